"""JSON share documents: a ``keys`` header plus one entry per share.

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shrec.decoder import RESERVED_KEY
from shrec.errors import InvalidThreshold, MalformedDocument
from shrec.interpolation import validate_threshold
from shrec.models import to_decimal
from shrec.pipeline import recover_secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShareDocument:
    """Parsed share document.

    Attributes:
        threshold: k to reconstruct with; the declared k unless overridden.
        records: Raw share entries keyed as in the document.
        declared_count: Declared n, if present.
    """

    threshold: int
    records: dict[str, Any] = field(default_factory=dict)
    declared_count: int | None = None

    def recover(self, k: int | None = None) -> int:
        """Reconstruct the secret, optionally overriding the threshold."""
        return recover_secret(self.records, self.threshold if k is None else k)


def parse_document(data: Any, threshold: int | None = None) -> ShareDocument:
    """Build a ShareDocument from decoded JSON.

    A ``threshold`` given here replaces the document's ``k``, which then need
    not be present.
    """
    if not isinstance(data, Mapping):
        raise MalformedDocument(
            f"Document must be a JSON object, got {type(data).__name__}"
        )
    header = data.get(RESERVED_KEY)
    if header is None and threshold is not None:
        header = {}
    if not isinstance(header, Mapping):
        raise MalformedDocument(f"Document has no '{RESERVED_KEY}' object")

    if threshold is not None:
        k = validate_threshold(threshold)
    elif "k" in header:
        k = validate_threshold(header["k"])
    else:
        raise InvalidThreshold(f"'{RESERVED_KEY}' has no threshold 'k'")

    declared = header.get("n")
    if declared is not None and (isinstance(declared, bool) or not isinstance(declared, int)):
        raise MalformedDocument(f"Share count 'n' must be an integer, got {declared!r}")

    records = {key: value for key, value in data.items() if key != RESERVED_KEY}
    if declared is not None and declared != len(records):
        logger.warning(
            "Document declares n=%s but holds %d shares",
            to_decimal(declared),
            len(records),
        )
    return ShareDocument(threshold=k, records=records, declared_count=declared)


def load_document(path: str | Path, threshold: int | None = None) -> ShareDocument:
    """Read and parse a share document from a JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise MalformedDocument(f"{path}: invalid JSON: {exc}") from exc
    return parse_document(data, threshold)
