"""Decode raw share records and reconstruct the secret."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shrec.decoder import decode_records
from shrec.interpolation import reconstruct_secret

logger = logging.getLogger(__name__)


def recover_secret(records: Mapping[Any, Any], k: int) -> int:
    """Recover the secret from raw ``{x: {"base", "value"}}`` records.

    Unparseable keys are skipped; every other failure raises a
    ``ReconstructionError`` subclass and no partial result is returned.
    """
    points = decode_records(records)
    logger.info("Reconstructing from %d usable shares", len(points))
    return reconstruct_secret(points, k)
