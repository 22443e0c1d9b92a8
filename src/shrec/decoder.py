"""Share decoding: arbitrary-base digit strings to exact integer points.

Bases up to 36 use the alphabet 0-9, a-z case-insensitively. Bases 37..62
extend it with A-Z as 36..61, and letters become case-sensitive.
"""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Mapping
from typing import Any

from shrec.errors import (
    DuplicateIndex,
    InvalidBase,
    InvalidDigit,
    InvalidIndex,
    MalformedDocument,
)
from shrec.models import MAX_BASE, MIN_BASE, Point, Share, to_decimal

logger = logging.getLogger(__name__)

RESERVED_KEY = "keys"

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

_LOWER = {ch: i for i, ch in enumerate(string.digits + string.ascii_lowercase)}
_CASELESS = {**_LOWER, **{ch.upper(): v for ch, v in _LOWER.items() if ch.isalpha()}}
_EXTENDED = {**_LOWER, **{ch: 36 + i for i, ch in enumerate(string.ascii_uppercase)}}


def _parse_decimal(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _DECIMAL_RE.fullmatch(raw):
        value = decode_digits(raw.lstrip("+-"), 10)
        return -value if raw.startswith("-") else value
    return None


def parse_index(key: Any) -> int:
    """Parse a share key as a decimal x-coordinate."""
    x = _parse_decimal(key)
    if x is None:
        raise InvalidIndex(f"Share key {key!r} is not an integer")
    return x


def parse_base(raw: Any) -> int:
    """Parse a share's base from its string or integer form."""
    base = _parse_decimal(raw)
    if base is None:
        raise InvalidBase(f"Base {raw!r} is not an integer")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {to_decimal(base)}"
        )
    return base


def digit_value(ch: str, base: int) -> int:
    """Value of a single digit character in ``base``."""
    table = _CASELESS if base <= 36 else _EXTENDED
    value = table.get(ch)
    if value is None or value >= base:
        raise InvalidDigit(f"Character {ch!r} is not a valid base-{base} digit")
    return value


def decode_digits(digits: str, base: int) -> int:
    """Convert a digit string in ``base`` to an exact integer.

    Accumulates positionally over Python ints, so the result is exact for any
    length and is not subject to the int/str conversion digit limit.
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {to_decimal(base)}"
        )
    if not digits:
        raise InvalidDigit(f"Empty digit string for base {base}")

    acc = 0
    for ch in digits:
        acc = acc * base + digit_value(ch, base)
    return acc


def decode_share(share: Share) -> Point:
    """Decode a raw share into an exact (x, y) point."""
    return Point(x=share.x, y=decode_digits(share.digits, share.base))


def decode_record(key: Any, record: Any) -> Point:
    """Decode one document entry ``{"base": ..., "value": ...}`` keyed by x.

    Raises:
        InvalidIndex: ``key`` is not an integer.
        InvalidBase: base missing or malformed.
        InvalidDigit: value missing or not valid in the base.
        MalformedDocument: ``record`` is not a mapping.
    """
    x = parse_index(key)
    if not isinstance(record, Mapping):
        raise MalformedDocument(
            f"Share {key!r} must be an object with 'base' and 'value', "
            f"got {type(record).__name__}"
        )
    if record.get("base") is None:
        raise InvalidBase(f"Share {key!r} has no base")
    base = parse_base(record["base"])

    digits = record.get("value")
    if not isinstance(digits, str):
        raise InvalidDigit(f"Share {key!r} value must be a digit string, got {digits!r}")

    return decode_share(Share(x=x, base=base, digits=digits))


def decode_records(records: Mapping[Any, Any]) -> list[Point]:
    """Decode a mapping of raw share records into points.

    Keys that are not integers are skipped with a warning. Any malformed base
    or value aborts the whole decode. The reserved ``keys`` entry is ignored.
    """
    points: list[Point] = []
    seen: dict[int, Any] = {}

    for key, record in records.items():
        if key == RESERVED_KEY:
            continue
        try:
            point = decode_record(key, record)
        except InvalidIndex as exc:
            logger.warning("Skipping share: %s", exc)
            continue

        if point.x in seen:
            raise DuplicateIndex(
                f"Shares {seen[point.x]!r} and {key!r} "
                f"both have x={to_decimal(point.x)}"
            )
        seen[point.x] = key
        points.append(point)

    logger.debug("Decoded %d shares", len(points))
    return points
