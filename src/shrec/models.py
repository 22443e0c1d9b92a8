"""Value types for raw shares and decoded points."""

from __future__ import annotations

from dataclasses import dataclass

from shrec.errors import InvalidBase

MIN_BASE = 2
MAX_BASE = 62

# Below the interpreter's default int/str conversion limit of 4300 digits.
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def to_decimal(value: int) -> str:
    """Decimal text of an int of any size.

    Converts in fixed-width chunks so the int/str digit limit never applies.
    """
    if value < 0:
        return "-" + to_decimal(-value)
    if value < _CHUNK:
        return str(value)
    chunks = []
    while value:
        value, low = divmod(value, _CHUNK)
        chunks.append(low)
    head = str(chunks.pop())
    return head + "".join(f"{c:0{_CHUNK_DIGITS}d}" for c in reversed(chunks))


@dataclass(frozen=True)
class Share:
    """A raw share: x-index plus the y-value written in ``base``.

    Attributes:
        x: Integer x-coordinate.
        base: Radix of ``digits``, in [MIN_BASE, MAX_BASE].
        digits: Digit string of the y-value.
    """

    x: int
    base: int
    digits: str

    def __post_init__(self) -> None:
        if not MIN_BASE <= self.base <= MAX_BASE:
            raise InvalidBase(
                f"base must be in [{MIN_BASE}, {MAX_BASE}], got {to_decimal(self.base)}"
            )


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y) with exact integer coordinates."""

    x: int
    y: int
