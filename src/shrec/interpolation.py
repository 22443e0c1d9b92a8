"""Exact Lagrange interpolation at x=0 over the rationals.

No modular field: every basis term is a ``Fraction`` of Python ints, so the
constant term is recovered without rounding for any share magnitude.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from fractions import Fraction

from shrec.errors import (
    DuplicateIndex,
    InsufficientShares,
    InvalidThreshold,
    NonIntegerResult,
)
from shrec.models import Point, to_decimal

logger = logging.getLogger(__name__)


def validate_threshold(k: object) -> int:
    """Return ``k`` if it is an integer threshold >= 1."""
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThreshold(f"Threshold must be an integer, got {k!r}")
    if k < 1:
        raise InvalidThreshold(f"Threshold must be >= 1, got {to_decimal(k)}")
    return k


def select_points(points: Iterable[Point], k: int) -> list[Point]:
    """Sort points by ascending x and take the first k."""
    k = validate_threshold(k)
    ordered = sorted(points, key=lambda p: p.x)

    for prev, cur in zip(ordered, ordered[1:]):
        if prev.x == cur.x:
            raise DuplicateIndex(f"Duplicate evaluation point x={to_decimal(cur.x)}")

    if len(ordered) < k:
        raise InsufficientShares(
            f"Need {to_decimal(k)} shares to reconstruct, got {len(ordered)}"
        )
    return ordered[:k]


def lagrange_at_zero(points: list[Point]) -> Fraction:
    """Value at x=0 of the polynomial through ``points``.

    For points (x_i, y_i):
        L_i(0) = prod_{j != i} x_j / (x_j - x_i)
        f(0)   = sum_i y_i * L_i(0)

    The x-values must be pairwise distinct.
    """
    total = Fraction(0)
    for i, pi in enumerate(points):
        numerator = 1
        denominator = 1
        for j, pj in enumerate(points):
            if i == j:
                continue
            numerator *= pj.x
            denominator *= pj.x - pi.x
        total += Fraction(pi.y * numerator, denominator)
    return total


class LagrangeInterpolator:
    """Recovers the constant term of the degree-(k-1) polynomial through k shares."""

    def reconstruct(self, points: Iterable[Point], k: int) -> int:
        """Reconstruct the secret from at least k points.

        Args:
            points: Decoded shares with pairwise-distinct x.
            k: Threshold; exactly the k smallest-x points are used.

        Returns:
            The secret as an exact integer.

        Raises:
            InvalidThreshold: k is not an integer >= 1.
            DuplicateIndex: two points share an x-coordinate.
            InsufficientShares: fewer than k points were given.
            NonIntegerResult: the interpolated value is not an integer.
        """
        selected = select_points(points, k)
        logger.debug(
            "Interpolating at x=0 with x=%s", [to_decimal(p.x) for p in selected]
        )

        value = lagrange_at_zero(selected)
        if value.denominator != 1:
            raise NonIntegerResult(
                f"Interpolated value has denominator {to_decimal(value.denominator)}; "
                "shares are inconsistent"
            )
        return value.numerator


def reconstruct_secret(points: Iterable[Point], k: int) -> int:
    """Convenience: reconstruct the secret from points with threshold k."""
    return LagrangeInterpolator().reconstruct(points, k)
