"""Shared test fixtures for the shrec test suite."""

from __future__ import annotations

import random
import string
from collections.abc import Callable

import pytest

from shrec.models import Point

_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase


def eval_poly(coeffs: list[int], x: int) -> int:
    """Horner evaluation over the integers; coeffs[0] is the constant term."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def to_digits(value: int, base: int) -> str:
    """Write a non-negative integer in ``base`` using 0-9a-zA-Z."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, r = divmod(value, base)
        out.append(_ALPHABET[r])
    return "".join(reversed(out))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240607)


@pytest.fixture
def make_points(rng: random.Random) -> Callable[..., list[Point]]:
    """Factory: points on a random degree-(k-1) polynomial with constant term secret."""

    def _make(
        secret: int,
        k: int,
        xs: list[int] | None = None,
        coeff_bits: int = 64,
    ) -> list[Point]:
        coeffs = [secret] + [rng.getrandbits(coeff_bits) for _ in range(k - 1)]
        if xs is None:
            xs = list(range(1, k + 1))
        return [Point(x=x, y=eval_poly(coeffs, x)) for x in xs]

    return _make


@pytest.fixture
def example_records() -> dict[str, dict[str, str]]:
    """Three shares decoding to (1, 1), (2, 1234), (3, 173)."""
    return {
        "1": {"base": "10", "value": "1"},
        "2": {"base": "10", "value": "1234"},
        "3": {"base": "2", "value": "10101101"},
    }


@pytest.fixture
def sample_document() -> dict:
    """Shares of f(x) = x^2 + 3, with one more share than k requires."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def encode() -> Callable[[int, int], str]:
    return to_digits
