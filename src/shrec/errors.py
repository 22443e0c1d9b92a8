"""Failure taxonomy for share decoding and secret reconstruction."""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for every typed reconstruction failure.

    Attributes:
        exit_code: Process exit status the CLI uses for this failure.
    """

    exit_code = 1


class InvalidIndex(ReconstructionError):
    """A share key cannot be parsed as an integer x-coordinate.

    Recoverable: the decoder skips the share.
    """


class InvalidBase(ReconstructionError):
    """A share's base is unparseable or outside the supported range."""


class InvalidDigit(ReconstructionError):
    """A share's digit string is not valid in its base."""


class DuplicateIndex(ReconstructionError):
    """Two shares resolve to the same x-coordinate."""


class MalformedDocument(ReconstructionError):
    """The share document or one of its records has the wrong structure."""


class InvalidThreshold(ReconstructionError):
    """The threshold k is missing, not an integer, or below 1."""


class InsufficientShares(ReconstructionError):
    """Fewer than k valid points are available."""

    exit_code = 2


class NonIntegerResult(ReconstructionError):
    """The interpolated constant term is not an integer.

    Signals shares that do not lie on a common polynomial with an integer
    constant term, as opposed to malformed input.
    """

    exit_code = 3
