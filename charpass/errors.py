"""
errors.py: the ways password generation can fail.

Everything derives from GenerationError so callers can catch the whole
family at once and show the message to the user.
"""

from __future__ import annotations

from typing import Optional


class GenerationError(Exception):
    """Base class for all generation failures."""


class InvalidLengthError(GenerationError, ValueError):
    """Requested length is below 1."""

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid length: don't ask for passwords of length {length}")
        self.length = length


class EmptyAlphabetError(GenerationError):
    """No characters survive allow/require/exclude resolution."""

    def __init__(self) -> None:
        super().__init__("no characters available to generate a password from")


class UnacceptableFailureRateError(GenerationError):
    """
    The bounded retry loop could not be trusted to succeed, so generation
    was refused before any randomness was used.
    """

    def __init__(self, success_probability: float, failure_rate: float, trials: int, tolerance: float) -> None:
        super().__init__(
            f"failure rate too high: {failure_rate:.3g} chance of no success in "
            f"{trials} attempts (tolerance {tolerance:.3g}, per-attempt success "
            f"probability {success_probability:.3g})"
        )
        self.success_probability = success_probability
        self.failure_rate = failure_rate
        self.trials = trials
        self.tolerance = tolerance


class RequirementsUnsatisfiedError(GenerationError):
    """
    Every attempt missed a required set. The failure-rate gate should make
    this practically unreachable.
    """

    def __init__(self, trials: int, last_missing: Optional[str] = None) -> None:
        msg = f"could not satisfy requirements after {trials} attempts"
        if last_missing:
            msg += f" (last attempt missed {last_missing!r})"
        super().__init__(msg)
        self.trials = trials
        self.last_missing = last_missing


class CollaboratorError(GenerationError):
    """A separator or word-list collaborator could not produce its part."""


__all__ = [
    "GenerationError",
    "InvalidLengthError",
    "EmptyAlphabetError",
    "UnacceptableFailureRateError",
    "RequirementsUnsatisfiedError",
    "CollaboratorError",
]
