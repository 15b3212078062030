"""Exception types raised by mlnutils."""

from __future__ import annotations


class MLNUtilsError(Exception):
    """Base class for all mlnutils errors."""


class ProbabilityDomainError(MLNUtilsError, ValueError):
    """A probability lies outside the open interval (0, 1).

    Raised by :func:`~mlnutils.logit` under the ``"raise"`` domain policy, and
    always by the decimal form when the log-odds are not finite.
    """

    def __init__(self, probability: object, message: str | None = None) -> None:
        self.probability = probability
        if message is None:
            message = (
                f"probability must lie in the open interval (0, 1), got {probability!r}"
            )
        super().__init__(message)


class StreamDecodeError(MLNUtilsError, OSError):
    """A byte sequence could not be decoded while streaming lines."""
