"""Exceptions raised while producing a Speed Index score.

The audit converts every one of these into a failed ScoreResult; callers of
the audit never see them.
"""

from __future__ import annotations

FAILURE_MESSAGE = "Navigation and first paint timings not found."


class SpeedIndexAuditError(Exception):
    """Base class for audit failures."""


class MissingInputError(SpeedIndexAuditError):
    """The measurement is absent or malformed."""

    def __init__(self, message: str = FAILURE_MESSAGE):
        super().__init__(message)


class UpstreamComputationError(SpeedIndexAuditError):
    """Deriving the measurement or evaluating the score raised."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UpstreamComputationError":
        error = cls(str(exc) or type(exc).__name__)
        error.__cause__ = exc
        return error
