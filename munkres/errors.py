"""
Errors Module

Failure reasons reported by the Munkres engine and the exceptions raised at
the API boundary and by the solver wrappers.
"""

from enum import Enum


class FailureReason(str, Enum):
    """Why a solve stopped without an assignment."""

    ROW_UNSOLVABLE = "row_unsolvable"
    NO_FEASIBLE_ADJUSTMENT = "no_feasible_adjustment"
    ITERATION_LIMIT = "iteration_limit"


class InvalidCostMatrixError(ValueError):
    """Raised before any algorithmic work when the input shape or values are unusable."""


class AssignmentFailedError(RuntimeError):
    """Raised by the tuple-returning solver wrappers when no assignment exists."""

    def __init__(self, reason: FailureReason, message: str = ""):
        self.reason = reason
        super().__init__(message or reason.value)


__all__ = [
    "FailureReason",
    "InvalidCostMatrixError",
    "AssignmentFailedError",
]
