"""
Geometry Errors
===============

Single error type for rejected shape construction, tagged with the
constraint that failed so callers can report it precisely.
"""

from enum import Enum


class Violation(str, Enum):
    """Which construction constraint was violated."""

    UNSUPPORTED_KIND = "unsupported_kind"
    PARAMETER_COUNT = "parameter_count"
    NON_POSITIVE = "non_positive"


class InvalidArgumentError(ValueError):
    """Raised when a shape cannot be built from the given arguments."""

    def __init__(self, violation: Violation, message: str):
        super().__init__(message)
        self.violation = violation
