# =============================================================================
# ddrconf/compare/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exception hierarchy for the comparison engine. All exceptions are value
# objects: no logging, no I/O, messages derived only from constructor
# arguments.
#
# EXCEPTION HIERARCHY
# -------------------
#   CompareError(Exception)                        -- base; never raised directly
#     InternalConsistencyError(CompareError)       -- common-subset counts disagree
#     ResourceExhaustionError(CompareError)        -- sublist allocation failed
#     CompareConfigError(CompareError)             -- invalid CompareOptions field
#
# A StructuralMismatch is an outcome, not an error, and has no exception.
# None of these is fatal to a multi-table run: the table checker records
# them per table and moves on.
# =============================================================================

from __future__ import annotations

from typing import Any


class CompareError(Exception):
    """
    Base class for comparison engine exceptions.

    Attributes:
        message:  Human-readable description. Always non-empty.
        kind:     Stable machine-readable tag, used in ComparisonFailure.
    """

    kind: str = "compare_error"

    def __init__(self, message: str) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError("CompareError: message must be a non-empty string")
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return self.__class__.__name__ + "(message=" + repr(self.message) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompareError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))


class InternalConsistencyError(CompareError):
    """
    Raised when the common-key count taken from the left side differs from
    the count taken from the right side. Never coerced into a structural
    mismatch.

    Message format:
        "Internal error: common register counts don't match (<l> vs <r>)"
    """

    kind = "internal_consistency"

    def __init__(self, left_count: int, right_count: int) -> None:
        super().__init__(
            f"Internal error: common register counts don't match "
            f"({left_count} vs {right_count})"
        )
        self.left_count:  int = left_count
        self.right_count: int = right_count


class ResourceExhaustionError(CompareError):
    """
    Raised when the temporary common-subset sublists cannot be built.
    Only the affected recursive branch is abandoned.
    """

    kind = "resource_exhaustion"

    def __init__(self, requested: int) -> None:
        super().__init__(
            f"Memory allocation failed for common register comparison "
            f"({requested} entries per side)"
        )
        self.requested: int = requested


class CompareConfigError(CompareError):
    """Raised by CompareOptions when a tunable is out of range."""

    kind = "config"

    def __init__(self, field_name: str, value: Any, constraint: str) -> None:
        if not isinstance(field_name, str) or not field_name:
            raise ValueError("CompareConfigError: field_name must be a non-empty string")
        super().__init__(
            f"CompareConfigError: field '{field_name}' = {value!r} violates "
            f"constraint: {constraint}"
        )
        self.field_name: str = field_name
        self.value:      Any = value
        self.constraint: str = constraint
