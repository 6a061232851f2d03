"""Guard Violations

Every failed guard check raises exactly one violation. Two families exist:

- BoundsViolation: the value lies outside accepted bounds (comparisons,
  ranges, sign, zero, string length)
- ShapeViolation: the value lacks the required shape (None/empty/whitespace
  presence, pattern mismatch)

Both subclass GuardViolation, itself a ValueError, so callers that already
catch ValueError at their boundary keep working.

Error Format (to_dict):
{
    "field": "age",
    "constraint": "at_least",
    "message": "age must be at least 18.",
    "code": "E2003_OUT_OF_RANGE",
    "operands": [18]
}
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

from .types import AppError, ErrorCode, ErrorContext, Err, Ok, Result

T = TypeVar("T")


class ConstraintKind(Enum):
    """Constraint violated by a failing guard check."""
    AT_LEAST = "at_least"
    AT_MOST = "at_most"
    NEGATIVE = "negative"
    POSITIVE = "positive"
    ZERO = "zero"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    IN_RANGE = "in_range"
    NOT_NULL_OR_EMPTY = "not_null_or_empty"
    NULL_OR_EMPTY = "null_or_empty"
    NOT_NULL_OR_WHITESPACE = "not_null_or_whitespace"
    NULL_OR_WHITESPACE = "null_or_whitespace"
    LENGTH_LESS_THAN = "length_less_than"
    LENGTH_LESS_THAN_OR_EQUAL = "length_less_than_or_equal"
    PATTERN_MISMATCH = "pattern_mismatch"

    @property
    def operand_names(self) -> tuple[str, ...]:
        """Names of the operands a message template may reference, in order."""
        return _OPERAND_NAMES.get(self, ())

    @property
    def is_shape(self) -> bool:
        return self in _SHAPE_KINDS

    @property
    def code(self) -> ErrorCode:
        if self in (ConstraintKind.NOT_NULL_OR_EMPTY, ConstraintKind.NOT_NULL_OR_WHITESPACE):
            return ErrorCode.E2001_REQUIRED_FIELD_MISSING
        if self in (ConstraintKind.NULL_OR_EMPTY, ConstraintKind.NULL_OR_WHITESPACE):
            return ErrorCode.E2005_CONSTRAINT_VIOLATION
        if self is ConstraintKind.PATTERN_MISMATCH:
            return ErrorCode.E2002_INVALID_FORMAT
        return ErrorCode.E2003_OUT_OF_RANGE

    @property
    def violation_class(self) -> type[GuardViolation]:
        return ShapeViolation if self.is_shape else BoundsViolation


_OPERAND_NAMES: dict[ConstraintKind, tuple[str, ...]] = {
    ConstraintKind.AT_LEAST: ("min",),
    ConstraintKind.AT_MOST: ("max",),
    ConstraintKind.LESS_THAN: ("value",),
    ConstraintKind.LESS_THAN_OR_EQUAL: ("value",),
    ConstraintKind.GREATER_THAN: ("value",),
    ConstraintKind.GREATER_THAN_OR_EQUAL: ("value",),
    ConstraintKind.IN_RANGE: ("min", "max"),
    ConstraintKind.LENGTH_LESS_THAN: ("length",),
    ConstraintKind.LENGTH_LESS_THAN_OR_EQUAL: ("length",),
    ConstraintKind.PATTERN_MISMATCH: ("pattern",),
}

_SHAPE_KINDS = frozenset({
    ConstraintKind.NOT_NULL_OR_EMPTY,
    ConstraintKind.NULL_OR_EMPTY,
    ConstraintKind.NOT_NULL_OR_WHITESPACE,
    ConstraintKind.NULL_OR_WHITESPACE,
    ConstraintKind.PATTERN_MISMATCH,
})


@dataclass(eq=False)
class GuardViolation(ValueError):
    """A failed guard check.

    Carries the parameter label, the violated constraint, the operands that
    went into the message (bounds, length, pattern) and the rendered message.
    """
    param_name: str
    kind: ConstraintKind
    message: str
    operands: tuple[Any, ...] = ()

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        # args holds only the message; rebuild from every field
        return (type(self), (self.param_name, self.kind, self.message, self.operands))

    @property
    def code(self) -> ErrorCode:
        return self.kind.code

    @classmethod
    def create(cls, kind: ConstraintKind, param_name: str, message: str, operands: tuple[Any, ...] = ()) -> GuardViolation:
        """Build the violation subclass matching the constraint kind."""
        return kind.violation_class(param_name=param_name, kind=kind, message=message, operands=operands)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        return {"field": self.param_name, "constraint": self.kind.value, "message": self.message,
            "code": self.code.name, "operands": list(self.operands)}

    def to_app_error(self, origin: str = "guardr") -> AppError:
        """Convert to AppError for the error handling system."""
        metadata = {"field": self.param_name, "constraint": self.kind.value}
        metadata.update(zip(self.kind.operand_names, self.operands))
        return AppError(code=self.code, message=self.message, context=ErrorContext(origin=origin),
            metadata=metadata, cause=self)


class BoundsViolation(GuardViolation):
    """Value outside accepted bounds."""


class ShapeViolation(GuardViolation):
    """Value missing or not matching the required shape."""


def attempt(f: Callable[[], T], origin: str = "guardr") -> Result[T, AppError]:
    """Run a guarded callable and wrap the outcome in a Result.

    Only guard violations are converted to Err; any other exception
    propagates unchanged.

    Usage:
        result = attempt(lambda: numeric(age, "age").min(18).value)
        if result.is_err():
            return error_response(result.unwrap_err())
    """
    try:
        return Ok(f())
    except GuardViolation as e:
        return Err(e.to_app_error(origin=origin))
