"""Error Handling for Guard Clauses

Failed checks raise GuardViolation subclasses (BoundsViolation,
ShapeViolation). Each violation converts to a structured AppError carrying
an ErrorCode from the validation range.

Usage:
    from guardr.errors import BoundsViolation, attempt

    try:
        numeric(age, "age").min(18)
    except BoundsViolation as e:
        log.warning("rejected", **e.to_dict())

    match attempt(lambda: string(name, "name").not_null_or_empty().value):
        case Ok(name):
            ...
        case Err(error):
            return error.to_dict()
"""
from .types import (
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
)

from .violations import (
    BoundsViolation,
    ConstraintKind,
    GuardViolation,
    ShapeViolation,
    attempt,
)

__all__ = [
    # Core types
    "AppError",
    "Err",
    "ErrorCode",
    "ErrorContext",
    "Ok",
    "Result",
    # Violations
    "BoundsViolation",
    "ConstraintKind",
    "GuardViolation",
    "ShapeViolation",
    "attempt",
]
