"""Fluent Guard Clauses

Wrap a parameter, chain declarative checks, fail fast on the first
violation with a standardized message.

Key Features:
- Category-specific clauses (NumericGuard, StringGuard) exposing only the
  checks that make sense for the value
- Chaining: every passing check returns the clause itself
- BoundsViolation / ShapeViolation taxonomy, both ValueError subclasses
- Pluggable message wording via an injected MessageProvider
- Labels captured from the call-site expression when none is given

Usage:
    from guardr import numeric, string

    def create_user(age: int, email: str | None) -> None:
        numeric(age).min(18)                      # "age must be at least 18."
        string(email, "email").not_null_or_whitespace().matches(r"@")

    # Custom wording, injected rather than set globally
    from guardr import Guard, GuardConfig, TemplateMessageProvider, ConstraintKind
    guard = Guard(GuardConfig(message_provider=TemplateMessageProvider({
        ConstraintKind.AT_LEAST: "{param_name} is below {min}.",
    })))
    guard.numeric(age, "age").min(18)
"""

from .errors import (
    AppError,
    BoundsViolation,
    ConstraintKind,
    Err,
    ErrorCode,
    GuardViolation,
    Ok,
    Result,
    ShapeViolation,
    attempt,
)

from .messages import (
    DEFAULT_TEMPLATES,
    MessageProvider,
    TemplateMessageProvider,
)

from .config import GuardConfig, Settings, get_settings

from .clauses import GuardClause, NumericGuard, StringGuard

from .guard import Guard, capture_label, default_guard, numeric, of, string

from .logging import configure_logging, get_logger, guard_logger

__version__ = "0.1.0"

__all__ = [
    # Dispatch
    "Guard",
    "default_guard",
    "numeric",
    "string",
    "of",
    "capture_label",
    # Clauses
    "GuardClause",
    "NumericGuard",
    "StringGuard",
    # Errors
    "GuardViolation",
    "BoundsViolation",
    "ShapeViolation",
    "ConstraintKind",
    "ErrorCode",
    "AppError",
    "Ok",
    "Err",
    "Result",
    "attempt",
    # Messages
    "MessageProvider",
    "TemplateMessageProvider",
    "DEFAULT_TEMPLATES",
    # Config
    "GuardConfig",
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "guard_logger",
]
