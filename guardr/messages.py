"""Violation Message Formatting

Guard clauses never build message text themselves. They hand the
constraint kind, the parameter label and the operands to a MessageProvider
taken from their GuardConfig.

Custom wording:
    provider = TemplateMessageProvider({
        ConstraintKind.AT_LEAST: "{param_name} needs to be {min} or more.",
    })
    guard = Guard(GuardConfig(message_provider=provider))
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Protocol, runtime_checkable

from guardr.errors import ConstraintKind

DEFAULT_TEMPLATES: Mapping[ConstraintKind, str] = MappingProxyType({
    ConstraintKind.AT_LEAST: "{param_name} must be at least {min}.",
    ConstraintKind.AT_MOST: "{param_name} must be at most {max}.",
    ConstraintKind.NEGATIVE: "{param_name} must be negative.",
    ConstraintKind.POSITIVE: "{param_name} must be positive.",
    ConstraintKind.ZERO: "{param_name} must be zero.",
    ConstraintKind.LESS_THAN: "{param_name} must be less than {value}.",
    ConstraintKind.LESS_THAN_OR_EQUAL: "{param_name} must be less than or equal to {value}.",
    ConstraintKind.GREATER_THAN: "{param_name} must be greater than {value}.",
    ConstraintKind.GREATER_THAN_OR_EQUAL: "{param_name} must be greater than or equal to {value}.",
    ConstraintKind.IN_RANGE: "{param_name} must be between {min} and {max} (inclusive).",
    ConstraintKind.NOT_NULL_OR_EMPTY: "{param_name} should not be null or empty.",
    ConstraintKind.NULL_OR_EMPTY: "{param_name} should be null or empty.",
    ConstraintKind.NOT_NULL_OR_WHITESPACE: "{param_name} should not be null or whitespace.",
    ConstraintKind.NULL_OR_WHITESPACE: "{param_name} should be null or whitespace.",
    ConstraintKind.LENGTH_LESS_THAN: "{param_name} length must be less than {length}.",
    ConstraintKind.LENGTH_LESS_THAN_OR_EQUAL: "{param_name} length must be less than or equal to {length}.",
    ConstraintKind.PATTERN_MISMATCH: "{param_name} must match the pattern '{pattern}'.",
})


@runtime_checkable
class MessageProvider(Protocol):
    """Formats the human-readable message of a violation."""

    def format(self, kind: ConstraintKind, param_name: str, *operands: Any) -> str: ...


@dataclass(frozen=True, slots=True)
class TemplateMessageProvider:
    """str.format based provider.

    Templates reference `param_name` and the operand names of their kind
    (see ConstraintKind.operand_names). Kinds missing from `overrides` use
    DEFAULT_TEMPLATES.
    """
    overrides: Mapping[ConstraintKind, str] = field(default_factory=dict)

    def template_for(self, kind: ConstraintKind) -> str:
        return self.overrides[kind] if kind in self.overrides else DEFAULT_TEMPLATES[kind]

    def format(self, kind: ConstraintKind, param_name: str, *operands: Any) -> str:
        names = kind.operand_names
        if len(operands) != len(names):
            raise TypeError(f"{kind.name} takes {len(names)} operand(s), got {len(operands)}")
        return self.template_for(kind).format(param_name=param_name, **dict(zip(names, operands)))


DEFAULT_MESSAGE_PROVIDER = TemplateMessageProvider()
