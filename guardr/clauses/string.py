"""String Guard Clauses

Presence checks (None/empty/whitespace) and pattern mismatches raise
ShapeViolation; length checks raise BoundsViolation.

None handling differs per check:
- length checks pass on None (no constraint on an absent value)
- matches() fails on None (an absent value cannot match a pattern)
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from guardr.errors import ConstraintKind

from .base import GuardClause


@dataclass(frozen=True, slots=True)
class StringGuard(GuardClause[Optional[str]]):
    """Chainable presence, length and pattern checks.

    Usage:
        string(username, "username").not_null_or_whitespace().length_is_less_than_or_equal_to(32)
        string(code, "code").matches(r"^[A-Z]{3}$")
    """

    @property
    def is_null_or_empty(self) -> bool:
        return not self.value

    @property
    def is_null_or_whitespace(self) -> bool:
        return self.value is None or not self.value.strip()

    def not_null_or_empty(self) -> StringGuard:
        if self.is_null_or_empty:
            self._fail(ConstraintKind.NOT_NULL_OR_EMPTY)
        return self

    def null_or_empty(self) -> StringGuard:
        if not self.is_null_or_empty:
            self._fail(ConstraintKind.NULL_OR_EMPTY)
        return self

    def not_null_or_whitespace(self) -> StringGuard:
        if self.is_null_or_whitespace:
            self._fail(ConstraintKind.NOT_NULL_OR_WHITESPACE)
        return self

    def null_or_whitespace(self) -> StringGuard:
        if not self.is_null_or_whitespace:
            self._fail(ConstraintKind.NULL_OR_WHITESPACE)
        return self

    def length_is_less_than(self, length: int) -> StringGuard:
        """Pass when len(value) < length, or when value is None."""
        if self.value is not None and len(self.value) >= length:
            self._fail(ConstraintKind.LENGTH_LESS_THAN, length)
        return self

    def length_is_less_than_or_equal_to(self, length: int) -> StringGuard:
        """Pass when len(value) <= length, or when value is None."""
        if self.value is not None and len(self.value) > length:
            self._fail(ConstraintKind.LENGTH_LESS_THAN_OR_EQUAL, length)
        return self

    def matches(self, pattern: str | re.Pattern[str], flags: int = 0) -> StringGuard:
        """Pass when the pattern is found anywhere in value (re.search).

        Anchor the pattern with ^...$ to require a full match. A compiled
        pattern keeps its own flags and `flags` is ignored.
        """
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)
        if self.value is None or compiled.search(self.value) is None:
            self._fail(ConstraintKind.PATTERN_MISMATCH, compiled.pattern)
        return self
