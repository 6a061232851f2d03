"""Numeric Guard Clauses

Checks for any totally ordered value: int, float, Decimal, Fraction,
timedelta and the like. Comparisons are exact; floating point values get
no tolerance. Every failure raises BoundsViolation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from guardr.errors import ConstraintKind

from .base import GuardClause

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class NumericGuard(GuardClause[T]):
    """Chainable bound, sign and range checks.

    Usage:
        numeric(age, "age").min(0).max(150)
        numeric(ratio, "ratio").is_in_range(0.0, 1.0)
    """

    @property
    def zero(self) -> T:
        """Additive identity of the held value's type."""
        return type(self.value)()

    def min(self, min: T) -> NumericGuard[T]:
        """Pass when value >= min."""
        if not self.value >= min:
            self._fail(ConstraintKind.AT_LEAST, min)
        return self

    def max(self, max: T) -> NumericGuard[T]:
        """Pass when value <= max."""
        if not self.value <= max:
            self._fail(ConstraintKind.AT_MOST, max)
        return self

    def is_negative(self) -> NumericGuard[T]:
        if not self.value < self.zero:
            self._fail(ConstraintKind.NEGATIVE)
        return self

    def is_positive(self) -> NumericGuard[T]:
        if not self.value > self.zero:
            self._fail(ConstraintKind.POSITIVE)
        return self

    def is_zero(self) -> NumericGuard[T]:
        if not self.value == self.zero:
            self._fail(ConstraintKind.ZERO)
        return self

    def is_less_than(self, value: T) -> NumericGuard[T]:
        """Exclusive upper bound."""
        if not self.value < value:
            self._fail(ConstraintKind.LESS_THAN, value)
        return self

    def is_less_than_or_equal_to(self, value: T) -> NumericGuard[T]:
        if not self.value <= value:
            self._fail(ConstraintKind.LESS_THAN_OR_EQUAL, value)
        return self

    def is_greater_than(self, value: T) -> NumericGuard[T]:
        """Exclusive lower bound."""
        if not self.value > value:
            self._fail(ConstraintKind.GREATER_THAN, value)
        return self

    def is_greater_than_or_equal_to(self, value: T) -> NumericGuard[T]:
        if not self.value >= value:
            self._fail(ConstraintKind.GREATER_THAN_OR_EQUAL, value)
        return self

    def is_in_range(self, min: T, max: T) -> NumericGuard[T]:
        """Inclusive on both ends."""
        if not min <= self.value <= max:
            self._fail(ConstraintKind.IN_RANGE, min, max)
        return self
