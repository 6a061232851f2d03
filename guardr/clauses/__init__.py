"""Guard clause types, one per value category."""
from .base import GuardClause
from .numeric import NumericGuard
from .string import StringGuard

__all__ = [
    "GuardClause",
    "NumericGuard",
    "StringGuard",
]
