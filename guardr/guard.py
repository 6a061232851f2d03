"""Guard Dispatcher

Routes a value to the clause type of its category. Construction never
validates; every failure comes from a chained check.

Usage:
    from guardr import numeric, string

    def register(age: int, username: str) -> None:
        numeric(age).min(18).max(150)
        string(username).not_null_or_whitespace().length_is_less_than(32)

Labels:
    An explicit label always wins. Without one, the source text of the
    argument expression is read from the calling line (numeric(user.age)
    labels the value "user.age"). When the line is unavailable, does not
    parse, or holds several different guard calls, the configured default
    label is used. Callees are matched by name (numeric, string, of), so an
    aliased entry point (check = guard.numeric; check(age)) is not
    recognized. Only the line the frame is executing is read, so a call
    whose arguments span several lines usually does not parse. Both cases
    fall back to the default label.
"""
from __future__ import annotations

import ast
import inspect
import linecache
from functools import lru_cache
from types import FrameType
from typing import Any, Optional, TypeVar

from guardr.clauses import GuardClause, NumericGuard, StringGuard
from guardr.config import GuardConfig

T = TypeVar("T")

ENTRY_POINTS = frozenset({"numeric", "string", "of"})


def _callee_name(func: ast.expr) -> str | None:
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _parse_line(source: str) -> ast.AST | None:
    for candidate in (source, f"{source} pass"):
        try:
            return ast.parse(candidate)
        except SyntaxError:
            continue
    return None


def capture_label(frame: FrameType | None, names: frozenset[str] = ENTRY_POINTS) -> str | None:
    """Source text of the first argument of the guard call on frame's current line."""
    if frame is None:
        return None
    source = linecache.getline(frame.f_code.co_filename, frame.f_lineno, frame.f_globals).strip()
    if not source or (tree := _parse_line(source)) is None:
        return None
    expressions = {
        ast.unparse(node.args[0])
        for node in ast.walk(tree)
        if isinstance(node, ast.Call) and node.args and not isinstance(node.args[0], ast.Starred)
        and _callee_name(node.func) in names
    }
    return expressions.pop() if len(expressions) == 1 else None


class Guard:
    """Entry point producing category-specific guard clauses.

    Each Guard carries one GuardConfig (message provider, label defaults,
    logging switch) and hands it to every clause it builds.
    """

    def __init__(self, config: GuardConfig | None = None):
        self.config = config or GuardConfig.from_settings()

    def resolve_label(self, label: str | None, frame: FrameType | None) -> str:
        """Explicit label, else captured call-site expression, else the default label.

        `frame` is the frame of the guard entry point; its caller's line is inspected.
        """
        if label:
            return label
        caller = frame.f_back if frame is not None else None
        try:
            if self.config.capture_labels and (captured := capture_label(caller)):
                return captured
        finally:
            del caller
        return self.config.default_label

    def numeric(self, value: T, label: Optional[str] = None) -> NumericGuard[T]:
        return NumericGuard(value, self.resolve_label(label, inspect.currentframe()), self.config)

    def string(self, value: Optional[str], label: Optional[str] = None) -> StringGuard:
        return StringGuard(value, self.resolve_label(label, inspect.currentframe()), self.config)

    def of(self, value: Any, label: Optional[str] = None) -> GuardClause:
        """Pick the clause by value type: str and None get StringGuard, anything else NumericGuard."""
        label = self.resolve_label(label, inspect.currentframe())
        if value is None or isinstance(value, str):
            return self.string(value, label)
        return self.numeric(value, label)


@lru_cache
def default_guard() -> Guard:
    """Guard configured from environment settings, shared by the module-level shortcuts."""
    return Guard(GuardConfig.from_settings())


def numeric(value: T, label: Optional[str] = None) -> NumericGuard[T]:
    guard = default_guard()
    return guard.numeric(value, guard.resolve_label(label, inspect.currentframe()))


def string(value: Optional[str], label: Optional[str] = None) -> StringGuard:
    guard = default_guard()
    return guard.string(value, guard.resolve_label(label, inspect.currentframe()))


def of(value: Any, label: Optional[str] = None) -> GuardClause:
    guard = default_guard()
    return guard.of(value, guard.resolve_label(label, inspect.currentframe()))
