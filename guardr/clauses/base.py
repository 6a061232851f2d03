from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, NoReturn, TypeVar

from guardr.config import GuardConfig
from guardr.errors import ConstraintKind, GuardViolation
from guardr.logging import guard_logger

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class GuardClause(Generic[T]):
    """Immutable (value, label) pair that checks run against.

    Checks return the clause itself so they chain; the first failing check
    raises and ends the chain.
    """
    value: T
    label: str
    config: GuardConfig = field(default_factory=GuardConfig, repr=False, compare=False)

    def _fail(self, kind: ConstraintKind, *operands: Any) -> NoReturn:
        message = self.config.message_provider.format(kind, self.label, *operands)
        violation = GuardViolation.create(kind, self.label, message, operands)
        if self.config.log_violations:
            guard_logger().debug("guard_violation", param=self.label, constraint=kind.value,
                operands=[str(o) for o in operands], violation=type(violation).__name__)
        raise violation
