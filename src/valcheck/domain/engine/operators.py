"""
Comparison operators and comparison terms.

Operators form a closed enumeration; every operator carries its display
name and the message template used when a comparison does not hold.
"""

from __future__ import annotations

import operator as _op
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

from ..errors import InvalidOperatorError


class Operator(IntEnum):
    """Comparison operators."""

    EQ = 1
    NE = 2
    LT = 3
    LTE = 4
    GT = 5
    GTE = 6

    @property
    def label(self) -> str:
        """Display name used in messages (e.g. "gte")."""
        return self.name.lower()

    @property
    def failure_template(self) -> str:
        """Message template for a comparison that does not hold."""
        templates = {
            Operator.EQ: "`{op}` comparison failed: `{x}` is not equal to `{term}`",
            Operator.NE: "`{op}` comparison failed: `{x}` is equal to `{term}`",
            Operator.LT: "`{op}` comparison failed: `{x}` is not less than `{term}`",
            Operator.LTE: "`{op}` comparison failed: `{x}` is not less than or equal to `{term}`",
            Operator.GT: "`{op}` comparison failed: `{x}` is not greater than `{term}`",
            Operator.GTE: "`{op}` comparison failed: `{x}` is not greater than or equal to `{term}`",
        }
        return templates[self]

    @property
    def is_equality(self) -> bool:
        """Check if this operator only tests (in)equality."""
        return self in (Operator.EQ, Operator.NE)

    def apply(self, left: Any, right: Any) -> bool:
        """Apply the operator to two values of the same category."""
        return bool(_FUNCTIONS[self](left, right))

    @classmethod
    def parse(cls, value: Any) -> Operator:
        """
        Resolve an operator from an Operator, an integer or a display name.

        Raises:
            InvalidOperatorError: If the value names no operator
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidOperatorError(value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidOperatorError(value) from None
        raise InvalidOperatorError(value)


_FUNCTIONS: dict[Operator, Callable[[Any, Any], Any]] = {
    Operator.EQ: _op.eq,
    Operator.NE: _op.ne,
    Operator.LT: _op.lt,
    Operator.LTE: _op.le,
    Operator.GT: _op.gt,
    Operator.GTE: _op.ge,
}


@dataclass(frozen=True)
class ComparisonTerm:
    """An operator bound to the right-hand operand of a comparison."""

    op: Operator
    term: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", Operator.parse(self.op))

    def __repr__(self) -> str:
        return f"ComparisonTerm({self.op.label}, {self.term!r})"
