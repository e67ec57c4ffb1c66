"""
Validation units.

Every check captures its inputs at construction and does nothing until it
is evaluated. Evaluation returns None on success or the CheckError that
describes the failure; errors are returned, never raised.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from .engine import Operator, compare, is_empty
from .errors import (
    CheckError,
    EmptyArgumentError,
    FormatInvalidError,
    InvalidPatternError,
    MembershipError,
    PatternMismatchError,
)


class Check(ABC):
    """A deferred, zero-argument validation unit."""

    @abstractmethod
    def evaluate(self) -> CheckError | None:
        """Run the check and return the failure, if any."""

    def __call__(self) -> CheckError | None:
        return self.evaluate()

    @property
    def name(self) -> str:
        """Check name used in logs."""
        return type(self).__name__


def is_blank(value: Any) -> bool:
    """Check if a string argument is None or whitespace only."""
    return value is None or str(value).strip() == ""


def required_error(required: bool, message: str) -> CheckError | None:
    """Return the error for an empty argument, or None when it is optional."""
    if not required:
        return None
    return EmptyArgumentError(message)


class Required(Check):
    """Fails on the first empty argument, in argument order."""

    def __init__(self, *values: Any, message: str | None = None) -> None:
        self.values = values
        self.message = message

    def evaluate(self) -> CheckError | None:
        for value in self.values:
            if is_empty(value):
                return EmptyArgumentError(self.message)
        return None

    def __repr__(self) -> str:
        return f"Required({', '.join(repr(v) for v in self.values)})"


@dataclass(frozen=True)
class Comparison(Check):
    """Compares x against a term with an arbitrary operator."""

    x: Any
    op: Operator | int | str
    term: Any

    def evaluate(self) -> CheckError | None:
        return compare(self.x, self.op, self.term)


class Eq(Comparison):
    """Checks that x is equal to the term."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.EQ, term)


class Ne(Comparison):
    """Checks that x is not equal to the term."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.NE, term)


class Lt(Comparison):
    """Checks that x is less than the term. Numbers, strings and timestamps only."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.LT, term)


class Lte(Comparison):
    """Checks that x is less than or equal to the term."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.LTE, term)


class Gt(Comparison):
    """Checks that x is greater than the term."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.GT, term)


class Gte(Comparison):
    """Checks that x is greater than or equal to the term."""

    def __init__(self, x: Any, term: Any) -> None:
        super().__init__(x, Operator.GTE, term)


@dataclass(frozen=True)
class Between(Check):
    """
    Checks that lower <= x <= upper.

    The lower bound is checked first; its error is returned without
    looking at the upper bound.
    """

    x: Any
    lower: Any
    upper: Any

    def evaluate(self) -> CheckError | None:
        error = compare(self.x, Operator.GTE, self.lower)
        if error is not None:
            return error
        return compare(self.x, Operator.LTE, self.upper)


class In(Check):
    """Checks that x equals at least one of the candidates."""

    def __init__(self, x: Any, *candidates: Any) -> None:
        self.x = x
        self.candidates = candidates

    def evaluate(self) -> CheckError | None:
        for candidate in self.candidates:
            if compare(self.x, Operator.EQ, candidate) is None:
                return None
        return MembershipError(self.x, self.candidates)

    def __repr__(self) -> str:
        return f"In({self.x!r}, {', '.join(repr(c) for c in self.candidates)})"


class NotIn(Check):
    """Checks that x equals none of the candidates."""

    def __init__(self, x: Any, *candidates: Any) -> None:
        self.x = x
        self.candidates = candidates

    def evaluate(self) -> CheckError | None:
        for candidate in self.candidates:
            if compare(self.x, Operator.EQ, candidate) is None:
                return MembershipError(self.x, self.candidates, negated=True, candidate=candidate)
        return None

    def __repr__(self) -> str:
        return f"NotIn({self.x!r}, {', '.join(repr(c) for c in self.candidates)})"


@dataclass(frozen=True)
class Matches(Check):
    """
    Checks that value contains a match for the regular expression.

    An empty value passes only when it is not required. The pattern is
    compiled on every evaluation.
    """

    value: str | None
    pattern: str
    required: bool = True

    def evaluate(self) -> CheckError | None:
        if is_blank(self.value):
            return required_error(self.required, "match term cannot be empty")

        try:
            compiled = re.compile(self.pattern)
        except re.error:
            return InvalidPatternError(self.pattern)

        if compiled.search(str(self.value)) is None:
            return PatternMismatchError(self.value, self.pattern)
        return None


@dataclass(frozen=True)
class FormatCheck(Check):
    """
    Base for checks of well-known string formats.

    Subclasses name their format and implement is_valid; an empty value
    passes only when it is not required.
    """

    value: str | None
    required: bool = True

    kind: ClassVar[str] = "value"
    empty_message: ClassVar[str] = "value cannot be empty"

    @abstractmethod
    def is_valid(self, value: str) -> bool:
        """Check if a non-empty value is well formed."""

    def evaluate(self) -> CheckError | None:
        if is_blank(self.value):
            return required_error(self.required, self.empty_message)
        if not self.is_valid(str(self.value)):
            return FormatInvalidError(self.kind, self.value)
        return None
