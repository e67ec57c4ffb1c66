"""
Comparison engine.

The left operand decides the category of a comparison: the comparison
term is always coerced into the left operand's category, never the
reverse. Structural values (anything outside the numeric, string and
timestamp categories) only support equality operators.
"""

from __future__ import annotations

from typing import Any

from ..errors import (
    CheckError,
    ComparisonFailedError,
    ConversionError,
    InvalidOperatorError,
    UnsupportedOperatorError,
)
from .coercion import Category, classify, coerce
from .equality import equals
from .operators import ComparisonTerm, Operator


def compare(x: Any, op: Operator | int | str, term: Any) -> CheckError | None:
    """
    Compare x against a term with the given operator.

    Args:
        x: Left operand; its runtime type selects the category
        op: Operator, operator value or display name
        term: Right operand, coerced into the category of x

    Returns:
        None if the comparison holds, otherwise the error describing why not
    """
    try:
        cmp = ComparisonTerm(op, term)
    except InvalidOperatorError as err:
        return err
    return evaluate_term(x, cmp)


def evaluate_term(x: Any, cmp: ComparisonTerm | None) -> CheckError | None:
    """Evaluate a prepared comparison term against x."""
    if cmp is None:
        return CheckError("comparison term cannot be None")

    op = cmp.op
    if not isinstance(op, Operator):
        return InvalidOperatorError(op)

    category = classify(x)
    if category is Category.STRUCTURAL:
        return _compare_structural(x, cmp)

    try:
        left = coerce(x, category)
        right = coerce(cmp.term, category)
    except ConversionError as err:
        return err

    if op.apply(left, right):
        return None
    return ComparisonFailedError(op.label, op.failure_template, x, cmp.term)


def _compare_structural(x: Any, cmp: ComparisonTerm) -> CheckError | None:
    op = cmp.op
    if not op.is_equality:
        return UnsupportedOperatorError(op.label, x, cmp.term)

    same = equals(x, cmp.term)
    if same == (op is Operator.EQ):
        return None
    return ComparisonFailedError(op.label, op.failure_template, x, cmp.term)
