"""
valcheck comparison engine.

Coercion of operands into comparison categories, structural equality and
emptiness, and operator evaluation.
"""

from .coercion import Category, classify, coerce
from .comparison import compare, evaluate_term
from .equality import equals, is_empty
from .operators import ComparisonTerm, Operator

__all__ = [
    "Category",
    "ComparisonTerm",
    "Operator",
    "classify",
    "coerce",
    "compare",
    "equals",
    "evaluate_term",
    "is_empty",
]
