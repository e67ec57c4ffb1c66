"""
valcheck domain layer.

Framework-free checks, the comparison engine and the error taxonomy.
"""

from .checks import (
    Between,
    Check,
    Comparison,
    Eq,
    FormatCheck,
    Gt,
    Gte,
    In,
    Lt,
    Lte,
    Matches,
    Ne,
    NotIn,
    Required,
)
from .formats import IBAN, IP, MAC, VAT

__all__ = [
    "Between",
    "Check",
    "Comparison",
    "Eq",
    "FormatCheck",
    "Gt",
    "Gte",
    "IBAN",
    "IP",
    "In",
    "Lt",
    "Lte",
    "MAC",
    "Matches",
    "Ne",
    "NotIn",
    "Required",
    "VAT",
]
