"""
valcheck - composable value checks.

Build checks with the constructors below and evaluate them with run(),
which returns the first failure or None:

    error = run(
        Required(name, email),
        Between(age, 18, 130),
        Email(email),
    )
"""

from .application import URL, Email, EmailList, run
from .application.errors import ApplicationError, ConfigurationError
from .domain import (
    IBAN,
    IP,
    MAC,
    VAT,
    Between,
    Check,
    Eq,
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
from .domain.engine import Operator, compare
from .domain.errors import (
    CheckError,
    ComparisonFailedError,
    ConversionError,
    EmptyArgumentError,
    FormatInvalidError,
    InvalidOperatorError,
    InvalidPatternError,
    MembershipError,
    PatternMismatchError,
    UnsupportedOperatorError,
)
from .infrastructure.bootstrap import configure
from .version import __version__

__all__ = [
    # Runner
    "run",
    "configure",
    # Checks
    "Check",
    "Required",
    "Eq",
    "Ne",
    "Lt",
    "Lte",
    "Gt",
    "Gte",
    "Between",
    "In",
    "NotIn",
    "Matches",
    "Email",
    "EmailList",
    "URL",
    "IBAN",
    "VAT",
    "IP",
    "MAC",
    # Engine
    "Operator",
    "compare",
    # Errors
    "CheckError",
    "ComparisonFailedError",
    "ConversionError",
    "EmptyArgumentError",
    "FormatInvalidError",
    "InvalidOperatorError",
    "InvalidPatternError",
    "MembershipError",
    "PatternMismatchError",
    "UnsupportedOperatorError",
    "ApplicationError",
    "ConfigurationError",
    "__version__",
]
