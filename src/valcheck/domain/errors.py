"""Domain errors for valcheck.

Checks return these as values; they are exceptions so callers can raise
them if they choose to.
"""

from typing import Any


class CheckError(Exception):
    """Base exception for all check failures."""

    def __init__(self, message: str) -> None:
        """
        Initialize check error.

        Args:
            message: Human-readable failure message
        """
        super().__init__(message)
        self.message = message


class InvalidOperatorError(CheckError):
    """Raised when an operator lies outside the comparison enumeration."""

    def __init__(self, operator: Any) -> None:
        super().__init__(f"invalid comparison operator `{operator}`")
        self.operator = operator


class ConversionError(CheckError):
    """Raised when an operand cannot be read as the required category."""

    def __init__(self, category: str, value: Any) -> None:
        """
        Initialize conversion error.

        Args:
            category: Display name of the target category (e.g. "int64")
            value: The rejected operand
        """
        if value is None:
            message = f"cannot convert None to type {category}"
        else:
            message = (
                f"cannot convert `{value}` of type `{type(value).__name__}` "
                f"to type {category}"
            )
        super().__init__(message)
        self.category = category
        self.value = value


class UnsupportedOperatorError(CheckError):
    """Raised when an ordering operator is applied to structural values."""

    def __init__(self, operator: str, x: Any, term: Any) -> None:
        super().__init__(f"invalid operation `{operator}` for values `{x}` and `{term}`")
        self.operator = operator
        self.x = x
        self.term = term


class ComparisonFailedError(CheckError):
    """Raised when two comparable values do not satisfy the operator."""

    def __init__(self, operator: str, template: str, x: Any, term: Any) -> None:
        """
        Initialize comparison failure.

        Args:
            operator: Operator display name
            template: Message template taking operator, x and term
            x: Left operand
            term: Right operand (comparison term)
        """
        super().__init__(template.format(op=operator, x=x, term=term))
        self.operator = operator
        self.x = x
        self.term = term


class MembershipError(CheckError):
    """Raised when a value is (or is not) found among candidates."""

    def __init__(
        self,
        x: Any,
        candidates: tuple,
        negated: bool = False,
        candidate: Any = None,
    ) -> None:
        """
        Initialize membership error.

        Args:
            x: The checked value
            candidates: Every candidate, in argument order
            negated: True for a failed "not in" check
            candidate: The candidate equal to x, for a failed "not in" check
        """
        rendered = list(candidates)
        if negated:
            message = f"`not in` comparison failed: `{x}` in `{rendered}`"
        else:
            message = f"`in` comparison failed: `{x}` not in `{rendered}`"
        super().__init__(message)
        self.x = x
        self.candidates = candidates
        self.negated = negated
        self.candidate = candidate


class EmptyArgumentError(CheckError):
    """Raised when a required value is empty."""

    DEFAULT_MESSAGE = "empty argument"

    def __init__(self, message: str | None = None) -> None:
        message = (message or "").strip()
        super().__init__(message or self.DEFAULT_MESSAGE)


class InvalidPatternError(CheckError):
    """Raised when a regular expression does not compile."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"invalid pattern `{pattern}`")
        self.pattern = pattern


class PatternMismatchError(CheckError):
    """Raised when a value does not match a regular expression."""

    def __init__(self, value: str, pattern: str) -> None:
        super().__init__(f"`{value}` does not match pattern `{pattern}`")
        self.value = value
        self.pattern = pattern


class FormatInvalidError(CheckError):
    """Raised when a value is not a well-formed instance of a format."""

    def __init__(self, kind: str, value: Any) -> None:
        """
        Initialize format error.

        Args:
            kind: Format name as shown to users (e.g. "IBAN", "email address")
            value: The rejected value
        """
        super().__init__(f"invalid {kind} `{value}`")
        self.kind = kind
        self.value = value
