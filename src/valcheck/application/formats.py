"""
Checks for email addresses and URLs.

Parsing is delegated to pydantic: email addresses go through its
email-validator backed parser (display names such as "Bob <bob@host>"
are accepted, deliverability is not checked) and URLs through AnyUrl.
"""

from typing import ClassVar

from pydantic import AnyUrl, TypeAdapter, ValidationError
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from ..domain.checks import FormatCheck, required_error
from ..domain.errors import CheckError, FormatInvalidError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_email_address(value: str) -> bool:
    """Check if a value is an email address with an optional display name."""
    try:
        validate_email(value)
    except PydanticCustomError:
        return False
    return True


def is_absolute_url(value: str) -> bool:
    """Check if a value is an absolute URL with a scheme and a host."""
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(url.host)


def strip_spaces(value: str) -> str:
    """Remove every whitespace character from a string."""
    return "".join(ch for ch in value if not ch.isspace())


class Email(FormatCheck):
    """Checks that the value is an email address."""

    kind: ClassVar[str] = "email address"
    empty_message: ClassVar[str] = "email address cannot be empty"

    def is_valid(self, value: str) -> bool:
        return is_email_address(value)


class EmailList(FormatCheck):
    """
    Checks that the value is a comma separated list of email addresses.

    Whitespace is removed from the whole list before splitting; the first
    invalid address is reported.
    """

    kind: ClassVar[str] = "email address"
    empty_message: ClassVar[str] = "email address list cannot be empty"

    def is_valid(self, value: str) -> bool:
        """Check a single address of the list."""
        return is_email_address(value)

    def evaluate(self) -> CheckError | None:
        addresses = strip_spaces(str(self.value or ""))
        if not addresses:
            return required_error(self.required, self.empty_message)

        for address in addresses.split(","):
            if not self.is_valid(address):
                return FormatInvalidError(self.kind, address)
        return None


class URL(FormatCheck):
    """Checks that the value is an absolute URL."""

    kind: ClassVar[str] = "URL"
    empty_message: ClassVar[str] = "URL cannot be empty"

    def is_valid(self, value: str) -> bool:
        return is_absolute_url(value)
