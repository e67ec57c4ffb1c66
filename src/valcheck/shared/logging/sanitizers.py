"""
Log sanitizers.

Check failures quote the values that were checked; those values can be
personal data (email addresses, IBANs, IPs), so they are masked before
any log line is rendered.
"""

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

# Field names that are always redacted
SENSITIVE_PATTERNS = [
    r"password",
    r"pwd",
    r"secret",
    r"token",
    r"api_key",
    r"apikey",
    r"credential",
    r"private",
]

_QUOTED = re.compile(r"`([^`]*)`")

# Quoted segments in these positions name an operator, not a value
_OPERATOR_SUFFIXES = (" comparison failed",)
_OPERATOR_PREFIXES = ("operation ", "operator ")

MASK = "***"


class CheckMessageProcessor:
    """
    Structlog processor masking checked values in log events.
    """

    def __call__(
        self,
        logger: WrappedLogger,
        name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Process log event and mask sensitive data."""
        return sanitize_for_log(event_dict)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize a dictionary for logging.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized dictionary with masked values
    """
    sanitized = {}

    for key, value in data.items():
        if _is_sensitive_field(key):
            sanitized[key] = "***REDACTED***"
        elif key in PARTIAL_MASK_FIELDS:
            if value is not None:
                sanitized[key] = PARTIAL_MASK_FIELDS[key](str(value))
            else:
                sanitized[key] = None
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_log(value)
        else:
            sanitized[key] = value

    return sanitized


def mask_check_message(message: str) -> str:
    """
    Mask the quoted values of a check failure message.

    Operator names stay readable:
    "`eq` comparison failed: `3` is not equal to `4`" becomes
    "`eq` comparison failed: `***` is not equal to `***`".
    """

    def _mask(match: re.Match[str]) -> str:
        before = message[: match.start()]
        after = message[match.end():]
        if after.startswith(_OPERATOR_SUFFIXES) or before.endswith(_OPERATOR_PREFIXES):
            return match.group(0)
        return f"`{MASK}`"

    return _QUOTED.sub(_mask, message)


# Fields that are partially masked
PARTIAL_MASK_FIELDS = {
    "error": mask_check_message,
}


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data."""
    field_lower = field_name.lower()
    return any(re.search(pattern, field_lower) for pattern in SENSITIVE_PATTERNS)
