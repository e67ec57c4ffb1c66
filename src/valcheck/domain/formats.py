"""Checks for financial and network identifiers."""

import ipaddress
import re
from typing import ClassVar

from .checks import FormatCheck

_IBAN_PATTERN = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]{11,30}$")

# Country prefix -> pattern of the national part
_VAT_PATTERNS: dict[str, re.Pattern[str]] = {
    country: re.compile(rf"^(?:{pattern})$")
    for country, pattern in {
        "AT": r"U\d{8}",
        "BE": r"[01]\d{9}",
        "BG": r"\d{9,10}",
        "CH": r"E\d{9}(?:MWST|TVA|IVA)?",
        "CY": r"\d{8}[A-Z]",
        "CZ": r"\d{8,10}",
        "DE": r"\d{9}",
        "DK": r"\d{8}",
        "EE": r"\d{9}",
        "EL": r"\d{9}",
        "ES": r"[A-Z0-9]\d{7}[A-Z0-9]",
        "FI": r"\d{8}",
        "FR": r"[A-HJ-NP-Z0-9]{2}\d{9}",
        "GB": r"\d{9}|\d{12}|GD[0-4]\d{2}|HA[5-9]\d{2}",
        "HR": r"\d{11}",
        "HU": r"\d{8}",
        "IE": r"\d{7}[A-W][AH]?|\d[A-Z+*]\d{5}[A-W]",
        "IT": r"\d{11}",
        "LT": r"\d{9}|\d{12}",
        "LU": r"\d{8}",
        "LV": r"\d{11}",
        "MT": r"\d{8}",
        "NL": r"\d{9}B\d{2}",
        "NO": r"\d{9}(?:MVA)?",
        "PL": r"\d{10}",
        "PT": r"\d{9}",
        "RO": r"\d{2,10}",
        "SE": r"\d{10}01",
        "SI": r"\d{8}",
        "SK": r"\d{10}",
        "XI": r"\d{9}|\d{12}|GD[0-4]\d{2}|HA[5-9]\d{2}",
    }.items()
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Valid octet counts: MAC-48, EUI-64, 20-octet IP over InfiniBand
_MAC_OCTETS = (6, 8, 20)


def iban_checksum_ok(iban: str) -> bool:
    """Check the ISO 7064 mod-97 check digits of an upper-case IBAN."""
    rearranged = iban[4:] + iban[:4]
    digits = "".join(str(int(ch, 36)) for ch in rearranged)
    return int(digits) % 97 == 1


def parse_mac(value: str) -> bytes | None:
    """
    Parse a hardware address in colon, hyphen or dot notation.

    Returns:
        The address octets, or None if the value is not a valid address
    """
    if len(value) >= 14 and value[4] == ".":
        groups = value.split(".")
        width = 4
    elif len(value) >= 17 and value[2] in ":-":
        groups = value.split(value[2])
        width = 2
    else:
        return None

    if any(len(group) != width or not _HEX_DIGITS.issuperset(group) for group in groups):
        return None

    octets = bytes.fromhex("".join(groups))
    if len(octets) not in _MAC_OCTETS:
        return None
    return octets


class IBAN(FormatCheck):
    """Checks that the value is an International Bank Account Number."""

    kind: ClassVar[str] = "IBAN"
    empty_message: ClassVar[str] = "IBAN cannot be empty"

    def is_valid(self, value: str) -> bool:
        return _IBAN_PATTERN.match(value) is not None and iban_checksum_ok(value)


class VAT(FormatCheck):
    """Checks that the value is a country-prefixed VAT identification number."""

    kind: ClassVar[str] = "VAT number"
    empty_message: ClassVar[str] = "VAT number cannot be empty"

    def is_valid(self, value: str) -> bool:
        pattern = _VAT_PATTERNS.get(value[:2])
        return pattern is not None and pattern.match(value[2:]) is not None


class IP(FormatCheck):
    """Checks that the value is an IPv4 or IPv6 address."""

    kind: ClassVar[str] = "IP address"
    empty_message: ClassVar[str] = "IP address cannot be empty"

    def is_valid(self, value: str) -> bool:
        try:
            ipaddress.ip_address(value)
        except ValueError:
            return False
        return True


class MAC(FormatCheck):
    """Checks that the value is a MAC-48, EUI-64 or InfiniBand hardware address."""

    kind: ClassVar[str] = "mac address"
    empty_message: ClassVar[str] = "MAC address cannot be empty"

    def is_valid(self, value: str) -> bool:
        return parse_mac(value) is not None
