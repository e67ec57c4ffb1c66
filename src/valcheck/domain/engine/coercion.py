"""
Type coercion for the comparison engine.

Values are read into one of a fixed set of categories. Coercion never
stringifies, parses or converts across categories: an operand whose
runtime type does not belong to the requested category is rejected with
a ConversionError.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Callable

import numpy as np
import pandas as pd

from ..errors import ConversionError


class Category(Enum):
    """Comparison categories, valued by their display names."""

    SIGNED_INTEGER = "int64"
    UNSIGNED_INTEGER = "uint64"
    FLOAT = "float64"
    STRING = "string"
    TIMESTAMP = "timestamp"
    STRUCTURAL = "structural"


def _is_signed(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, np.timedelta64):
        return False
    return isinstance(value, (int, np.signedinteger))


def _is_unsigned(value: Any) -> bool:
    return isinstance(value, np.unsignedinteger)


def _is_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, (datetime, np.datetime64))


_PREDICATES: tuple[tuple[Category, Callable[[Any], bool]], ...] = (
    (Category.SIGNED_INTEGER, _is_signed),
    (Category.UNSIGNED_INTEGER, _is_unsigned),
    (Category.FLOAT, _is_float),
    (Category.STRING, _is_string),
    (Category.TIMESTAMP, _is_timestamp),
)


def classify(value: Any) -> Category:
    """Return the comparison category of a value's runtime type."""
    for category, accepts in _PREDICATES:
        if accepts(value):
            return category
    return Category.STRUCTURAL


def to_signed(value: Any) -> int:
    """Read a signed integer of any width as a Python int."""
    if value is None or not _is_signed(value):
        raise ConversionError(Category.SIGNED_INTEGER.value, value)
    return int(value)


def to_unsigned(value: Any) -> int:
    """Read an unsigned integer of any width as a Python int."""
    if value is None or not _is_unsigned(value):
        raise ConversionError(Category.UNSIGNED_INTEGER.value, value)
    return int(value)


def to_float(value: Any) -> float:
    """Read a single or double precision float as a double."""
    if value is None or not _is_float(value):
        raise ConversionError(Category.FLOAT.value, value)
    return float(value)


def to_string(value: Any) -> str:
    """Read a genuine string value."""
    if value is None or not _is_string(value):
        raise ConversionError(Category.STRING.value, value)
    return str(value)


def to_timestamp(value: Any) -> pd.Timestamp:
    """
    Read a timestamp as a UTC-normalised pandas Timestamp.

    Naive datetimes are read as UTC so that every timestamp compares by
    instant.
    """
    if value is None or not _is_timestamp(value):
        raise ConversionError(Category.TIMESTAMP.value, value)
    stamp = pd.Timestamp(value)
    if stamp is pd.NaT:
        return stamp
    if stamp.tzinfo is None:
        return stamp.tz_localize("UTC")
    return stamp.tz_convert("UTC")


_COERCERS: dict[Category, Callable[[Any], Any]] = {
    Category.SIGNED_INTEGER: to_signed,
    Category.UNSIGNED_INTEGER: to_unsigned,
    Category.FLOAT: to_float,
    Category.STRING: to_string,
    Category.TIMESTAMP: to_timestamp,
}


def coerce(value: Any, category: Category) -> Any:
    """
    Read a value as the native representation of a category.

    Raises:
        ConversionError: If the value does not belong to the category
        ValueError: For the structural category, which has no coercion
    """
    try:
        coercer = _COERCERS[category]
    except KeyError:
        raise ValueError(f"category {category.value} has no coercion") from None
    return coercer(value)
