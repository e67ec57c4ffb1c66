"""Structural equality and emptiness predicates."""

from __future__ import annotations

import weakref
from collections.abc import Mapping, Sized
from dataclasses import fields, is_dataclass
from datetime import date, datetime, timedelta
from numbers import Number
from typing import Any

import numpy as np
import pandas as pd

_PANDAS_CONTAINERS = (pd.Series, pd.DataFrame, pd.Index)


def equals(a: Any, b: Any) -> bool:
    """
    Deep equality across sequences, mappings, arrays and scalar values.

    Lists never equal tuples; mappings are compared key by key; numpy
    arrays and pandas containers compare by shape and content.
    """
    if a is b:
        return True
    if a is pd.NA or b is pd.NA or a is pd.NaT or b is pd.NaT:
        # Missing markers are only equal to themselves
        return False

    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        if not (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)):
            return False
        return a.dtype == b.dtype and bool(np.array_equal(a, b))

    if isinstance(a, _PANDAS_CONTAINERS) or isinstance(b, _PANDAS_CONTAINERS):
        return type(a) is type(b) and bool(a.equals(b))

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if isinstance(a, list) != isinstance(b, list):
            return False
        return len(a) == len(b) and all(equals(x, y) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(equals(a[key], b[key]) for key in a)

    if _is_dataclass_instance(a) or _is_dataclass_instance(b):
        if type(a) is not type(b):
            return False
        return all(equals(getattr(a, f.name), getattr(b, f.name)) for f in fields(a))

    try:
        result = a == b
    except (TypeError, ValueError):
        return False
    # Element-wise or ambiguous results are not an answer to "equal?"
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    return False


def _is_dataclass_instance(value: Any) -> bool:
    return is_dataclass(value) and not isinstance(value, type)


def is_empty(x: Any) -> bool:
    """
    Check if a value is empty.

    A value is empty if it is:
    - None or a pandas missing marker (NA, NaT)
    - a sized value (string, sequence, mapping, set, array) of length 0
    - a wrapper (weak reference, numpy scalar, 0-d array) around an empty value
    - the zero value of its type (0, 0.0, False, zero timedelta, minimum date)
    - a dataclass instance whose fields are all empty
    """
    if x is None or x is pd.NA or x is pd.NaT:
        return True

    if isinstance(x, weakref.ref):
        return is_empty(x())
    if isinstance(x, np.generic) or (isinstance(x, np.ndarray) and x.ndim == 0):
        return is_empty(x.item())

    if isinstance(x, (np.ndarray,) + _PANDAS_CONTAINERS):
        return x.size == 0
    if isinstance(x, Sized):
        return len(x) == 0

    if isinstance(x, Number):
        return x == 0
    if isinstance(x, timedelta):
        return x == timedelta(0)
    if isinstance(x, datetime):
        return x.year == 1 and x.replace(tzinfo=None) == datetime.min
    if isinstance(x, date):
        return x == date.min

    if _is_dataclass_instance(x):
        return all(is_empty(getattr(x, f.name)) for f in fields(x))

    return False
