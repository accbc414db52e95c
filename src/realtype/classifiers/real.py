"""
Real type classifier.

Refines the shallow tag: NaN and infinities get their own tags, and
objects are split by runtime category (array, null, date, regexp, set,
map, ...).
"""

import cmath
import math
import numbers
from decimal import Decimal
from typing import Any

from realtype.classifiers.registry import match_rule


def is_nan(value: Any) -> bool:
    """True only for numeric not-a-number values, never for other types."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    if isinstance(value, Decimal):
        # sNaN signals on comparison
        return value.is_nan()
    return value != value


def is_infinite(value: Any) -> bool:
    """True for numeric positive or negative infinity."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, complex):
        return cmath.isinf(value)
    if isinstance(value, numbers.Integral):
        return False
    return abs(value) == math.inf


def runtime_descriptor(value: Any) -> str:
    """
    Canonical category of a value taken from its runtime type.

    Built-in types report their own lower-cased name; instances of
    user-defined classes are plain objects.
    """
    value_type = type(value)
    if value_type.__module__ == "builtins":
        return value_type.__name__.lower()
    return "object"


def get_real_type(value: Any) -> str:
    """
    Return the real type tag of a value.

    Examples:
        get_real_type(datetime.date.today())  # 'date'
        get_real_type(float("nan"))           # 'NaN'
        get_real_type(Boxed("abc"))           # 'object'
    """
    # NaN is not finite either, so it must be tested first
    if is_nan(value):
        return "NaN"
    if is_infinite(value):
        return "Infinity"

    tag = match_rule(value)
    if tag is not None:
        return tag
    return runtime_descriptor(value)
