"""
Shallow type classifier.

Mirrors what a basic built-in type check can tell apart: primitives,
callables and "everything else is an object".
"""

import numbers
from typing import Any

from realtype.domain.models import UNDEFINED

SHALLOW_TAGS = frozenset(
    {"boolean", "number", "string", "object", "function", "undefined"}
)


def get_type(value: Any) -> str:
    """
    Return the coarse type tag of a value.

    ``None``, containers, dates and boxed primitives are all ``object``;
    NaN and infinities are still ``number``.
    """
    if value is UNDEFINED:
        return "undefined"
    # bool is an int subclass, test it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"
