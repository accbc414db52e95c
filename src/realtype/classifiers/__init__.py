"""
Type classifiers.

Both classifiers are pure and total: any Python value yields a tag.

- shallow: the coarse tag a basic type check provides
- real: the refined tag, extensible through the registry
"""

from realtype.classifiers.real import (
    get_real_type,
    is_infinite,
    is_nan,
    runtime_descriptor,
)
from realtype.classifiers.registry import (
    BUILTIN_RULES,
    TypeRule,
    register_type,
    registered_rules,
    unregister_type,
)
from realtype.classifiers.shallow import SHALLOW_TAGS, get_type

__all__ = [
    # Shallow classifier
    "SHALLOW_TAGS",
    "get_type",
    # Real classifier
    "get_real_type",
    "is_infinite",
    "is_nan",
    "runtime_descriptor",
    # Registry
    "BUILTIN_RULES",
    "TypeRule",
    "register_type",
    "registered_rules",
    "unregister_type",
]
