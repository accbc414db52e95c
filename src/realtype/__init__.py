"""
realtype: classify runtime values by their real type.

A basic type check lumps lists, dates, regexes, sets, maps and None
together as "object" and calls NaN a number. The real classifier tells
them apart.

Example:
    from realtype import count_real_types, get_real_type, get_type

    get_type([1, 2])                 # 'object'
    get_real_type([1, 2])            # 'array'
    get_real_type(float("nan"))      # 'NaN'
    count_real_types([True, None, False])
    # [TypeCount(tag='boolean', count=2), TypeCount(tag='null', count=1)]
"""

# Application layer (aggregates and checks)
from realtype.application import (
    KNOWN_TYPES,
    CheckRunner,
    all_items_have_the_same_type,
    check,
    compare,
    count_real_types,
    every_item_has_a_unique_real_type,
    every_item_is_finite,
    every_item_is_nan,
    get_real_types_of_items,
    get_types_of_items,
    run_builtin_suite,
)

# Classifiers
from realtype.classifiers import (
    TypeRule,
    get_real_type,
    get_type,
    is_infinite,
    is_nan,
    register_type,
    unregister_type,
)

# Domain models, ports and exceptions
from realtype.domain import (
    UNDEFINED,
    Boxed,
    CheckResult,
    CheckSummary,
    ConfigurationError,
    ReporterInterface,
    TypeCount,
)

# Infrastructure
from realtype.infrastructure import MemoryReporter, RichConsoleReporter

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Domain
    "UNDEFINED",
    "Boxed",
    "CheckResult",
    "CheckSummary",
    "ConfigurationError",
    "ReporterInterface",
    "TypeCount",
    # Classifiers
    "TypeRule",
    "get_real_type",
    "get_type",
    "is_infinite",
    "is_nan",
    "register_type",
    "unregister_type",
    # Aggregates
    "all_items_have_the_same_type",
    "count_real_types",
    "every_item_has_a_unique_real_type",
    "every_item_is_finite",
    "every_item_is_nan",
    "get_real_types_of_items",
    "get_types_of_items",
    # Checks
    "KNOWN_TYPES",
    "CheckRunner",
    "check",
    "compare",
    "run_builtin_suite",
    # Reporters
    "MemoryReporter",
    "RichConsoleReporter",
]
