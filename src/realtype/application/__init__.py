"""Application layer: aggregates over collections and the check runner."""

from realtype.application.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    every_item_is_finite,
    every_item_is_nan,
    get_real_types_of_items,
    get_types_of_items,
)
from realtype.application.checks import CheckRunner, check, compare
from realtype.application.suite import KNOWN_TYPES, run_builtin_suite

__all__ = [
    "KNOWN_TYPES",
    "CheckRunner",
    "all_items_have_the_same_type",
    "check",
    "compare",
    "count_real_types",
    "every_item_has_a_unique_real_type",
    "every_item_is_finite",
    "every_item_is_nan",
    "get_real_types_of_items",
    "get_types_of_items",
    "run_builtin_suite",
]
