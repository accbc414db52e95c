"""
Built-in self-check suite.

Replays the reference checks for every classifier and aggregate, grouped
in blocks. Run it through the CLI or hand it any CheckRunner.
"""

import datetime
import math
import re
from decimal import Decimal
from types import SimpleNamespace

from realtype.application.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    every_item_is_finite,
    every_item_is_nan,
    get_real_types_of_items,
    get_types_of_items,
)
from realtype.application.checks import CheckRunner
from realtype.classifiers.shallow import get_type
from realtype.domain.models import UNDEFINED, Boxed, CheckSummary

# One sample per known real type, in vocabulary order
KNOWN_TYPES: tuple = (
    False,
    123,
    "abcde",
    [1, 2, 3],
    SimpleNamespace(id=1),
    lambda x: x * 2,
    UNDEFINED,
    None,
    math.nan,
    math.inf,
    datetime.datetime(2020, 5, 12, 23, 50, 21, 817000, tzinfo=datetime.UTC),
    re.compile(r"[abcd]+"),
    {1, 2, 3, 4},
    {},
)

KNOWN_SHALLOW_TYPES = [
    "boolean",
    "number",
    "string",
    "object",
    "object",
    "function",
    "undefined",
    "object",
    "number",
    "number",
    "object",
    "object",
    "object",
    "object",
]

KNOWN_REAL_TYPES = [
    "boolean",
    "number",
    "string",
    "array",
    "object",
    "function",
    "undefined",
    "null",
    "NaN",
    "Infinity",
    "date",
    "regexp",
    "set",
    "map",
]


def _check_shallow_types(runner: CheckRunner) -> None:
    runner.block("getType")
    runner.check("Boolean", get_type(True), "boolean")
    runner.check("Number", get_type(123), "number")
    runner.check("String", get_type("whoo"), "string")
    runner.check("Array", get_type([]), "object")
    runner.check("Object", get_type(object()), "object")
    runner.check("Function", get_type(lambda: None), "function")
    runner.check("Undefined", get_type(UNDEFINED), "undefined")
    runner.check("Null", get_type(None), "object")


def _check_same_type(runner: CheckRunner) -> None:
    runner.block("allItemsHaveTheSameType")
    runner.check(
        "All values are numbers", all_items_have_the_same_type([11, 12, 13]), True
    )
    runner.check(
        "All values are strings",
        all_items_have_the_same_type(["11", "12", "13"]),
        True,
    )
    # A boxed string is an object
    runner.check(
        "All values are strings but wait",
        all_items_have_the_same_type(["11", Boxed("12"), "13"]),
        False,
    )
    # NaN and infinity are still numbers
    runner.check(
        "Values like a number",
        all_items_have_the_same_type([123, math.nan, math.inf]),
        True,
    )
    runner.check(
        "Values like an object",
        all_items_have_the_same_type([SimpleNamespace()]),
        True,
    )


def _check_known_types(runner: CheckRunner) -> None:
    runner.block("getTypesOfItems VS getRealTypesOfItems")
    runner.check(
        "Check basic types", get_types_of_items(KNOWN_TYPES), KNOWN_SHALLOW_TYPES
    )
    runner.check(
        "Check real types", get_real_types_of_items(KNOWN_TYPES), KNOWN_REAL_TYPES
    )


def _check_unique_types(runner: CheckRunner) -> None:
    runner.block("everyItemHasAUniqueRealType")
    runner.check(
        "All value types in the array are unique",
        every_item_has_a_unique_real_type([True, 123, "123"]),
        True,
    )
    runner.check(
        "Two values have the same type",
        every_item_has_a_unique_real_type([True, 123, "123" == 123]),
        False,
    )
    runner.check(
        "There are no repeated types in knownTypes",
        every_item_has_a_unique_real_type(KNOWN_TYPES),
        True,
    )


def _check_counts(runner: CheckRunner) -> None:
    runner.block("countRealTypes")
    expected = [["boolean", 3], ["null", 1], ["object", 1]]
    runner.check(
        "Count unique types of array items",
        count_real_types([True, None, not None, not not None, object()]),
        expected,
    )
    runner.check(
        "Counted unique types are sorted",
        count_real_types([object(), None, True, not None, not not None]),
        expected,
    )


def _check_nan_and_finite(runner: CheckRunner) -> None:
    runner.block("myTestAllAreNaN")
    runner.check(
        "All the items are NaN",
        every_item_is_nan([math.inf / math.inf, math.nan + 1, Decimal("NaN")]),
        True,
    )

    runner.block("myTestAllAreFinite")
    runner.check(
        "All values are numeric", every_item_is_finite([123, 113.2, 23 / 12]), True
    )
    runner.check("Has String", every_item_is_finite([123, 113.2, "123"]), False)
    runner.check("Has Infinity", every_item_is_finite([123, 113.2, math.inf]), False)
    runner.check("Has NaN", every_item_is_finite([math.nan, 123]), False)


def run_builtin_suite(runner: CheckRunner) -> CheckSummary:
    """
    Run every built-in check through ``runner``.

    Returns:
        The summary handed to the runner's reporter
    """
    _check_shallow_types(runner)
    _check_same_type(runner)
    _check_known_types(runner)
    _check_unique_types(runner)
    _check_counts(runner)
    _check_nan_and_finite(runner)
    return runner.finish()
