"""Tests for the shallow type classifier."""

import datetime
import math
import re
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace

import pytest

from realtype.classifiers.shallow import SHALLOW_TAGS, get_type
from realtype.domain.models import UNDEFINED, Boxed


class TestPrimitives:
    """Primitives keep their own tag."""

    @pytest.mark.parametrize("value", [True, False])
    def test_booleans(self, value) -> None:
        assert get_type(value) == "boolean"

    @pytest.mark.parametrize(
        "value", [0, 123, -4.5, 10**30, Decimal("1.5"), Fraction(1, 3), 2j]
    )
    def test_numbers(self, value) -> None:
        assert get_type(value) == "number"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, Decimal("NaN")])
    def test_special_numbers_are_still_numbers(self, value) -> None:
        assert get_type(value) == "number"

    @pytest.mark.parametrize("value", ["", "whoo"])
    def test_strings(self, value) -> None:
        assert get_type(value) == "string"

    def test_undefined(self) -> None:
        assert get_type(UNDEFINED) == "undefined"


class TestObjects:
    """Everything composite collapses to object."""

    @pytest.mark.parametrize(
        "value",
        [
            None,
            [],
            (1, 2),
            {},
            {1, 2},
            object(),
            SimpleNamespace(id=1),
            datetime.date(2020, 5, 12),
            re.compile("a+"),
            b"bytes",
        ],
    )
    def test_composites_are_objects(self, value) -> None:
        assert get_type(value) == "object"

    @pytest.mark.parametrize("value", [Boxed("12"), Boxed(12), Boxed(True)])
    def test_boxed_primitives_are_objects(self, value) -> None:
        assert get_type(value) == "object"


class TestFunctions:
    """Anything callable is a function."""

    def test_lambda(self) -> None:
        assert get_type(lambda x: x * 2) == "function"

    def test_builtin(self) -> None:
        assert get_type(len) == "function"

    def test_class(self) -> None:
        assert get_type(dict) == "function"

    def test_callable_instance(self) -> None:
        class Adder:
            def __call__(self, a, b):
                return a + b

        assert get_type(Adder()) == "function"


def test_results_stay_in_shallow_vocabulary() -> None:
    values = [True, 1, "s", None, [], UNDEFINED, len, Boxed("x"), math.nan]
    assert {get_type(v) for v in values} <= SHALLOW_TAGS
