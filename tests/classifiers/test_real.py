"""Tests for the real type classifier."""

import datetime
import math
import re
from collections import OrderedDict, defaultdict
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType, SimpleNamespace

import pytest

from realtype.classifiers.real import (
    get_real_type,
    is_infinite,
    is_nan,
    runtime_descriptor,
)
from realtype.domain.models import UNDEFINED, Boxed


class TestNaN:
    """Numeric not-a-number values."""

    @pytest.mark.parametrize(
        "value",
        [
            math.nan,
            float("nan"),
            math.inf / math.inf,
            Decimal("NaN"),
            Decimal("sNaN"),
            complex(math.nan, 0),
        ],
    )
    def test_nan_values(self, value) -> None:
        assert is_nan(value) is True
        assert get_real_type(value) == "NaN"

    @pytest.mark.parametrize("value", ["NaN", "a", None, [math.nan], True])
    def test_non_numbers_are_never_nan(self, value) -> None:
        assert is_nan(value) is False


class TestInfinity:
    """Numeric positive and negative infinity."""

    @pytest.mark.parametrize(
        "value",
        [math.inf, -math.inf, 1e308 * 10, Decimal("Infinity"), Decimal("-Infinity")],
    )
    def test_infinite_values(self, value) -> None:
        assert is_infinite(value) is True
        assert get_real_type(value) == "Infinity"

    def test_complex_infinity(self) -> None:
        assert get_real_type(complex(math.inf, 1)) == "Infinity"

    @pytest.mark.parametrize("value", [0, 10**400, 1.5, Fraction(7, 2), "Infinity"])
    def test_finite_values_are_not_infinite(self, value) -> None:
        assert is_infinite(value) is False

    def test_nan_is_checked_before_infinity(self) -> None:
        # NaN is not finite either
        assert get_real_type(math.nan) == "NaN"


class TestKnownTags:
    """Each known tag and its Python values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (False, "boolean"),
            (123, "number"),
            (1.5, "number"),
            (Decimal("2.50"), "number"),
            (Fraction(1, 3), "number"),
            ("abcde", "string"),
            ([1, 2, 3], "array"),
            ((1, 2), "array"),
            (SimpleNamespace(id=1), "object"),
            (object(), "object"),
            (lambda x: x * 2, "function"),
            (len, "function"),
            (UNDEFINED, "undefined"),
            (None, "null"),
            (datetime.datetime(2020, 5, 12, 23, 50, 21), "date"),
            (datetime.date(2020, 5, 12), "date"),
            (re.compile(r"[abcd]+"), "regexp"),
            ({1, 2, 3, 4}, "set"),
            (frozenset(), "set"),
            ({}, "map"),
            (OrderedDict(), "map"),
            (defaultdict(list), "map"),
            (MappingProxyType({}), "map"),
        ],
    )
    def test_real_type(self, value, expected) -> None:
        assert get_real_type(value) == expected

    def test_boolean_is_not_a_number(self) -> None:
        assert get_real_type(True) == "boolean"

    @pytest.mark.parametrize("value", [Boxed("12"), Boxed(12), Boxed(False)])
    def test_boxed_primitives_are_objects(self, value) -> None:
        assert get_real_type(value) == "object"

    def test_user_class_instance_is_object(self) -> None:
        class Point:
            def __init__(self, x, y):
                self.x = x
                self.y = y

        assert get_real_type(Point(1, 2)) == "object"

    def test_user_class_itself_is_function(self) -> None:
        class Point:
            pass

        assert get_real_type(Point) == "function"


class TestRuntimeDescriptor:
    """Fallback to the runtime's own category name."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (b"abc", "bytes"),
            (bytearray(b"abc"), "bytearray"),
            (range(3), "range"),
            (memoryview(b"abc"), "memoryview"),
            ((x for x in []), "generator"),
        ],
    )
    def test_builtin_categories(self, value, expected) -> None:
        assert get_real_type(value) == expected

    def test_builtin_type_name_is_lowercased(self) -> None:
        assert runtime_descriptor(NotImplemented) == "notimplementedtype"

    def test_non_builtin_is_object(self) -> None:
        assert runtime_descriptor(SimpleNamespace()) == "object"
