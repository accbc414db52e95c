"""
Collection predicates and the real type counter.

All functions accept any iterable (generators included) and never raise.
Empty input is vacuously true for the predicates and yields no counts.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from realtype.classifiers.real import get_real_type, is_infinite, is_nan
from realtype.classifiers.shallow import get_type
from realtype.domain.models import TypeCount


def get_types_of_items(values: Iterable[Any]) -> list[str]:
    """Shallow tag of each item, in order."""
    return [get_type(value) for value in values]


def get_real_types_of_items(values: Iterable[Any]) -> list[str]:
    """Real tag of each item, in order."""
    return [get_real_type(value) for value in values]


def all_items_have_the_same_type(values: Iterable[Any]) -> bool:
    """
    True if every item has the first item's shallow tag.

    A finite number, NaN and infinity all share the tag ``number``,
    while a string and a boxed string do not.
    """
    tags = get_types_of_items(values)
    if not tags:
        return True
    first = tags[0]
    return all(tag == first for tag in tags)


def every_item_has_a_unique_real_type(values: Iterable[Any]) -> bool:
    """True if no two items share a real tag."""
    tags = get_real_types_of_items(values)
    return len(set(tags)) == len(tags)


def count_real_types(values: Iterable[Any]) -> list[TypeCount]:
    """
    Count items per real tag.

    Returns:
        One TypeCount per distinct tag, sorted by tag, e.g.
        ``[TypeCount("boolean", 3), TypeCount("null", 1)]``
    """
    counts = Counter(get_real_types_of_items(values))
    return [TypeCount(tag, counts[tag]) for tag in sorted(counts)]


def every_item_is_nan(values: Iterable[Any]) -> bool:
    """True if every item is a numeric NaN."""
    return all(tag == "NaN" for tag in get_real_types_of_items(values))


def every_item_is_finite(values: Iterable[Any]) -> bool:
    """
    True if every item is a finite number.

    Booleans and numeric strings are not numbers, so they fail too.
    """
    return all(
        get_type(value) == "number" and not (is_nan(value) or is_infinite(value))
        for value in values
    )
