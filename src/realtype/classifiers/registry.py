"""
Type-rule registry for the real type classifier.

Built-in rules map Python runtime types onto the known tag vocabulary.
Callers can register extra rules, which are consulted first.
"""

import datetime
import logging
import numbers
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from realtype.domain.models import UNDEFINED, Boxed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeRule:
    """Maps every instance of ``types`` to ``tag``."""

    tag: str
    types: tuple[type, ...]

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.types)


# Order matters: bool before number, Boxed before anything callable.
BUILTIN_RULES: tuple[TypeRule, ...] = (
    TypeRule("null", (type(None),)),
    TypeRule("undefined", (type(UNDEFINED),)),
    TypeRule("boolean", (bool,)),
    TypeRule("number", (numbers.Number,)),
    TypeRule("string", (str,)),
    TypeRule("object", (Boxed,)),
    TypeRule("array", (list, tuple)),
    TypeRule("map", (Mapping,)),
    TypeRule("set", (set, frozenset)),
    TypeRule("date", (datetime.date,)),
    TypeRule("regexp", (re.Pattern,)),
    TypeRule("function", (Callable,)),
)

# Caller rules, most recently registered first
_custom_rules: list[TypeRule] = []


def register_type(tag: str, *types: type) -> TypeRule:
    """
    Register a custom real type tag.

    Args:
        tag: Tag reported for matching values (e.g., "decimal")
        *types: Classes whose instances receive the tag

    Returns:
        The registered rule

    Raises:
        ValueError: If the tag is empty or no types are given
    """
    if not tag:
        raise ValueError("Type tag must be a non-empty string")
    if not types:
        raise ValueError(f"No types given for tag '{tag}'")

    rule = TypeRule(tag=tag, types=tuple(types))
    _custom_rules.insert(0, rule)
    logger.debug(
        "Registered type rule %s -> %s", [t.__name__ for t in types], tag
    )
    return rule


def unregister_type(tag: str) -> int:
    """
    Remove every custom rule reporting ``tag``.

    Returns:
        Number of rules removed
    """
    kept = [rule for rule in _custom_rules if rule.tag != tag]
    removed = len(_custom_rules) - len(kept)
    _custom_rules[:] = kept
    if removed:
        logger.debug("Unregistered %d type rule(s) for %s", removed, tag)
    return removed


def registered_rules() -> tuple[TypeRule, ...]:
    """Custom rules currently in effect, in lookup order."""
    return tuple(_custom_rules)


def match_rule(value: Any) -> str | None:
    """Return the tag of the first rule matching ``value``, or None."""
    for rule in _custom_rules:
        if rule.matches(value):
            return rule.tag
    for rule in BUILTIN_RULES:
        if rule.matches(value):
            return rule.tag
    return None
