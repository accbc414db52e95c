"""
Domain models for real-type classification.

Pure data structures shared by the classifiers, the aggregates and the
check helper. Everything except the UNDEFINED sentinel is immutable.
"""

from dataclasses import dataclass, field
from typing import Any, NamedTuple

# =============================================================================
# SPECIAL VALUES
# =============================================================================


class _UndefinedType:
    """Type of the UNDEFINED sentinel. Only one instance ever exists."""

    _instance: "_UndefinedType | None" = None

    def __new__(cls) -> "_UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _UndefinedType()
"""Absence of a value. ``None`` is the null value, this is "not there at all"."""


@dataclass(frozen=True)
class Boxed:
    """
    Explicitly constructed wrapper around a primitive.

    A boxed string is a composite value, not a string, so both
    classifiers report it as ``object``.
    """

    value: Any

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# AGGREGATION RESULTS
# =============================================================================


class TypeCount(NamedTuple):
    """Number of items in a collection bearing a real type tag."""

    tag: str
    count: int


# =============================================================================
# CHECK RESULTS
# =============================================================================


@dataclass(frozen=True)
class CheckResult:
    """Immutable outcome of a single labelled check."""

    label: str
    passed: bool
    expected: Any = None
    actual: Any = None
    feedback: str = ""
    block: str = ""  # Heading of the group the check ran in


@dataclass(frozen=True)
class CheckSummary:
    """Tally of every check run by a CheckRunner."""

    results: tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        return tuple(result for result in self.results if not result.passed)
