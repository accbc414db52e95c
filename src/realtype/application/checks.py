"""
Labelled checks with pass/fail reporting.

A check compares an actual result with an expected one and hands the
outcome to a reporter. Mismatches are reported, never raised, so a run
always reaches its last check.
"""

import json
import logging
from typing import Any

from realtype.classifiers.real import is_nan
from realtype.classifiers.shallow import get_type
from realtype.domain.interfaces import ReporterInterface
from realtype.domain.models import CheckResult, CheckSummary

logger = logging.getLogger(__name__)

ARRAY_LIKE = (list, tuple)


def _serialize(value: Any) -> str:
    # Non-JSON items (sets, dates, UNDEFINED) compare by repr
    return json.dumps(value, default=repr)


def _strict_equals(actual: Any, expected: Any) -> bool:
    # NaN never equals anything; signalling NaNs raise on ==
    if is_nan(actual) or is_nan(expected):
        return False
    tag = get_type(actual)
    if tag != get_type(expected):
        return False
    if tag in ("object", "function"):
        return actual is expected
    return bool(actual == expected)


def compare(actual: Any, expected: Any) -> bool:
    """
    Compare two results.

    Array-likes (lists and tuples) compare by their JSON serialisation,
    which is order- and value-sensitive. Anything else must have the same
    shallow tag and be equal; composite values must be the same object.

    Raises:
        TypeError, ValueError: If an array-like cannot be serialised
        RecursionError: If an array-like is nested too deeply to serialise
    """
    if isinstance(actual, ARRAY_LIKE) and isinstance(expected, ARRAY_LIKE):
        return _serialize(actual) == _serialize(expected)
    return _strict_equals(actual, expected)


def check(label: str, actual: Any, expected: Any, block: str = "") -> CheckResult:
    """
    Evaluate one labelled check.

    Never raises: values that cannot be compared produce a failed result.

    Returns:
        CheckResult with passed=True if actual matches expected
    """
    try:
        passed = compare(actual, expected)
    except (TypeError, ValueError, ArithmeticError, RecursionError) as e:
        return CheckResult(
            label=label,
            passed=False,
            expected=expected,
            actual=actual,
            feedback=f"Values could not be compared: {e}",
            block=block,
        )

    return CheckResult(
        label=label,
        passed=passed,
        expected=expected,
        actual=actual,
        feedback="" if passed else "Actual result differs from expected result",
        block=block,
    )


class CheckRunner:
    """
    Runs labelled checks in call order and forwards them to a reporter.

    Example:
        runner = CheckRunner(MemoryReporter())
        runner.block("getType")
        runner.check("Boolean", get_type(True), "boolean")
        summary = runner.finish()
    """

    def __init__(self, reporter: ReporterInterface):
        """
        Args:
            reporter: Output sink receiving blocks and results
        """
        self._reporter = reporter
        self._results: list[CheckResult] = []
        self._current_block = ""

    @property
    def current_block(self) -> str:
        return self._current_block

    def block(self, name: str) -> None:
        """Start a named group; following checks belong to it."""
        self._current_block = name
        logger.debug("Check block: %s", name)
        self._reporter.start_block(name)

    def check(self, label: str, actual: Any, expected: Any) -> CheckResult:
        """Evaluate, record and report one check."""
        result = check(label, actual, expected, block=self._current_block)
        self._results.append(result)
        if not result.passed:
            logger.debug("Check failed: %s (%s)", label, result.feedback)
        self._reporter.report(result)
        return result

    def summary(self) -> CheckSummary:
        """Tally of the checks run so far."""
        return CheckSummary(results=tuple(self._results))

    def finish(self) -> CheckSummary:
        """Hand the final tally to the reporter and return it."""
        summary = self.summary()
        logger.info(
            "Ran %d checks: %d passed, %d failed",
            summary.total,
            summary.passed,
            summary.failed,
        )
        self._reporter.finish(summary)
        return summary
