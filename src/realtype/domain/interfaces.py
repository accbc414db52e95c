"""
Domain interfaces (Ports) for realtype.

The check runner writes through a reporter so that the same suite can
print to a terminal or collect results in memory.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from realtype.domain.models import CheckResult, CheckSummary


class ReporterInterface(ABC):
    """
    Port for check output.

    Reporters receive events in call order and must not raise for any
    check outcome.
    """

    @abstractmethod
    def start_block(self, name: str) -> None:
        """
        Open a named group of checks.

        Args:
            name: Heading for the checks that follow
        """
        pass

    @abstractmethod
    def report(self, result: "CheckResult") -> None:
        """
        Record the outcome of one check.

        Args:
            result: The check outcome, passed or failed
        """
        pass

    @abstractmethod
    def finish(self, summary: "CheckSummary") -> None:
        """
        Called once after the last check.

        Args:
            summary: Tally of every check reported
        """
        pass
