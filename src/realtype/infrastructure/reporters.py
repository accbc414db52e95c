"""
Reporter adapters for check output.

RichConsoleReporter prints to a terminal; MemoryReporter keeps events
for tests and embedding callers.
"""

from rich.console import Console
from rich.padding import Padding
from rich.pretty import Pretty
from rich.text import Text

from realtype.domain.interfaces import ReporterInterface
from realtype.domain.models import CheckResult, CheckSummary

INDENT = 2


class RichConsoleReporter(ReporterInterface):
    """
    Prints checks to a rich Console.

    Output per check:
        [OK] <label>
    or
        [FAIL] <label>
        Expected:
        <expected>
        Actual:
        <actual>

    Labels are rendered as plain Text so brackets are never read as markup.
    """

    def __init__(self, console: Console | None = None):
        """
        Args:
            console: Target console (default: a new stdout Console)
        """
        self.console = console or Console()
        self._in_block = False

    def _print(self, renderable: Text | Pretty) -> None:
        if self._in_block:
            self.console.print(Padding(renderable, (0, 0, 0, INDENT)))
        else:
            self.console.print(renderable)

    def start_block(self, name: str) -> None:
        if self._in_block:
            self.console.print()
        self.console.print(Text(f"# {name}", style="bold"))
        self._in_block = True

    def report(self, result: CheckResult) -> None:
        if result.passed:
            self._print(Text(f"[OK] {result.label}", style="green"))
            return

        self._print(Text(f"[FAIL] {result.label}", style="bold red"))
        if result.feedback:
            self._print(Text(result.feedback, style="dim"))
        self._print(Text("Expected:", style="yellow"))
        self._print(Pretty(result.expected))
        self._print(Text("Actual:", style="yellow"))
        self._print(Pretty(result.actual))

    def finish(self, summary: CheckSummary) -> None:
        self._in_block = False
        style = "bold green" if summary.ok else "bold red"
        self.console.print()
        self.console.print(
            Text(
                f"{summary.passed} passed, {summary.failed} failed "
                f"({summary.total} checks)",
                style=style,
            )
        )


class MemoryReporter(ReporterInterface):
    """Collects blocks and results in memory, in call order."""

    def __init__(self) -> None:
        self.blocks: list[str] = []
        self.results: list[CheckResult] = []
        self.summary: CheckSummary | None = None

    def start_block(self, name: str) -> None:
        self.blocks.append(name)

    def report(self, result: CheckResult) -> None:
        self.results.append(result)

    def finish(self, summary: CheckSummary) -> None:
        self.summary = summary

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.blocks.clear()
        self.results.clear()
        self.summary = None
