"""Reporting sinks receiving semantic run events."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from suiterunner.models import (
    OutcomeStatus,
    RunSummary,
    SuiteReport,
    TestEvent,
)


class Reporter(ABC):
    """Abstract base class for reporters.

    Reporters only observe the run; they never change its control flow.
    """

    def run_started(self, suite_count: int) -> None:
        pass

    def suite_started(self, suite_name: str) -> None:
        pass

    def test_described(self, suite_name: str, test_name: str, description: str) -> None:
        pass

    @abstractmethod
    def test_finished(self, event: TestEvent) -> None:
        """Receive the outcome of a single test."""
        pass

    def suite_finished(self, report: SuiteReport) -> None:
        pass

    def suite_aborted(self, suite_name: str, error: Exception) -> None:
        pass

    def run_finished(self, summary: RunSummary) -> None:
        pass


class NullReporter(Reporter):
    """Discards every event."""

    def test_finished(self, event: TestEvent) -> None:
        pass


class RecordingReporter(Reporter):
    """Keeps events in memory, in the order they arrive."""

    def __init__(self):
        self.events: list[TestEvent] = []
        self.descriptions: list[tuple[str, str, str]] = []
        self.aborted: list[tuple[str, Exception]] = []
        self.log: list[str] = []

    def suite_started(self, suite_name: str) -> None:
        self.log.append(f"suite_started:{suite_name}")

    def test_described(self, suite_name: str, test_name: str, description: str) -> None:
        self.descriptions.append((suite_name, test_name, description))
        self.log.append(f"described:{test_name}")

    def test_finished(self, event: TestEvent) -> None:
        self.events.append(event)
        self.log.append(f"finished:{event.test_name}:{event.status.value}")

    def suite_finished(self, report: SuiteReport) -> None:
        self.log.append(f"suite_finished:{report.suite_name}")

    def suite_aborted(self, suite_name: str, error: Exception) -> None:
        self.aborted.append((suite_name, error))
        self.log.append(f"suite_aborted:{suite_name}")


class CompositeReporter(Reporter):
    """Forwards every event to several reporters."""

    def __init__(self, reporters: Iterable[Reporter]):
        self.reporters = list(reporters)

    def run_started(self, suite_count: int) -> None:
        for r in self.reporters:
            r.run_started(suite_count)

    def suite_started(self, suite_name: str) -> None:
        for r in self.reporters:
            r.suite_started(suite_name)

    def test_described(self, suite_name: str, test_name: str, description: str) -> None:
        for r in self.reporters:
            r.test_described(suite_name, test_name, description)

    def test_finished(self, event: TestEvent) -> None:
        for r in self.reporters:
            r.test_finished(event)

    def suite_finished(self, report: SuiteReport) -> None:
        for r in self.reporters:
            r.suite_finished(report)

    def suite_aborted(self, suite_name: str, error: Exception) -> None:
        for r in self.reporters:
            r.suite_aborted(suite_name, error)

    def run_finished(self, summary: RunSummary) -> None:
        for r in self.reporters:
            r.run_finished(summary)


def format_event(event: TestEvent) -> str:
    """Plain-text outcome line for a test event."""
    prefix = f"[Test method {event.test_name}]"
    outcome = event.outcome
    if outcome.status == OutcomeStatus.PASSED:
        return f"{prefix} is successful"
    if outcome.status == OutcomeStatus.FAILED:
        return f"{prefix} is failed. {outcome.detail}"
    if outcome.status == OutcomeStatus.TIMED_OUT:
        return f"{prefix} is failed. Timed out. {outcome.detail}"
    return f"{prefix} is failed. Error: {outcome.detail}"


def format_description(test_name: str, description: str) -> str:
    return f"[Test method {test_name}] detailed description: {description}"


class ConsoleReporter(Reporter):
    """Prints colored outcome lines and a summary table with rich."""

    def __init__(
        self,
        console: Optional[Console] = None,
        show_descriptions: bool = True,
        verbose: bool = False,
    ):
        self.console = console or Console()
        self.show_descriptions = show_descriptions
        self.verbose = verbose

    def suite_started(self, suite_name: str) -> None:
        self.console.print(f"\n[bold]{suite_name}[/bold]")

    def test_described(self, suite_name: str, test_name: str, description: str) -> None:
        if self.show_descriptions:
            self.console.print(format_description(test_name, description), style="dim", markup=False)

    def test_finished(self, event: TestEvent) -> None:
        style = "green" if event.status == OutcomeStatus.PASSED else "red"
        self.console.print(format_event(event), style=style, markup=False)
        if self.verbose and event.status == OutcomeStatus.ERRORED and event.outcome.traceback:
            self.console.print(event.outcome.traceback, style="dim", markup=False)

    def suite_aborted(self, suite_name: str, error: Exception) -> None:
        self.console.print(f"[red]Suite {suite_name} aborted:[/red] ", end="")
        self.console.print(str(error), markup=False)

    def run_finished(self, summary: RunSummary) -> None:
        self.console.print("\n" + "=" * 50)
        self.console.print("[bold]Suite Results Summary[/bold]")
        self.console.print("=" * 50)

        table = Table(show_header=False, box=None)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Suites", str(len(summary.suites)))
        table.add_row("Total Tests", str(summary.total))
        table.add_row("Passed", f"[green]{summary.passed}[/green]")
        table.add_row("Failed", f"[red]{summary.failed}[/red]")
        table.add_row("Timed Out", f"[red]{summary.timed_out}[/red]")
        table.add_row("Errored", f"[red]{summary.errored}[/red]")

        if summary.total > 0:
            pass_rate = (summary.passed / summary.total) * 100
            table.add_row("Pass Rate", f"{pass_rate:.1f}%")

        self.console.print(table)

        if summary.success:
            self.console.print("\n[green]All tests passed![/green]")
        else:
            self.console.print("\n[red]Some tests failed![/red]")
