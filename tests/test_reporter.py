"""Tests for reporters and HTML report generation."""

import io

from rich.console import Console

from suiterunner.config import ProjectConfig, ReportConfig, RunnerConfig
from suiterunner.models import (
    AssertionFailed,
    Errored,
    Passed,
    RunSummary,
    SuiteReport,
    SuiteState,
    TestEvent,
    TimedOut,
)
from suiterunner.report.generator import ReportGenerator
from suiterunner.report.reporter import (
    CompositeReporter,
    ConsoleReporter,
    RecordingReporter,
    format_description,
    format_event,
)


def _event(name, outcome, description=None):
    return TestEvent(
        suite_name="CartSuite",
        test_name=name,
        outcome=outcome,
        description=description,
        duration_ms=12,
    )


def _summary():
    return RunSummary(
        suites=[
            SuiteReport(
                suite_name="CartSuite",
                state=SuiteState.DONE,
                events=[
                    _event("adds_item", Passed(), description="adds one <item>"),
                    _event("totals", AssertionFailed("5", "3")),
                    _event("checkout", TimedOut("Expected running time is 50 MILLISECOND")),
                    _event("refund", Errored("KeyError: 'order'")),
                ],
            )
        ]
    )


class TestFormatting:
    """Tests for outcome line formatting."""

    def test_passed(self):
        assert format_event(_event("a", Passed())) == "[Test method a] is successful"

    def test_assertion_failed(self):
        line = format_event(_event("a", AssertionFailed("5", "3")))
        assert line == "[Test method a] is failed. Expected = [5]; actual = [3]"

    def test_timed_out(self):
        line = format_event(_event("a", TimedOut("Expected running time is 50 MILLISECOND")))
        assert line == "[Test method a] is failed. Timed out. Expected running time is 50 MILLISECOND"

    def test_errored(self):
        line = format_event(_event("a", Errored("RuntimeError: boom")))
        assert line == "[Test method a] is failed. Error: RuntimeError: boom"

    def test_description(self):
        assert format_description("a", "note") == "[Test method a] detailed description: note"


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def _reporter(self, **kwargs):
        buffer = io.StringIO()
        console = Console(file=buffer, no_color=True, width=120)
        return ConsoleReporter(console=console, **kwargs), buffer

    def test_outcome_lines(self):
        reporter, buffer = self._reporter()
        for event in _summary().events:
            reporter.test_finished(event)

        output = buffer.getvalue()
        assert "[Test method adds_item] is successful" in output
        assert "Expected = [5]; actual = [3]" in output
        assert "Timed out. Expected running time is 50 MILLISECOND" in output
        assert "Error: KeyError: 'order'" in output

    def test_descriptions_toggle(self):
        reporter, buffer = self._reporter(show_descriptions=False)
        reporter.test_described("CartSuite", "adds_item", "hidden note")
        assert "hidden note" not in buffer.getvalue()

        reporter, buffer = self._reporter()
        reporter.test_described("CartSuite", "adds_item", "shown note")
        assert "detailed description: shown note" in buffer.getvalue()

    def test_summary(self):
        reporter, buffer = self._reporter()
        reporter.run_finished(_summary())

        output = buffer.getvalue()
        assert "Total Tests" in output
        assert "25.0%" in output
        assert "Some tests failed!" in output

    def test_suite_aborted(self):
        reporter, buffer = self._reporter()
        reporter.suite_aborted("CartSuite", RuntimeError("db [down]"))
        output = buffer.getvalue()
        assert "Suite CartSuite aborted" in output
        assert "db [down]" in output


class TestCompositeReporter:
    """Tests for CompositeReporter."""

    def test_fans_out(self):
        first, second = RecordingReporter(), RecordingReporter()
        composite = CompositeReporter([first, second])

        composite.suite_started("CartSuite")
        composite.test_finished(_event("a", Passed()))

        assert first.log == second.log == ["suite_started:CartSuite", "finished:a:passed"]


class TestReportGenerator:
    """Tests for ReportGenerator."""

    def test_generate(self, tmp_path):
        """Test that the report is written with every test in it."""
        config = RunnerConfig(
            project=ProjectConfig(name="shop"),
            report=ReportConfig(output_dir="reports", filename="run.html", title="Nightly"),
        )

        path = ReportGenerator(config, tmp_path).generate(_summary())

        assert path == (tmp_path / "reports" / "run.html").resolve()
        html = path.read_text(encoding="utf-8")
        assert "Nightly" in html
        assert "shop" in html
        for name in ["adds_item", "totals", "checkout", "refund"]:
            assert name in html
        assert "Expected = [5]; actual = [3]" in html
        # Descriptions are escaped
        assert "adds one &lt;item&gt;" in html

    def test_format_duration(self):
        assert ReportGenerator._format_duration(500) == "500ms"
        assert ReportGenerator._format_duration(1500) == "1.50s"
        assert ReportGenerator._format_duration(90000) == "1m 30.0s"

    def test_format_percentage(self):
        assert ReportGenerator._format_percentage(66.666) == "66.7%"
