"""Report generation using Jinja2 templates."""

from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from suiterunner.config import RunnerConfig
from suiterunner.models import OutcomeStatus, RunSummary


class ReportGenerator:
    """Generates static HTML reports from run summaries."""

    def __init__(self, config: RunnerConfig, base_dir: Path):
        """Initialize the report generator.

        Args:
            config: Runner configuration
            base_dir: Directory the report output path is relative to
        """
        self.config = config
        self.base_dir = base_dir

        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

        self.env.filters["duration_format"] = self._format_duration
        self.env.filters["datetime_format"] = self._format_datetime
        self.env.filters["percentage"] = self._format_percentage

    def generate(self, summary: RunSummary) -> Path:
        """Render ``summary`` and write the HTML report.

        Returns:
            Path to the generated report file
        """
        context = self._prepare_context(summary)

        template = self.env.get_template("report.html")
        html_content = template.render(**context)

        report_path = self.config.get_report_path(self.base_dir)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(html_content, encoding="utf-8")

        return report_path

    def _prepare_context(self, summary: RunSummary) -> dict[str, Any]:
        total = summary.total
        pass_rate = (summary.passed / total * 100) if total > 0 else 0

        results = [e.to_dict() for e in summary.events]
        failing = [r for r in results if r["status"] != OutcomeStatus.PASSED.value]
        # Slowest failures first
        failing.sort(key=lambda r: r["duration_ms"], reverse=True)

        return {
            "title": self.config.report.title,
            "project_name": self.config.project.name,
            "generated_at": datetime.now(),
            "total": total,
            "passed": summary.passed,
            "failed": summary.failed,
            "timed_out": summary.timed_out,
            "errored": summary.errored,
            "pass_rate": pass_rate,
            "duration_ms": summary.duration_ms,
            "suites": [s.to_dict() for s in summary.suites],
            "failing_tests": failing,
        }

    @staticmethod
    def _format_duration(ms: int) -> str:
        """Format duration in milliseconds to human-readable string."""
        if ms < 1000:
            return f"{ms}ms"
        elif ms < 60000:
            return f"{ms / 1000:.2f}s"
        else:
            minutes = ms // 60000
            seconds = (ms % 60000) / 1000
            return f"{minutes}m {seconds:.1f}s"

    @staticmethod
    def _format_datetime(dt: Any) -> str:
        """Format datetime object or string."""
        if isinstance(dt, str):
            try:
                dt = datetime.fromisoformat(dt)
            except ValueError:
                return dt

        if isinstance(dt, datetime):
            return dt.strftime("%Y-%m-%d %H:%M:%S")

        return str(dt)

    @staticmethod
    def _format_percentage(value: float) -> str:
        """Format a decimal as percentage."""
        return f"{value:.1f}%"
