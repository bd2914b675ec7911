"""Reporting sinks and HTML report generation."""

from suiterunner.report.reporter import (
    CompositeReporter,
    ConsoleReporter,
    NullReporter,
    RecordingReporter,
    Reporter,
)

__all__ = [
    "CompositeReporter",
    "ConsoleReporter",
    "NullReporter",
    "RecordingReporter",
    "Reporter",
]
