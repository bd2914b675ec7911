"""Suite run orchestration."""

import logging
from typing import Optional

from suiterunner.core.classifier import classify
from suiterunner.core.errors import SuiteRunnerError
from suiterunner.core.executor import LifecycleExecutor
from suiterunner.core.factory import create_instance
from suiterunner.core.guard import TimeoutGuard
from suiterunner.core.registry import SuiteRegistry
from suiterunner.models import RunSummary, SuiteReport
from suiterunner.report.reporter import NullReporter, Reporter

log = logging.getLogger(__name__)


class TestRunner:
    """Runs registered suites one after another.

    Each suite is instantiated, classified and executed in registration
    order. A fatal error (instantiation or hook failure) is reported to the
    reporter and re-raised; suites registered after it do not run.
    """

    __test__ = False

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        registry: Optional[SuiteRegistry] = None,
        guard: Optional[TimeoutGuard] = None,
    ):
        """Initialize the test runner."""
        self.reporter = reporter or NullReporter()
        self.registry = registry or SuiteRegistry()
        self.executor = LifecycleExecutor(self.reporter, guard)

    def register(self, *suites: type) -> None:
        """Register one or more suite types."""
        self.registry.register(*suites)

    def run(self) -> RunSummary:
        """Execute every registered suite.

        Returns:
            RunSummary with one SuiteReport per executed suite

        Raises:
            InstantiationError: If a suite cannot be constructed
            HookError: If a setup or teardown hook raises
            ConfigurationError: If a suite carries conflicting tags
        """
        summary = RunSummary()
        self.reporter.run_started(len(self.registry))

        for suite_type in self.registry:
            summary.suites.append(self._process_suite(suite_type))

        log.info(
            "Run finished: %d passed, %d failed, %d timed out, %d errored",
            summary.passed,
            summary.failed,
            summary.timed_out,
            summary.errored,
        )
        self.reporter.run_finished(summary)
        return summary

    def _process_suite(self, suite_type: type) -> SuiteReport:
        suite_name = suite_type.__name__
        log.info("Running suite %s", suite_name)
        self.reporter.suite_started(suite_name)

        try:
            instance = create_instance(suite_type)
            methods = classify(suite_type)
            report = self.executor.execute(instance, methods, suite_name)
        except SuiteRunnerError as e:
            log.error("Suite %s aborted: %s", suite_name, e)
            self.reporter.suite_aborted(suite_name, e)
            raise

        self.reporter.suite_finished(report)
        return report
