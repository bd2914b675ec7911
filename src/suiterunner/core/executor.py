"""Lifecycle execution of a single suite instance."""

import logging
import time
from typing import Optional

from suiterunner.core.classifier import ClassifiedMethods, TaggedMethod
from suiterunner.core.errors import HookError
from suiterunner.core.guard import TimeoutGuard
from suiterunner.models import SuiteReport, SuiteState, TestEvent
from suiterunner.report.reporter import NullReporter, Reporter

log = logging.getLogger(__name__)


class LifecycleExecutor:
    """Runs hooks and tests of one suite instance in lifecycle order.

    Order: one-time setup, then for every test its per-test setup, the test
    itself and its per-test teardown, then one-time teardown. A raising hook
    aborts the suite and propagates as :class:`HookError`; a failing test
    only produces an outcome.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        guard: Optional[TimeoutGuard] = None,
    ):
        self.reporter = reporter or NullReporter()
        self.guard = guard or TimeoutGuard()

    def execute(
        self,
        instance: object,
        methods: ClassifiedMethods,
        suite_name: Optional[str] = None,
    ) -> SuiteReport:
        """Execute the full lifecycle of ``instance``.

        Args:
            instance: Live suite instance
            methods: Classified methods of the instance's type
            suite_name: Name used in events (defaults to the class name)

        Returns:
            SuiteReport in state DONE

        Raises:
            HookError: If any setup or teardown hook raises
        """
        report = SuiteReport(suite_name=suite_name or type(instance).__name__)

        try:
            self._transition(report, SuiteState.RUNNING_ONE_TIME_SETUP)
            self._run_hooks(instance, methods.one_time_setup, report)

            self._transition(report, SuiteState.RUNNING_TESTS)
            for method in methods.tests:
                self._run_test(instance, method, methods, report)

            self._transition(report, SuiteState.RUNNING_ONE_TIME_TEARDOWN)
            self._run_hooks(instance, methods.one_time_teardown, report)
        except HookError:
            self._transition(report, SuiteState.ABORTED)
            raise

        self._transition(report, SuiteState.DONE)
        return report

    def _transition(self, report: SuiteReport, state: SuiteState) -> None:
        log.debug("%s: %s -> %s", report.suite_name, report.state.value, state.value)
        report.state = state

    def _run_hooks(
        self,
        instance: object,
        hooks: tuple[TaggedMethod, ...],
        report: SuiteReport,
    ) -> None:
        for hook in hooks:
            log.debug("%s: calling %s hook %s", report.suite_name, hook.role.value, hook.name)
            try:
                getattr(instance, hook.name)()
            except Exception as e:
                raise HookError(report.suite_name, hook.name, hook.role, e) from e

    def _run_test(
        self,
        instance: object,
        method: TaggedMethod,
        methods: ClassifiedMethods,
        report: SuiteReport,
    ) -> None:
        self._run_hooks(instance, methods.per_test_setup, report)

        if method.description:
            self.reporter.test_described(report.suite_name, method.name, method.description)

        start_time = time.monotonic()
        outcome = self.guard.invoke(
            getattr(instance, method.name),
            timeout=method.timeout,
            name=method.name,
        )
        duration_ms = int((time.monotonic() - start_time) * 1000)

        self._run_hooks(instance, methods.per_test_teardown, report)

        event = TestEvent(
            suite_name=report.suite_name,
            test_name=method.name,
            outcome=outcome,
            description=method.description,
            duration_ms=duration_ms,
        )
        report.events.append(event)
        log.debug("%s.%s: %s", report.suite_name, method.name, outcome.status.value)
        self.reporter.test_finished(event)
