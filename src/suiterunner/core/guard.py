"""Timeout-bounded invocation of a single test.

A test with a budget runs on its own short-lived daemon thread. When the
budget elapses the guard reports a timeout and sets the worker's cancel
event, but it cannot stop the thread: Python offers no safe way to kill
arbitrary code. A test body that never checks
:func:`cancellation_requested` keeps running in the background after its
timeout has been reported.
"""

import logging
import threading
import traceback
from typing import Callable, Optional

from suiterunner.assertions import AssertionMismatch
from suiterunner.models import (
    AssertionFailed,
    Errored,
    Outcome,
    Passed,
    TimedOut,
    TimeoutSpec,
)

log = logging.getLogger(__name__)

_worker_state = threading.local()


def current_cancel_event() -> Optional[threading.Event]:
    """Cancel event of the guarded test running on this thread, if any."""
    return getattr(_worker_state, "cancel_event", None)


def cancellation_requested() -> bool:
    """Check whether the guard has given up on the current test."""
    event = current_cancel_event()
    return event is not None and event.is_set()


def classify_exception(exc: BaseException) -> Outcome:
    """Map an exception raised by a test body to its outcome."""
    if isinstance(exc, AssertionMismatch):
        return AssertionFailed(expected=exc.expected, actual=exc.actual)
    return Errored(
        cause=f"{type(exc).__name__}: {exc}",
        traceback="".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ),
    )


class _Worker(threading.Thread):
    """One-shot daemon thread running a single test invocation."""

    def __init__(self, func: Callable[[], object], name: str):
        super().__init__(name=name, daemon=True)
        self.func = func
        self.cancel_event = threading.Event()
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        _worker_state.cancel_event = self.cancel_event
        try:
            self.func()
        except BaseException as e:
            self.error = e
        finally:
            # Drop references held by the thread
            self.func = None


class TimeoutGuard:
    """Runs a test invocation and classifies its outcome."""

    def invoke(
        self,
        func: Callable[[], object],
        timeout: Optional[TimeoutSpec] = None,
        name: str = "test",
    ) -> Outcome:
        """Invoke ``func``, bounded by ``timeout`` when one is given.

        Args:
            func: Zero-argument callable, usually a bound test method
            timeout: Optional wall-clock budget
            name: Test name used for the worker thread and log messages

        Returns:
            Passed, AssertionFailed, TimedOut or Errored
        """
        if timeout is None:
            return self._invoke_inline(func)
        return self._invoke_on_worker(func, timeout, name)

    def _invoke_inline(self, func: Callable[[], object]) -> Outcome:
        try:
            func()
        # KeyboardInterrupt still stops the run
        except (Exception, SystemExit) as e:
            return classify_exception(e)
        return Passed()

    def _invoke_on_worker(
        self,
        func: Callable[[], object],
        timeout: TimeoutSpec,
        name: str,
    ) -> Outcome:
        worker = _Worker(func, name=f"suiterunner-{name}")
        worker.start()
        worker.join(timeout.seconds)

        if worker.is_alive():
            worker.cancel_event.set()
            log.warning(
                "Test %s exceeded %s %s; cancellation requested but the "
                "worker thread is still running",
                name,
                timeout.duration,
                timeout.unit.name,
            )
            return TimedOut(message=timeout.message)

        if worker.error is not None:
            return classify_exception(worker.error)
        return Passed()
