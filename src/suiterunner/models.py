"""Data models for suite roles, test outcomes and run results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class MethodRole(str, Enum):
    """Lifecycle role of a suite method."""

    ONE_TIME_SETUP = "one_time_setup"
    PER_TEST_SETUP = "per_test_setup"
    TEST = "test"
    PER_TEST_TEARDOWN = "per_test_teardown"
    ONE_TIME_TEARDOWN = "one_time_teardown"


class TimeUnit(Enum):
    """Units accepted by a test timeout."""

    MILLISECOND = 0.001
    SECONDS = 1.0
    MINUTES = 60.0

    @property
    def seconds(self) -> float:
        return self.value


@dataclass(frozen=True)
class TimeoutSpec:
    """Wall-clock budget attached to a test."""

    duration: int
    unit: TimeUnit = TimeUnit.MILLISECOND

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError("Timeout duration must be positive")
        if not isinstance(self.unit, TimeUnit):
            raise ValueError(f"Timeout unit must be a TimeUnit, got {self.unit!r}")

    @property
    def seconds(self) -> float:
        """Budget converted to seconds."""
        return self.duration * self.unit.seconds

    @property
    def message(self) -> str:
        return f"Expected running time is {self.duration} {self.unit.name}"


class OutcomeStatus(str, Enum):
    """Classification of a single test run."""

    PASSED = "passed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    ERRORED = "errored"


@dataclass(frozen=True)
class Passed:
    """The test body returned normally."""

    status = OutcomeStatus.PASSED

    @property
    def detail(self) -> str:
        return ""

    def to_dict(self) -> dict:
        return {"status": self.status.value}


@dataclass(frozen=True)
class AssertionFailed:
    """The test body raised an assertion mismatch."""

    expected: str
    actual: str

    status = OutcomeStatus.FAILED

    @property
    def detail(self) -> str:
        return f"Expected = [{self.expected}]; actual = [{self.actual}]"

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass(frozen=True)
class TimedOut:
    """The test body did not finish within its budget."""

    message: str

    status = OutcomeStatus.TIMED_OUT

    @property
    def detail(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {"status": self.status.value, "message": self.message}


@dataclass(frozen=True)
class Errored:
    """The test body raised something other than an assertion mismatch."""

    cause: str
    traceback: str = ""

    status = OutcomeStatus.ERRORED

    @property
    def detail(self) -> str:
        return self.cause

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "cause": self.cause,
            "traceback": self.traceback,
        }


Outcome = Union[Passed, AssertionFailed, TimedOut, Errored]


@dataclass(frozen=True)
class TestEvent:
    """One reporting event, emitted once per test method."""

    __test__ = False

    suite_name: str
    test_name: str
    outcome: Outcome
    description: Optional[str] = None
    duration_ms: int = 0

    @property
    def status(self) -> OutcomeStatus:
        return self.outcome.status

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "suite_name": self.suite_name,
            "test_name": self.test_name,
            "description": self.description,
            "duration_ms": self.duration_ms,
            "detail": self.outcome.detail,
            **self.outcome.to_dict(),
        }


class SuiteState(str, Enum):
    """Lifecycle state of one suite execution."""

    INIT = "init"
    RUNNING_ONE_TIME_SETUP = "running_one_time_setup"
    RUNNING_TESTS = "running_tests"
    RUNNING_ONE_TIME_TEARDOWN = "running_one_time_teardown"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class SuiteReport:
    """Events and final state of one suite execution."""

    suite_name: str
    state: SuiteState = SuiteState.INIT
    events: list[TestEvent] = field(default_factory=list)

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for e in self.events if e.status == status)

    @property
    def passed(self) -> int:
        return self.count(OutcomeStatus.PASSED)

    @property
    def total(self) -> int:
        return len(self.events)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "suite_name": self.suite_name,
            "state": self.state.value,
            "total": self.total,
            "passed": self.passed,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass
class RunSummary:
    """Aggregated results of a runner execution."""

    suites: list[SuiteReport] = field(default_factory=list)

    @property
    def events(self) -> list[TestEvent]:
        return [e for s in self.suites for e in s.events]

    def count(self, status: OutcomeStatus) -> int:
        return sum(s.count(status) for s in self.suites)

    @property
    def total(self) -> int:
        return sum(s.total for s in self.suites)

    @property
    def passed(self) -> int:
        return self.count(OutcomeStatus.PASSED)

    @property
    def failed(self) -> int:
        return self.count(OutcomeStatus.FAILED)

    @property
    def timed_out(self) -> int:
        return self.count(OutcomeStatus.TIMED_OUT)

    @property
    def errored(self) -> int:
        return self.count(OutcomeStatus.ERRORED)

    @property
    def duration_ms(self) -> int:
        return sum(e.duration_ms for e in self.events)

    @property
    def success(self) -> bool:
        """True when every test passed.

        Aborted suites never produce a summary; the fatal error propagates
        out of the run instead.
        """
        return self.passed == self.total

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "timed_out": self.timed_out,
            "errored": self.errored,
            "duration_ms": self.duration_ms,
            "suites": [s.to_dict() for s in self.suites],
        }
