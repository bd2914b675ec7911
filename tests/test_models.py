"""Tests for the data models."""

import dataclasses

import pytest

from suiterunner.models import (
    AssertionFailed,
    Errored,
    MethodRole,
    OutcomeStatus,
    Passed,
    RunSummary,
    SuiteReport,
    SuiteState,
    TestEvent,
    TimedOut,
    TimeoutSpec,
    TimeUnit,
)


class TestTimeoutSpec:
    """Tests for TimeoutSpec."""

    def test_seconds(self):
        assert TimeoutSpec(50, TimeUnit.MILLISECOND).seconds == pytest.approx(0.05)
        assert TimeoutSpec(3, TimeUnit.SECONDS).seconds == 3
        assert TimeoutSpec(2, TimeUnit.MINUTES).seconds == 120

    def test_message(self):
        """Test the timeout message format."""
        assert TimeoutSpec(50, TimeUnit.MILLISECOND).message == "Expected running time is 50 MILLISECOND"
        assert TimeoutSpec(1, TimeUnit.MINUTES).message == "Expected running time is 1 MINUTES"

    def test_default_unit(self):
        assert TimeoutSpec(10).unit == TimeUnit.MILLISECOND

    @pytest.mark.parametrize("duration", [0, -5])
    def test_rejects_non_positive(self, duration):
        with pytest.raises(ValueError):
            TimeoutSpec(duration)

    def test_rejects_unit_name(self):
        with pytest.raises(ValueError, match="TimeUnit"):
            TimeoutSpec(50, "MILLISECOND")


class TestOutcomes:
    """Tests for outcome variants."""

    def test_statuses(self):
        """Test that each variant carries its status."""
        assert Passed().status == OutcomeStatus.PASSED
        assert AssertionFailed("1", "2").status == OutcomeStatus.FAILED
        assert TimedOut("late").status == OutcomeStatus.TIMED_OUT
        assert Errored("boom").status == OutcomeStatus.ERRORED

    def test_immutable(self):
        """Test that outcomes cannot be changed after creation."""
        outcome = AssertionFailed(expected="5", actual="3")
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.expected = "4"

    def test_detail(self):
        assert AssertionFailed("5", "3").detail == "Expected = [5]; actual = [3]"
        assert TimedOut("Expected running time is 1 SECONDS").detail.endswith("SECONDS")
        assert Passed().detail == ""

    def test_to_dict(self):
        assert AssertionFailed("5", "3").to_dict() == {
            "status": "failed",
            "expected": "5",
            "actual": "3",
        }
        assert Errored("KeyError: 'x'").to_dict()["cause"] == "KeyError: 'x'"


class TestRunSummary:
    """Tests for SuiteReport and RunSummary."""

    def _event(self, name, outcome, duration_ms=10):
        return TestEvent(suite_name="S", test_name=name, outcome=outcome, duration_ms=duration_ms)

    def test_counts(self):
        report = SuiteReport(
            suite_name="S",
            state=SuiteState.DONE,
            events=[
                self._event("a", Passed()),
                self._event("b", AssertionFailed("1", "2")),
                self._event("c", TimedOut("late")),
                self._event("d", Errored("boom")),
            ],
        )
        summary = RunSummary(suites=[report])

        assert summary.total == 4
        assert summary.passed == 1
        assert summary.failed == 1
        assert summary.timed_out == 1
        assert summary.errored == 1
        assert summary.duration_ms == 40
        assert not summary.success

    def test_success(self):
        report = SuiteReport(suite_name="S", state=SuiteState.DONE, events=[self._event("a", Passed())])
        assert RunSummary(suites=[report]).success

    def test_success_follows_outcomes(self):
        """Test that success depends only on the recorded outcomes."""
        failed = SuiteReport(
            suite_name="S",
            state=SuiteState.DONE,
            events=[self._event("a", Passed()), self._event("b", Errored("boom"))],
        )
        assert not RunSummary(suites=[failed]).success
        assert RunSummary(suites=[]).success

    def test_to_dict(self):
        event = TestEvent(
            suite_name="S",
            test_name="t",
            outcome=TimedOut("late"),
            description="slow one",
            duration_ms=55,
        )
        data = RunSummary(suites=[SuiteReport(suite_name="S", events=[event])]).to_dict()

        assert data["total"] == 1
        assert data["timed_out"] == 1
        assert data["suites"][0]["events"][0] == {
            "suite_name": "S",
            "test_name": "t",
            "description": "slow one",
            "duration_ms": 55,
            "detail": "late",
            "status": "timed_out",
            "message": "late",
        }


def test_method_roles():
    """Test that all five lifecycle roles exist."""
    assert [r.value for r in MethodRole] == [
        "one_time_setup",
        "per_test_setup",
        "test",
        "per_test_teardown",
        "one_time_teardown",
    ]
