"""
suiterunner - a small in-process test harness.

This package provides tools to:
- Tag suite methods as one-time/per-test setup, tests and teardowns
- Run suites in a fixed lifecycle order
- Bound individual tests with a wall-clock timeout
- Report pass, assertion failure, timeout and error outcomes
"""

__version__ = "0.1.0"
__author__ = "suiterunner Team"

from suiterunner.assertions import AssertionMismatch, assert_equals
from suiterunner.core import TestRunner
from suiterunner.core.guard import cancellation_requested, current_cancel_event
from suiterunner.markers import (
    after_all,
    after_each,
    before_all,
    before_each,
    description,
    test,
    timeout,
)
from suiterunner.models import TimeUnit

__all__ = [
    "AssertionMismatch",
    "TestRunner",
    "TimeUnit",
    "after_all",
    "after_each",
    "assert_equals",
    "before_all",
    "before_each",
    "cancellation_requested",
    "current_cancel_event",
    "description",
    "test",
    "timeout",
]
