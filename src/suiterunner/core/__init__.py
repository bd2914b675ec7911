"""Core suite execution functionality."""

from suiterunner.core.classifier import ClassifiedMethods, TaggedMethod, classify
from suiterunner.core.errors import (
    ConfigurationError,
    HookError,
    InstantiationError,
    SuiteRunnerError,
)
from suiterunner.core.executor import LifecycleExecutor
from suiterunner.core.factory import create_instance
from suiterunner.core.guard import TimeoutGuard
from suiterunner.core.registry import SuiteRegistry
from suiterunner.core.runner import TestRunner

__all__ = [
    "ClassifiedMethods",
    "ConfigurationError",
    "HookError",
    "InstantiationError",
    "LifecycleExecutor",
    "SuiteRegistry",
    "SuiteRunnerError",
    "TaggedMethod",
    "TestRunner",
    "TimeoutGuard",
    "classify",
    "create_instance",
]
