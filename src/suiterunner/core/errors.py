"""Exceptions raised by the execution engine."""

from typing import Optional

from suiterunner.models import MethodRole


class SuiteRunnerError(Exception):
    """Base class for suiterunner errors."""

    pass


class ConfigurationError(SuiteRunnerError):
    """Raised for invalid tags, configuration or suite targets."""

    pass


class InstantiationError(SuiteRunnerError):
    """Raised when a suite cannot be instantiated."""

    def __init__(self, suite_name: str, reason: str):
        self.suite_name = suite_name
        super().__init__(f"Cannot instantiate suite {suite_name}: {reason}")


class HookError(SuiteRunnerError):
    """Raised when a setup or teardown hook fails."""

    def __init__(
        self,
        suite_name: str,
        method_name: str,
        role: MethodRole,
        cause: Optional[BaseException] = None,
    ):
        self.suite_name = suite_name
        self.method_name = method_name
        self.role = role
        detail = f": {type(cause).__name__}: {cause}" if cause is not None else ""
        super().__init__(
            f"Hook {suite_name}.{method_name} ({role.value}) failed{detail}"
        )
