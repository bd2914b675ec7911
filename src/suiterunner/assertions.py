"""Assertion helpers raising the mismatch signal understood by the runner."""

from typing import Any, Callable


class AssertionMismatch(Exception):
    """Structured assertion failure carrying expected and actual values."""

    def __init__(self, expected: Any, actual: Any, message: str = ""):
        self.expected = str(expected)
        self.actual = str(actual)
        text = f"Expected = [{self.expected}]; actual = [{self.actual}]"
        super().__init__(f"{message}: {text}" if message else text)


def assert_equals(expected: Any, actual: Any, message: str = "") -> None:
    if expected != actual:
        raise AssertionMismatch(expected, actual, message)


def assert_true(value: Any, message: str = "") -> None:
    if not value:
        raise AssertionMismatch(True, value, message)


def assert_false(value: Any, message: str = "") -> None:
    if value:
        raise AssertionMismatch(False, value, message)


def assert_raises(
    exc_type: type[BaseException],
    func: Callable[..., Any],
    *args: Any,
    **kwargs: Any,
) -> BaseException:
    """Call ``func`` and require it to raise ``exc_type``.

    Returns:
        The raised exception
    """
    try:
        func(*args, **kwargs)
    except exc_type as e:
        return e
    except Exception as e:
        raise AssertionMismatch(exc_type.__name__, type(e).__name__) from e
    raise AssertionMismatch(exc_type.__name__, "no exception")
