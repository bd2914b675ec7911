"""Role markers for suite methods.

Markers only record tags on the decorated function; they never wrap it.
The tags are read back by :mod:`suiterunner.core.classifier`.

Example::

    class CartSuite:
        @before_all
        def connect(self): ...

        @test(description="adds one item", timeout=(500, TimeUnit.MILLISECOND))
        def add_item(self): ...

        @timeout(2, TimeUnit.SECONDS)
        @test
        def checkout(self): ...
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from suiterunner.models import MethodRole, TimeoutSpec, TimeUnit

TAGS_ATTRIBUTE = "__suiterunner_tags__"


@dataclass
class MethodTags:
    """Tags recorded on a single function."""

    roles: list[MethodRole] = field(default_factory=list)
    description: Optional[str] = None
    timeout: Optional[TimeoutSpec] = None


def get_tags(func: Callable) -> Optional[MethodTags]:
    """Return the tags recorded on ``func``, if any."""
    return getattr(func, TAGS_ATTRIBUTE, None)


def _tags_for(func: Callable) -> MethodTags:
    tags = get_tags(func)
    if tags is None:
        tags = MethodTags()
        setattr(func, TAGS_ATTRIBUTE, tags)
    return tags


def _add_role(func: Callable, role: MethodRole) -> Callable:
    tags = _tags_for(func)
    if role not in tags.roles:
        tags.roles.append(role)
    return func


def _to_timeout(value: Union[TimeoutSpec, tuple, int]) -> TimeoutSpec:
    if isinstance(value, TimeoutSpec):
        return value
    if isinstance(value, tuple):
        return TimeoutSpec(*value)
    return TimeoutSpec(value)


def before_all(func: Callable) -> Callable:
    """Run once before any test of the suite."""
    return _add_role(func, MethodRole.ONE_TIME_SETUP)


def before_each(func: Callable) -> Callable:
    """Run immediately before every test."""
    return _add_role(func, MethodRole.PER_TEST_SETUP)


def after_each(func: Callable) -> Callable:
    """Run immediately after every test."""
    return _add_role(func, MethodRole.PER_TEST_TEARDOWN)


def after_all(func: Callable) -> Callable:
    """Run once after all tests of the suite."""
    return _add_role(func, MethodRole.ONE_TIME_TEARDOWN)


def test(
    func: Optional[Callable] = None,
    *,
    description: Optional[str] = None,
    timeout: Union[TimeoutSpec, tuple, int, None] = None,
):
    """Mark an executable test method.

    Usable bare (``@test``) or with metadata
    (``@test(description="...", timeout=(50, TimeUnit.MILLISECOND))``).
    """

    def decorator(f: Callable) -> Callable:
        _add_role(f, MethodRole.TEST)
        tags = _tags_for(f)
        if description is not None:
            tags.description = description
        if timeout is not None:
            tags.timeout = _to_timeout(timeout)
        return f

    if func is not None:
        return decorator(func)
    return decorator


# Keep pytest from collecting the marker itself.
test.__test__ = False


def timeout(duration: int, unit: TimeUnit = TimeUnit.MILLISECOND):
    """Attach a wall-clock budget to a test."""
    spec = TimeoutSpec(duration, unit)

    def decorator(f: Callable) -> Callable:
        _tags_for(f).timeout = spec
        return f

    return decorator


def description(text: str):
    """Attach a human-readable note, emitted before the test runs."""

    def decorator(f: Callable) -> Callable:
        _tags_for(f).description = text
        return f

    return decorator
