"""Partition a suite's methods by lifecycle role."""

import functools
import inspect
from dataclasses import dataclass
from typing import Optional

from suiterunner.core.errors import ConfigurationError
from suiterunner.markers import get_tags
from suiterunner.models import MethodRole, TimeoutSpec


@dataclass(frozen=True)
class TaggedMethod:
    """A suite method together with its role and test metadata."""

    name: str
    role: MethodRole
    description: Optional[str] = None
    timeout: Optional[TimeoutSpec] = None


@dataclass(frozen=True)
class ClassifiedMethods:
    """Suite methods grouped by role, each group in declaration order."""

    one_time_setup: tuple[TaggedMethod, ...] = ()
    per_test_setup: tuple[TaggedMethod, ...] = ()
    tests: tuple[TaggedMethod, ...] = ()
    per_test_teardown: tuple[TaggedMethod, ...] = ()
    one_time_teardown: tuple[TaggedMethod, ...] = ()

    def by_role(self, role: MethodRole) -> tuple[TaggedMethod, ...]:
        return {
            MethodRole.ONE_TIME_SETUP: self.one_time_setup,
            MethodRole.PER_TEST_SETUP: self.per_test_setup,
            MethodRole.TEST: self.tests,
            MethodRole.PER_TEST_TEARDOWN: self.per_test_teardown,
            MethodRole.ONE_TIME_TEARDOWN: self.one_time_teardown,
        }[role]

    @property
    def is_empty(self) -> bool:
        return not any(self.by_role(role) for role in MethodRole)


def _declared_functions(suite_type: type) -> dict[str, object]:
    """Collect functions from the class and its bases in declaration order.

    Base classes come first. An override keeps the slot of the method it
    overrides.
    """
    members: dict[str, object] = {}
    for klass in reversed(suite_type.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if isinstance(value, (staticmethod, classmethod)) and (
                get_tags(value) or get_tags(value.__func__)
            ):
                raise ConfigurationError(
                    f"{klass.__name__}.{name}: markers need a plain instance method, "
                    f"not a {type(value).__name__}"
                )
            if inspect.isfunction(value):
                members[name] = value
            elif name in members:
                # Shadowed by a non-function attribute
                del members[name]
    return members


def _to_tagged(suite_type: type, name: str, func) -> Optional[TaggedMethod]:
    tags = get_tags(func)
    if tags is None:
        return None

    if len(tags.roles) > 1:
        roles = ", ".join(r.value for r in tags.roles)
        raise ConfigurationError(
            f"{suite_type.__name__}.{name} has conflicting roles: {roles}"
        )
    if not tags.roles:
        raise ConfigurationError(
            f"{suite_type.__name__}.{name} has test metadata but no role"
        )

    role = tags.roles[0]
    if role != MethodRole.TEST and (tags.description or tags.timeout):
        raise ConfigurationError(
            f"{suite_type.__name__}.{name}: description and timeout "
            f"are only allowed on tests, not on {role.value}"
        )

    return TaggedMethod(
        name=name,
        role=role,
        description=tags.description,
        timeout=tags.timeout,
    )


@functools.lru_cache(maxsize=None)
def classify(suite_type: type) -> ClassifiedMethods:
    """Classify the tagged methods of ``suite_type``.

    Raises:
        ConfigurationError: If a method carries conflicting tags
    """
    groups: dict[MethodRole, list[TaggedMethod]] = {role: [] for role in MethodRole}
    for name, func in _declared_functions(suite_type).items():
        tagged = _to_tagged(suite_type, name, func)
        if tagged is not None:
            groups[tagged.role].append(tagged)

    return ClassifiedMethods(
        one_time_setup=tuple(groups[MethodRole.ONE_TIME_SETUP]),
        per_test_setup=tuple(groups[MethodRole.PER_TEST_SETUP]),
        tests=tuple(groups[MethodRole.TEST]),
        per_test_teardown=tuple(groups[MethodRole.PER_TEST_TEARDOWN]),
        one_time_teardown=tuple(groups[MethodRole.ONE_TIME_TEARDOWN]),
    )


def has_tagged_methods(suite_type: type) -> bool:
    """Check whether any function of ``suite_type`` carries a marker."""
    return any(
        get_tags(func) is not None
        for func in _declared_functions(suite_type).values()
    )
