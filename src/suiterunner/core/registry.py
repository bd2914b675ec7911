"""Registry of suites to execute."""

from typing import Iterator


class SuiteRegistry:
    """Ordered list of registered suite types.

    Registration order is execution order. Duplicates are kept: a suite
    registered twice runs twice, each time on a fresh instance.
    """

    def __init__(self):
        self._suites: list[type] = []

    def register(self, *suites: type) -> None:
        """Register one or more suite types."""
        self._suites.extend(suites)

    def clear(self) -> None:
        self._suites.clear()

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._suites))

    def __len__(self) -> int:
        return len(self._suites)
