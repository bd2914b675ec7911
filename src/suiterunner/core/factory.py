"""Suite instantiation."""

from suiterunner.core.errors import InstantiationError


def create_instance(suite_type: type) -> object:
    """Create one suite instance through its zero-argument constructor.

    Raises:
        InstantiationError: If the constructor needs arguments or raises
    """
    try:
        return suite_type()
    except Exception as e:
        raise InstantiationError(
            suite_type.__name__, f"{type(e).__name__}: {e}"
        ) from e
