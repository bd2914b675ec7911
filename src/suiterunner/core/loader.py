"""Resolve suite targets such as ``pkg.module`` or ``pkg.module:Suite``."""

import importlib
import inspect
import sys
from pathlib import Path
from typing import Iterable, Optional

from suiterunner.core.classifier import has_tagged_methods
from suiterunner.core.errors import ConfigurationError


def _extend_search_path(search_path: Iterable[str], base_dir: Path) -> None:
    for entry in search_path:
        path = str((base_dir / entry).resolve())
        if path not in sys.path:
            sys.path.insert(0, path)


def _suites_in_module(module) -> list[type]:
    """Classes defined in ``module`` that carry tagged methods."""
    return [
        value
        for value in vars(module).values()
        if inspect.isclass(value)
        and value.__module__ == module.__name__
        and has_tagged_methods(value)
    ]


def load_target(target: str) -> list[type]:
    """Resolve a single target to its suite classes."""
    module_name, _, attr = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import suite module {module_name}: {e}") from e
    except Exception as e:
        # Syntax errors and failing module-level code
        raise ConfigurationError(
            f"Error while importing suite module {module_name}: {type(e).__name__}: {e}"
        ) from e

    if not attr:
        suites = _suites_in_module(module)
        if not suites:
            raise ConfigurationError(f"No suites found in module {module_name}")
        return suites

    suite = getattr(module, attr, None)
    if not inspect.isclass(suite):
        raise ConfigurationError(f"{target} does not name a suite class")
    return [suite]


def load_suites(
    targets: Iterable[str],
    search_path: Iterable[str] = (),
    base_dir: Optional[Path] = None,
) -> list[type]:
    """Resolve all targets in order.

    Raises:
        ConfigurationError: If a target cannot be imported or holds no suites
    """
    _extend_search_path(search_path, base_dir or Path.cwd())
    importlib.invalidate_caches()

    suites: list[type] = []
    for target in targets:
        suites.extend(load_target(target))
    return suites
