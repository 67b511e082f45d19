"""Lazy loading of suite registration functions by key."""

from collections.abc import Sequence
from importlib.metadata import entry_points

from integration_runner.session import SuiteFn

ENTRY_POINT_GROUP = "integration_runner.suites"


class SuiteNotFoundError(Exception):
    """Raised when a requested suite is not registered."""


def load_suite(key: str) -> SuiteFn:
    """Load a suite registration function by its key.

    Args:
        key: Suite key (e.g., "self-check")

    Returns:
        Function that registers the suite on a runner

    Raises:
        SuiteNotFoundError: If no suite with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            suite: SuiteFn = entry.load()
            return suite

    available = sorted(e.name for e in entries)
    raise SuiteNotFoundError(f"Suite '{key}' not found. Available suites: {available}")


def load_suites(keys: Sequence[str]) -> Sequence[SuiteFn]:
    """Load several suites, keeping the requested order."""
    return [load_suite(key) for key in keys]


def available_suites() -> Sequence[str]:
    """Return the keys of all installed suites."""
    return sorted(e.name for e in entry_points(group=ENTRY_POINT_GROUP))
