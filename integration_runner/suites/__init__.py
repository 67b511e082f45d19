"""Suite plugins and their loader."""

from integration_runner.suites.loading import (
    ENTRY_POINT_GROUP,
    SuiteNotFoundError,
    available_suites,
    load_suite,
    load_suites,
)

__all__ = [
    "ENTRY_POINT_GROUP",
    "SuiteNotFoundError",
    "available_suites",
    "load_suite",
    "load_suites",
]
