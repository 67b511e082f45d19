"""Tests for suite loading."""

from unittest.mock import Mock, patch

import pytest

from integration_runner.suites import (
    SuiteNotFoundError,
    available_suites,
    load_suite,
    load_suites,
)
from integration_runner.suites.self_check import register_self_check


def test_load_suite_returns_registered_function() -> None:
    """Loads the built-in suite by key."""
    suite = load_suite("self-check")

    assert suite is register_self_check


def test_load_suite_raises_for_unknown_key() -> None:
    """Raises SuiteNotFoundError listing the available keys."""
    with pytest.raises(SuiteNotFoundError) as exc_info:
        load_suite("unknown-suite")

    assert "unknown-suite" in str(exc_info.value)
    assert "Available suites" in str(exc_info.value)
    assert "self-check" in str(exc_info.value)


def test_load_suites_preserves_order() -> None:
    """Suites are returned in the requested order."""
    entries = []
    for name in ("b", "a"):
        entry = Mock()
        entry.name = name
        entry.load.return_value = f"suite-{name}"
        entries.append(entry)

    with patch(
        "integration_runner.suites.loading.entry_points", return_value=entries
    ):
        suites = load_suites(["b", "a"])

    assert suites == ["suite-b", "suite-a"]


def test_available_suites_includes_builtin() -> None:
    """The self-check suite is installed with the package."""
    assert "self-check" in available_suites()
