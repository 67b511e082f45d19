"""Tests for run configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from integration_runner.config_loader import load_run_config
from integration_runner.models.config import RunConfig


def test_loads_valid_yaml(tmp_path: Path) -> None:
    """Loads and validates a configuration file."""
    config_file = tmp_path / "integration-tests.yaml"
    config_file.write_text(
        """
version: "1.0"
suites:
  - mnemonic
  - wallet
output: json
log_level: DEBUG
"""
    )

    config = load_run_config(config_file)

    assert config == RunConfig(
        version="1.0",
        suites=["mnemonic", "wallet"],
        output="json",
        log_level="DEBUG",
    )


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty document falls back to the defaults."""
    config_file = tmp_path / "integration-tests.yaml"
    config_file.write_text("")

    config = load_run_config(config_file)

    assert list(config.suites) == ["self-check"]
    assert config.output == "text"
    assert config.log_level == "INFO"


def test_missing_file_raises(tmp_path: Path) -> None:
    """Raises FileNotFoundError when the file does not exist."""
    with pytest.raises(FileNotFoundError):
        load_run_config(tmp_path / "missing.yaml")


def test_invalid_output_raises(tmp_path: Path) -> None:
    """Unknown output formats are rejected."""
    config_file = tmp_path / "integration-tests.yaml"
    config_file.write_text("output: xml\n")

    with pytest.raises(ValidationError):
        load_run_config(config_file)


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Typos in keys are rejected."""
    config_file = tmp_path / "integration-tests.yaml"
    config_file.write_text("suite: [self-check]\n")

    with pytest.raises(ValidationError):
        load_run_config(config_file)
