"""Load run configuration files."""

import logging
from pathlib import Path

import yaml

from integration_runner.models.config import RunConfig

log = logging.getLogger(__name__)


def load_run_config(path: Path) -> RunConfig:
    """Load and validate a run configuration.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Validated run configuration

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the content does not match the schema

    """
    if not path.is_file():
        raise FileNotFoundError(f"Run configuration not found: {path}")

    log.debug("Loading run configuration from %s", path)
    data = yaml.safe_load(path.read_text()) or {}
    return RunConfig.model_validate(data)
