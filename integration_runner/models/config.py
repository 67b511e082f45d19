"""Models for run configuration loaded from YAML files."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from integration_runner.models.base import Model


class RunConfig(Model):
    """Which suites to run and how to report them."""

    version: str = Field(default="1.0", description="Config schema version")
    suites: Sequence[str] = Field(
        default=("self-check",),
        description="Suite keys to run, in order",
    )
    output: Literal["text", "json"] = Field(
        default="text", description="Emit the JSON outcome on stdout when 'json'"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level for the report channel"
    )
