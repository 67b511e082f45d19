"""Base model configuration for configuration documents."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Instances are immutable and reject keys the schema does not declare, so a
    typo in a config file fails loudly instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
