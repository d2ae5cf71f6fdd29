"""Top-level configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rangeprim.config.examples import ExamplesConfig
from rangeprim.config.logging import LoggingConfig


class RangePrimConfig(BaseModel):
    """Complete rangeprim configuration.

    Attributes
    ----------
    logging : LoggingConfig
        Logging settings.
    examples : ExamplesConfig
        Example driver settings.

    Examples
    --------
    >>> config = RangePrimConfig()
    >>> config.logging.level
    'INFO'
    >>> config.examples.random_points
    3
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    examples: ExamplesConfig = Field(default_factory=ExamplesConfig)
