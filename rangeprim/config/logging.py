"""Logging configuration models for the rangeprim package."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from rich.logging import RichHandler

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : LogLevel
        Root logging level.
    format : str
        Log record format string.
    rich : bool
        Whether to render records with a rich console handler.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'INFO'
    >>> config.rich
    True
    """

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="INFO", description="Logging level")
    format: str = Field(default="%(message)s", description="Log record format")
    rich: bool = Field(default=True, description="Use rich console handler")


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig.

    Replaces any handlers already installed on the root logger.

    Parameters
    ----------
    config : LoggingConfig
        Logging settings to apply.
    """
    handlers: list[logging.Handler] | None = None
    if config.rich:
        handlers = [RichHandler(rich_tracebacks=True, show_path=False)]
    logging.basicConfig(
        level=getattr(logging, config.level),
        format=config.format,
        handlers=handlers,
        force=True,
    )
