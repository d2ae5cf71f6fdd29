"""Configuration system for rangeprim.

Provides configuration models, YAML loading and logging setup.
"""

from __future__ import annotations

from rangeprim.config.config import RangePrimConfig
from rangeprim.config.examples import ExamplesConfig
from rangeprim.config.loader import (
    ConfigError,
    load_config,
    load_yaml_file,
    merge_configs,
)
from rangeprim.config.logging import LoggingConfig, configure_logging
from rangeprim.config.serialization import to_yaml

__all__ = [
    # Main config
    "RangePrimConfig",
    # Config sections
    "LoggingConfig",
    "ExamplesConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Logging
    "configure_logging",
    # Serialization
    "to_yaml",
]
