"""Loading configuration from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from rangeprim.config.config import RangePrimConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be parsed or validated."""


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed mapping; an empty file yields an empty dict.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ConfigError
        If the file is not valid YAML or its top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Examples
    --------
    >>> merge_configs({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
    {'a': {'b': 1, 'c': 3}}
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: Path | str | None = None, **overrides: Any
) -> RangePrimConfig:
    """Load configuration from an optional YAML file plus overrides.

    Parameters
    ----------
    path : Path | str | None
        YAML file to read. None starts from the defaults.
    **overrides : Any
        Section dictionaries merged over the file contents,
        e.g. ``logging={"level": "DEBUG"}``.

    Returns
    -------
    RangePrimConfig
        The validated configuration.

    Raises
    ------
    ConfigError
        If the file or the merged result is invalid.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data = load_yaml_file(path)
        logger.debug("Loaded configuration from %s", path)
    data = merge_configs(data, overrides)

    try:
        return RangePrimConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
