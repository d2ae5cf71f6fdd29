"""Serializing configuration back to YAML."""

from __future__ import annotations

import yaml

from rangeprim.config.config import RangePrimConfig


def to_yaml(config: RangePrimConfig) -> str:
    """Render a configuration as a YAML document.

    Examples
    --------
    >>> print(to_yaml(RangePrimConfig()).splitlines()[0])
    examples:
    """
    return yaml.safe_dump(config.model_dump(mode="json"), sort_keys=True)
