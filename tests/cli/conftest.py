"""Pytest configuration for CLI tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging(restore_root_logger: logging.Logger) -> logging.Logger:
    """Undo the logging setup performed by each CLI invocation."""
    return restore_root_logger
