"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from rangeprim.config import LoggingConfig, configure_logging


def test_rejects_unknown_level() -> None:
    """Test that only standard level names are accepted."""
    with pytest.raises(ValidationError):
        LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


def test_configure_plain_handler(restore_root_logger: logging.Logger) -> None:
    """Test configuring a plain stream handler."""
    configure_logging(LoggingConfig(level="DEBUG", rich=False))
    assert restore_root_logger.level == logging.DEBUG
    assert not any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_configure_rich_handler(restore_root_logger: logging.Logger) -> None:
    """Test configuring the rich console handler."""
    configure_logging(LoggingConfig(level="WARNING"))
    assert restore_root_logger.level == logging.WARNING
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)
