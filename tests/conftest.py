"""Root pytest configuration for rangeprim tests."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

RANDOM_SEED = 128


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible sampling.

    Returns
    -------
    random.Random
        Random instance seeded with a fixed value.
    """
    return random.Random(RANDOM_SEED)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click test runner.

    Returns
    -------
    CliRunner
        Runner for invoking CLI commands in-process.
    """
    return CliRunner()


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore root logger handlers and level after a test reconfigures logging.

    Yields
    ------
    logging.Logger
        The root logger.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
