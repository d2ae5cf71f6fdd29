"""Command-line interface.

Provides the example driver and a command for inspecting a range.
"""

from __future__ import annotations

from rangeprim.cli.main import cli

__all__ = ["cli"]
