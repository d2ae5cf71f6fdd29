"""CLI entry point for rangeprim package.

Allows running via: python -m rangeprim
"""

from __future__ import annotations

from rangeprim.cli.main import cli

if __name__ == "__main__":
    cli()
