"""Main CLI entry point for rangeprim.

Provides the ``rangeprim`` command group with the example driver and a
command for inspecting an arbitrary range.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

import click
from rich.table import Table

from rangeprim.cli.utils import console, parse_value, print_error, promote
from rangeprim.config import ConfigError, RangePrimConfig, configure_logging, load_config
from rangeprim.data.range import Range
from rangeprim.data.vectors import Vector, Vector2

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Override the configured logging level",
)
@click.version_option(package_name="rangeprim")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, log_level: str | None) -> None:
    r"""Scalar and vector ranges.

    \b
    Examples:
        $ rangeprim examples --seed 42
        $ rangeprim inspect 12 168 --t 0.25 --value 37
        $ rangeprim inspect 10,-100 100,100 --value 50,0
    """
    overrides: dict[str, Any] = {}
    if log_level is not None:
        overrides["logging"] = {"level": log_level}

    try:
        config = load_config(config_file, **overrides)
    except ConfigError as e:
        print_error(str(e))
        ctx.exit(1)

    configure_logging(config.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.option("--seed", type=int, help="Random seed (overrides configuration)")
@click.pass_context
def examples(ctx: click.Context, seed: int | None) -> None:
    """Run the one- and two-dimensional range examples.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    seed : int | None
        Random seed for reproducibility.
    """
    config: RangePrimConfig = ctx.obj["config"]
    settings = config.examples
    rng = random.Random(seed if seed is not None else settings.seed)

    table = Table(title="Range Examples")
    table.add_column("Expression", style="cyan")
    table.add_column("Result", style="green")

    logger.info("--- Range Examples ---")

    logger.info("-- One-Dimensional Examples --")
    line = Range[int](12, 168)
    steps = max(settings.lerp_samples - 1, 1)
    for i in range(settings.lerp_samples):
        t = i / steps
        sample = line.lerp(t)
        logger.info("lerp(%s) = %s", t, sample)
        table.add_row(f"{_show(line)}.lerp({t:g})", f"{sample:g}")

    logger.info("spread = %s", line.spread())
    table.add_row(f"{_show(line)}.spread()", str(line.spread()))
    ratio = line.inverse_lerp(37)
    logger.info("inverse_lerp(37) = %.2f", ratio)
    table.add_row(f"{_show(line)}.inverse_lerp(37)", f"{ratio:.2f}")

    logger.info("-- Two-Dimensional Examples --")
    area = Range[Vector2](Vector2(-10, -10), Vector2(10, 10))
    for _ in range(settings.random_points):
        point = area.random(rng)
        logger.info("random = %s", point)
        table.add_row(f"{_show(area)}.random()", _format(point))

    probe = Vector2(-8.3, 15)
    inside = area.contains(probe)
    logger.info("contains(%s) = %s", probe, inside)
    table.add_row(f"{_show(area)}.contains({probe})", str(inside))
    table.add_row(f"{_show(area)}.center()", _format(area.center()))
    table.add_row(f"{_show(area)}.spread()", _format(area.spread()))

    console.print(table)


@cli.command()
@click.argument("min_value", metavar="MIN")
@click.argument("max_value", metavar="MAX")
@click.option("--t", "t", type=float, default=0.5, help="Interpolation factor")
@click.option("--value", help="Value to test, clamp and locate within the range")
@click.option("--seed", type=int, help="Random seed for the sample")
def inspect(
    min_value: str, max_value: str, t: float, value: str | None, seed: int | None
) -> None:
    r"""Show every range measure for the range MIN..MAX.

    Boundaries are numbers or comma-separated vectors (2 or 3 components).
    Integer literals build integer ranges.

    \b
    Examples:
        $ rangeprim inspect --t 0.25 -- 99.5 -5.5
        $ rangeprim inspect 10,-100 100,100 --value 200,0
    """
    low = parse_value(min_value)
    high = parse_value(max_value)
    probe = parse_value(value) if value is not None else None
    _check_shape(low, high, "MAX")
    if probe is not None:
        _check_shape(low, probe, "--value")

    floating = _is_floating(low) or _is_floating(high)
    low, high = promote(low, floating), promote(high, floating)
    range_ = Range[type(low)](low, high)  # type: ignore[misc]
    rng = random.Random(seed)

    table = Table(title=f"Range {_show(range_)}")
    table.add_column("Operation", style="cyan")
    table.add_column("Result", style="green")

    table.add_row("delta()", _format(range_.delta()))
    table.add_row("size()", _format(range_.size()))
    table.add_row("center()", _format(range_.center()))
    table.add_row(f"lerp({t:g})", _format(range_.lerp(t)))
    table.add_row(f"smooth_step({t:g})", _format(range_.smooth_step(t)))
    table.add_row("random()", _format(range_.random(rng)))
    reordered = range_.reorder_per_component()
    table.add_row("reorder_per_component()", _show(reordered))

    if probe is not None:
        table.add_row(f"contains({probe})", str(range_.contains(probe)))
        table.add_row(f"clamp({probe})", _format(range_.clamp(probe)))
        table.add_row(f"inverse_lerp({probe})", _format(range_.inverse_lerp(probe)))

    console.print(table)


def _check_shape(reference: Any, other: Any, name: str) -> None:
    def dim(v: Any) -> int:
        return len(v.axes) if isinstance(v, Vector) else 1

    if dim(reference) != dim(other):
        raise click.BadParameter(
            f"expected {dim(reference)} component(s), got {dim(other)}",
            param_hint=name,
        )


def _is_floating(value: Any) -> bool:
    if isinstance(value, Vector):
        return not type(value).is_integral()
    return isinstance(value, float)


def _format(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.4g}"
    if isinstance(value, Vector):
        return "(" + ", ".join(_format(c) for c in value.axes) + ")"
    return str(value)


def _show(range_: Range[Any]) -> str:
    return f"({_format(range_.min)} .. {_format(range_.max)})"
