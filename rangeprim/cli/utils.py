"""Shared helpers for rangeprim CLI commands."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from rangeprim.data.vectors import Vector, Vector2, Vector2Int, Vector3, Vector3Int

console = Console()

_VECTOR_TYPES: dict[tuple[int, bool], type[Vector]] = {
    (2, True): Vector2Int,
    (2, False): Vector2,
    (3, True): Vector3Int,
    (3, False): Vector3,
}


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def parse_value(text: str) -> Any:
    """Parse a scalar or comma-separated vector literal.

    Every component written as an integer literal yields an ``int`` or
    integer vector; anything else yields the floating type.

    Parameters
    ----------
    text : str
        One, two or three comma-separated numbers, e.g. ``"12"`` or
        ``"-10,10.5"``.

    Returns
    -------
    Any
        An int, float or vector.

    Raises
    ------
    click.BadParameter
        If a component is not a number or the dimension is unsupported.

    Examples
    --------
    >>> parse_value("12")
    12
    >>> parse_value("1,2.5")
    Vector2(x=1.0, y=2.5)
    """
    parts = [part.strip() for part in text.split(",")]
    components: list[int | float] = []
    for part in parts:
        try:
            components.append(int(part))
        except ValueError:
            try:
                components.append(float(part))
            except ValueError as e:
                raise click.BadParameter(f"{part!r} is not a number") from e

    integral = all(isinstance(c, int) for c in components)
    if len(components) == 1:
        return components[0]
    cls = _VECTOR_TYPES.get((len(components), integral))
    if cls is None:
        raise click.BadParameter(
            f"Expected 1 to 3 components, got {len(components)} in {text!r}"
        )
    return cls.from_axes(components)


def promote(value: Any, floating: bool) -> Any:
    """Return ``value`` in its floating type when ``floating`` is set."""
    if not floating:
        return value
    if isinstance(value, Vector):
        return type(value).floating.from_axes(value.axes)
    return float(value)
