"""Operations over scalar and vector ranges.

Every operation is written once against a tuple-of-axes view of its
operands: a scalar is a single axis, a vector contributes one axis per
component. Results are rebuilt in the matching scalar or vector type.

Clamping, containment and sampling use the per-axis smaller and larger
boundary. Interpolation, inverse interpolation, smoothing and ``delta`` use
the boundaries as stored, so a range whose ``min`` exceeds its ``max`` runs
in the opposite direction.

Behaviour with NaN or infinite components, or with integers too large to
convert to ``float``, is unspecified. ``delta`` and ``size`` stay exact on
huge integers while ``lerp`` and ``center`` may raise ``OverflowError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from rangeprim import numeric
from rangeprim.data.vectors import Vector
from rangeprim.sampling import RandomSource, default_source

if TYPE_CHECKING:
    from rangeprim.data.range import Range

logger = logging.getLogger(__name__)


def _axes(value: Any) -> tuple[Any, ...]:
    if isinstance(value, Vector):
        return value.axes
    return (value,)


def _zip_axes(*values: Any) -> Iterable[tuple[Any, ...]]:
    """Pair up the axes of the operands, which must share one shape."""
    is_vector = [isinstance(value, Vector) for value in values]
    if any(is_vector) and not all(is_vector):
        raise TypeError(
            "Cannot mix scalar and vector operands: "
            + ", ".join(type(value).__name__ for value in values)
        )
    axes = [_axes(value) for value in values]
    if len({len(a) for a in axes}) != 1:
        raise ValueError(
            "Operands differ in dimension: "
            + ", ".join(type(value).__name__ for value in values)
        )
    return zip(*axes, strict=True)


def _map_axes(func: Callable[..., Any], *values: Any) -> tuple[Any, ...]:
    return tuple(func(*components) for components in _zip_axes(*values))


def _build(like: Any, components: tuple[Any, ...]) -> Any:
    """Rebuild components in the type of ``like``.

    Integer vectors fall back to their floating counterpart when a
    component is no longer an integer.
    """
    if not isinstance(like, Vector):
        return components[0]
    cls = type(like)
    if cls.is_integral() and not all(isinstance(c, int) for c in components):
        cls = cls.floating
    return cls.from_axes(components)


def _build_floating(like: Any, components: tuple[Any, ...]) -> Any:
    if not isinstance(like, Vector):
        return float(components[0])
    return type(like).floating.from_axes(float(c) for c in components)


def _bounds(range_: Range[Any]) -> tuple[Any, Any]:
    """Return the per-axis (lower, upper) boundary components."""
    pairs = _map_axes(lambda a, b: (min(a, b), max(a, b)), range_.min, range_.max)
    return tuple(lo for lo, _ in pairs), tuple(hi for _, hi in pairs)


def reorder(range_: Range[Any]) -> Range[Any]:
    """Return a new scalar range with the smaller boundary as ``min``.

    Parameters
    ----------
    range_ : Range
        A range over ``int`` or ``float``.

    Returns
    -------
    Range
        A range of the same class with ``min <= max``.

    Raises
    ------
    TypeError
        If the range holds vectors; vectors have no total order, use
        :func:`reorder_per_component` instead.

    Examples
    --------
    >>> from rangeprim.data.range import Range
    >>> r = reorder(Range[int](5, 1))
    >>> r.min, r.max
    (1, 5)
    """
    if isinstance(range_.min, Vector) or isinstance(range_.max, Vector):
        raise TypeError(
            f"reorder() needs scalar boundaries, got {type(range_.min).__name__}; "
            "use reorder_per_component() for vector ranges"
        )
    if range_.min > range_.max:
        logger.debug("Swapping boundaries of %r", range_)
        return type(range_)(range_.max, range_.min)
    return type(range_)(range_.min, range_.max)


def reorder_per_component(range_: Range[Any]) -> Range[Any]:
    """Return a new range whose boundaries are the per-axis min and max.

    The result is the axis-aligned bounding box of the two stored corners,
    so its corners need not equal either stored vector.

    Examples
    --------
    >>> from rangeprim.data.range import Range
    >>> from rangeprim.data.vectors import Vector2Int
    >>> r = reorder_per_component(Range[Vector2Int](Vector2Int(5, 0), Vector2Int(1, 9)))
    >>> str(r.min), str(r.max)
    ('(1, 0)', '(5, 9)')
    """
    lows, highs = _bounds(range_)
    return type(range_)(_build(range_.min, lows), _build(range_.max, highs))


def random(range_: Range[Any], source: RandomSource | None = None) -> Any:
    """Draw a value uniformly from the range, both boundaries included.

    Integer axes draw with ``source.randint`` and floating axes with
    ``source.uniform``. Each vector axis is drawn independently.

    Parameters
    ----------
    range_ : Range
        The range to sample.
    source : RandomSource | None
        Random source to draw from. Defaults to the shared, unseeded
        package source.

    Returns
    -------
    Any
        A value of the range's type that the range contains.
    """
    rng = source if source is not None else default_source()

    def draw(lo: Any, hi: Any) -> Any:
        if isinstance(lo, int) and isinstance(hi, int):
            return rng.randint(lo, hi)
        # uniform() may round past hi
        return numeric.clamp(rng.uniform(lo, hi), lo, hi)

    lows, highs = _bounds(range_)
    return _build(range_.min, tuple(draw(lo, hi) for lo, hi in zip(lows, highs)))


def lerp(range_: Range[Any], t: float) -> Any:
    """Interpolate from ``min`` to ``max`` by ``t`` clamped to [0, 1].

    Integer ranges return floats (or floating vectors) without truncation.

    Examples
    --------
    >>> from rangeprim.data.range import Range
    >>> [lerp(Range[int](12, 168), i / 4) for i in range(5)]
    [12.0, 51.0, 90.0, 129.0, 168.0]
    """
    return _build_floating(
        range_.min, _map_axes(lambda a, b: numeric.lerp(a, b, t), range_.min, range_.max)
    )


def inverse_lerp(range_: Range[Any], value: Any) -> Any:
    """Return where ``value`` lies between ``min`` and ``max``, per axis.

    The ratio is clamped to [0, 1] and follows the stored direction. An
    axis whose boundaries are equal yields 0.

    Parameters
    ----------
    range_ : Range
        The reference range.
    value : Any
        A scalar, or a vector with the range's dimension. Integer ranges
        accept floating values.

    Returns
    -------
    float | Vector
        A float for scalar ranges, a floating vector of ratios otherwise.
    """
    if any(a == b for a, b in _zip_axes(range_.min, range_.max)):
        logger.debug("Degenerate axis in %r, inverse_lerp yields 0 there", range_)
    return _build_floating(
        range_.min, _map_axes(numeric.inverse_lerp, range_.min, range_.max, value)
    )


def smooth_step(range_: Range[Any], t: float) -> Any:
    """Interpolate from ``min`` to ``max`` by a smoothstep of the clamped ``t``."""
    return _build_floating(
        range_.min,
        _map_axes(lambda a, b: numeric.smooth_step(a, b, t), range_.min, range_.max),
    )


def delta(range_: Range[Any]) -> Any:
    """Return ``max - min`` per axis; negative where ``max < min``."""
    return _build(range_.min, _map_axes(lambda a, b: b - a, range_.min, range_.max))


def size(range_: Range[Any]) -> Any:
    """Return the absolute value of :func:`delta` per axis."""
    return _build(range_.min, tuple(abs(c) for c in _axes(delta(range_))))


spread = size


def clamp(range_: Range[Any], value: Any) -> Any:
    """Clamp ``value`` between the range's boundaries, whatever their order.

    Examples
    --------
    >>> from rangeprim.data.range import Range
    >>> clamp(Range[int](100, -1), 1000)
    100
    """
    return _build(
        value,
        _map_axes(
            lambda a, b, v: numeric.clamp(v, min(a, b), max(a, b)),
            range_.min,
            range_.max,
            value,
        ),
    )


def contains(range_: Range[Any], value: Any) -> bool:
    """Check whether ``value`` lies within the boundaries on every axis."""
    return all(
        min(a, b) <= v <= max(a, b)
        for a, b, v in _zip_axes(range_.min, range_.max, value)
    )


def center(range_: Range[Any]) -> Any:
    """Return the midpoint between ``min`` and ``max``."""
    return lerp(range_, 0.5)
