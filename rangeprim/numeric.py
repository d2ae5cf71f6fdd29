"""Scalar numeric primitives shared by every range instantiation.

Range operations on vectors apply these functions independently to each
axis, so the rules for clamping, interpolation and smoothing live here once.
"""

from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value to the closed interval [low, high].

    Parameters
    ----------
    value : float
        The value to clamp.
    low : float
        Lower bound (must not exceed ``high``).
    high : float
        Upper bound.

    Returns
    -------
    float
        ``low`` if value < low, ``high`` if value > high, otherwise value.

    Examples
    --------
    >>> clamp(10, 1, 5)
    5
    >>> clamp(-0.1, 0.0, 1.0)
    0.0
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp01(t: float) -> float:
    """Clamp an interpolation factor to [0, 1] and return it as a float."""
    return float(clamp(t, 0.0, 1.0))


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate linearly from ``a`` to ``b`` by the clamped factor ``t``.

    Examples
    --------
    >>> lerp(12, 168, 0.25)
    51.0
    >>> lerp(0, 10, 2)
    10.0
    """
    return a + (b - a) * clamp01(t)


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Return where ``value`` lies between ``a`` and ``b`` as a ratio in [0, 1].

    The ratio follows the order of the arguments, not numeric order: with
    ``a > b`` the ratio grows as ``value`` moves from ``a`` down to ``b``.
    A zero-width interval yields 0.

    Examples
    --------
    >>> inverse_lerp(1, 2, 1.5)
    0.5
    >>> inverse_lerp(99.5, -5.5, 73.25)
    0.25
    >>> inverse_lerp(5, 5, 100)
    0.0
    """
    if a == b:
        return 0.0
    return clamp01((value - a) / (b - a))


def smooth_step(a: float, b: float, t: float) -> float:
    """Interpolate from ``a`` to ``b`` with a smoothstep curve on the clamped ``t``.

    Examples
    --------
    >>> smooth_step(1, 5, 0.25)
    1.625
    """
    t = clamp01(t)
    t = t * t * (3.0 - 2.0 * t)
    return a + (b - a) * t
