"""Generic range model holding two boundary values.

Provides a reusable Range[T] model for scalar and vector ranges. The two
boundaries are stored exactly as given: ``min`` may be greater than ``max``
on any axis, and every operation accounts for that ordering.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from rangeprim import operations
from rangeprim.data.vectors import Vector2, Vector2Int, Vector3, Vector3Int
from rangeprim.sampling import RandomSource

T = TypeVar("T", int, float, Vector2, Vector2Int, Vector3, Vector3Int)

_UNSET: Any = object()


class Range(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """A pair of boundary values of the same type.

    The boundaries are not reordered on construction. Operations that need
    a lower and upper bound (``clamp``, ``contains``, ``random``) compute
    them per axis, while ``lerp``, ``inverse_lerp``, ``smooth_step`` and
    ``delta`` follow the stored direction from ``min`` to ``max``.

    Attributes
    ----------
    min
        First boundary value.
    max
        Second boundary value.

    Examples
    --------
    >>> r = Range[int](12, 168)
    >>> r.lerp(0.25)
    51.0
    >>> r.size()
    156
    >>> Range[float](99.5, -5.5).inverse_lerp(73.25)
    0.25
    >>> area = Range[Vector2Int](Vector2Int(10, -100), Vector2Int(100, 100))
    >>> area.contains(Vector2Int(50, 0))
    True
    >>> str(area.center())
    '(55.0, 0.0)'
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    min: T = Field(description="Boundary the range starts from")
    max: T = Field(description="Boundary the range ends at")

    def __init__(self, min: T = _UNSET, max: T = _UNSET, **data: Any) -> None:  # noqa: A002
        zero = self._zero() if min is _UNSET or max is _UNSET else None
        super().__init__(
            min=zero if min is _UNSET else min,
            max=zero if max is _UNSET else max,
            **data,
        )

    @classmethod
    def _zero(cls) -> Any:
        """Zero value of the parametrised type (0 for a bare ``Range``).

        Subclasses such as ``class Area(Range[Vector2])`` carry no generic
        args themselves, so the first parametrised base supplies the type.
        """
        for klass in cls.__mro__:
            metadata = getattr(klass, "__pydantic_generic_metadata__", None) or {}
            args = metadata.get("args", ())
            if args and not isinstance(args[0], TypeVar):
                return args[0]()
        return 0

    def reorder(self) -> Range[T]:
        """Return a copy with the smaller scalar boundary as ``min``."""
        return operations.reorder(self)

    def reorder_per_component(self) -> Range[T]:
        """Return a copy whose boundaries are the per-axis minimum and maximum."""
        return operations.reorder_per_component(self)

    def random(self, source: RandomSource | None = None) -> T:
        """Draw a uniformly distributed value from the range (both ends inclusive)."""
        return operations.random(self, source)

    def lerp(self, t: float) -> Any:
        """Linearly interpolate from ``min`` to ``max`` by ``t`` clamped to [0, 1]."""
        return operations.lerp(self, t)

    def inverse_lerp(self, value: Any) -> Any:
        """Return where ``value`` lies between ``min`` and ``max`` as a ratio."""
        return operations.inverse_lerp(self, value)

    def smooth_step(self, t: float) -> Any:
        """Interpolate from ``min`` to ``max`` with smoothing at the edges."""
        return operations.smooth_step(self, t)

    def delta(self) -> T:
        """Return ``max - min``."""
        return operations.delta(self)

    def size(self) -> T:
        """Return the absolute difference between the boundaries."""
        return operations.size(self)

    spread = size

    def clamp(self, value: Any) -> Any:
        """Clamp ``value`` between the boundaries, whatever their order."""
        return operations.clamp(self, value)

    def contains(self, value: Any) -> bool:
        """Check if ``value`` lies within the boundaries (inclusive)."""
        return operations.contains(self, value)

    def center(self) -> Any:
        """Return the point halfway between ``min`` and ``max``."""
        return operations.center(self)
