"""Two- and three-component vector value types.

Vectors are immutable pydantic models. Range operations treat them as a
tuple of axes (``axes``) and rebuild results with ``from_axes``, so every
operation is written once for scalars and vectors alike.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Vector(BaseModel):
    """Base class for fixed-size vectors.

    Attributes
    ----------
    AXES : tuple[str, ...]
        Names of the per-axis fields, in order.
    floating : type[Vector]
        The floating-point counterpart of this vector class. Floating
        vectors map to themselves.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    AXES: ClassVar[tuple[str, ...]] = ()
    floating: ClassVar[type[Vector]]

    @property
    def axes(self) -> tuple[Any, ...]:
        """Components in axis order."""
        return tuple(getattr(self, name) for name in self.AXES)

    @classmethod
    def from_axes(cls, values: Iterable[Any]) -> Vector:
        """Build a vector of this class from components in axis order.

        Raises
        ------
        ValueError
            If the number of components does not match the dimension.
        """
        values = tuple(values)
        if len(values) != len(cls.AXES):
            raise ValueError(
                f"{cls.__name__} takes {len(cls.AXES)} components, got {len(values)}"
            )
        return cls(**dict(zip(cls.AXES, values, strict=True)))

    @classmethod
    def is_integral(cls) -> bool:
        """Whether the components of this class are integers."""
        return cls.floating is not cls

    def __str__(self) -> str:
        return "(" + ", ".join(str(value) for value in self.axes) + ")"


class Vector2(Vector):
    """A two-component floating-point vector."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float = 0.0
    y: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)


class Vector2Int(Vector):
    """A two-component integer vector."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    x: int = 0
    y: int = 0

    def __init__(self, x: int = 0, y: int = 0, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)


class Vector3(Vector):
    """A three-component floating-point vector."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, **data: Any
    ) -> None:
        super().__init__(x=x, y=y, z=z, **data)


class Vector3Int(Vector):
    """A three-component integer vector."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: int = 0
    y: int = 0
    z: int = 0

    def __init__(self, x: int = 0, y: int = 0, z: int = 0, **data: Any) -> None:
        super().__init__(x=x, y=y, z=z, **data)


Vector2.floating = Vector2
Vector2Int.floating = Vector2
Vector3.floating = Vector3
Vector3Int.floating = Vector3
