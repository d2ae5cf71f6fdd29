"""Range and vector data models.

This module provides the generic ``Range`` container and the vector value
types it can hold.
"""

from __future__ import annotations

from rangeprim.data.range import Range
from rangeprim.data.vectors import Vector, Vector2, Vector2Int, Vector3, Vector3Int

__all__ = [
    # Container
    "Range",
    # Vectors
    "Vector",
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
]
