"""rangeprim - Scalar and vector ranges with interpolation and sampling.

A small numeric-interval library: a generic ``Range`` holding two boundary
values plus pure operations for interpolation, clamping, containment,
random sampling and derived measures over int, float and 2-D/3-D vectors.
"""

from __future__ import annotations

from rangeprim.data import Range, Vector, Vector2, Vector2Int, Vector3, Vector3Int
from rangeprim.sampling import RandomSource, default_source

__version__ = "0.1.0"

__all__ = [
    "Range",
    "Vector",
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
    "RandomSource",
    "default_source",
]
