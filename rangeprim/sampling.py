"""Random source used by range sampling.

Sampling only needs uniform draws over closed intervals. Any object with
``uniform`` and ``randint`` methods behaving like :class:`random.Random`
works; pass ``random.Random(seed)`` for reproducible draws.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random draws over closed intervals."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float in [a, b]."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Return an integer in [a, b], both ends included."""
        ...


_default = random.Random()


def default_source() -> RandomSource:
    """Return the shared source used when no source is passed.

    The shared source is never seeded by this package.
    """
    return _default
