"""Configuration for the example driver."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExamplesConfig(BaseModel):
    """Settings for ``rangeprim examples``.

    Parameters
    ----------
    seed : int | None
        Seed for the random source; None draws from an unseeded source.
    lerp_samples : int
        Number of evenly spaced interpolation samples (must be > 0).
    random_points : int
        Number of random points drawn from the 2-D example area (must be > 0).

    Examples
    --------
    >>> config = ExamplesConfig(seed=7)
    >>> config.lerp_samples
    5
    """

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(default=None, description="Random seed")
    lerp_samples: int = Field(default=5, gt=0, description="Interpolation samples")
    random_points: int = Field(default=3, gt=0, description="Random 2-D points")
