"""Dwell time generators for ON/OFF traffic sources.

This module provides the Pareto (Type I) distribution used to draw how long a
source stays ON or OFF. Superposing many sources with heavy-tailed dwell times
produces self-similar aggregate traffic.
"""

import math
from typing import Optional

import numpy as np

from onoff_sim.utils.rng import default_generator


class ParetoDistribution:
    """Pareto Type I distribution with CDF ``1 - (scale / x) ** shape``.

    Smaller shapes give heavier tails. Samples are never below ``scale`` and
    have no upper bound.

    Attributes:
        shape: Tail index (alpha), strictly positive.
        scale: Minimum value (beta), strictly positive.
        rng: Random stream the samples are drawn from.
    """

    def __init__(
        self,
        shape: float,
        scale: float,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize the distribution.

        Args:
            shape: Shape parameter alpha (must be > 0).
            scale: Scale parameter beta (must be > 0).
            rng: Random generator. A fresh unseeded one is used if omitted.

        Raises:
            ValueError: If shape or scale is not a positive finite number.
        """
        if not (shape > 0 and math.isfinite(shape)):
            raise ValueError(f"Pareto shape must be positive, got {shape}")
        if not (scale > 0 and math.isfinite(scale)):
            raise ValueError(f"Pareto scale must be positive, got {scale}")
        self.shape = float(shape)
        self.scale = float(scale)
        self.rng = default_generator(rng)

    def sample(self) -> float:
        """Draw one duration by inverse transform sampling.

        Returns:
            A value >= scale. Overflow yields ``inf`` for very small shapes.
        """
        u = self.rng.random()
        with np.errstate(over="ignore"):
            return float(self.scale * np.power(1.0 - u, -1.0 / self.shape))

    def sample_many(self, size: int) -> np.ndarray:
        """Draw ``size`` independent durations.

        Args:
            size: Number of samples.

        Returns:
            Array of samples, each >= scale.
        """
        u = self.rng.random(size)
        with np.errstate(over="ignore"):
            return self.scale * np.power(1.0 - u, -1.0 / self.shape)

    @property
    def mean(self) -> float:
        """Expected value, infinite when shape <= 1."""
        if self.shape <= 1:
            return math.inf
        return self.shape * self.scale / (self.shape - 1)

    def __repr__(self) -> str:
        return f"ParetoDistribution(shape={self.shape}, scale={self.scale})"
