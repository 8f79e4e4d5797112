# pathlab/simulation/sequences.py
"""
Gaussian sequence generators feeding the path generator.

Each generator yields one D-dimensional vector of independent standard
normals per draw:
    - RandomSequenceGenerator: NumPy pseudo-random normals
    - SobolSequenceGenerator: scrambled Sobol points pushed through the
      inverse normal CDF (quasi-Monte Carlo)

QMC converges at O(1/N) vs O(1/sqrt(N)) for MC on smooth integrands,
which is where Brownian-bridge path construction pays off.
"""

import logging
import warnings
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
from scipy.stats import norm
from scipy.stats.qmc import Sobol

from pathlab.common.config import NORMAL_CLIP, SOBOL_BLOCK_SIZE, SOBOL_MAX_DIMENSION
from pathlab.exceptions.config_exceptions import ConfigurationError
from pathlab.exceptions.generation_exceptions import NoPreviousDrawError
from pathlab.simulation.path import Sample

logger = logging.getLogger(__name__)

__all__ = ["SequenceGenerator", "RandomSequenceGenerator", "SobolSequenceGenerator"]


class SequenceGenerator(ABC):
    """Source of D-dimensional standard-normal vectors with a weight per draw."""

    def __init__(self, dimension: int):
        if dimension < 1:
            raise ConfigurationError(
                f"sequence dimension must be a positive integer, got {dimension}"
            )
        self._dimension = int(dimension)
        self._last: Optional[Sample] = None

    def dimension(self) -> int:
        return self._dimension

    @abstractmethod
    def _draw(self) -> np.ndarray:
        """Return one fresh vector of length ``dimension()``."""
        pass

    def _weight(self) -> float:
        """Probability weight of the vector just drawn."""
        return 1.0

    def next_sequence(self) -> Sample:
        """Draw a fresh vector; it also becomes the ``last_sequence()``."""
        value = self._draw()
        self._last = Sample(value=value, weight=self._weight())
        return Sample(value=self._last.value.copy(), weight=self._last.weight)

    def last_sequence(self) -> Sample:
        """The vector returned by the most recent ``next_sequence()``."""
        if self._last is None:
            raise NoPreviousDrawError(type(self).__name__)
        return Sample(value=self._last.value.copy(), weight=self._last.weight)


class RandomSequenceGenerator(SequenceGenerator):
    """Pseudo-random standard normals from ``numpy.random.default_rng``."""

    def __init__(self, dimension: int, seed: Optional[int] = None):
        super().__init__(dimension)
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def _draw(self) -> np.ndarray:
        return self.rng.standard_normal(self._dimension)


class SobolSequenceGenerator(SequenceGenerator):
    """
    Low-discrepancy normals from ``scipy.stats.qmc.Sobol``.

    Points are fetched in fixed blocks of ``block_size`` (a power of 2, so
    each block is a balanced Sobol net) and served one at a time.
    """

    def __init__(
        self,
        dimension: int,
        seed: Optional[int] = None,
        scramble: bool = True,
        block_size: int = SOBOL_BLOCK_SIZE,
    ):
        super().__init__(dimension)
        if dimension > SOBOL_MAX_DIMENSION:
            raise ConfigurationError(
                f"Sobol dimension {dimension} exceeds the supported maximum "
                f"of {SOBOL_MAX_DIMENSION}"
            )
        if block_size < 1 or block_size & (block_size - 1):
            raise ConfigurationError(
                f"block_size must be a power of 2, got {block_size}"
            )
        if not scramble:
            logger.warning(
                "Unscrambled Sobol starts at the origin; the first point is "
                "clipped to %g before the inverse normal",
                NORMAL_CLIP,
            )

        self.seed = seed
        self.scramble = scramble
        self.block_size = block_size
        self.sampler = Sobol(d=dimension, scramble=scramble, seed=seed)
        self._block = np.empty((0, dimension))
        self._position = 0

    def _refill(self):
        n = self.block_size
        with warnings.catch_warnings():
            # running total is a multiple of block_size, not always a power of 2
            warnings.simplefilter("ignore", UserWarning)
            uniforms = self.sampler.random(n)
        # Clamp to avoid inf at boundaries
        self._block = norm.ppf(np.clip(uniforms, NORMAL_CLIP, 1 - NORMAL_CLIP))
        self._position = 0
        logger.debug(
            "Drew %d Sobol points in %d dimensions (total %d)",
            n,
            self._dimension,
            self.sampler.num_generated,
        )

    def _draw(self) -> np.ndarray:
        if self._position >= self._block.shape[0]:
            self._refill()
        point = self._block[self._position]
        self._position += 1
        return point.copy()
