# pathlab/simulation/path_generator.py
"""
Monte Carlo path generator for one-dimensional processes.

Couples a Gaussian sequence generator with a StochasticProcess1D and builds
one path per draw, either directly from the variates or from a Brownian
bridge built on them.
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from pathlab.exceptions.config_exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    UnsupportedProcessError,
)
from pathlab.exceptions.generation_exceptions import NoPreviousDrawError
from pathlab.simulation.brownian_bridge import BrownianBridge
from pathlab.simulation.path import Path, Sample
from pathlab.simulation.process import StochasticProcess1D
from pathlab.simulation.sequences import SequenceGenerator
from pathlab.simulation.time_grid import TimeGrid

logger = logging.getLogger(__name__)

__all__ = ["DrawMode", "PathGenerator"]


class DrawMode(Enum):
    FRESH = "fresh"
    ANTITHETIC = "antithetic"


class PathGenerator:
    """
    Generates (Path, weight) samples of a 1D process on a fixed time grid.

    Two ways to build one:
    - ``PathGenerator(process, generator, length=T, steps=N)``: uniform grid
      of N steps over [0, T]
    - ``PathGenerator(process, generator, time_grid=grid)``: explicit grid

    The generator dimension must equal the number of time steps.

    With ``brownian_bridge=True`` the variates are first mapped to
    cumulative Brownian values and the path is driven by their successive
    differences; otherwise each variate is used as the shock of its step.

    Every call returns a new Sample; earlier samples are never modified.
    ``antithetic()`` reuses the draw behind the latest ``next()`` with all
    shocks negated.
    """

    def __init__(
        self,
        process: StochasticProcess1D,
        generator: SequenceGenerator,
        length: Optional[float] = None,
        steps: Optional[int] = None,
        time_grid: Optional[TimeGrid] = None,
        brownian_bridge: bool = False,
    ):
        if not isinstance(process, StochasticProcess1D):
            raise UnsupportedProcessError(process)

        if time_grid is not None:
            if length is not None or steps is not None:
                raise ConfigurationError(
                    "pass either time_grid or length and steps, not both"
                )
            time_steps = time_grid.size() - 1
        else:
            if length is None or steps is None:
                raise ConfigurationError(
                    "length and steps are required when no time_grid is given"
                )
            time_steps = steps

        dimension = generator.dimension()
        if dimension != time_steps:
            logger.error(
                "Sequence generator dimensionality %d does not match %d time steps",
                dimension,
                time_steps,
            )
            raise DimensionMismatchError(dimension, time_steps)

        if time_grid is None:
            time_grid = TimeGrid(length, steps)

        self._process = process
        self._generator = generator
        self._dimension = dimension
        self._time_grid = time_grid
        self._brownian_bridge = brownian_bridge
        self._bridge = BrownianBridge(time_grid) if brownian_bridge else None
        self._last_draw: Optional[Sample] = None

        logger.debug(
            "PathGenerator ready: %d steps over [0, %g], brownian_bridge=%s",
            dimension,
            time_grid.horizon,
            brownian_bridge,
        )

    # ------------------------------------------------------------------
    # Inspectors
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._dimension

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    @property
    def brownian_bridge(self) -> bool:
        return self._brownian_bridge

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def next(self) -> Sample:
        """Draw fresh variates and build a new path."""
        return self.generate(DrawMode.FRESH)

    def antithetic(self) -> Sample:
        """Rebuild the latest path with every shock sign-flipped."""
        return self.generate(DrawMode.ANTITHETIC)

    def generate(self, mode: DrawMode) -> Sample:
        """Build a path for ``mode`` ("fresh" or "antithetic" also accepted)."""
        mode = DrawMode(mode)
        if mode is DrawMode.FRESH:
            draw = self._fresh_draw()
            self._last_draw = draw
        else:
            if self._last_draw is None:
                raise NoPreviousDrawError(type(self).__name__)
            draw = self._last_draw

        sign = -1.0 if mode is DrawMode.ANTITHETIC else 1.0
        if self._brownian_bridge:
            shocks = self._bridge_increments(draw.value)
        else:
            shocks = draw.value

        return Sample(value=self._build_path(sign * shocks), weight=draw.weight)

    def _fresh_draw(self) -> Sample:
        sequence = self._generator.next_sequence()
        values = np.array(sequence.value, dtype=np.float64)
        if self._brownian_bridge:
            values = self._bridge.transform(values)
        return Sample(value=values, weight=sequence.weight)

    @staticmethod
    def _bridge_increments(cumulative: np.ndarray) -> np.ndarray:
        # step 1 starts from W(0) = 0
        increments = np.empty_like(cumulative)
        increments[0] = cumulative[0]
        increments[1:] = cumulative[1:] - cumulative[:-1]
        return increments

    def _build_path(self, shocks: np.ndarray) -> Path:
        process = self._process
        grid = self._time_grid

        path = Path(grid)
        path[0] = process.x0()
        for i in range(1, len(path)):
            t = grid[i - 1]
            dt = grid.dt(i - 1)
            path[i] = process.apply(
                process.expectation(t, path[i - 1], dt), shocks[i - 1]
            )
        return path
