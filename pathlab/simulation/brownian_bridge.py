# pathlab/simulation/brownian_bridge.py
"""
Brownian-bridge construction of a discretely sampled Brownian path.

The first variate fixes the terminal value W(t_N); each following variate
fills the midpoint of the leftmost still-open interval, conditional on its
two known neighbours. The most significant variates of a low-discrepancy
sequence therefore drive the coarsest features of the path.

The output is reordered into time order, so consumers only ever see
W(t_1), ..., W(t_N).
"""

import logging
from typing import Union

import numpy as np

from pathlab.simulation.time_grid import TimeGrid

logger = logging.getLogger(__name__)

__all__ = ["BrownianBridge"]


class BrownianBridge:
    """
    Turns N independent standard normals into N cumulative Brownian values.

    Args:
        time_grid: grid whose points t_1..t_N are the sampling times, or an
            integer step count for the unit-spaced grid 1..N.
    """

    def __init__(self, time_grid: Union[TimeGrid, int]):
        if isinstance(time_grid, TimeGrid):
            times = np.asarray(time_grid.times[1:], dtype=np.float64)
        else:
            times = np.arange(1, int(time_grid) + 1, dtype=np.float64)
        self._times = times
        self._size = times.size

        self._bridge_index = np.zeros(self._size, dtype=np.intp)
        self._left_index = np.zeros(self._size, dtype=np.intp)
        self._right_index = np.zeros(self._size, dtype=np.intp)
        self._left_weight = np.zeros(self._size)
        self._right_weight = np.zeros(self._size)
        self._std_dev = np.zeros(self._size)

        self._initialize()
        logger.debug("Brownian bridge schedule built for %d points", self._size)

    def _initialize(self):
        t = self._times
        n = self._size
        filled = np.zeros(n, dtype=bool)

        # Terminal point first: W(t_N) ~ N(0, t_N)
        filled[n - 1] = True
        self._bridge_index[0] = n - 1
        self._std_dev[0] = np.sqrt(t[n - 1])

        j = 0
        for i in range(1, n):
            # next open interval is [j, k): j is the first empty slot,
            # k the first filled slot after it
            while filled[j]:
                j += 1
            k = j
            while not filled[k]:
                k += 1
            l = j + ((k - 1 - j) >> 1)
            filled[l] = True

            self._bridge_index[i] = l
            self._left_index[i] = j
            self._right_index[i] = k

            t_left = t[j - 1] if j > 0 else 0.0
            span = t[k] - t_left
            self._left_weight[i] = (t[k] - t[l]) / span
            self._right_weight[i] = (t[l] - t_left) / span
            self._std_dev[i] = np.sqrt((t[l] - t_left) * (t[k] - t[l]) / span)

            j = k + 1
            if j >= n:
                j = 0

    def size(self) -> int:
        return self._size

    @property
    def times(self) -> np.ndarray:
        return self._times

    def transform(self, variates) -> np.ndarray:
        """
        Map independent standard normals to time-ordered Brownian values.

        Args:
            variates: sequence of length ``size()``; element 0 carries the
                most weight (it sets the terminal value).

        Returns:
            Array ``w`` with ``w[i] = W(t_{i+1})``.
        """
        z = np.asarray(variates, dtype=np.float64)
        if z.shape != (self._size,):
            raise ValueError(
                f"Brownian bridge expects {self._size} variates, got shape {z.shape}"
            )

        w = np.empty(self._size)
        w[self._size - 1] = self._std_dev[0] * z[0]
        for i in range(1, self._size):
            j = self._left_index[i]
            k = self._right_index[i]
            l = self._bridge_index[i]
            if j > 0:
                w[l] = (
                    self._left_weight[i] * w[j - 1]
                    + self._right_weight[i] * w[k]
                    + self._std_dev[i] * z[i]
                )
            else:
                # left neighbour is W(0) = 0
                w[l] = self._right_weight[i] * w[k] + self._std_dev[i] * z[i]
        return w
