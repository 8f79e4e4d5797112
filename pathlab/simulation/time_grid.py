# pathlab/simulation/time_grid.py
"""
Time discretization for path simulation.

A grid holds N+1 increasing time points t0 = 0 < t1 < ... < tN = horizon.
"""

from typing import Sequence

import numpy as np

from pathlab.exceptions.config_exceptions import InvalidTimeGridError

__all__ = ["TimeGrid"]


class TimeGrid:
    """
    Ordered time points from 0 to the simulation horizon.

    Use ``TimeGrid(end, steps)`` for a uniform grid and
    ``TimeGrid.from_times(times)`` for explicit (possibly uneven) points.
    """

    def __init__(self, end: float, steps: int):
        if steps < 1:
            raise InvalidTimeGridError(f"at least one time step required, got {steps}")
        if end <= 0:
            raise InvalidTimeGridError(f"horizon must be positive, got {end}")

        self._times = np.linspace(0.0, float(end), int(steps) + 1)
        self._times.setflags(write=False)
        self._dt = np.diff(self._times)
        self._dt.setflags(write=False)

    @classmethod
    def from_times(cls, times: Sequence[float]) -> "TimeGrid":
        """Build a grid from explicit time points; 0 is prepended when missing."""
        points = np.array(times, dtype=np.float64).ravel()
        if points.size == 0:
            raise InvalidTimeGridError("no time points given")
        if points[0] < 0:
            raise InvalidTimeGridError(f"negative time {points[0]}")
        if points[0] > 0:
            points = np.concatenate(([0.0], points))
        if points.size < 2:
            raise InvalidTimeGridError("at least one time step required")

        dt = np.diff(points)
        if np.any(dt <= 0):
            raise InvalidTimeGridError("time points must be strictly increasing")

        grid = cls.__new__(cls)
        grid._times = points
        grid._times.setflags(write=False)
        grid._dt = dt
        grid._dt.setflags(write=False)
        return grid

    def size(self) -> int:
        """Number of time points (steps + 1)."""
        return self._times.size

    def __len__(self) -> int:
        return self._times.size

    def __getitem__(self, i):
        return self._times[i]

    def __iter__(self):
        return iter(self._times)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeGrid):
            return NotImplemented
        return np.array_equal(self._times, other._times)

    def __repr__(self) -> str:
        return f"TimeGrid(steps={self.steps}, horizon={self.horizon})"

    def dt(self, i: int) -> float:
        """Length of the i-th subinterval, t[i+1] - t[i]."""
        return float(self._dt[i])

    @property
    def steps(self) -> int:
        return self._times.size - 1

    @property
    def horizon(self) -> float:
        return float(self._times[-1])

    @property
    def times(self) -> np.ndarray:
        """Read-only array of all time points."""
        return self._times

    @property
    def dts(self) -> np.ndarray:
        """Read-only array of subinterval lengths."""
        return self._dt
