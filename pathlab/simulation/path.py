# pathlab/simulation/path.py

from dataclasses import dataclass
from typing import Generic, TypeVar

import numpy as np
import pandas as pd

from pathlab.simulation.time_grid import TimeGrid

__all__ = ["Path", "Sample"]

T = TypeVar("T")


class Path:
    """Simulated process values at each point of a time grid."""

    def __init__(self, time_grid: TimeGrid, values=None):
        self.time_grid = time_grid
        if values is None:
            self.values = np.zeros(time_grid.size())
        else:
            self.values = np.array(values, dtype=np.float64)
            if self.values.shape != (time_grid.size(),):
                raise ValueError(
                    f"Path needs {time_grid.size()} values, got shape {self.values.shape}"
                )

    def __len__(self) -> int:
        return self.values.size

    def __getitem__(self, i):
        return self.values[i]

    def __setitem__(self, i, value):
        self.values[i] = value

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Path(length={len(self)}, front={self.front()}, back={self.back()})"

    def front(self) -> float:
        return float(self.values[0])

    def back(self) -> float:
        return float(self.values[-1])

    def to_series(self, name: str = "value") -> pd.Series:
        """Path values indexed by grid time."""
        return pd.Series(
            self.values.copy(),
            index=pd.Index(self.time_grid.times, name="time"),
            name=name,
        )


@dataclass
class Sample(Generic[T]):
    """A Monte Carlo draw and its probability weight."""

    value: T
    weight: float = 1.0
