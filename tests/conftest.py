# tests/conftest.py
"""Shared fixtures and lightweight collaborators for the path generator tests."""

import numpy as np
import pytest

from pathlab.simulation.process import StochasticProcess1D
from pathlab.simulation.sequences import SequenceGenerator
from pathlab.simulation.time_grid import TimeGrid


class DriftlessProcess(StochasticProcess1D):
    """x(t + dt) = x(t) + shock."""

    def __init__(self, x0: float = 100.0, sigma: float = 1.0):
        self._x0 = x0
        self.sigma = sigma

    def x0(self) -> float:
        return self._x0

    def expectation(self, t, x, dt):
        return x

    def std_deviation(self, t, x, dt):
        return self.sigma * np.sqrt(dt)


class DriftingProcess(DriftlessProcess):
    """Additive process with a constant drift, so expectation differs from x."""

    def __init__(self, x0: float = 1.0, mu: float = 0.3):
        super().__init__(x0)
        self.mu = mu

    def expectation(self, t, x, dt):
        return x + self.mu * dt


class ScriptedSequenceGenerator(SequenceGenerator):
    """Replays fixed vectors (cycling) with fixed weights."""

    def __init__(self, sequences, weights=None):
        sequences = [np.asarray(s, dtype=np.float64) for s in sequences]
        super().__init__(sequences[0].size)
        self.sequences = sequences
        self.weights = weights or [1.0] * len(sequences)
        self.calls = 0

    def _draw(self):
        return self.sequences[self.calls % len(self.sequences)].copy()

    def _weight(self):
        weight = self.weights[self.calls % len(self.weights)]
        self.calls += 1
        return weight


@pytest.fixture
def two_step_grid():
    return TimeGrid(1.0, 2)


@pytest.fixture
def driftless_process():
    return DriftlessProcess(x0=100.0)


@pytest.fixture
def drifting_process():
    return DriftingProcess(x0=1.0, mu=0.3)
