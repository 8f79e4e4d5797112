# pathlab/simulation/process.py
"""
Abstract one-dimensional stochastic process.

Concrete dynamics (GBM, Ornstein-Uhlenbeck, ...) subclass this and supply
the drift and volatility formulas; the path generator only relies on the
methods declared here.
"""

from abc import ABC, abstractmethod

__all__ = ["StochasticProcess1D"]


class StochasticProcess1D(ABC):
    """
    Capability required to advance a single-factor path.

    Subclasses must implement:
    - x0: initial value
    - expectation: conditional mean of x(t + dt) given x(t) = x
    - std_deviation: conditional standard deviation over [t, t + dt]

    ``apply`` combines a mean with a shock and defaults to addition;
    log-space processes override it (e.g. ``mean * exp(shock)``).
    """

    @abstractmethod
    def x0(self) -> float:
        """Initial value of the process."""
        pass

    @abstractmethod
    def expectation(self, t: float, x: float, dt: float) -> float:
        """Expected value at t + dt given value x at time t."""
        pass

    @abstractmethod
    def std_deviation(self, t: float, x: float, dt: float) -> float:
        """Standard deviation of the increment over [t, t + dt]."""
        pass

    def apply(self, mean: float, shock: float) -> float:
        return mean + shock

    def evolve(self, t: float, x: float, dt: float, dw: float) -> float:
        """Value at t + dt for a standard-normal draw dw."""
        return self.apply(
            self.expectation(t, x, dt), self.std_deviation(t, x, dt) * dw
        )
