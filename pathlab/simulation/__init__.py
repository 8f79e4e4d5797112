# pathlab/simulation/__init__.py
"""
Path simulation for one-dimensional Monte Carlo.

    generator = PathGenerator(process, SobolSequenceGenerator(n_steps, seed=42),
                              length=T, steps=n_steps, brownian_bridge=True)
    sample = generator.next()          # Sample(value=Path, weight)
    mirror = generator.antithetic()    # same draw, shocks negated
"""

from pathlab.simulation.brownian_bridge import BrownianBridge
from pathlab.simulation.path import Path, Sample
from pathlab.simulation.path_generator import DrawMode, PathGenerator
from pathlab.simulation.process import StochasticProcess1D
from pathlab.simulation.sequences import (
    RandomSequenceGenerator,
    SequenceGenerator,
    SobolSequenceGenerator,
)
from pathlab.simulation.time_grid import TimeGrid

__all__ = [
    "TimeGrid",
    "Path",
    "Sample",
    "StochasticProcess1D",
    "SequenceGenerator",
    "RandomSequenceGenerator",
    "SobolSequenceGenerator",
    "BrownianBridge",
    "DrawMode",
    "PathGenerator",
]
