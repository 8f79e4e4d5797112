# Expose main modules for easier imports
from pathlab import common, exceptions, simulation
from pathlab.exceptions import ConfigurationError
from pathlab.simulation import (
    BrownianBridge,
    DrawMode,
    Path,
    PathGenerator,
    RandomSequenceGenerator,
    Sample,
    SequenceGenerator,
    SobolSequenceGenerator,
    StochasticProcess1D,
    TimeGrid,
)

__version__ = "0.1.0"

__all__ = [
    "common",
    "exceptions",
    "simulation",
    "ConfigurationError",
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
