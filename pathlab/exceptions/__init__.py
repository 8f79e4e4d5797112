from pathlab.exceptions.config_exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidTimeGridError,
    PathGeneratorError,
    UnsupportedProcessError,
)
from pathlab.exceptions.generation_exceptions import (
    NoPreviousDrawError,
    PathGenerationError,
)

__all__ = [
    "PathGeneratorError",
    "ConfigurationError",
    "DimensionMismatchError",
    "UnsupportedProcessError",
    "InvalidTimeGridError",
    "PathGenerationError",
    "NoPreviousDrawError",
]
