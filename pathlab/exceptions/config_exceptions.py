class PathGeneratorError(Exception):
    """Base class for all path generation errors."""


class ConfigurationError(PathGeneratorError):
    """Raised when a generator, grid or bridge is built from inconsistent inputs."""


class DimensionMismatchError(ConfigurationError):
    """Raised when a sequence dimensionality does not match the number of time steps."""

    def __init__(self, dimension: int, time_steps: int):
        self.dimension = dimension
        self.time_steps = time_steps
        super().__init__(
            f"sequence generator dimensionality ({dimension}) != time steps ({time_steps})"
        )


class UnsupportedProcessError(ConfigurationError):
    """Raised when the supplied process is not one-dimensional."""

    def __init__(self, process):
        super().__init__(
            f"Process of type '{type(process).__name__}' does not implement "
            "StochasticProcess1D."
        )


class InvalidTimeGridError(ConfigurationError):
    """Raised when time grid points are missing, negative or not increasing."""

    def __init__(self, message: str):
        super().__init__(f"Invalid time grid: {message}")
