from pathlab.exceptions.config_exceptions import PathGeneratorError


class PathGenerationError(PathGeneratorError):
    """Base class for errors raised while drawing paths."""


class NoPreviousDrawError(PathGenerationError):
    """Raised when a draw is reused before any fresh draw has been made."""

    def __init__(self, source: str):
        super().__init__(
            f"{source} has no previous draw; request a fresh draw first."
        )
