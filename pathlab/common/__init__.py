from pathlab.common.config import (
    DEFAULT_RANDOM_SEED,
    LOG_LEVEL,
    NORMAL_CLIP,
    PROJECT_NAME,
    SOBOL_BLOCK_SIZE,
    SOBOL_MAX_DIMENSION,
)
from pathlab.common.logging_config import setup_logging

__all__ = [
    "PROJECT_NAME",
    "DEFAULT_RANDOM_SEED",
    "LOG_LEVEL",
    "NORMAL_CLIP",
    "SOBOL_BLOCK_SIZE",
    "SOBOL_MAX_DIMENSION",
    "setup_logging",
]
