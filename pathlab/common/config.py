# pathlab/common/config.py

import os

# General project config
PROJECT_NAME = "pathlab"

# Simulation defaults
DEFAULT_RANDOM_SEED = 42
SOBOL_BLOCK_SIZE = int(os.getenv("PATHLAB_SOBOL_BLOCK_SIZE", "1024"))
SOBOL_MAX_DIMENSION = 21201

# Clamp uniforms before the inverse normal to avoid inf at the boundaries
NORMAL_CLIP = 1e-10

# Logging config
LOG_LEVEL = os.getenv("PATHLAB_LOG_LEVEL", "INFO")
