# pathlab/common/logging_config.py

import logging

from pathlab.common.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
