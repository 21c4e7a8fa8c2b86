import logging
import sys
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, name: str = "tasador") -> logging.Logger:
    """Attach a stdout handler to the package logger; safe to call more than once."""
    level_name = (level or get_settings().log_level).upper()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
