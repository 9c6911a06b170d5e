"""
Logging configuration for applications embedding studystats.

The library itself only creates module loggers (logging.getLogger(__name__))
and never installs handlers on import.
"""
import logging
import sys
from typing import Optional

from studystats.config import get_settings

LOGGER_NAME = "studystats"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Repeated calls replace the handler instead of stacking a new one.

    Args:
        level: Level name; defaults to Settings.log_level

    Returns:
        The configured 'studystats' logger
    """
    level_name = (level or get_settings().log_level).upper()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level_name)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_studystats_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._studystats_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)

    return package_logger

