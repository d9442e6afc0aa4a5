"""
Opt-in logging setup. The library only creates module loggers; applications
that want client logs on stdout call configure_logging().
"""

import logging
import sys

from hubspot_client.core.config import get_settings

LOGGER_NAME = "hubspot_client"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger (idempotent)."""
    if level is None:
        level = get_settings().hubspot_log_level
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
