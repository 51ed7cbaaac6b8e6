"""
Logger factory shared by the layout services.

Output handlers belong to the host application; records propagate to its
root configuration.
"""

import logging

from timeline_layout.core.config import get_settings


def setup_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module with the configured level.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(get_settings().LOG_LEVEL)
    return logger
