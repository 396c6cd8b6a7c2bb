"""
Logging Configuration
Sets up the package logger. Frames go to stdout, so log records go to stderr.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "sphere_cli_renderer"


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """
    Configures the logger for the 'sphere_cli_renderer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        stream: Where records are written; stderr by default.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized.")
