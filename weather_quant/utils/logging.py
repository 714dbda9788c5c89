"""Logging configuration for weather-quant."""

import logging
import sys
from typing import Optional, TextIO

from weather_quant.config import LOG_LEVEL, LOG_FORMAT

PACKAGE_LOGGER = "weather_quant"


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure logging for the application.

    The library modules only create loggers; an entry point (the CLI, a
    notebook, a service) calls this once to decide where records go.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        stream: Destination stream (default stderr, keeping stdout for output)

    Raises:
        ValueError: If level is not a known log level name
    """
    level = (level or LOG_LEVEL).upper()
    numeric_level = getattr(logging, level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or LOG_FORMAT,
        handlers=[
            logging.StreamHandler(stream or sys.stderr),
        ],
    )

    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger under the weather_quant hierarchy
    """
    return logging.getLogger(name)
