"""
Logger module for graphplot

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from graphplot.logger import Logger, ConsoleLogger

    # Use the shared console logger
    logger = session_logger
    logger.info("Chart computed", kind="line", points=201)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from graphplot.config import Config
from graphplot.exceptions import ConfigurationError

from .base import Logger
from .console_logger import ConsoleLogger


def initial_log_level() -> int:
    """Level from GRAPHPLOT_LOG_LEVEL, or INFO when the value is not a level name.

    An invalid name is reported by main_web, which re-reads it at startup.
    """
    try:
        return Config.get_log_level()
    except ConfigurationError:
        return logging.INFO


# Shared logger instance for modules that just need basic console logging
session_logger: ConsoleLogger = ConsoleLogger(level=initial_log_level())

__all__ = [
    "Logger",
    "ConsoleLogger",
    "initial_log_level",
    "session_logger",
]
