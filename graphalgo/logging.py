"""Logging utilities for graphalgo.

Provides cached, namespaced loggers with a single stderr handler each.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LEVEL_ENV_VAR = "GRAPHALGO_LOG_LEVEL"


def _level_from_env() -> int:
    value = os.getenv(_LEVEL_ENV_VAR)
    if not value:
        return logging.WARNING
    return getattr(logging, value.upper(), logging.WARNING)


# Default logging level
_DEFAULT_LEVEL = _level_from_env()
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphalgo.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("visited %d vertices", 4)
    """
    if name is None:
        name = "graphalgo"

    if name == "graphalgo" or name.startswith("graphalgo."):
        logger_name = name
    else:
        logger_name = f"graphalgo.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all graphalgo loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for graphalgo.

    Replaces the handler of every cached logger. It should typically be
    called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from graphalgo.logging import configure_logging
        >>> import logging
        >>> configure_logging(level=logging.DEBUG)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if stream is None:
        stream = sys.stderr

    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level
