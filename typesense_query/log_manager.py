#!/usr/bin/env python3
"""
Logging helpers for the Typesense query builder.

Loggers live under the "typesense-query" namespace. The package is silent by
default; hosts either configure logging themselves or call configure_logging().
"""

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "typesense-query"

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def debug_enabled() -> bool:
    """Whether TYPESENSE_QUERY_DEBUG is set to a truthy value."""
    return os.environ.get('TYPESENSE_QUERY_DEBUG', '').lower() in ('1', 'true', 'yes')


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (e.g., 'TypesenseQueryBuilder')

    Returns:
        Logger named "typesense-query.<name>"
    """
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    if debug_enabled():
        logger.setLevel(logging.DEBUG)
    return logger


def enable_debug() -> logging.Logger:
    """
    Lower the package root logger to DEBUG.

    Process-wide: every typesense-query logger inherits the level, whichever
    builder asked for it.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    return root


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Send package logs to stderr.

    Replaces any handler previously added by this function, so calling it
    twice does not duplicate output.

    Args:
        level: Log level (default: DEBUG in debug mode, INFO otherwise)

    Returns:
        The package root logger
    """
    debug = debug_enabled()
    if level is None:
        level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in root.handlers[:]:
        if getattr(handler, '_typesense_query', False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT, datefmt=DATE_FORMAT))
    handler._typesense_query = True
    root.addHandler(handler)
    return root


# Prevent "no handler" noise when the host has not configured logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
