"""
Logging configuration for cluster-match.

Modules obtain a logger with ``get_logger(__name__)``; applications call
``setup_logging()`` once to attach a handler to the package logger.

Usage:
    from cluster_match.utils.logging_config import setup_logging, get_logger

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "cluster_match"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: Union[int, str, None] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """
    Configure the package logger.

    The handler is attached only on the first call; later calls just update
    the level, so scripts and tests can call this freely.

    Args:
        level: Logging level name or number. Defaults to the configured
            ``CLUSTER_MATCH_LOG_LEVEL``.
        fmt: Format string for the stream handler.

    Returns:
        The ``cluster_match`` package logger.
    """
    global _handler

    if level is None:
        from ..config import config

        level = config.matching.log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for *name* (normally ``__name__``)."""
    return logging.getLogger(name)
