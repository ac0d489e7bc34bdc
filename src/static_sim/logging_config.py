# MIT License (see LICENSE)
"""
Logging configuration.

The library only creates module loggers under the ``static_sim`` namespace;
applications (examples, benchmarks, a host UI) call setup_logging() once to
see them.
"""
from __future__ import annotations
import logging
import sys

from .util import env_log_level


def setup_logging(level: int | str | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the ``static_sim`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to
               $STATIC_SIM_LOG_LEVEL, or INFO.
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = env_log_level()

    logger = logging.getLogger("static_sim")
    logger.setLevel(level)

    # avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized")
    return logger
