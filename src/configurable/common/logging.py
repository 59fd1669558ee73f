"""Logging utilities for configurable using Loguru.

The package is a library, so its logging is disabled on import. Applications
that want to see what the stores and resolvers are doing opt in with
``configurable.enable_logging()``.
"""

import sys

import loguru
from loguru import logger

from configurable.constants import APP_NAME
from configurable.settings import get_settings


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str | None = None) -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level or get_settings().log_level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
