"""Centralized logging helpers.

Every nucleo module logs under the ``nucleo`` namespace. The default level is
``WARNING`` and can be changed with the ``NUCLEO_LOG_LEVEL`` environment
variable (e.g. ``NUCLEO_LOG_LEVEL=DEBUG`` to trace each mutation).
"""

from __future__ import annotations

import logging
import os
from typing import Final

_LOGGER_NAME: Final = "nucleo"
_LEVEL_ENV: Final = "NUCLEO_LOG_LEVEL"


def _parse_level(level: int | str) -> int | None:
    if isinstance(level, int):
        return level
    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else None


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        # A bad environment value must not break imports.
        env_level = _parse_level(os.environ.get(_LEVEL_ENV, "WARNING"))
        return logging.WARNING if env_level is None else env_level
    resolved = _parse_level(level)
    if resolved is None:
        msg = f"Unknown log level: {level!r}"
        raise ValueError(msg)
    return resolved


def get_logger(component: str | None = None, *, level: int | str | None = None) -> logging.Logger:
    """Return the ``nucleo[.component]`` logger, attaching a stream handler once."""
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
    elif level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
