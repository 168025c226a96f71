"""Shared logging helpers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler


# stdout may be one of the output sinks, so log records always go to stderr.
_CONSOLE = Console(stderr=True, width=120)
_LOGGER_CACHE: dict[str, logging.Logger] = {}
_LEVEL = logging.INFO


def get_logger(name: str) -> logging.Logger:
    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    handler = RichHandler(console=_CONSOLE, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(f"buffered_tee.{name}")
    logger.setLevel(_LEVEL)
    logger.addHandler(handler)
    logger.propagate = False

    _LOGGER_CACHE[name] = logger
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of every package logger, including ones created later."""
    global _LEVEL
    _LEVEL = level
    for logger in _LOGGER_CACHE.values():
        logger.setLevel(level)


@contextmanager
def scoped_log_level(level: int) -> Iterator[None]:
    """Apply ``level`` for the duration of one run, then restore the previous one."""
    previous = _LEVEL
    set_global_log_level(level)
    try:
        yield
    finally:
        set_global_log_level(previous)
