"""
Logging utilities for stash search.

All modules log through children of the ``stash_search`` logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_root_logger = logging.getLogger("stash_search")


def _to_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
        file: Optional file path to write logs

    Example:
        from stash_search.logging import setup_logging

        setup_logging("DEBUG")
        setup_logging("INFO", file="search.log")
    """
    level = _to_level(level)
    _root_logger.setLevel(level)
    _root_logger.disabled = False
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format)

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    _root_logger.addHandler(stream_handler)

    if file:
        file_handler = logging.FileHandler(file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "query", "filters.colors")

    Returns:
        Logger instance
    """
    if name.startswith("stash_search."):
        return logging.getLogger(name)
    return logging.getLogger(f"stash_search.{name}")


def disable() -> None:
    """Disable all package logging."""
    _root_logger.disabled = True
