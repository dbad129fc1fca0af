"""Logging configuration for gctx."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_INFO = 1  # State transitions
VERBOSITY_DEBUG = 2  # Store commands and record paths


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the gctx logger, or a child of it when name is given."""
    return logging.getLogger("gctx" if not name else f"gctx.{name}")


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the gctx logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=errors only, 1=info, 2 or more=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_INFO: logging.INFO,
    }
    logger.setLevel(level_map.get(verbosity, logging.DEBUG))

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
