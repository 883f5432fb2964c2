"""Logging configuration — central setup for the CLI entry point.

Every module that does ``logger = logging.getLogger(__name__)`` inherits
this config. Levels are resolved in precedence order:
    --log-level flag  >  CODELOCK_LOG_LEVEL env var  >  WARNING (default)
"""

from __future__ import annotations

import logging
import sys

# WARNING: minimal, no noise
_FMT_MINIMAL = "%(message)s"

# INFO: timestamped with module context
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"

# DEBUG: full diagnostic with file:line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_DATEFMT = "%H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the whole process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)


def _parse_level(level: str) -> int:
    """Convert a level name to its numeric value, defaulting to WARNING."""
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING
