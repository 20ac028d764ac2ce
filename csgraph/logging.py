"""Logging setup for the csgraph command line and MCP server.

Library code logs through loguru's shared logger; this module only decides
where records go and at which level.

Environment Variables:
    CSGRAPH_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
"""

from __future__ import annotations

import os
import sys

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"

_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str | None = None) -> int:
    """Enable csgraph logging and send records at or above level to stderr.

    The level comes from the argument, then CSGRAPH_LOG_LEVEL, then WARNING.
    Returns the loguru handler id.
    """
    level = (level or os.environ.get("CSGRAPH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    logger.enable("csgraph")
    logger.remove()
    return logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        colorize=None,
    )
