"""Core logging implementation for compdoc."""

import logging
import sys
from typing import Optional

__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    stream=sys.stderr,
    verbose: bool = False,
) -> None:
    """Configure basic logging.

    Args:
        level: Logging level.
        stream: Output stream.
        verbose: Shortcut for DEBUG level, wins over ``level``.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format=LOG_FORMAT,
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or "compdoc")
