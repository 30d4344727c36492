"""Loguru sink configuration for command-line runs."""

import sys
from typing import Optional, TextIO

from loguru import logger


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> int:
    """Route log messages to ``stream`` without decoration.

    Event lines and summaries are printed exactly as emitted. Debug messages
    are only shown when ``verbose`` is set.

    Args:
        verbose: Also emit DEBUG messages.
        stream: Destination for log output (standard output by default).

    Returns:
        The id of the installed sink.
    """
    logger.remove()
    return logger.add(
        stream if stream is not None else sys.stdout,
        level="DEBUG" if verbose else "INFO",
        format="{message}",
        colorize=False,
    )
