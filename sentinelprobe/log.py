"""Logger configuration for sentinelprobe.

Stdout carries the single status line read by the monitoring system, so
everything logged here goes to stderr.
"""

import logging
import os
import sys

# Environment variable to control the log level when --verbose is not given
LOG_LEVEL_ENV = "SENTINELPROBE_LOG_LEVEL"


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def get_logger(verbose=False):
    """Get the package logger, attaching a stderr handler on first use."""
    logger = logging.getLogger("sentinelprobe")
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


__all__ = ["LOG_LEVEL_ENV", "get_logger"]
