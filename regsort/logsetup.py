"""Logging configuration for the regsort package."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "regsort"
_HANDLER_MARK = "_regsort_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logger(verbose: bool) -> logging.Logger:
    """Configure the package logger to write to stderr.

    Verbose mode shows everything down to DEBUG; otherwise only warnings
    and errors are shown. Calling it again replaces the earlier setup.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger