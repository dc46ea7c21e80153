"""Structured logging configuration for muxt-math.

Library modules only create loggers under the ``muxt_math`` namespace; the
CLI is the one place that attaches handlers. The evaluator reports every
arithmetic step on ``muxt_math.interpreter`` at DEBUG level, which
``setup_logging(trace=True)`` turns on without lowering the level of the
rest of the package.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "muxt_math"
TRACE_LOGGER = f"{ROOT_LOGGER}.interpreter"


class StructuredFormatter(logging.Formatter):
    """Formats records as ``<iso timestamp> [LEVEL] logger: message``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def _make_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None, trace: bool = False
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level name for the package (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives the same records as stderr
        trace: Log each evaluation step regardless of ``level``

    Returns:
        The ``muxt_math`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stderr)))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file)))

    # NOTSET defers to the package level
    logging.getLogger(TRACE_LOGGER).setLevel(logging.DEBUG if trace else logging.NOTSET)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return ``muxt_math.<name>``, or the package logger itself."""
    if name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
