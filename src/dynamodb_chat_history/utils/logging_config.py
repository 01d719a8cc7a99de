"""JSON logging for the chat history package."""

import logging
import os

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(name: str) -> int:
    """Map a level name such as ``debug`` to its number, defaulting to INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Return a package logger that writes one JSON object per record.

    The level comes from ``LOG_LEVEL``; an unrecognised name falls back to
    INFO so a bad environment never breaks imports. Callers pass table and
    operation context through ``extra`` and never log message content.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(os.environ.get("LOG_LEVEL", "INFO")))
    logger.propagate = False
    return logger
