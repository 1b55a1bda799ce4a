# src/playlist_extractor/utils/logging.py
from __future__ import annotations

import logging

_PACKAGE = "playlist_extractor"
_FORMAT = "%(levelname)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str = _PACKAGE) -> logging.Logger:
    """
    Return the package logger, attaching a single stderr handler on first use.
    Child loggers (logging.getLogger(__name__)) propagate to it.
    """
    global _handler
    logger = logging.getLogger(name)
    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(_handler)
        logger.setLevel(logging.INFO)
    return logger


def reset_logger(name: str = _PACKAGE) -> None:
    """Detach the handler added by get_logger (it holds the stderr of its creation time)."""
    global _handler
    if _handler is not None:
        logging.getLogger(name).removeHandler(_handler)
        _handler = None
