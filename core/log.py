"""Logging setup for the image viewer."""

import logging
import sys
from pathlib import Path

LOGGER_NAMESPACE = "image_viewer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def reset_logging() -> None:
    """Close and detach every handler on the viewer logger."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Send viewer logs to stderr and, when log_file is given, to that file.

    Safe to call again: handlers from an earlier call are closed first.
    """
    reset_logging()
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
