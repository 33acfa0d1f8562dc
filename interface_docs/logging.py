"""Logger hierarchy and console/file handlers for interface-docs."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "interface_docs"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``interface_docs.<name>``, or the package logger itself."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach a stderr handler and, when ``log_file`` is given, a file handler.

    The console stays quiet except for errors unless ``verbose`` is set, in
    which case progress and diagnostics are shown too. A log file always
    receives every record down to DEBUG.
    """
    level = logging.DEBUG if verbose else logging.ERROR
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Repeated calls replace the handlers instead of stacking them.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[interface-docs] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
