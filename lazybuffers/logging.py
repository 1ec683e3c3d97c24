"""Logging helpers for lazybuffers."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "lazybuffers"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the lazybuffers hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None, console: bool = True
) -> logging.Logger:
    """Configure the lazybuffers logger with console output and optional file sink.

    Interactive sessions pass ``console=False`` because stderr output would be
    drawn over the list.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when main() runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        stream_handler.setFormatter(logging.Formatter("[lazybuffers] %(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


__all__ = ["configure_logging", "get_logger"]
