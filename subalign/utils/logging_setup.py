"""Logging initialization helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from subalign.config import LoggingSettings, Settings

LOGGER_NAME = "subalign"
_CONFIGURED_FLAG = "_subalign_configured"


def log_file_path(settings: Settings) -> Path | None:
    """Where the rotating log goes; relative names resolve under `log_dir`."""
    if not settings.logging.file:
        return None
    path = Path(str(settings.logging.file)).expanduser()
    return path if path.is_absolute() else settings.log_path / path


def _build_handlers(options: LoggingSettings, file_path: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if options.console:
        handlers.append(logging.StreamHandler())
    if file_path is not None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                file_path,
                maxBytes=int(options.max_bytes),
                backupCount=int(options.backup_count),
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(settings: Settings) -> logging.Logger:
    """Attach handlers to the `subalign` logger once and stop propagation.

    Library loggers outside `subalign` are left untouched.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, _CONFIGURED_FLAG, False):
        return logger

    options = settings.logging
    level = getattr(logging, str(options.level or "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(fmt=str(options.format), datefmt=str(options.datefmt))

    handlers = _build_handlers(options, log_file_path(settings))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.handlers = handlers
    logger.propagate = False
    setattr(logger, _CONFIGURED_FLAG, True)
    return logger


def reset_logging() -> None:
    """Close handlers installed by `setup_logging` and restore propagation."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    if hasattr(logger, _CONFIGURED_FLAG):
        delattr(logger, _CONFIGURED_FLAG)
