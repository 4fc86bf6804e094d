"""Shared rotating JSON file handler for module loggers."""

from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from wanderplan.configs.settings import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_file_handler: RotatingFileHandler | None = None


def get_file_handler() -> RotatingFileHandler:
    """Return the process-wide file handler, creating it on first use."""
    global _file_handler

    if _file_handler is None:
        log_file = Path(settings.LOG_FILE)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
            delay=True,
        )
        _file_handler.setLevel(INFO)
        _file_handler.setFormatter(JsonFormatter(LOG_FORMAT))
    return _file_handler


def file_logger(logger: Logger) -> Logger:
    """
    Attach the JSON file handler to ``logger`` when file logging is enabled.

    Args:
        logger: The module logger.

    Returns:
        The same logger, for use at module level.
    """
    if not settings.LOG_TO_FILE:
        return logger

    handler = get_file_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    return logger
