"""
Logging configuration for the asset scoring library.

The library itself only emits DEBUG records (the sub-score breakdown of each
computed score). Host applications call ``configure_logging`` once at start-up
when they want those records on the console or in a file.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .config import get_settings

APP_LOGGER = "asset_score"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    enable_console_logging: bool = True,
) -> logging.Logger:
    """
    Attach console and file handlers to the ``asset_score`` logger.

    Args:
        log_level: Level for the package logger. Falls back to
                   ``Settings.log_level`` (``ASSET_SCORE_LOG_LEVEL``).
        log_file: Optional path to a log file. Falls back to
                  ``Settings.log_file``; no file handler when both are unset.
        enable_console_logging: Whether to log to stdout.

    Returns:
        The configured package logger.

    Example:
        >>> from asset_score.logging_config import configure_logging
        >>> configure_logging(log_level="DEBUG")
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{log_level}'")
    if log_file is None and settings.log_file:
        log_file = settings.log_file

    logger = logging.getLogger(APP_LOGGER)
    # Re-configuring replaces the handlers installed by a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    logger.debug("Logging configured (level=%s, file=%s)", level_name, log_file)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    Example:
        >>> from asset_score.logging_config import get_logger
        >>> logger = get_logger(__name__)
    """
    return logging.getLogger(name)
