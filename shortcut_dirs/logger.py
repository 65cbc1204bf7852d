"""
Logging configuration for shortcut-dirs.

Library modules only ask for named loggers; handlers are installed by
:func:`setup_logging`, which the command line calls at startup.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

from .constants import LOG_BACKUP_COUNT, LOG_FILENAME, LOG_MAX_BYTES

__all__ = ["setup_logging", "get_logger", "DEFAULT_LOGGER_NAME"]

DEFAULT_LOGGER_NAME = "shortcut_dirs"

# Marks handlers installed by setup_logging so re-initialisation only
# replaces our own handlers.
_HANDLER_TAG = "_shortcut_dirs"


def _default_level() -> int:
    """Return DEBUG when the ``DEBUG`` env var is truthy, otherwise INFO."""
    if os.environ.get("DEBUG", "").strip().lower() in ("1", "true", "yes"):
        return logging.DEBUG
    return logging.INFO


def setup_logging(
    log_level: Optional[int] = None,
    log_dir: Optional[str] = None,
    log_filename: str = LOG_FILENAME,
) -> logging.Logger:
    """
    Set up logging configuration for the command line tool.

    Args:
        log_level: The logging level (default: INFO, or DEBUG when the
            ``DEBUG`` environment variable is set)
        log_dir: Directory for a rotating log file (default: console only)
        log_filename: Name of the log file inside ``log_dir``

    Returns:
        The configured root logger
    """
    level = _default_level() if log_level is None else log_level

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(message)s')

    log_file: Optional[Path] = None
    if log_dir:
        try:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            log_file = log_path / log_filename
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8',
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            setattr(file_handler, _HANDLER_TAG, True)
            logger.addHandler(file_handler)
        except (IOError, OSError) as e:
            log_file = None
            print(f"Warning: Could not create log file in {log_dir}: {e}", file=sys.stderr)

    # Results go to stdout, so diagnostics stay on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    setattr(console_handler, _HANDLER_TAG, True)
    logger.addHandler(console_handler)

    logger.debug(f"Python version: {sys.version}")
    logger.debug(f"Platform: {sys.platform}")
    if log_file is not None:
        logger.debug(f"Log file: {log_file}")

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "shortcut_dirs")

    Returns:
        Logger instance
    """
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
