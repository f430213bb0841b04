"""Logging setup for the docmock logger hierarchy."""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import get_settings

ROOT_LOGGER = "docmock"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Attach handlers to the ``docmock`` logger, replacing any set up before.

    Console output goes to stderr so documents printed on stdout can be piped.

    Args:
        level: Level name; defaults to Settings.log_level
        log_file: Also log to this file; defaults to Settings.log_file
        format_string: Record format; defaults to LOG_FORMAT
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())
    log_file_path = log_file or settings.log_file
    formatter = logging.Formatter(format_string or LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(log_level)
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, under the ``docmock`` hierarchy."""
    if not logging.getLogger(ROOT_LOGGER).handlers:
        setup_logging()

    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
