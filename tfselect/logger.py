"""Logging configuration for tfselect.

Stdout belongs to the wizard and to terraform, so the console handler writes
warnings to stderr only. DEBUG level adds a timestamped log file.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "tfselect"


def get_log_dir() -> Path:
    """Return the platform-specific log directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False))


def setup_logging(log_level: str = "WARNING", log_file: bool | None = None) -> logging.Logger:
    """Configure the ``tfselect`` logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Also log to a file. Defaults to ``True`` at DEBUG level.

    Returns:
        The package logger.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file is None:
        log_file = level <= logging.DEBUG
    if log_file:
        log_dir = get_log_dir()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = log_dir / f"{APP_NAME}_{timestamp}.log"
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        except OSError as exc:
            logger.warning("cannot open log file %s: %s", log_file_path, exc)
            return logger
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
        logger.debug("logging to file: %s", log_file_path)

    return logger
