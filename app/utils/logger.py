"""Logging configuration for the application."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _add_file_handler(log: logging.Logger, log_file: str, level: int) -> None:
    """Attach a rotating file handler for ``log_file`` unless one is already attached."""
    path = Path(log_file).resolve()
    for handler in log.handlers:
        if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == path:
            return

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        log.warning(f"Failed to create file handler for {log_file}: {e}")
        return

    file_handler.setLevel(level)
    file_handler.setFormatter(LOG_FORMAT)
    log.addHandler(file_handler)


def setup_logger(
    name: str = "app",
    log_file: str | None = None,
    log_level: str | None = None,
) -> logging.Logger:
    """Configure and return the application logger.

    Modules log through ``logging.getLogger(__name__)``; since every module
    lives under the ``app`` package their records reach these handlers.
    Calling it again (as the app factory does with the loaded settings)
    updates the level and adds the file handler if one is requested.

    Args:
        name: Logger name
        log_file: Path to a rotating log file (default: from LOG_FILE env, none if unset)
        log_level: Log level (default: from LOG_LEVEL env or DEBUG for local, INFO otherwise)

    Returns:
        Configured logger instance
    """
    if log_level is None:
        is_local = os.getenv("ENV", "local") == "local"
        log_level = os.getenv("LOG_LEVEL", "DEBUG" if is_local else "INFO")

    level = getattr(logging, log_level.upper(), logging.INFO)

    log = logging.getLogger(name)
    log.setLevel(level)

    if not log.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(LOG_FORMAT)
        log.addHandler(console_handler)

    for handler in log.handlers:
        handler.setLevel(level)

    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    if log_file:
        _add_file_handler(log, log_file, level)

    log.propagate = False

    return log


logger = setup_logger()
