"""Centralized logging configuration for release-notes.

Logs progress to stderr, and to an opt-in rotating file, with consistent
formatting across all components.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_FILE = "release-notes.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

ROOT_LOGGER = "release_notes"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "--> %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging to stderr and, when a log directory is given, a rotating file.

    The tool runs inside the repository being released, so nothing is written
    to disk unless a log directory is asked for.

    Args:
        log_dir: Directory for log files. Defaults to the RELEASE_NOTES_LOG_DIR
                 environment variable; no file is written when neither is set.
        log_file: Log file name. Defaults to 'release-notes.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with RELEASE_NOTES_LOG_LEVEL environment variable.
        console: Whether to also log progress to stderr. Defaults to True.

    Returns:
        The root release_notes logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("RELEASE_NOTES_LOG_DIR") or None

    if level is None:
        level = os.environ.get("RELEASE_NOTES_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    # Progress goes to our own handlers only
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # stderr keeps stdout clean for the markdown itself
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir) / log_file
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Cannot write log file %s: %s", log_path, e)
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
            logger.debug("Logging to %s", log_path)

    logger.debug("Logging initialized (level=%s)", level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'tracker', 'git_reader').
              Will be prefixed with 'release_notes.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Remove credentials from log output.

    Args:
        text: Text that may contain sensitive data.

    Returns:
        Sanitized text safe for logging.
    """
    patterns = [
        (r"SG\.[A-Za-z0-9_-]{16,}\.[A-Za-z0-9_-]{16,}", "[SENDGRID_KEY]"),  # SendGrid API key
        (r"Basic [A-Za-z0-9+/=]+", "Basic [REDACTED]"),  # Basic auth header
        (r"Bearer [a-zA-Z0-9._-]+", "Bearer [REDACTED]"),  # Bearer tokens
        (r"https://[^/\s:@]+:[^/\s@]+@", "https://[REDACTED]@"),  # Credentials in URLs
    ]

    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)

    return result
