"""Logging utilities for the announcement analyzer.

This module provides a centralized logging configuration, the logfire setup
used to trace model requests, and a helper for reporting provider failures in
a consistent format.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import logfire

from announcement_analyzer.ai.errors import provider_tag
from .config import CONFIG

_logfire_configured = False


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
) -> logging.Logger:
    """Set up and configure a logger.

    Args:
        name: The name of the logger, typically the component name.
        log_file: Path to the log file. If None, uses the default from config.
        level: The logging level. If None, uses the default from config.
        max_bytes: Maximum size of log file before rotation. If None, uses the default from config.
        backup_count: Number of backup log files to keep. If None, uses the default from config.

    Returns:
        A configured logger instance.
    """
    if log_file is None and "LOG_FILE" in CONFIG:
        log_file = CONFIG.get("LOG_FILE")

    level_name = level or CONFIG.get("LOG_LEVEL", "INFO")
    max_bytes = max_bytes or CONFIG.get("LOG_MAX_BYTES", 10485760)
    backup_count = backup_count or CONFIG.get("LOG_BACKUP_COUNT", 5)

    level = getattr(logging, level_name.upper(), logging.INFO)

    logger = logging.getLogger(f"announcement_analyzer.{name}")
    logger.setLevel(level)

    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(component_name: str) -> logging.Logger:
    """Get a logger for a specific component.

    Args:
        component_name: The name of the component requesting the logger,
            for example "ai.extraction".

    Returns:
        A configured logger instance.
    """
    return setup_logger(component_name)


def log_provider_error(
    logger: logging.Logger, provider: str, action: str, error: BaseException
) -> None:
    """Log a failed provider call tagged with the provider name.

    Args:
        logger: The component logger.
        provider: The provider tag, e.g. "gemini".
        action: Short description of the failed call, e.g. "API Extraction Error".
        error: The exception raised by the call.
    """
    logger.error(
        f"[{provider_tag(provider)}] {action}: {type(error).__name__}: {error}",
        exc_info=(type(error), error, error.__traceback__),
    )


def configure_logfire() -> None:
    """Configure logfire and instrument pydantic-ai model requests.

    Spans are only exported when a logfire token is present in the environment.
    Repeated calls are no-ops.
    """
    global _logfire_configured
    if _logfire_configured:
        return

    logfire.configure(
        send_to_logfire="if-token-present",
        service_name="announcement-analyzer",
        scrubbing=False,
        console=False,
    )
    logfire.instrument_pydantic_ai()
    _logfire_configured = True
