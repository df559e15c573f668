"""
envs Logger Module

Structured logging used by ConfigStore for its diagnostics: the optional
missing-source warning, load summaries at debug level, and the critical record
written before a fatal exit.

Usage:
    from envs.logger import get_logger, create_logger

    logger = get_logger()
    logger = create_logger(name="envs", level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., ENVS for "envs").
    These are read directly from the process environment since the logger is
    created before any ConfigStore has loaded.
"""

import logging
import os
from typing import Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "envs" -> "ENVS"
        "my-service" -> "MY_SERVICE"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "envs",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL, {PREFIX}_LOG_FILE
    and {PREFIX}_LOG_JSON.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "envs") -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name)


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
]
