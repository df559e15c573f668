"""envs - Process configuration from a .env file and environment variables.

This package provides:
- config: ConfigStore, loading a KEY=VALUE source file then overlaying
  environment variables, with typed accessors and optional defaults
- logger: Structured logging used for store diagnostics
- exceptions: Exception classes with structured error info
- testing: pytest fixtures for code that reads configuration
"""

__version__ = "1.0.0"

from envs.config import (
    DEFAULT_SOURCE_PATH,
    ConfigStore,
)

from envs.exceptions import (
    EnvsError,
    ConfigurationError,
    SourceError,
    ParseError,
)

from envs.logger import (
    Logger,
    StructuredLogger,
    get_logger,
    create_logger,
)

__all__ = [
    "__version__",
    # Config
    "ConfigStore",
    "DEFAULT_SOURCE_PATH",
    # Exceptions
    "EnvsError",
    "ConfigurationError",
    "SourceError",
    "ParseError",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
]
