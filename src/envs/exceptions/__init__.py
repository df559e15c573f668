"""Common exceptions for envs.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for diagnostics

Usage:
    from envs.exceptions import (
        EnvsError,
        ConfigurationError,
        SourceError,
        ParseError,
    )
"""

from envs.exceptions.base import (
    ConfigurationError,
    EnvsError,
    ParseError,
    SourceError,
)

__all__ = [
    "EnvsError",
    "ConfigurationError",
    "SourceError",
    "ParseError",
]
