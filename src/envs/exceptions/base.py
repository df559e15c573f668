"""Base exception classes for envs.

All envs exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (key, path, cause) for diagnostics
"""

from typing import Any, Dict, Optional


class EnvsError(Exception):
    """Base exception for all envs errors.

    Attributes:
        code: Machine-readable error code (e.g., "PARSE_ERROR")
        message: Human-readable error message
        details: Optional additional context for diagnostics
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnvsError):
    """Raised when a store is misused, e.g. reconfigured after loading began."""

    pass


class SourceError(EnvsError):
    """Raised when the source file opened but could not be read or parsed."""

    def __init__(
        self,
        message: str,
        path: str,
        code: str = "SOURCE_READ_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        super().__init__(code=code, message=message, details={"path": path, **(details or {})})


class ParseError(EnvsError):
    """Raised when a stored value cannot be coerced to the requested type.

    The offending key, target type, raw value and underlying cause are kept both
    as attributes and in ``details``.
    """

    def __init__(self, key: str, target: str, value: str, cause: Exception):
        self.key = key
        self.target = target
        self.value = value
        self.cause = cause
        super().__init__(
            code="PARSE_ERROR",
            message=f"Failed to parse key {key} to {target}",
            details={"key": key, "target": target, "value": value, "cause": str(cause)},
        )
