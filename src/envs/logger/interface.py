"""
Logger interface for envs.

Abstract base class defining the logging contract used by ConfigStore.
Host applications can pass their own implementation to route store
diagnostics into an existing logging setup.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Example:
        class PrintLogger(Logger):
            def info(self, message: str, **kwargs: Any) -> None:
                print(f"INFO: {message}")
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message. Emitted right before a fatal exit."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the unique session identifier for this logger instance."""
