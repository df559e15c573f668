"""Shared fixtures for envs tests."""

from typing import Any, Dict, List, Tuple

import pytest

from envs.logger import Logger

pytest_plugins = ["envs.testing.pytest_fixtures"]


class RecordingLogger(Logger):
    """Logger that keeps every call in memory for assertions."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("critical", message, **kwargs)

    def get_session_id(self) -> str:
        return "recording"

    def at(self, level: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [(message, fields) for lvl, message, fields in self.records if lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
