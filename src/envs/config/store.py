"""ConfigStore: file-then-environment configuration with typed accessors.

Loading order:
1) Source file (default ``.env``), if it can be opened
2) Environment variables, overriding keys that came from the file

If the source file cannot be opened, the store holds a full snapshot of the
process environment instead. When the file is present, variables that only
exist in the environment are NOT visible through the store.

Configuration problems are treated as operator errors: a malformed source file
or a value that cannot be coerced to the requested type is logged at critical
level and the process exits (SystemExit with code 1, chained from the typed
EnvsError describing the problem).

Example:
    from envs.config import ConfigStore

    store = ConfigStore(debug=True)
    store.load()

    port = store.get_int("PORT", 8080)
    hosts = store.get_slice("ALLOWED_HOSTS")
    limits = store.get_map("RATE_LIMITS", {"default": "100"})
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, NoReturn, Optional, TypeVar, Union

from envs.config.parsers import (
    parse_bool,
    parse_float,
    parse_int,
    parse_map,
    parse_slice,
    parse_slice_float,
    parse_slice_int,
)
from envs.config.source import (
    DEFAULT_SOURCE_PATH,
    environ_snapshot,
    overlay_environ,
    parse_source_lines,
)
from envs.exceptions import ConfigurationError, EnvsError, ParseError, SourceError
from envs.logger import Logger, create_logger

T = TypeVar("T")

# Marks "no default given"; None is a legitimate default value.
_UNSET: Any = object()


class ConfigStore:
    """Typed key/value configuration loaded from a source file and the environment.

    Attributes:
        debug: Log a warning when the source file cannot be opened
    """

    def __init__(
        self,
        source_path: Optional[Union[str, Path]] = None,
        debug: bool = False,
        logger: Optional[Logger] = None,
    ) -> None:
        """Create an empty store. Nothing is read until load() is called.

        Args:
            source_path: Source file to read; None or "" means ``.env`` in the
                current working directory
            debug: Log a warning when the source file cannot be opened
            logger: Optional logger instance. Creates one if not provided.
        """
        self._source_path = source_path
        self.debug = debug
        self._logger = logger if logger is not None else create_logger(name="envs")
        self._entries: Dict[str, str] = {}
        self._load_started = False
        self._loaded = False

    @classmethod
    def from_env(cls, prefix: str = "ENVS", logger: Optional[Logger] = None) -> "ConfigStore":
        """Create a store configured from environment variables.

        Environment variables:
            {prefix}_SOURCE_PATH: Source file path (default: .env)
            {prefix}_DEBUG: "true" to log a missing source file
        """
        return cls(
            source_path=os.environ.get(f"{prefix}_SOURCE_PATH") or None,
            debug=os.environ.get(f"{prefix}_DEBUG", "false").lower() == "true",
            logger=logger,
        )

    @property
    def source_path(self) -> Optional[Union[str, Path]]:
        return self._source_path

    @source_path.setter
    def source_path(self, value: Optional[Union[str, Path]]) -> None:
        if self._load_started:
            raise ConfigurationError(
                "SOURCE_PATH_LOCKED",
                "source_path cannot be changed once loading has begun",
                details={"source_path": str(self._source_path), "requested": str(value)},
            )
        self._source_path = value

    @property
    def resolved_source_path(self) -> Path:
        """The file load() reads: source_path if set, else ``.env``."""
        if self._source_path:
            return Path(self._source_path)
        return Path(DEFAULT_SOURCE_PATH)

    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the raw loaded values."""
        return MappingProxyType(self._entries)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source_path={str(self.resolved_source_path)!r}, "
            f"debug={self.debug!r}, entries={len(self._entries)})"
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Rebuild the store from the source file and the environment.

        Any previously loaded values are discarded.

        Raises:
            SystemExit: If the source file opened but could not be read, or a
                line in it is malformed. The file is closed first.
        """
        self._load_started = True
        path = self.resolved_source_path

        try:
            source = open(path, newline="\n")
        except OSError as exc:
            if self.debug:
                self._logger.warning(
                    "Failed to read source file, reading all environment variables",
                    path=str(path),
                    error=str(exc),
                )
            self._entries = environ_snapshot()
            self._finish_load(path, fallback=True)
            return

        try:
            with source:
                entries = parse_source_lines(source, path)
        except SourceError as exc:
            self._fatal(exc)
        except (OSError, UnicodeDecodeError) as exc:
            self._fatal(
                SourceError(
                    f"Failed to read source file {path}",
                    path=str(path),
                    details={"cause": str(exc)},
                )
            )

        self._entries = dict(overlay_environ(entries))
        self._finish_load(path, fallback=False)

    def _finish_load(self, path: Path, fallback: bool) -> None:
        self._loaded = True
        self._logger.debug(
            "Configuration loaded",
            path=str(path),
            entries=len(self._entries),
            fallback=fallback,
        )

    def _fatal(self, error: EnvsError) -> NoReturn:
        self._logger.critical(error.message, code=error.code, **error.details)
        raise SystemExit(1) from error

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def _resolve(self, key: str, default: Any, target: str, parser: Callable[[str], T]) -> T:
        raw = self._entries.get(key)
        if raw is None:
            if default is not _UNSET:
                return default
            raw = ""

        try:
            return parser(raw)
        except ValueError as exc:
            self._fatal(ParseError(key=key, target=target, value=raw, cause=exc))

    def get(self, key: str, default: str = _UNSET) -> str:
        """Return the value verbatim, or "" when absent and no default is given."""
        return self._resolve(key, default, "string", str)

    def get_bool(self, key: str, default: bool = _UNSET) -> bool:
        """Return the value as a boolean (1/0, t/f, true/false in any case)."""
        return self._resolve(key, default, "boolean", parse_bool)

    def get_float(self, key: str, default: float = _UNSET) -> float:
        """Return the value as a float rounded to single precision."""
        return self._resolve(key, default, "float", parse_float)

    def get_int(self, key: str, default: int = _UNSET) -> int:
        """Return the value as a base-10 integer."""
        return self._resolve(key, default, "integer", parse_int)

    def get_map(self, key: str, default: Dict[str, str] = _UNSET) -> Dict[str, str]:
        """Return ``k1:v1;k2:v2`` as a dict."""
        return self._resolve(key, default, "map of strings", parse_map)

    def get_slice(self, key: str, default: List[str] = _UNSET) -> List[str]:
        """Return the comma-separated value as a list of strings, untrimmed."""
        return self._resolve(key, default, "slice of strings", parse_slice)

    def get_slice_float(self, key: str, default: List[float] = _UNSET) -> List[float]:
        return self._resolve(key, default, "slice of floats", parse_slice_float)

    def get_slice_int(self, key: str, default: List[int] = _UNSET) -> List[int]:
        return self._resolve(key, default, "slice of integers", parse_slice_int)


__all__ = ["ConfigStore"]
