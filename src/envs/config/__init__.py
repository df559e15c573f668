"""Configuration Module for envs

Loads KEY=VALUE pairs from a source file (default ``.env``), overlays matching
environment variables, and exposes typed accessors with optional defaults.

Example:
    from envs.config import ConfigStore

    store = ConfigStore(source_path="service.env")
    store.load()

    debug = store.get_bool("DEBUG", False)
    weights = store.get_slice_float("WEIGHTS")
"""

from envs.config.parsers import (
    parse_bool,
    parse_float,
    parse_int,
    parse_map,
    parse_slice,
    parse_slice_float,
    parse_slice_int,
    round_float32,
)
from envs.config.source import (
    DEFAULT_SOURCE_PATH,
    environ_snapshot,
    overlay_environ,
    parse_source_lines,
)
from envs.config.store import ConfigStore

__all__ = [
    # Store
    "ConfigStore",
    "DEFAULT_SOURCE_PATH",
    # Source handling
    "parse_source_lines",
    "environ_snapshot",
    "overlay_environ",
    # Value parsers
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_map",
    "parse_slice",
    "parse_slice_float",
    "parse_slice_int",
    "round_float32",
]
