"""Source file parsing and environment merging for ConfigStore.

Source file format:
    # comment
    KEY=VALUE
    QUERY=a=b&c=d

Lines are terminated by ``\\n`` (a trailing ``\\r`` is dropped). Empty lines and
lines starting with ``#`` are skipped. Every other line is split on its first
``=``; the remainder is the value, taken literally.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, MutableMapping

from envs.exceptions import SourceError

DEFAULT_SOURCE_PATH = ".env"
COMMENT_PREFIX = "#"
ASSIGNMENT = "="


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_source_lines(lines: Iterable[str], path: Path | str) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines into a dict.

    Lines have no length limit. Line scanners with a fixed token buffer (such
    as Go's bufio.Scanner, which fails on lines over 64 KiB) reject long values
    that load fine here.

    Args:
        lines: Lines as produced by iterating a text file opened with newline="\\n"
        path: Source path, used for error details only

    Returns:
        Mapping of key to literal value; later duplicates win

    Raises:
        SourceError: If a non-comment line has no ``=``
    """
    entries: Dict[str, str] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = _strip_line_ending(raw_line)
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, separator, value = line.partition(ASSIGNMENT)
        if not separator:
            raise SourceError(
                f"Malformed line {line_number} in {path}: expected KEY=VALUE",
                path=str(path),
                code="MALFORMED_LINE",
                details={"line": line_number},
            )
        entries[key] = value
    return entries


def environ_snapshot() -> Dict[str, str]:
    """Copy every variable currently set in the process environment."""
    return dict(os.environ)


def overlay_environ(entries: MutableMapping[str, str]) -> MutableMapping[str, str]:
    """Replace values of keys already in ``entries`` with their environment values.

    Variables that are only present in the environment are not added.
    """
    for key in entries:
        value = os.environ.get(key)
        if value is not None:
            entries[key] = value
    return entries


__all__ = [
    "DEFAULT_SOURCE_PATH",
    "environ_snapshot",
    "overlay_environ",
    "parse_source_lines",
]
