"""File discovery, filtering and line splitting for searches."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from quickgrep.options import Options

__all__ = [
    "FileInfo",
    "LineInfo",
    "FileScanner",
    "get_file_info",
    "is_binary_file",
    "matches_pattern",
]

_BINARY_PROBE_SIZE = 1024
_WILDCARDS = ("*", "?")


@dataclass(frozen=True)
class FileInfo:
    """Basic facts about a path found while scanning.

    ``type`` is one of ``regular``, ``directory``, ``symlink``, ``block``,
    ``character``, ``fifo``, ``socket``, ``not_found`` or ``unknown``.
    """

    path: str
    name: str
    is_directory: bool
    size: int
    type: str


@dataclass(frozen=True)
class LineInfo:
    """One line of file content; ``start_pos``/``end_pos`` exclude the newline."""

    line_number: int
    start_pos: int
    end_pos: int
    content: str


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _type_name(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "regular"
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISBLK(mode):
        return "block"
    if stat.S_ISCHR(mode):
        return "character"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "unknown"


def get_file_info(path: str) -> FileInfo:
    """Describe ``path``, following symlinks; missing paths report ``not_found``."""
    name = Path(path).name
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return FileInfo(path, name, False, 0, "not_found")
    except OSError:
        return FileInfo(path, name, False, 0, "unknown")
    size = 0
    if stat.S_ISREG(mode):
        try:
            size = os.path.getsize(path)
        except OSError:
            return FileInfo(path, name, False, 0, "unknown")
    return FileInfo(path, name, stat.S_ISDIR(mode), size, _type_name(mode))


def is_binary_file(path: str) -> bool:
    """Return True if the first 1024 bytes hold a NUL byte or the file cannot be read."""
    try:
        with open(path, "rb") as handle:
            head = handle.read(_BINARY_PROBE_SIZE)
    except OSError:
        return True
    return b"\0" in head


def matches_pattern(path: str, patterns: Iterable[str]) -> bool:
    """Check the file name of ``path`` against ``patterns``.

    A pattern holding ``*`` or ``?`` matches when it occurs inside the file
    name as written; any other pattern must equal the file name exactly.
    """
    filename = Path(path).name
    for pattern in patterns:
        if any(w in pattern for w in _WILDCARDS):
            if pattern in filename:
                return True
        elif filename == pattern:
            return True
    return False


class FileScanner:
    """Finds searchable files and reads them as text."""

    def __init__(self, options: Options) -> None:
        self.options = options

    def scan(self, paths: Iterable[str]) -> Iterator[FileInfo]:
        """Yield every file under ``paths`` that passes the filters.

        Missing paths and directories in non-recursive mode are reported on
        stderr and skipped.
        """
        for path in paths:
            try:
                if not os.path.exists(path):
                    _warn(f"Warning: Path does not exist: {path}")
                    continue
                if os.path.isdir(path):
                    if self.options.recursive:
                        yield from self._scan_directory(path, 0)
                    else:
                        _warn(f"Warning: Skipping directory (use -r for recursive): {path}")
                elif os.path.isfile(path):
                    info = get_file_info(path)
                    if self.should_scan_file(path):
                        yield info
            except OSError as exc:
                _warn(f"Error scanning path {path}: {exc}")

    def _scan_directory(self, path: str, depth: int) -> Iterator[FileInfo]:
        max_depth = self.options.max_depth
        if max_depth >= 0 and depth > max_depth:
            return
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            _warn(f"Error scanning directory {path}: {exc}")
            return
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                if entry.is_dir():
                    yield from self._scan_directory(entry.path, depth + 1)
                elif entry.is_file() and self.should_scan_file(entry.path):
                    yield get_file_info(entry.path)
            except OSError as exc:
                _warn(f"Error scanning directory {path}: {exc}")

    def read_file(self, path: str) -> str:
        """Return the whole file as text; undecodable bytes are kept as surrogates.

        Raises OSError if the file cannot be opened or read.
        """
        with open(path, "rb") as handle:
            data = handle.read()
        return data.decode("utf-8", errors="surrogateescape")

    def get_lines(self, content: str) -> list[LineInfo]:
        """Split ``content`` on newlines, dropping one trailing carriage return per line."""
        lines: list[LineInfo] = []
        pos = 0
        line_number = 1
        while pos < len(content):
            end = content.find("\n", pos)
            if end == -1:
                end = len(content)
            text = content[pos:end]
            if text.endswith("\r"):
                text = text[:-1]
            lines.append(LineInfo(line_number, pos, end, text))
            pos = end + 1
            line_number += 1
        return lines

    def should_scan_file(self, path: str) -> bool:
        """Apply exclude and include patterns, then reject binary files."""
        if matches_pattern(path, self.options.exclude_patterns):
            return False
        if self.options.include_patterns and not matches_pattern(
            path, self.options.include_patterns
        ):
            return False
        return not is_binary_file(path)