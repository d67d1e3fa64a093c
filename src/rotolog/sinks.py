"""
Logger contract and concrete sinks.
"""

from __future__ import annotations

import os
import re
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO

from .formatters import LineFormatter
from .levels import LevelFilter, Severity

FATAL_EXIT_CODE = -1


def terminate(exit_code: int = FATAL_EXIT_CODE) -> None:
    """End the process with ``exit_code``.

    On the main thread this raises ``SystemExit`` so ``finally`` blocks and
    atexit hooks run. ``SystemExit`` raised in any other thread only ends that
    thread, so there the process is stopped with ``os._exit``.
    """
    if threading.current_thread() is threading.main_thread():
        sys.exit(exit_code)
    os._exit(exit_code & 0xFF)


# =============================================================================
# Logger Contract (Strategy Pattern)
# =============================================================================


class BaseLogger(ABC):
    """Abstract base class for every logger-shaped component.

    Subclasses implement ``log``; the level-named calls all delegate to it.
    """

    def __init__(self, level: Severity = Severity.INFO) -> None:
        self._filter = LevelFilter(level)

    @property
    def level(self) -> Severity:
        return self._filter.threshold

    @level.setter
    def level(self, value: Severity) -> None:
        self._filter.threshold = Severity.parse(value)

    @abstractmethod
    def log(self, level: Severity, message: str) -> None:
        """Record ``message`` if ``level`` passes the threshold."""
        ...

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self.log(Severity.WARN, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def fatal(self, message: str) -> None:
        """Log at FATAL, then terminate the process. See ``log_fatal_and_exit``."""
        self.log_fatal_and_exit(message)

    def log_fatal_and_exit(self, message: str, exit_code: int = FATAL_EXIT_CODE) -> None:
        """Write the fatal line, flush, then terminate the process.

        ``log(Severity.FATAL, ...)`` writes the same line without exiting.
        """
        self.log(Severity.FATAL, message)
        self.flush()
        terminate(exit_code)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# =============================================================================
# Console
# =============================================================================


class ConsoleSink(BaseLogger):
    """Writes formatted lines to standard output.

    Args:
        level: Initial threshold.
        stream: Output stream. When omitted ``sys.stdout`` is looked up on
            every write, so redirections made after construction are honoured.
        formatter: Line formatter (default: ``LineFormatter()``).
    """

    def __init__(
        self,
        level: Severity = Severity.INFO,
        *,
        stream: TextIO | None = None,
        formatter: LineFormatter | None = None,
    ) -> None:
        super().__init__(level)
        self._stream = stream
        self._formatter = formatter or LineFormatter()

    @property
    def stream(self) -> Any:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, level: Severity, message: str) -> None:
        level = Severity.parse(level)
        if not self._filter.allows(level):
            return
        # No lock: lines from concurrent threads may interleave.
        stream = self.stream
        stream.write(self._formatter.format(level, message) + "\n")
        stream.flush()

    def flush(self) -> None:
        self.stream.flush()


# =============================================================================
# Rotating File
# =============================================================================


class RotatingFileSink(BaseLogger):
    """Append-only file sink with size-based rotation.

    The active file is always ``<directory>/<base_name><extension>``. When a
    write finds it at or above ``max_file_size`` the file is renamed to
    ``<base_name>_<N><extension>`` and a fresh active file is opened. ``N``
    cycles through ``1..max_rotated_files``, overwriting the oldest rotated
    file once the bound is reached.

    On construction the directory is scanned for existing rotated files and
    numbering resumes after the highest index found.

    Only one sink instance may write a given file; appends from other
    processes are not accounted for.

    The path is split with ``Path.stem`` and ``Path.suffix``. A dot-file such
    as ``logs/.log`` therefore has base name ``.log`` and no extension, and
    rotates to ``.log_1``, not ``_1.log``.

    Args:
        level: Initial threshold.
        file_path: Active log file path. Missing directories are created.
        max_file_size: Rotation threshold in bytes.
        max_rotated_files: Number of rotated files kept before wrapping.
        formatter: Line formatter (default: ``LineFormatter()``).
        encoding: Text encoding of the log file.
    """

    DEFAULT_MAX_FILE_SIZE = 25 * 1024 * 1024
    DEFAULT_MAX_ROTATED_FILES = 10

    def __init__(
        self,
        level: Severity,
        file_path: str | os.PathLike[str],
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        max_rotated_files: int = DEFAULT_MAX_ROTATED_FILES,
        *,
        formatter: LineFormatter | None = None,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__(level)
        path = Path(file_path)
        self._directory = path.parent
        self._base_name = path.stem
        self._extension = path.suffix
        self._max_file_size = max_file_size
        self._max_rotated_files = max_rotated_files
        self._formatter = formatter or LineFormatter()
        self._encoding = encoding
        self._lock = threading.Lock()
        self._stream: TextIO | None = None

        self._directory.mkdir(parents=True, exist_ok=True)
        self._rotation_index = self._recover_rotation_index()
        self._open()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """Canonical active file path."""
        return self._directory / f"{self._base_name}{self._extension}"

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def base_name(self) -> str:
        return self._base_name

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def rotation_index(self) -> int:
        """Index the next rotated file will receive (before wraparound)."""
        return self._rotation_index

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    @max_file_size.setter
    def max_file_size(self, value: int) -> None:
        with self._lock:
            self._max_file_size = value

    @property
    def max_rotated_files(self) -> int:
        return self._max_rotated_files

    @max_rotated_files.setter
    def max_rotated_files(self, value: int) -> None:
        with self._lock:
            self._max_rotated_files = value

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def rotated_path(self, index: int) -> Path:
        return self._directory / f"{self._base_name}_{index}{self._extension}"

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def log(self, level: Severity, message: str) -> None:
        if self._stream is None:
            return
        level = Severity.parse(level)
        if not self._filter.allows(level):
            return

        # Size check, rotation and write form one critical section.
        with self._lock:
            if self._stream is None:
                return
            if self._current_size() >= self._max_file_size:
                self._rotate()
            self._stream.write(self._formatter.format(level, message) + "\n")
            self._stream.flush()

    def rotate(self) -> None:
        """Rotate the active file now, regardless of its size."""
        with self._lock:
            if self._stream is None:
                return
            self._rotate()

    def flush(self) -> None:
        with self._lock:
            if self._stream is not None:
                self._stream.flush()

    def close(self) -> None:
        """Flush and close the active file. Later calls to ``log`` do nothing."""
        with self._lock:
            self._close_stream()

    # -------------------------------------------------------------------------
    # Internals (callers hold the lock, except during construction)
    # -------------------------------------------------------------------------

    def _current_size(self) -> int:
        return os.fstat(self._stream.fileno()).st_size

    def _rotate(self) -> None:
        if self._rotation_index >= self._max_rotated_files + 1:
            self._rotation_index = 1

        target = self.rotated_path(self._rotation_index)
        self._close_stream()
        try:
            if target.exists():
                target.unlink()
            self.path.rename(target)
            self._rotation_index += 1
        finally:
            self._open()

    def _recover_rotation_index(self) -> int:
        pattern = re.compile(
            rf"^{re.escape(self._base_name)}_([0-9]+){re.escape(self._extension)}$"
        )
        highest = 0
        for entry in self._directory.iterdir():
            match = pattern.match(entry.name)
            if match is None or not entry.is_file():
                continue
            highest = max(highest, int(match.group(1)))
        return highest + 1

    def _open(self) -> None:
        self._stream = open(self.path, "a", encoding=self._encoding)

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        stream, self._stream = self._stream, None
        try:
            stream.flush()
        finally:
            stream.close()

    def __repr__(self) -> str:
        return (
            f"RotatingFileSink(path={str(self.path)!r}, level={self.level.name}, "
            f"max_file_size={self._max_file_size}, max_rotated_files={self._max_rotated_files})"
        )
