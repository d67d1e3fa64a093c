"""
Severity levels and threshold filtering.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from .exceptions import InvalidLevelError


class Severity(IntEnum):
    """Ordered log severity. Comparison follows the integer rank."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """Name as rendered in a log line, e.g. ``Warn``."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Coerce a member, an integer rank or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value=value) from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.parse(int(name))
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise InvalidLevelError(value=value)

    def to_stdlib(self) -> int:
        """Matching ``logging`` level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Severity":
        """Nearest severity at or below a ``logging`` level number."""
        for severity in reversed(cls):
            if levelno >= _STDLIB_LEVELS[severity]:
                return severity
        return cls.DEBUG


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

_STDLIB_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}


class LevelFilter:
    """Minimum severity a message needs to be recorded."""

    def __init__(self, threshold: Severity = Severity.INFO) -> None:
        self.threshold = Severity.parse(threshold)

    def allows(self, level: Severity) -> bool:
        return level >= self.threshold

    def __repr__(self) -> str:
        return f"LevelFilter(threshold={self.threshold.name})"
