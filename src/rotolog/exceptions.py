"""
Exception hierarchy for rotolog.

Filesystem failures are never wrapped here: open, rotate and write errors
surface to the caller as the original ``OSError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


class RotologError(Exception):
    """Root of all rotolog exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(RotologError):
    """Settings cannot be turned into a working logger."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "CONFIGURATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class UnknownSinkError(ConfigurationError):
    """A sink name in the settings is not one rotolog knows how to build."""

    def __init__(self, *, sink_name: str, known: List[str]) -> None:
        super().__init__(
            f"Unknown sink '{sink_name}', expected one of: {', '.join(known)}",
            code="UNKNOWN_SINK",
            details={"sink_name": sink_name, "known": known},
        )


class InvalidLevelError(RotologError, ValueError):
    """A severity name or rank could not be parsed."""

    def __init__(self, *, value: Any) -> None:
        super().__init__(
            f"Invalid log level: {value!r}",
            code="INVALID_LEVEL",
            details={"value": value},
        )


# ================================
# Dispatch errors
# ================================


class FanoutError(RotologError):
    """One or more children of a fanout logger failed.

    Every child is still called; the failures are collected in ``errors`` as
    ``(logger, exception)`` pairs in dispatch order.
    """

    def __init__(self, errors: List[Tuple[Any, BaseException]]) -> None:
        names = ", ".join(type(logger).__name__ for logger, _ in errors)
        super().__init__(
            f"{len(errors)} fanout child logger(s) failed: {names}",
            code="FANOUT_FAILED",
            details={"failed": len(errors)},
        )
        self.errors = errors
