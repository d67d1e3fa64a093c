"""
Process-wide default logger.

Usage:
    from rotolog import default

    default.info("service started")
    default.set_logger(RotatingFileSink(Severity.DEBUG, "logs/app.log"))
    default.set_level(Severity.WARN)

The slot starts as a ``ConsoleSink`` at ``INFO`` and may be replaced at any
time. Swapping is guarded by a lock, but a call that already picked up the
previous logger finishes against it.
"""

from __future__ import annotations

import threading

from .levels import Severity
from .sinks import FATAL_EXIT_CODE, BaseLogger, ConsoleSink


class DefaultLoggerRegistry:
    """Holds one active logger and forwards the logger contract to it."""

    def __init__(self, logger: BaseLogger | None = None) -> None:
        self._lock = threading.Lock()
        self._logger: BaseLogger = logger if logger is not None else ConsoleSink(Severity.INFO)

    @property
    def logger(self) -> BaseLogger:
        with self._lock:
            return self._logger

    @logger.setter
    def logger(self, value: BaseLogger) -> None:
        with self._lock:
            self._logger = value

    @property
    def level(self) -> Severity:
        return self.logger.level

    @level.setter
    def level(self, value: Severity) -> None:
        self.logger.level = value

    def log(self, level: Severity, message: str) -> None:
        self.logger.log(level, message)

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self.log(Severity.WARN, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def fatal(self, message: str) -> None:
        self.log_fatal_and_exit(message)

    def log_fatal_and_exit(self, message: str, exit_code: int = FATAL_EXIT_CODE) -> None:
        self.logger.log_fatal_and_exit(message, exit_code)


# =============================================================================
# Global State
# =============================================================================

registry = DefaultLoggerRegistry()


def get_logger() -> BaseLogger:
    return registry.logger


def set_logger(logger: BaseLogger) -> None:
    registry.logger = logger


def get_level() -> Severity:
    return registry.level


def set_level(level: Severity) -> None:
    registry.level = level


def reset() -> None:
    """Restore a fresh ``ConsoleSink`` at ``INFO``. The previous logger is not closed."""
    registry.logger = ConsoleSink(Severity.INFO)


def log(level: Severity, message: str) -> None:
    registry.log(level, message)


def debug(message: str) -> None:
    registry.debug(message)


def info(message: str) -> None:
    registry.info(message)


def warn(message: str) -> None:
    registry.warn(message)


def error(message: str) -> None:
    registry.error(message)


def fatal(message: str) -> None:
    registry.fatal(message)


def log_fatal_and_exit(message: str, exit_code: int = FATAL_EXIT_CODE) -> None:
    registry.log_fatal_and_exit(message, exit_code)
