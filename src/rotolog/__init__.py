"""
Leveled logging to files and console with size-based rotation.

Provides:
- RotatingFileSink: append-only file with rotation and bounded retention
- ConsoleSink: standard output
- FanoutLogger: one call forwarded to several loggers
- default: process-wide default logger (console at INFO)

Design Pattern: Strategy Pattern for the logger contract.
Library: pydantic-settings for configuration, structlog and stdlib bridges.
"""

from . import default
from .config import RotologSettings, build_logger, configure_default
from .core import configure_structlog, get_logger
from .exceptions import (
    ConfigurationError,
    FanoutError,
    InvalidLevelError,
    RotologError,
    UnknownSinkError,
)
from .fanout import FanoutLogger
from .formatters import LineFormatter
from .interceptors import RedirectStdLibHandler, intercept_stdlib
from .levels import LevelFilter, Severity
from .sinks import BaseLogger, ConsoleSink, RotatingFileSink

__all__ = [
    "BaseLogger",
    "ConfigurationError",
    "ConsoleSink",
    "FanoutError",
    "FanoutLogger",
    "InvalidLevelError",
    "LevelFilter",
    "LineFormatter",
    "RedirectStdLibHandler",
    "RotatingFileSink",
    "RotologError",
    "RotologSettings",
    "Severity",
    "UnknownSinkError",
    "build_logger",
    "configure_default",
    "configure_structlog",
    "default",
    "get_logger",
    "intercept_stdlib",
]
