"""
structlog front-end rendering into rotolog loggers.

Application code logs through structlog as usual; the last processor
flattens each event into a single message and hands it to a rotolog logger,
so output keeps the fixed ``timestamp level message`` line.
"""

from __future__ import annotations

from typing import Any

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

from . import default
from .levels import Severity
from .sinks import BaseLogger

# =============================================================================
# Global State
# =============================================================================

# None routes events to whatever the default registry holds at call time.
_target: BaseLogger | None = None

_METHOD_LEVELS = {
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "error": Severity.ERROR,
    "exception": Severity.ERROR,
    "critical": Severity.FATAL,
    "fatal": Severity.FATAL,
}


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structlog logger; ``name`` is shown as a ``[name]`` prefix."""
    if name:
        return structlog.get_logger(_name=name)
    return structlog.get_logger()


# =============================================================================
# Structlog Processors
# =============================================================================


def render_message(event_dict: EventDict) -> str:
    """Flatten an event dict into ``[name] event key=value ...``.

    Exception and stack text, when present, follow on their own lines.
    """
    event = event_dict.pop("event", "")
    name = event_dict.pop("_name", None)
    exception = event_dict.pop("exception", None)
    stack = event_dict.pop("stack", None)

    message = f"[{name}] {event}" if name else str(event)
    extras = " ".join(f"{key}={value}" for key, value in event_dict.items())
    if extras:
        message = f"{message} {extras}"
    for block in (exception, stack):
        if block:
            message = f"{message}\n{block}"
    return message


def rotolog_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Send the event to the rotolog target. Returns empty to suppress default output."""
    level = _METHOD_LEVELS.get(str(event_dict.pop("level", method_name)).lower(), Severity.INFO)
    message = render_message(event_dict)
    target = _target if _target is not None else default.get_logger()
    target.log(level, message)
    return ""


# =============================================================================
# Configuration Logic
# =============================================================================


class NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = NopFile()


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


def configure_structlog(logger: BaseLogger | None = None, level: Any = Severity.INFO) -> None:
    """
    Route structlog events into a rotolog logger.

    Args:
        logger: Target logger. None follows the default registry, including
            later replacements.
        level: Minimum severity structlog lets through (name, rank or member).
            The target still applies its own threshold.
    """
    global _target
    _target = logger
    threshold = Severity.parse(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            rotolog_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold.to_stdlib()),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
