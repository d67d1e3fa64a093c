from __future__ import annotations

import typing as t
from datetime import datetime
from pathlib import Path

import pytest
import structlog

from rotolog import core, default
from rotolog.formatters import LineFormatter
from rotolog.levels import Severity
from rotolog.sinks import BaseLogger

FIXED_TIME = datetime(2024, 3, 5, 14, 7, 9)


class RecordingLogger(BaseLogger):
    """Logger double that records every call it receives, unfiltered."""

    def __init__(self, name: str = "rec", calls: list | None = None, level: Severity = Severity.DEBUG) -> None:
        super().__init__(level)
        self.name = name
        self.calls = calls if calls is not None else []
        self.closed = False
        self.flushed = 0

    def log(self, level: Severity, message: str) -> None:
        self.calls.append((self.name, level, message))

    def flush(self) -> None:
        self.flushed += 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "app.log"


@pytest.fixture
def formatter() -> LineFormatter:
    """Formatter with a frozen clock so lines are predictable."""
    return LineFormatter(clock=lambda: FIXED_TIME)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_recorder() -> t.Callable[..., RecordingLogger]:
    """Factory for recording loggers that can share one call list."""
    return RecordingLogger


@pytest.fixture(autouse=True)
def reset_global_loggers(monkeypatch) -> t.Iterator[None]:
    """
    Every test starts from a fresh default registry and unconfigured structlog.
    """
    default.reset()
    monkeypatch.setattr(core, "_target", None)
    yield
    default.reset()
    structlog.reset_defaults()
