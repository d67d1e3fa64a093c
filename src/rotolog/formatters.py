"""
Line formatting shared by every sink.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from .levels import Severity


class LineFormatter:
    """Renders ``DD/MM/YYYY HH:MM:SS <Label> <message>``.

    The message is written verbatim, embedded newlines included. The trailing
    newline is added by the sink, not here.

    Args:
        clock: Callable returning the local time of the event (default:
            ``datetime.now``). Tests inject a fixed clock.
    """

    TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now

    def format(self, level: Severity, message: str) -> str:
        timestamp = self._clock().strftime(self.TIMESTAMP_FORMAT)
        return f"{timestamp} {level.label} {message}"
