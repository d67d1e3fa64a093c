from __future__ import annotations

from datetime import datetime

from rotolog.formatters import LineFormatter
from rotolog.levels import Severity


def test_line_layout(formatter: LineFormatter) -> None:
    """Timestamp is day-first with a 24h clock, followed by label and message."""
    assert formatter.format(Severity.WARN, "disk almost full") == "05/03/2024 14:07:09 Warn disk almost full"


def test_message_is_not_escaped(formatter: LineFormatter) -> None:
    assert formatter.format(Severity.INFO, "first\nsecond") == "05/03/2024 14:07:09 Info first\nsecond"


def test_zero_padding() -> None:
    formatter = LineFormatter(clock=lambda: datetime(2025, 1, 2, 3, 4, 5))
    assert formatter.format(Severity.DEBUG, "x") == "02/01/2025 03:04:05 Debug x"


def test_default_clock_uses_local_time() -> None:
    line = LineFormatter().format(Severity.ERROR, "boom")
    date, time, label, message = line.split(" ", 3)
    datetime.strptime(f"{date} {time}", LineFormatter.TIMESTAMP_FORMAT)
    assert label == "Error"
    assert message == "boom"
