"""
Interceptors for capturing standard library logs.
"""

from __future__ import annotations

import logging
from typing import Any

from . import default
from .levels import Severity
from .sinks import BaseLogger


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging records to a rotolog logger.
    Third-party libraries logging through ``logging`` end up in the same
    files and console as the application.
    """

    def __init__(self, logger: BaseLogger | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._target = logger
        self.setFormatter(logging.Formatter("[%(name)s] %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            target = self._target if self._target is not None else default.get_logger()
            target.log(Severity.from_stdlib(record.levelno), msg)
        except Exception:
            self.handleError(record)


def intercept_stdlib(logger: BaseLogger | None = None, level: Any = Severity.INFO) -> RedirectStdLibHandler:
    """Replace the root logger's handlers with a ``RedirectStdLibHandler``."""
    handler = RedirectStdLibHandler(logger)
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(Severity.parse(level).to_stdlib())
    root_logger.addHandler(handler)
    return handler
