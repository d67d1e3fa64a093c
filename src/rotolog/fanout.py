"""
Fan one log call out to several loggers.
"""

from __future__ import annotations

from typing import Iterable

from .exceptions import FanoutError
from .levels import Severity
from .sinks import FATAL_EXIT_CODE, BaseLogger, terminate


class FanoutLogger(BaseLogger):
    """Forwards every call to each child logger in insertion order.

    The fanout's own ``level`` is kept for the contract but never filters;
    children apply their own thresholds. A failing child does not stop
    dispatch: all children are called, then a ``FanoutError`` is raised with
    every failure collected.
    """

    def __init__(
        self,
        level: Severity = Severity.INFO,
        loggers: Iterable[BaseLogger] = (),
    ) -> None:
        super().__init__(level)
        self._loggers: list[BaseLogger] = list(loggers)

    @property
    def loggers(self) -> tuple[BaseLogger, ...]:
        return tuple(self._loggers)

    def add(self, logger: BaseLogger) -> None:
        self._loggers.append(logger)

    def log(self, level: Severity, message: str) -> None:
        self._each(lambda logger: logger.log(level, message))

    def log_fatal_and_exit(self, message: str, exit_code: int = FATAL_EXIT_CODE) -> None:
        """Write the fatal line to every child, then terminate.

        The process ends even when children fail; their ``FanoutError`` is
        dropped because nothing is left to handle it.
        """
        try:
            self.log(Severity.FATAL, message)
            self.flush()
        finally:
            terminate(exit_code)

    def flush(self) -> None:
        self._each(lambda logger: logger.flush())

    def close(self) -> None:
        self._each(lambda logger: logger.close())

    def _each(self, call) -> None:
        errors: list[tuple[BaseLogger, BaseException]] = []
        for logger in self._loggers:
            try:
                call(logger)
            except Exception as exc:
                errors.append((logger, exc))
        if errors:
            raise FanoutError(errors) from errors[0][1]
