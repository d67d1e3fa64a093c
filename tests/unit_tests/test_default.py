from __future__ import annotations

import pytest

from rotolog import default
from rotolog.default import DefaultLoggerRegistry
from rotolog.levels import Severity
from rotolog.sinks import ConsoleSink


class TestInitialState:
    def test_starts_with_console_at_info(self) -> None:
        logger = default.get_logger()
        assert isinstance(logger, ConsoleSink)
        assert default.get_level() is Severity.INFO

    def test_module_calls_reach_console(self, capsys) -> None:
        default.debug("hidden")
        default.info("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert out.endswith(" Info shown\n")


class TestReplacement:
    def test_set_logger_routes_calls(self, recorder) -> None:
        default.set_logger(recorder)
        default.debug("d")
        default.info("i")
        default.warn("w")
        default.error("e")
        default.log(Severity.FATAL, "f")
        assert [level for _, level, _ in recorder.calls] == list(Severity)
        assert default.get_logger() is recorder

    def test_level_passes_through(self, recorder) -> None:
        default.set_logger(recorder)
        default.set_level(Severity.ERROR)
        assert recorder.level is Severity.ERROR
        assert default.get_level() is Severity.ERROR

    def test_fatal_logs_then_exits(self, recorder) -> None:
        default.set_logger(recorder)
        with pytest.raises(SystemExit):
            default.fatal("bye")
        assert recorder.calls == [("rec", Severity.FATAL, "bye")]
        assert recorder.flushed == 1

    def test_reset_restores_console(self, recorder) -> None:
        default.set_logger(recorder)
        default.reset()
        assert isinstance(default.get_logger(), ConsoleSink)
        assert not recorder.closed


class TestRegistryInstance:
    def test_independent_registries(self, make_recorder) -> None:
        first = DefaultLoggerRegistry(make_recorder("one"))
        second = DefaultLoggerRegistry()
        first.info("x")
        assert first.logger.calls == [("one", Severity.INFO, "x")]
        assert isinstance(second.logger, ConsoleSink)

    def test_level_property(self, recorder) -> None:
        registry = DefaultLoggerRegistry(recorder)
        registry.level = Severity.WARN
        assert registry.level is Severity.WARN

    def test_log_fatal_and_exit_uses_code(self, recorder) -> None:
        registry = DefaultLoggerRegistry(recorder)
        with pytest.raises(SystemExit) as exc_info:
            registry.log_fatal_and_exit("bye", exit_code=4)
        assert exc_info.value.code == 4
