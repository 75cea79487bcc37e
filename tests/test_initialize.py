"""Tests for logline.logger.initialize module."""

from __future__ import annotations

import io
import logging
import threading

import pytest

from logline.config import OFF_LEVEL, LoggerConfig, LoggerPreset, LogLevel
from logline.logger import (
    PlainStyler,
    init_logger,
    installed_level,
    is_configured,
    reset_logger,
    resolve_level,
)


def _install(sink: io.StringIO, **options) -> None:
    options.setdefault("project_name", "proj")
    init_logger(LoggerConfig(**options), stream=sink, styler=PlainStyler())


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("error", LogLevel.ERROR),
            ("WARN", LogLevel.WARN),
            ("Info", LogLevel.INFO),
            ("debug", LogLevel.DEBUG),
            ("trace", LogLevel.TRACE),
            ("off", LogLevel.OFF),
        ],
    )
    def test_known_names(self, name, expected, capsys) -> None:
        assert resolve_level(name, "LOG_LEVEL") is expected
        assert capsys.readouterr().err == ""

    @pytest.mark.parametrize("name", ["verbose", "warning", "LOUD", "5"])
    def test_unknown_name_falls_back_to_info(self, name, capsys) -> None:
        assert resolve_level(name, "LOG_LEVEL") is LogLevel.INFO

        err = capsys.readouterr().err
        assert err == f"Invalid log level '{name.lower()}', using default level Info\n"

    def test_environment_overrides_configured_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "trace")
        assert resolve_level("error", "LOG_LEVEL") is LogLevel.TRACE

    def test_empty_environment_value_is_ignored(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "")
        assert resolve_level("debug", "LOG_LEVEL") is LogLevel.DEBUG

    def test_custom_env_key(self, monkeypatch) -> None:
        monkeypatch.setenv("MYAPP_LOG", "warn")
        assert resolve_level("info", "MYAPP_LOG") is LogLevel.WARN
        assert resolve_level("info", "LOG_LEVEL") is LogLevel.INFO


class TestInitLogger:
    def test_installs_formatter_on_root(self, sink) -> None:
        _install(sink, path_depth=2, preset=LoggerPreset.THREAD_ONLY)

        logging.getLogger("proj.mod").info("hello\n")

        assert is_configured()
        assert sink.getvalue().endswith(" INFO  [MainThread] hello\n")

    def test_threshold_applies_to_root(self, sink) -> None:
        _install(sink, minimum_level="warn", preset=LoggerPreset.MINIMAL)

        logging.getLogger("proj").info("quiet\n")
        logging.getLogger("proj").warning("loud\n")

        assert "quiet" not in sink.getvalue()
        assert "WARN ] loud\n" in sink.getvalue()
        assert logging.getLogger().level == logging.WARNING

    def test_dependencies_visible_without_restriction(self, sink) -> None:
        _install(sink, minimum_level="warn", path_depth=1)

        logging.getLogger("other_crate.x").warning("from a dependency\n")

        assert "[[other_crate.x] test_initialize.py:" in sink.getvalue()

    def test_restrict_suppresses_dependencies(self, sink) -> None:
        _install(sink, minimum_level="warn", restrict_to_project=True)

        logging.getLogger("other_crate.x").warning("dependency\n")
        logging.getLogger("proj.mod").warning("project\n")
        logging.getLogger("proj.mod").info("too detailed\n")

        output = sink.getvalue()
        assert "dependency" not in output
        assert "project\n" in output
        assert "too detailed" not in output
        assert logging.getLogger().level == OFF_LEVEL
        assert logging.getLogger("proj").level == logging.WARNING

    def test_restrict_ignores_dependency_with_own_level(self, sink) -> None:
        dependency = logging.getLogger("chatty_dependency.pool")
        dependency.setLevel(logging.DEBUG)
        try:
            _install(sink, minimum_level="warn", restrict_to_project=True)

            dependency.warning("dependency\n")
            logging.getLogger("proj.mod").warning("project\n")
        finally:
            dependency.setLevel(logging.NOTSET)

        assert "dependency" not in sink.getvalue()
        assert "project\n" in sink.getvalue()

    def test_trace_level(self, sink) -> None:
        _install(sink, minimum_level="trace", preset=LoggerPreset.MINIMAL)

        logging.getLogger("proj").log(LogLevel.TRACE.level, "fine grained\n")

        assert "TRACE] fine grained\n" in sink.getvalue()

    def test_off_silences_everything(self, sink) -> None:
        _install(sink, minimum_level="off")

        logging.getLogger("proj").error("nothing\n")

        assert sink.getvalue() == ""

    def test_invalid_level_warns_once_and_uses_info(self, sink, capsys) -> None:
        _install(sink, minimum_level="verbose", preset=LoggerPreset.MINIMAL)

        logging.getLogger("proj").debug("hidden\n")
        logging.getLogger("proj").info("shown\n")

        err = capsys.readouterr().err
        assert err.count("Invalid log level") == 1
        assert "'verbose'" in err
        assert installed_level() is LogLevel.INFO
        assert "hidden" not in sink.getvalue()
        assert "shown" in sink.getvalue()

    def test_environment_override(self, sink, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        _install(sink, minimum_level="debug")

        logging.getLogger("proj").warning("suppressed\n")
        logging.getLogger("proj").error("kept\n")

        assert installed_level() is LogLevel.ERROR
        assert "suppressed" not in sink.getvalue()
        assert "kept" in sink.getvalue()

    def test_project_name_defaults_to_callers_package(self, sink) -> None:
        init_logger(LoggerConfig(path_depth=1), stream=sink, styler=PlainStyler())
        package = __name__.split(".")[0]

        logging.getLogger(f"{package}.sub").info("mine\n")

        assert f"[{package}.sub]" not in sink.getvalue()
        assert "[test_initialize.py:" in sink.getvalue()

    def test_records_from_other_threads(self, sink) -> None:
        _install(sink, preset=LoggerPreset.THREAD_ONLY)

        worker = threading.Thread(
            target=lambda: logging.getLogger("proj").info("in worker\n"),
            name="worker-7",
        )
        worker.start()
        worker.join()

        assert "[worker-7] in worker\n" in sink.getvalue()

    def test_colors_flag_selects_styler(self) -> None:
        plain, colored = io.StringIO(), io.StringIO()

        init_logger(LoggerConfig(project_name="proj", colors=False), stream=plain)
        logging.getLogger("proj").info("x\n")
        init_logger(LoggerConfig(project_name="proj", colors=True), stream=colored)
        logging.getLogger("proj").info("x\n")

        assert "\x1b[" not in plain.getvalue()
        assert "\x1b[" in colored.getvalue()

    def test_non_terminal_stream_is_not_styled(self, sink) -> None:
        init_logger(LoggerConfig(project_name="proj"), stream=sink)
        logging.getLogger("proj").info("x\n")

        assert "\x1b[" not in sink.getvalue()


class TestReinitialization:
    def test_last_call_wins(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        _install(first, minimum_level="info", restrict_to_project=True)
        _install(second, minimum_level="info")

        logging.getLogger("other_crate").info("once\n")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
        assert logging.getLogger("proj").level == logging.NOTSET

    def test_reset_restores_root(self, sink) -> None:
        root = logging.getLogger()
        before = root.level
        handlers_before = list(root.handlers)

        _install(sink, minimum_level="trace", restrict_to_project=True)
        reset_logger()

        assert not is_configured()
        assert root.level == before
        assert root.handlers == handlers_before
        assert logging.getLogger("proj").level == logging.NOTSET
