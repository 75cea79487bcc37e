"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import io
import logging

import pytest

from logline.logger import reset_logger
from logline.logger.structlog_config import reset_structlog

_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_PROJECT_ONLY",
    "LOG_PATH_DEPTH",
    "LOG_TIME_FORMAT",
    "LOG_PRESET",
    "LOG_PROJECT_NAME",
    "LOG_COLORS",
    "NO_COLOR",
    "FORCE_COLOR",
)



@pytest.fixture(autouse=True)
def clean_logging(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the environment and from earlier installs."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logger()
    reset_structlog()


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_record():
    """Build a LogRecord the way Logger.makeRecord would."""

    def _make(
        msg: str = "hello",
        name: str = "proj.mod",
        level: int = logging.INFO,
        pathname: str | None = "/home/u/proj/src/mod/file.py",
        lineno: int | None = 42,
        thread_name: str | None = "MainThread",
        args: tuple = (),
        exc_info=None,
    ) -> logging.LogRecord:
        record = logging.LogRecord(
            name, level, pathname or "", lineno or 0, msg, args, exc_info
        )
        record.pathname = pathname
        record.lineno = lineno
        record.threadName = thread_name
        return record

    return _make
