# logline/logger/formatter.py
"""
Line formatter installed on the root handler.

Renders one record as:

    FULL:     <timestamp> <level> [<thread>] [<qualifier>:<line>] <message>
    THREAD:   <timestamp> <level> [<thread>] <message>
    MINIMAL:  [ <timestamp> <level>] <message>

No terminator is appended; messages carry their own.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from logline.config import LoggerConfig, LoggerPreset, LogLevel
from .paths import UNKNOWN, project_relative_path
from .styles import PlainStyler, StyleClass, Styler

MAIN_THREAD_NAMES = frozenset({"main", "MainThread"})

# Record attributes that override pathname/lineno, set by the structlog bridge
CALLSITE_PATHNAME = "callsite_pathname"
CALLSITE_LINENO = "callsite_lineno"

LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN ",
    LogLevel.INFO: "INFO ",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}

_LEVEL_STYLES: Dict[LogLevel, StyleClass] = {
    LogLevel.ERROR: StyleClass.ERROR,
    LogLevel.WARN: StyleClass.WARN,
    LogLevel.INFO: StyleClass.INFO,
    LogLevel.DEBUG: StyleClass.DEBUG,
    LogLevel.TRACE: StyleClass.TRACE,
}

PRESET_TEMPLATES: Dict[LoggerPreset, str] = {
    LoggerPreset.FULL: "{timestamp} {level} [{thread}] [{qualifier}:{line}] {message}",
    LoggerPreset.THREAD_ONLY: "{timestamp} {level} [{thread}] {message}",
    LoggerPreset.MINIMAL: "[ {timestamp} {level}] {message}",
}


class LineFormatter(logging.Formatter):
    """
    Formats records into a single styled line.

    Configuration values are copied at construction, so one instance can be
    shared by every thread that logs.

    Args:
        config: Logger configuration
        project_name: Logger name prefix treated as first-party
        styler: Style provider, plain text when omitted
        clock: Returns the time stamped on each line
    """

    def __init__(
        self,
        config: LoggerConfig,
        project_name: str,
        styler: Optional[Styler] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self._path_depth = config.path_depth
        self._time_pattern = config.time_pattern
        self._template = PRESET_TEMPLATES[config.preset]
        self._project_name = project_name
        self._styler: Styler = styler or PlainStyler()
        self._clock = clock

    def format(self, record: logging.LogRecord) -> str:
        severity = LogLevel.from_levelno(record.levelno)
        level = self._styler.style(LEVEL_LABELS[severity], _LEVEL_STYLES[severity])

        timestamp = self._styler.style(
            self._clock().strftime(self._time_pattern), StyleClass.TIMESTAMP
        )
        lineno = getattr(record, CALLSITE_LINENO, None) or record.lineno or 0
        line = self._styler.style(str(lineno), StyleClass.LOCATION)

        return self._template.format(
            timestamp=timestamp,
            level=level,
            thread=self._thread_label(record),
            qualifier=self._qualifier(record),
            line=line,
            message=self._message(record),
        )

    def _message(self, record: logging.LogRecord) -> str:
        """
        Message plus any traceback and stack, keeping the message's own
        trailing newline at the very end.
        """
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)

        details = []
        if record.exc_text:
            details.append(record.exc_text)
        if record.stack_info:
            details.append(self.formatStack(record.stack_info))
        if not details:
            return message

        terminator = ""
        if message.endswith("\n"):
            message, terminator = message[:-1], "\n"
        return "\n".join([message, *details]) + terminator

    def _thread_label(self, record: logging.LogRecord) -> str:
        name = record.threadName or UNKNOWN
        style_class = (
            StyleClass.MAIN_THREAD if name in MAIN_THREAD_NAMES else StyleClass.THREAD
        )
        return self._styler.style(name, style_class)

    def _qualifier(self, record: logging.LogRecord) -> str:
        pathname = getattr(record, CALLSITE_PATHNAME, None) or record.pathname
        path = self._styler.style(
            project_relative_path(pathname, self._path_depth),
            StyleClass.LOCATION,
        )
        if record.name.startswith(self._project_name):
            return path
        target = self._styler.style(record.name, StyleClass.LOCATION)
        return f"[{target}] {path}"


__all__ = [
    "MAIN_THREAD_NAMES",
    "LEVEL_LABELS",
    "PRESET_TEMPLATES",
    "CALLSITE_PATHNAME",
    "CALLSITE_LINENO",
    "LineFormatter",
]
