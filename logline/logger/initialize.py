# logline/logger/initialize.py
"""
Logger initialization.

init_logger() wires a LoggerConfig into the stdlib logging module. It is
meant to be called once, at application startup, before other threads log.

Usage:
    from logline import LoggerConfig, LoggerPreset, init_logger

    init_logger(LoggerConfig(minimum_level="debug", path_depth=2))
"""

import inspect
import logging
import sys
import threading
from typing import Optional, Set, TextIO

from logline.config import OFF_LEVEL, LoggerConfig, LogLevel, get_env
from .formatter import LineFormatter
from .styles import Styler, default_styler


class _LoggerState:
    """
    Process-wide record of what init_logger installed.

    Lets a repeated call replace the previous installation instead of
    stacking handlers, and lets tests undo it.
    """

    _instance: Optional["_LoggerState"] = None
    _lock = threading.Lock()

    _handler: Optional[logging.Handler]
    _project_loggers: Set[str]
    _saved_root_level: Optional[int]
    _level: Optional[LogLevel]

    def __new__(cls) -> "_LoggerState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._handler = None
                    instance._project_loggers = set()
                    instance._saved_root_level = None
                    instance._level = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        return self._handler is not None

    @property
    def level(self) -> Optional[LogLevel]:
        return self._level

    def install(
        self,
        handler: logging.Handler,
        level: LogLevel,
        restrict_to_project: bool,
        project_name: str,
    ) -> None:
        """Attach the handler and apply thresholds, replacing any earlier install."""
        root = logging.getLogger()
        with self._lock:
            if self._handler is None:
                self._saved_root_level = root.level
            else:
                root.removeHandler(self._handler)
            self._clear_project_levels()

            if restrict_to_project:
                root.setLevel(OFF_LEVEL)
                logging.getLogger(project_name).setLevel(level.level)
                self._project_loggers.add(project_name)
                # Drops dependency loggers that set their own level
                handler.addFilter(logging.Filter(project_name))
            else:
                root.setLevel(level.level)

            root.addHandler(handler)
            self._handler = handler
            self._level = level

    def reset(self) -> None:
        """Remove the installed handler and restore the root level."""
        root = logging.getLogger()
        with self._lock:
            if self._handler is not None:
                root.removeHandler(self._handler)
                self._handler.close()
            if self._saved_root_level is not None:
                root.setLevel(self._saved_root_level)
            self._clear_project_levels()
            self._handler = None
            self._saved_root_level = None
            self._level = None

    def _clear_project_levels(self) -> None:
        for name in self._project_loggers:
            logging.getLogger(name).setLevel(logging.NOTSET)
        self._project_loggers.clear()


_state = _LoggerState()


def resolve_level(level: str, env_key: str) -> LogLevel:
    """
    Work out the threshold to install.

    A non-empty environment variable `env_key` wins over `level`. Unknown
    names fall back to INFO after printing a warning to stderr; logging is
    not usable yet, so the warning bypasses it.

    Args:
        level: Configured level name
        env_key: Name of the overriding environment variable

    Returns:
        Parsed LogLevel
    """
    raw = (get_env(env_key) or level).lower()
    try:
        return LogLevel.parse(raw)
    except ValueError:
        print(
            f"Invalid log level '{raw}', using default level Info",
            file=sys.stderr,
        )
        return LogLevel.INFO


def _caller_package() -> str:
    """Top-level package name of the module that called init_logger."""
    frame = inspect.currentframe()
    # _caller_package -> init_logger -> caller
    caller_frame = frame.f_back.f_back if frame and frame.f_back else None
    if caller_frame is None:
        return "__main__"
    module_name = caller_frame.f_globals.get("__name__") or "__main__"
    return module_name.split(".")[0]


def init_logger(
    config: Optional[LoggerConfig] = None,
    *,
    stream: Optional[TextIO] = None,
    styler: Optional[Styler] = None,
) -> None:
    """
    Install the line formatter and level thresholds on the root logger.

    Call at most once per process. A second call replaces the first
    installation, but concurrent logging during the swap is not supported.

    Args:
        config: Logger configuration, defaults to LoggerConfig()
        stream: Sink for rendered lines (default: sys.stderr)
        styler: Style provider; chosen from config.colors when omitted
    """
    config = config or LoggerConfig()
    project_name = config.project_name or _caller_package()
    level = resolve_level(config.minimum_level, config.env_key)

    handler = logging.StreamHandler(stream)
    # Messages bring their own line endings
    handler.terminator = ""
    handler.setFormatter(
        LineFormatter(
            config,
            project_name=project_name,
            styler=styler or default_styler(handler.stream, config.colors),
        )
    )

    _state.install(
        handler,
        level=level,
        restrict_to_project=config.restrict_to_project,
        project_name=project_name,
    )


def is_configured() -> bool:
    """Check if init_logger has run in this process."""
    return _state.is_configured


def installed_level() -> Optional[LogLevel]:
    """Threshold installed by the last init_logger call, if any."""
    return _state.level


def reset_logger() -> None:
    """Undo init_logger. Mostly useful in tests."""
    _state.reset()


__all__ = [
    "init_logger",
    "resolve_level",
    "is_configured",
    "installed_level",
    "reset_logger",
]
