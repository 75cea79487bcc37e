# logline/logger/emit.py
"""
Per-severity emission helpers.

Each helper logs through the logger named after the calling module, so the
target shown on the line is the caller's __name__ and the file/line are the
caller's too.

Usage:
    from logline import info, info_raw

    info("loaded %d rows", 42)      # "... loaded 42 rows\n"
    info_raw("progress: ")          # no newline appended
"""

import inspect
import logging
from typing import Any

from logline.config import LogLevel

_TERMINATOR = "\n"

# helper -> _emit -> Logger.log: skip up to the helper's caller
_STACKLEVEL = 3


def _caller_module() -> str:
    frame = inspect.currentframe()
    # _caller_module -> _emit -> helper -> caller
    try:
        caller_frame = frame.f_back.f_back.f_back  # type: ignore[union-attr]
    except AttributeError:
        return "unknown"
    if caller_frame is None:
        return "unknown"
    return caller_frame.f_globals.get("__name__", "unknown")


def _emit(level: LogLevel, terminator: str, msg: str, args: Any, **kwargs: Any) -> None:
    logger = logging.getLogger(_caller_module())
    logger.log(level.level, f"{msg}{terminator}", *args, stacklevel=_STACKLEVEL, **kwargs)


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log an error line."""
    _emit(LogLevel.ERROR, _TERMINATOR, msg, args, **kwargs)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log a warning line."""
    _emit(LogLevel.WARN, _TERMINATOR, msg, args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log an info line."""
    _emit(LogLevel.INFO, _TERMINATOR, msg, args, **kwargs)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log a debug line."""
    _emit(LogLevel.DEBUG, _TERMINATOR, msg, args, **kwargs)


def trace(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log a trace line."""
    _emit(LogLevel.TRACE, _TERMINATOR, msg, args, **kwargs)


def error_raw(msg: str, *args: Any, **kwargs: Any) -> None:
    """Like error(), without the trailing newline."""
    _emit(LogLevel.ERROR, "", msg, args, **kwargs)


def warn_raw(msg: str, *args: Any, **kwargs: Any) -> None:
    """Like warn(), without the trailing newline."""
    _emit(LogLevel.WARN, "", msg, args, **kwargs)


def info_raw(msg: str, *args: Any, **kwargs: Any) -> None:
    """Like info(), without the trailing newline."""
    _emit(LogLevel.INFO, "", msg, args, **kwargs)


def debug_raw(msg: str, *args: Any, **kwargs: Any) -> None:
    """Like debug(), without the trailing newline."""
    _emit(LogLevel.DEBUG, "", msg, args, **kwargs)


def trace_raw(msg: str, *args: Any, **kwargs: Any) -> None:
    """Like trace(), without the trailing newline."""
    _emit(LogLevel.TRACE, "", msg, args, **kwargs)


__all__ = [
    "error",
    "warn",
    "info",
    "debug",
    "trace",
    "error_raw",
    "warn_raw",
    "info_raw",
    "debug_raw",
    "trace_raw",
]
