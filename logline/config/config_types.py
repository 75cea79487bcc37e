# logline/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging

TRACE_LEVEL = 5
OFF_LEVEL = logging.CRITICAL + 10

logging.addLevelName(TRACE_LEVEL, "TRACE")


class LogLevel(str, Enum):
    """
    Supported severity thresholds.

    Inherits from str so members compare equal to their lower-case names.
    ERROR through TRACE are record severities; OFF only makes sense as a
    threshold and silences everything.

    Examples:
        >>> LogLevel.parse("WARN")
        <LogLevel.WARN: 'warn'>
        >>> LogLevel.WARN.level
        30
        >>> LogLevel.from_levelno(logging.CRITICAL)
        <LogLevel.ERROR: 'error'>
    """

    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return _NUMERIC_LEVELS[self]

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """
        Parse a level name, ignoring case.

        Raises:
            ValueError: If the name is not a known level
        """
        return cls(value.lower())

    @classmethod
    def from_levelno(cls, levelno: int) -> "LogLevel":
        """Map a record's numeric level onto one of the five severities."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


_NUMERIC_LEVELS = {
    LogLevel.OFF: OFF_LEVEL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE_LEVEL,
}


class LoggerPreset(str, Enum):
    """Line layouts."""

    FULL = "full"
    THREAD_ONLY = "thread"
    MINIMAL = "minimal"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "TRACE_LEVEL",
    "OFF_LEVEL",
    "LogLevel",
    "LoggerPreset",
]
