# logline/__init__.py
"""
Configurable log-line formatting on top of the stdlib logging module.

Usage:
    from logline import LoggerConfig, LoggerPreset, init_logger, info

    init_logger(LoggerConfig(minimum_level="debug", preset=LoggerPreset.THREAD_ONLY))
    info("service started on port %d", 8080)
"""

from logline.errors import ConfigurationError
from logline.config import (
    LoggerConfig,
    LoggerPreset,
    LogLevel,
    load_logger_config,
)
from logline.logger import (
    LineFormatter,
    PlainStyler,
    RichStyler,
    StyleClass,
    configure_structlog,
    debug,
    debug_raw,
    error,
    error_raw,
    get_logger,
    info,
    info_raw,
    init_logger,
    is_configured,
    project_relative_path,
    reset_logger,
    trace,
    trace_raw,
    warn,
    warn_raw,
)

__all__ = [
    "ConfigurationError",
    "LoggerConfig",
    "LoggerPreset",
    "LogLevel",
    "load_logger_config",
    "LineFormatter",
    "PlainStyler",
    "RichStyler",
    "StyleClass",
    "configure_structlog",
    "get_logger",
    "init_logger",
    "is_configured",
    "project_relative_path",
    "reset_logger",
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
