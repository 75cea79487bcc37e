# logline/config/logger_config.py
"""
Logger configuration.

LoggerConfig is a frozen model: once handed to init_logger its values are
copied into the formatter and never change.
"""

from typing import Any, Dict, List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from logline.errors import ConfigurationError
from .config_types import LoggerPreset
from .env_config import get_env, get_env_bool, get_env_int

_default_log_level_env_key = "LOG_LEVEL"
_default_env_prefix = "LOG_"
_default_time_pattern = "%Y-%m-%d %H:%M:%S"


class LoggerConfig(BaseModel):
    """
    Logger builder options.

    The level string is deliberately not validated here. init_logger parses
    it and falls back to INFO with a warning when it is unknown.
    """

    minimum_level: str = Field(default="info")
    restrict_to_project: bool = Field(
        default=False,
        description="Emit only records from the project's own loggers",
    )
    path_depth: int = Field(
        default=0, ge=0, description="Trailing path components shown, 0 = all"
    )
    time_pattern: str = Field(default=_default_time_pattern)
    preset: LoggerPreset = Field(default=LoggerPreset.FULL)

    project_name: Optional[str] = Field(
        default=None,
        description="Top-level logger name of the host; None = caller's package",
    )
    env_key: str = Field(default=_default_log_level_env_key, min_length=1)
    colors: Optional[bool] = Field(
        default=None, description="Force styling on/off, None = auto-detect"
    )

    model_config = {"frozen": True}


def _parse_preset(name: str, value: str) -> LoggerPreset:
    try:
        return LoggerPreset(value.strip().lower())
    except ValueError as exc:
        valid_presets = ", ".join(preset.value for preset in LoggerPreset)
        raise ConfigurationError(
            f"{name} must be one of [{valid_presets}], got '{value}'"
        ) from exc


def load_logger_config(
    env_file: Optional[str] = None,
    prefix: str = _default_env_prefix,
) -> LoggerConfig:
    """
    Load logger configuration from environment.

    Args:
        env_file: Optional .env file loaded before reading the environment
        prefix: Prefix of the environment variable names

    Environment variables (all optional):
    - LOG_LEVEL: Minimum level (not validated until init_logger)
    - LOG_PROJECT_ONLY: Only emit the project's own records
    - LOG_PATH_DEPTH: Trailing path components shown
    - LOG_TIME_FORMAT: strftime pattern
    - LOG_PRESET: full, thread or minimal
    - LOG_PROJECT_NAME: Project logger name
    - LOG_COLORS: Force styling on or off

    Returns:
        LoggerConfig instance

    Raises:
        ConfigurationError: If a variable is malformed
    """
    if env_file is not None:
        load_dotenv(env_file)

    values: Dict[str, Any] = {}

    level = get_env(f"{prefix}LEVEL")
    if level:
        values["minimum_level"] = level

    restrict = get_env_bool(f"{prefix}PROJECT_ONLY")
    if restrict is not None:
        values["restrict_to_project"] = restrict

    depth = get_env_int(f"{prefix}PATH_DEPTH")
    if depth is not None:
        values["path_depth"] = depth

    time_pattern = get_env(f"{prefix}TIME_FORMAT")
    if time_pattern:
        values["time_pattern"] = time_pattern

    preset = get_env(f"{prefix}PRESET")
    if preset:
        values["preset"] = _parse_preset(f"{prefix}PRESET", preset)

    project_name = get_env(f"{prefix}PROJECT_NAME")
    if project_name:
        values["project_name"] = project_name

    colors = get_env_bool(f"{prefix}COLORS")
    if colors is not None:
        values["colors"] = colors

    try:
        return LoggerConfig(env_key=f"{prefix}LEVEL", **values)
    except ValidationError as e:
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{field}: {msg}")

        raise ConfigurationError(
            "Logger configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        ) from e


__all__ = [
    "_default_log_level_env_key",
    "LoggerConfig",
    "load_logger_config",
]
