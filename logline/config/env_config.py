# logline/config/env_config.py
import os
from typing import Optional
from logline.errors import ConfigurationError

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default
    """
    return os.getenv(name, default=default)


def get_env_bool(name: str) -> Optional[bool]:
    """
    Get a boolean env variable, None when unset or empty.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    value = get_env(name)
    if not value:
        return None

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ConfigurationError(
        f"{name} must be one of [{', '.join(_TRUE_VALUES + _FALSE_VALUES)}], "
        f"got '{value}'"
    )


def get_env_int(name: str) -> Optional[int]:
    """
    Get a non-negative integer env variable, None when unset or empty.

    Raises:
        ConfigurationError: If the value is not a non-negative integer
    """
    value = get_env(name)
    if not value:
        return None

    try:
        number = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be a non-negative integer, got '{value}'"
        ) from exc

    if number < 0:
        raise ConfigurationError(
            f"{name} must be a non-negative integer, got '{value}'"
        )
    return number


__all__ = ["get_env", "get_env_bool", "get_env_int"]
