# logline/errors/__init__.py
from .config_error import ConfigurationError

__all__ = ["ConfigurationError"]
