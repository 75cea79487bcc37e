# logline/config/__init__.py
"""
Logger configuration types and loaders.
"""

from .config_types import *
from .env_config import *
from .logger_config import *
