# logline/logger/__init__.py
"""
Line formatter, initialization and emission helpers.
"""

from .paths import *
from .styles import *
from .formatter import *
from .initialize import *
from .emit import *
from .structlog_config import *
