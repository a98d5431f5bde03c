"""
Logging for appconsole.

Built on the standard ``logging`` module: a ``Logger`` subclass that keeps
``extra`` fields structured, a formatter that renders them, and a factory that
wires both to a stream handler.
"""

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import TRACE, Logger

__all__ = [
    "TRACE",
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
