"""
Exceptions raised by the logging system.
"""


class LogError(Exception):
    """Base exception for logging errors."""

    pass


class InvalidLogLevelError(LogError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: str):
        self.level = level
        super().__init__(f"Invalid log level: {level}")
