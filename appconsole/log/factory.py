"""
Factory for creating configured loggers.
"""

import logging
import sys
from typing import IO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig) -> Logger:
        """Create the root logger of the package (named ``/``)."""
        return LoggerFactory.create("/", config)

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing
        return None

    @staticmethod
    def configure(lg: Logger, config: LogConfig) -> Logger:
        """Apply level and formatting of ``config`` to an existing logger."""
        lg.disabled = config.level is False
        if config.level is not False:
            lg.setLevel(config.level)
        for handler in lg.handlers:
            handler.setFormatter(LogFormatter(config))
        return lg

    @staticmethod
    def create(name: str, config: LogConfig, stream: IO[str] | None = None) -> Logger:
        """
        Create a logger writing formatted records to ``stream`` (stderr).

        A logger already created under ``name`` is returned as is.

        Example:
            >>> lg = LoggerFactory.create("/console", LogConfig.from_params("debug"))
            >>> lg.debug("registered group", extra={"name": "db"})
            [12:34:56,789] [D] registered group [name:db]
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing is not None:
            return existing

        lg = Logger(name)
        lg.addHandler(logging.StreamHandler(stream or sys.stderr))
        LoggerFactory.configure(lg, config)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg
        lg.trace(
            "created logger",
            extra={"level": logging.getLevelName(lg.level), "colors": config.colors},
        )
        return lg
