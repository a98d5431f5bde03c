"""
Configuration for the logging system.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """Immutable logger configuration."""

    level: int | bool = logging.INFO  # int for normal levels, False to disable logging
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            if level.isnumeric():
                return int(level)
            if level.lower() in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[level.lower()]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(cls, level: str | int | bool, colors: bool = True) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output
        """
        return cls(level=cls._resolve_level(level), colors=colors)

    @classmethod
    def from_config(
        cls, config_dict: Mapping[str, Any], section: str = "logging"
    ) -> LogConfig:
        """
        Create LogConfig from the given section of a configuration mapping.

        Missing sections fall back to defaults.
        """
        current: Any = config_dict
        for part in section.split("."):
            current = current.get(part, {}) if isinstance(current, Mapping) else {}
        if not isinstance(current, Mapping):
            current = {}

        return cls.from_params(
            level=current.get("level", "info"),
            colors=current.get("colors", True),
        )
