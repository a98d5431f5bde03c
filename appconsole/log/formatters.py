"""
Log formatter producing ``[time] [L] message [key:value]`` lines.
"""

import logging
import time
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_fields(fields: dict[str, Any], colors: bool) -> str:
    """Render extra fields as ``[key:value]`` groups."""
    parts = []
    for key, value in fields.items():
        if isinstance(value, (list, tuple)):
            value = ",".join(map(str, value))
        if colors:
            parts.append(
                ColorManager.colorize(f"{key}:", ColorManager.GRAY) + f"{value}"
            )
        else:
            parts.append(f"{key}:{value}")
    return " ".join(f"[{part}]" for part in parts)


class LogFormatter(logging.Formatter):
    """
    Formatter with level colors and structured field rendering.

    Exceptions are appended below the message by the base class.
    """

    def __init__(self, config: LogConfig):
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = time.strftime("%H:%M:%S", self.converter(record.created))
        return f"{stamp},{int(record.msecs):03d}"

    def formatMessage(self, record: logging.LogRecord) -> str:
        colors = self._config.colors
        letter = record.levelname[:1]
        color = ColorManager.get_color_for_level(record.levelno)
        if colors and color is not None:
            letter = ColorManager.colorize(letter, color, bold=True)

        line = f"[{record.asctime}] [{letter}] {record.message}"
        fields = getattr(record, EXTRA_ATTR, None)
        if fields:
            line = f"{line} {_format_fields(fields, colors)}"
        return line
