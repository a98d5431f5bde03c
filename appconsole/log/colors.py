"""
ANSI color selection for log levels.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    RED = "\x1b[31"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    GRAY = "\x1b[38;5;244"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: GRAY,
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str | None:
        """Get color for log level, or None if the level has none."""
        return ColorManager.COLORS.get(level)

    @staticmethod
    def colorize(text: str, color: str, bold: bool = False) -> str:
        """
        Wrap text in a color sequence.

        Args:
            text: Text to colorize
            color: Color prefix without the trailing ``m`` (e.g. ColorManager.RED)
            bold: Render in bold

        Returns:
            Colored text terminated with a reset sequence
        """
        weight = ";1" if bold else ""
        return f"{color}{weight}m{text}{ColorManager.RESET}"
