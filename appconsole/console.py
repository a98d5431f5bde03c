"""
Terminal output for the process boundary.

Wraps ``rich.console.Console`` and honours ``NO_COLOR`` / ``FORCE_COLOR``.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

CONSOLE_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
}


def should_use_color(file: IO[str]) -> bool:
    """Determine if color output should be used."""
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return file.isatty()


class Console:
    """
    Console writing to stderr by default.

    Example:
        console = Console()
        console.print_error("missing argument 'name'")
    """

    def __init__(
        self,
        *,
        no_color: bool | None = None,
        quiet: bool = False,
        file: IO[str] | None = None,
    ):
        self._file = file or sys.stderr
        self._quiet = quiet
        if no_color is None:
            no_color = not should_use_color(self._file)
        self._rich_console = RichConsole(
            file=self._file,
            no_color=no_color,
            theme=Theme(CONSOLE_THEME),
            highlight=False,
            soft_wrap=True,
        )

    @property
    def quiet(self) -> bool:
        return self._quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print rich markup."""
        if self._quiet:
            return
        self._rich_console.print(*args, **kwargs)

    def print_text(self, text: str) -> None:
        """Print text verbatim, without markup interpretation."""
        self.print(escape(text))

    def print_error(self, message: str) -> None:
        """Print an error message; never suppressed by quiet mode."""
        self._rich_console.print(f"[error]Error:[/error] {escape(message)}")

    def print_warning(self, message: str) -> None:
        self.print(f"[warning]Warning:[/warning] {escape(message)}")
