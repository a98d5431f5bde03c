"""
Error classes for the appconsole package.

Configuration errors are raised eagerly while commands are being registered.
Parser errors are raised while argv is being dispatched and carry an exit code
plus a stable ``code`` string so callers can classify them without parsing
messages.
"""

from typing import Any


class ConsoleError(Exception):
    """Base exception for appconsole package."""

    pass


class ConfigurationError(ConsoleError):
    """Raised when commands or groups are declared inconsistently."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class DupCommandError(ConfigurationError):
    """Raised when a sibling command already uses a name or alias."""

    def __init__(self, name: str, parent: Any = None) -> None:
        self.name = name
        self.parent = parent
        where = f" under '{parent.name}'" if getattr(parent, "name", None) else ""
        super().__init__(f"Command '{name}' is already registered{where}")


class ParserError(ConsoleError):
    """
    Raised when argument parsing stops before a handler ran.

    Attributes:
        exit_code: Process exit code associated with the outcome
        code: Stable identifier of the outcome (e.g. ``console.missingArgument``)
        command: Command node that reported the error, when known
    """

    code = "console.error"

    def __init__(
        self,
        message: str,
        exit_code: int = 1,
        code: str | None = None,
        command: Any = None,
    ) -> None:
        self.exit_code = exit_code
        self.command = command
        if code is not None:
            self.code = code
        super().__init__(message)


class UnknownCommandError(ParserError):
    """Raised when a token does not name any command of the current node."""

    code = "console.unknownCommand"

    def __init__(self, token: str, command: Any = None) -> None:
        self.token = token
        super().__init__(f'"{token}" command not found', command=command)


class MissingArgumentError(ParserError):
    """Raised when a required positional argument or option was not given."""

    code = "console.missingArgument"


class InvalidArgumentError(ParserError):
    """Raised for any other argument the parser rejects."""

    code = "console.invalidArgument"


class HelpDisplayed(ParserError):
    """Signals that help was printed. Not a failure."""

    code = "console.helpDisplayed"

    def __init__(self, message: str = "(outputHelp)") -> None:
        super().__init__(message, exit_code=0)
