"""
Decorator-driven command-line applications.

Classes decorated with ``@console`` and methods decorated with ``@command``
become commands and command groups. Parsing is done by argparse, one parser
per command node; dispatch results are normalised into ``ActionResponse``.
"""

from importlib.metadata import PackageNotFoundError, version

from .args import DefaultsHelpFormatter
from .bootstrap import BootstrapConsole
from .config import ConsoleConfig
from .console import Console
from .container import Container, InstanceContainer
from .decorators import command, console, option
from .descriptors import CommandDescriptor, GroupDescriptor, OptionDescriptor
from .errors import (
    ConfigurationError,
    ConsoleError,
    DupCommandError,
    HelpDisplayed,
    InvalidArgumentError,
    MissingArgumentError,
    ParserError,
    UnknownCommandError,
)
from .formatting import format_response
from .handler import ActionResponse, create_handler
from .parser import CommandNode
from .registry import CommandRegistry
from .scanner import ConsoleScanner
from .service import ConsoleService

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("appconsole")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Decorators
    "command",
    "console",
    "option",
    # Descriptors
    "CommandDescriptor",
    "GroupDescriptor",
    "OptionDescriptor",
    # Core
    "ActionResponse",
    "BootstrapConsole",
    "CommandNode",
    "CommandRegistry",
    "ConsoleScanner",
    "ConsoleService",
    "create_handler",
    "format_response",
    # Configuration and wiring
    "Console",
    "ConsoleConfig",
    "Container",
    "DefaultsHelpFormatter",
    "InstanceContainer",
    # Errors
    "ConfigurationError",
    "ConsoleError",
    "DupCommandError",
    "HelpDisplayed",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ParserError",
    "UnknownCommandError",
]
