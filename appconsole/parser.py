"""
Command tree built on argparse.

Each :class:`CommandNode` owns one ``argparse.ArgumentParser`` for its own
positional arguments and options. Nesting is an explicit trie: a node with
children consumes the first non-option token, looks up the child by name or
alias and hands the remaining tokens over to it. argparse only ever parses
the tokens of a single node, so its own sub-parser machinery and its
``sys.exit`` calls are never involved.
"""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Awaitable, Callable
from typing import IO, Any, NoReturn

from .args import (
    ArgumentSpec,
    DefaultsHelpFormatter,
    option_to_argparse,
    parse_command_pattern,
    validate_command_name,
)
from .constants import HELP_COMMAND
from .descriptors import OptionDescriptor
from .errors import (
    ConfigurationError,
    DupCommandError,
    HelpDisplayed,
    InvalidArgumentError,
    MissingArgumentError,
    ParserError,
    UnknownCommandError,
)
from .handler import ActionResponse

ExitCallback = Callable[[ParserError], Any]


def _raise(error: ParserError) -> NoReturn:
    raise error


class _NodeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors and exits through its node."""

    def __init__(self, node: CommandNode, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._node = node

    def format_help(self) -> str:
        return super().format_help() + self._node.format_commands()

    def error(self, message: str) -> NoReturn:  # type: ignore[override]
        if message.startswith("the following arguments are required"):
            self._node._exit(
                MissingArgumentError(message, exit_code=2, command=self._node)
            )
        if message.startswith("unrecognized arguments"):
            self._node._exit(
                InvalidArgumentError(
                    message,
                    exit_code=2,
                    code="console.unknownOption",
                    command=self._node,
                )
            )
        self._node._exit(
            InvalidArgumentError(message, exit_code=2, command=self._node)
        )

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:  # type: ignore[override]
        if status == 0:
            self._node._exit(HelpDisplayed())
        self._node._exit(InvalidArgumentError(message or "", exit_code=status))


class CommandNode:
    """
    One command or group in the command tree.

    A node without a name is the root. Nodes are created through
    :meth:`add_command` on their parent, never directly for children.
    """

    def __init__(
        self,
        name: str | None = None,
        parent: CommandNode | None = None,
        prog: str | None = None,
        formatter_class: type[argparse.HelpFormatter] = DefaultsHelpFormatter,
    ) -> None:
        self._name = name
        self.parent = parent
        self._prog = prog
        self._aliases: list[str] = []
        self._description: str | None = None
        self._formatter_class = formatter_class
        self._action: Callable[..., Awaitable[ActionResponse]] | None = None
        self._exit_callback: ExitCallback | None = None
        self._opts: dict[str, Any] = {}
        self.arguments: list[ArgumentSpec] = []
        self.commands: list[CommandNode] = []
        self.parser = _NodeArgumentParser(
            self,
            prog=self.prog,
            formatter_class=formatter_class,
            allow_abbrev=False,
        )

    def __repr__(self) -> str:
        return f"CommandNode({self.prog!r})"

    # -- metadata ----------------------------------------------------------

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def aliases(self) -> list[str]:
        return list(self._aliases)

    @property
    def alias(self) -> str | None:
        """First alias, if any."""
        return self._aliases[0] if self._aliases else None

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def prog(self) -> str:
        """Full invocation name, e.g. ``"tool group command"``."""
        if self.parent is None:
            return self._prog or self._name or "cli"
        return f"{self.parent.prog} {self._name}"

    @prog.setter
    def prog(self, value: str) -> None:
        self._prog = value

    def set_description(self, description: str) -> CommandNode:
        self._description = description
        self.parser.description = description
        return self

    def add_alias(self, alias: str) -> CommandNode:
        """Add an alias; it must not clash with a sibling."""
        validate_command_name(alias)
        if self.parent is not None:
            self.parent._check_free(alias)
        self._aliases.append(alias)
        return self

    def matches(self, token: str) -> bool:
        return token == self._name or token in self._aliases

    # -- tree --------------------------------------------------------------

    def _check_free(self, name: str) -> None:
        if self.find_command(name) is not None:
            raise DupCommandError(name, self)

    def find_command(self, token: str) -> CommandNode | None:
        """Return the direct child named or aliased ``token``."""
        for command in self.commands:
            if command.matches(token):
                return command
        return None

    def resolve(self, tokens: list[str]) -> CommandNode:
        """Follow ``tokens`` down the tree as far as they name commands."""
        node = self
        for token in tokens:
            child = node.find_command(token)
            if child is None:
                break
            node = child
        return node

    def add_command(self, pattern: str) -> CommandNode:
        """
        Create a child from a ``"name <required> [optional]"`` pattern.

        Raises:
            ConfigurationError: If the pattern is malformed
            DupCommandError: If a sibling already uses the name
        """
        name, specs = parse_command_pattern(pattern)
        self._check_free(name)

        child = CommandNode(name, parent=self, formatter_class=self._formatter_class)
        for spec in specs:
            spec.add_to(child.parser)
        child.arguments = specs
        self.commands.append(child)
        return child

    def add_option(self, option: OptionDescriptor) -> CommandNode:
        args, kwargs = option_to_argparse(option)
        try:
            self.parser.add_argument(*args, **kwargs)
        except (argparse.ArgumentError, ValueError) as e:
            raise ConfigurationError(f"Invalid option '{option.flags}': {e}") from e
        return self

    def set_action(self, action: Callable[..., Awaitable[ActionResponse]]) -> CommandNode:
        self._action = action
        return self

    def opts(self) -> dict[str, Any]:
        """Options parsed during the last dispatch to this node."""
        return dict(self._opts)

    # -- exit handling -----------------------------------------------------

    def exit_override(self, callback: ExitCallback | None = None) -> CommandNode:
        """
        Route parser exits through ``callback`` instead of ``sys.exit``.

        Without a callback, the error is raised.
        """
        self._exit_callback = callback or _raise
        return self

    def _exit(self, error: ParserError) -> NoReturn:
        if self._exit_callback is not None:
            self._exit_callback(error)
        if not isinstance(error, HelpDisplayed):
            self.parser.print_usage(sys.stderr)
            sys.stderr.write(f"{self.prog}: error: {error}\n")
        sys.exit(error.exit_code)

    # -- help --------------------------------------------------------------

    def format_commands(self) -> str:
        """Render the children section appended to argparse help."""
        if not self.commands:
            return ""
        rows = []
        for command in self.commands:
            usage = " ".join(
                [command.name or "", *(_format_argument(a) for a in command.arguments)]
            )
            if command.aliases:
                usage += f" ({', '.join(command.aliases)})"
            rows.append((usage, command.description or ""))
        width = max(len(usage) for usage, _ in rows)
        lines = [f"  {usage.ljust(width)}  {text}".rstrip() for usage, text in rows]
        return "\ncommands:\n" + "\n".join(lines) + "\n"

    def format_help(self) -> str:
        self._sync_parser()
        return self.parser.format_help()

    def format_usage(self) -> str:
        self._sync_parser()
        return self.parser.format_usage()

    def output_help(self, file: IO[str] | None = None) -> None:
        self._sync_parser()
        self.parser.print_help(file)

    def help(self, file: IO[str] | None = None) -> NoReturn:
        """Print help and exit through the exit callback."""
        self.output_help(file)
        self._exit(HelpDisplayed())

    def _sync_parser(self) -> None:
        self.parser.prog = self.prog
        if self.commands and self._action is None:
            self.parser.usage = "%(prog)s [-h] <command> [args]"

    # -- dispatch ----------------------------------------------------------

    async def parse(self, tokens: list[str]) -> list[ActionResponse]:
        """
        Dispatch ``tokens`` (argv without the program) through this subtree.

        Returns:
            The responses of the matched action, empty when nothing ran

        Raises:
            HelpDisplayed: Through the exit callback, after ``help [command...]``
                printed the help of the named command (or of this node)
        """
        self._sync_parser()
        if not self.commands:
            return await self._run_action(tokens)

        leading = list(itertools.takewhile(lambda t: t.startswith("-"), tokens))
        rest = tokens[len(leading) :]

        if rest:
            child = self.find_command(rest[0])
            if child is not None:
                if leading:
                    self.parser.parse_args(leading)
                return await child.parse(rest[1:])

        if self._action is not None:
            return await self._run_action(tokens)

        self.parser.parse_args(leading)
        if not rest:
            return []
        if rest[0] == HELP_COMMAND:
            self.resolve(rest[1:]).help()
        raise UnknownCommandError(rest[0], command=self)

    async def _run_action(self, tokens: list[str]) -> list[ActionResponse]:
        namespace = self.parser.parse_args(tokens)
        values = vars(namespace)
        positional = [values.pop(spec.name) for spec in self.arguments]
        self._opts = values
        if self._action is None:
            return []
        return [await self._action(*positional, self)]


def _format_argument(spec: ArgumentSpec) -> str:
    name = spec.name + ("..." if spec.variadic else "")
    return f"<{name}>" if spec.required else f"[{name}]"
