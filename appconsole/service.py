"""
Console service: command registration and dispatch.

The service owns the root command node and the group registry. It is the
context object threaded through registration and dispatch, so independent
instances can coexist (e.g. one per test).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .config import ConsoleConfig
from .container import Container, InstanceContainer
from .descriptors import CommandDescriptor, GroupDescriptor
from .errors import ConfigurationError, HelpDisplayed, MissingArgumentError
from .formatting import format_response
from .handler import ActionResponse, CommandActionHandler, create_handler
from .log import LoggerFactory
from .parser import CommandNode
from .registry import CommandRegistry


class ConsoleService:
    """
    Builds the command tree and runs it against argv.

    Example:
        service = ConsoleService()
        group = service.create_group_command(GroupDescriptor("db"), service.get_cli())
        service.create_command(CommandDescriptor("migrate <target>"), migrate, group)
        response = await service.init(["prog", "db", "migrate", "head"])
    """

    def __init__(
        self,
        cli: CommandNode | None = None,
        config: ConsoleConfig | None = None,
        container: Container | None = None,
        lg: Any | None = None,
    ) -> None:
        """
        Initialize the console service.

        Args:
            cli: Root command node; created with :meth:`create` when None
            config: Console settings
            container: Resolves handler instances of decorated classes
            lg: Logger; when None the shared ``/console`` logger is used and
                reconfigured from ``config``
        """
        self.config = config or ConsoleConfig()
        if lg is None:
            log_config = self.config.log_config
            lg = LoggerFactory.configure(
                LoggerFactory.create("/console", log_config), log_config
            )
        self.lg = lg
        self.container: Container = container or InstanceContainer()
        self.commands = CommandRegistry(self.lg)
        self.cli = cli or self.create(self.config)

    @staticmethod
    def create(config: ConsoleConfig | None = None) -> CommandNode:
        """Create a root command node."""
        config = config or ConsoleConfig()
        cli = CommandNode(prog=config.prog)
        if config.description:
            cli.set_description(config.description)
        return cli

    def reset_cli(self) -> None:
        """Replace the root node and forget all groups (test isolation)."""
        self.cli = self.create(self.config)
        self.commands.clear()

    def get_cli(self, name: str | None = None) -> CommandNode | None:
        """
        Get a command node.

        Args:
            name: Group name or alias; the root node when None
        """
        return self.commands.lookup(name) if name else self.cli

    def set_container(self, container: Container) -> ConsoleService:
        self.container = container
        return self

    def get_container(self) -> Container:
        return self.container

    def log_error(self, error: BaseException) -> None:
        self.lg.error(format_response(error, verbose=self.config.verbose_errors))

    # -- registration ------------------------------------------------------

    def create_command(
        self,
        descriptor: CommandDescriptor,
        handler: CommandActionHandler,
        parent: CommandNode,
    ) -> CommandNode:
        """
        Create a leaf command under ``parent``.

        The handler is called with the positional argument values followed by
        the command node.

        Raises:
            ConfigurationError: If the pattern, alias or an option is invalid
        """
        command = parent.add_command(descriptor.command).exit_override(parent._exit)
        try:
            if descriptor.description:
                command.set_description(descriptor.description)
            if descriptor.alias:
                command.add_alias(descriptor.alias)
            for option in descriptor.options:
                command.add_option(option)
        except ConfigurationError:
            parent.commands.remove(command)
            raise

        command.set_action(create_handler(handler))
        self.lg.debug(
            "registered command",
            extra={"command": command.prog, "args": [a.name for a in command.arguments]},
        )
        return command

    def create_group_command(
        self, descriptor: GroupDescriptor, parent: CommandNode
    ) -> CommandNode:
        """
        Create a group under ``parent`` and register it by name and alias.

        Returns:
            The group node, to which commands and further groups can be added

        Raises:
            ConfigurationError: If ``parent`` declares positional arguments
            DupCommandError: If a sibling already uses the name or alias
        """
        if parent.arguments:
            raise ConfigurationError(
                "Sub commands cannot be applied to command with explicit args"
            )
        if len(descriptor.name.split()) != 1:
            raise ConfigurationError(
                f"Group name '{descriptor.name}' must be a single word without arguments"
            )

        command = parent.add_command(descriptor.name).exit_override(parent._exit)
        try:
            if descriptor.description:
                command.set_description(descriptor.description)
            if descriptor.alias:
                command.add_alias(descriptor.alias)
        except ConfigurationError:
            parent.commands.remove(command)
            raise

        for key in (command.name, *command.aliases):
            assert key is not None
            self.commands.register(key, command)

        self.lg.debug(
            "registered group",
            extra={"group": command.prog, "aliases": command.aliases},
        )
        return command

    # -- dispatch ----------------------------------------------------------

    def _show_help(self, argv: Sequence[str]) -> None:
        """Display help of the top-level command named by the last token."""
        token = argv[-1] if argv else None
        command = self.cli.find_command(token) if token else None
        (command or self.cli).help()

    async def init(self, argv: Sequence[str]) -> ActionResponse | None:
        """
        Parse ``argv`` and run the matched command.

        Args:
            argv: Process arguments, ``argv[0]`` being the program

        Returns:
            The response of the matched handler, or None when help was shown

        Raises:
            ConfigurationError: If no command was registered
            MissingArgumentError: If a required argument is missing (not logged)
            Exception: Any other parser or handler error (logged first)
        """
        cli = self.get_cli()
        assert cli is not None
        try:
            if not cli.commands:
                raise ConfigurationError("The cli does not contain sub command")

            cli.exit_override()
            if cli._prog is None and argv:
                cli.prog = _prog_name(argv[0])

            results = await cli.parse(list(argv[1:]))
            if not results:
                self._show_help(argv[1:])
            return results[0] if results else None
        except HelpDisplayed:
            return None
        except MissingArgumentError:
            raise
        except Exception as e:
            self.log_error(e)
            raise

    run = init


def _prog_name(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1] or path
