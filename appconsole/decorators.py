"""
Decorator API for declaring console commands.

Decorators only attach descriptors; nothing is registered until the classes
are scanned (see :mod:`appconsole.scanner`).

Example:
    @console(name="db", description="Database commands")
    class DbCommands:
        @command("migrate <target>", description="Migrate to a revision")
        @option("--dry-run", description="Print the plan only")
        def migrate(self, target, command):
            if command.opts()["dry_run"]:
                ...
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .descriptors import CommandDescriptor, GroupDescriptor, OptionDescriptor
from .errors import ConfigurationError

CONSOLE_ATTR = "__console__"
COMMAND_ATTR = "__console_command__"
PENDING_OPTIONS_ATTR = "__console_options__"

C = TypeVar("C", bound=type)
F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class ConsoleMetadata:
    """What ``@console`` attached to a class."""

    group: GroupDescriptor | None = None
    parent: str | None = None


def console(
    name: str | None = None,
    description: str | None = None,
    alias: str | None = None,
    parent: str | None = None,
) -> Callable[[C], C]:
    """
    Mark a class as a holder of console commands.

    Args:
        name: Group name; without it the commands are added to ``parent``
            directly (the root when ``parent`` is None)
        description: Group description shown in help
        alias: Alternative group name
        parent: Name of an already declared group to nest under
    """
    if name is None and (description or alias):
        raise ConfigurationError("description and alias require a group name")

    group = GroupDescriptor(name, description, alias, parent) if name else None
    metadata = ConsoleMetadata(group=group, parent=parent)

    def decorator(cls: C) -> C:
        if not isinstance(cls, type):
            raise TypeError("@console can only decorate classes")
        setattr(cls, CONSOLE_ATTR, metadata)
        return cls

    return decorator


def command(
    command: str,
    description: str | None = None,
    alias: str | None = None,
    options: Iterable[OptionDescriptor | Mapping[str, Any]] | None = None,
) -> Callable[[F], F]:
    """
    Mark a method as a command.

    Args:
        command: Pattern such as ``"copy <source> [target]"``
        description: Command description shown in help
        alias: Alternative command name
        options: Option descriptors or mappings of their fields
    """

    def decorator(func: F) -> F:
        # @option decorators below this one ran first, innermost first
        pending = list(reversed(getattr(func, PENDING_OPTIONS_ATTR, [])))
        descriptor = CommandDescriptor.create(
            command, description, alias, [*pending, *(options or ())]
        )
        setattr(func, COMMAND_ATTR, descriptor)
        return func

    return decorator


def option(
    flags: str,
    description: str | None = None,
    type: Callable[[str], Any] | None = None,
    default: Any = None,
    required: bool = False,
) -> Callable[[F], F]:
    """
    Add an option to a command, e.g. ``@option("-p, --port <port>", type=int)``.

    Works both above and below ``@command``.
    """
    opt = OptionDescriptor(flags, description, type, default, required)

    def decorator(func: F) -> F:
        descriptor = getattr(func, COMMAND_ATTR, None)
        if descriptor is not None:
            setattr(
                func,
                COMMAND_ATTR,
                dataclasses.replace(descriptor, options=(opt, *descriptor.options)),
            )
        else:
            pending = getattr(func, PENDING_OPTIONS_ATTR, [])
            setattr(func, PENDING_OPTIONS_ATTR, [*pending, opt])
        return func

    return decorator


def get_console_metadata(cls: type) -> ConsoleMetadata | None:
    """Return the metadata declared on ``cls`` itself (not inherited)."""
    return vars(cls).get(CONSOLE_ATTR)


def get_command_descriptor(func: Any) -> CommandDescriptor | None:
    return getattr(func, COMMAND_ATTR, None)
