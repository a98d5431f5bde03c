"""
Registration of decorated classes.

The scanner resolves each ``@console`` class through the service's container,
creates its group and binds every ``@command`` method of the resolved
instance. Classes nested under another group are bound after their parent,
whatever order they were given in.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from .decorators import ConsoleMetadata, get_command_descriptor, get_console_metadata
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .parser import CommandNode
    from .service import ConsoleService

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def fit_arguments(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Adapt ``func`` to receive only the leading arguments it declares.

    Handlers are called with the argument values followed by the command
    node; a method that does not declare a parameter for the node simply
    does not get it.
    """
    params = inspect.signature(func).parameters.values()
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return func

    count = sum(1 for p in params if p.kind in _POSITIONAL)

    @functools.wraps(func)
    def handler(*args: Any) -> Any:
        return func(*args[:count])

    return handler


def _command_members(cls: type) -> list[tuple[str, Any]]:
    """Decorated methods in definition order, base classes first."""
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if get_command_descriptor(value) is not None:
                members[attr] = value
            elif attr in members:
                del members[attr]
    return list(members.items())


class ConsoleScanner:
    """Binds decorated classes onto a console service."""

    def __init__(self, service: ConsoleService) -> None:
        self._service = service

    @property
    def lg(self) -> Any:
        return self._service.lg

    def _metadata(self, cls: type) -> ConsoleMetadata:
        metadata = get_console_metadata(cls)
        if metadata is None:
            raise ConfigurationError(f"{cls.__name__} is not decorated with @console")
        return metadata

    def _resolve_parent(self, metadata: ConsoleMetadata) -> CommandNode | None:
        return self._service.get_cli(metadata.parent)

    def scan(self, classes: Iterable[type]) -> list[CommandNode]:
        """
        Register all given classes.

        Returns:
            The node each class was bound to, in binding order

        Raises:
            ConfigurationError: If a class is not decorated or names a parent
                group that no class declares
        """
        pending = [(cls, self._metadata(cls)) for cls in classes]
        bound: list[CommandNode] = []

        while pending:
            remaining = []
            for cls, metadata in pending:
                parent = self._resolve_parent(metadata)
                if parent is None:
                    remaining.append((cls, metadata))
                    continue
                bound.append(self.bind(cls, metadata, parent))

            if len(remaining) == len(pending):
                names = ", ".join(
                    f"{cls.__name__} -> '{metadata.parent}'" for cls, metadata in remaining
                )
                raise ConfigurationError(f"Parent group not found: {names}")
            pending = remaining

        return bound

    def bind(
        self, cls: type, metadata: ConsoleMetadata, parent: CommandNode
    ) -> CommandNode:
        """Create the group of ``cls`` (if any) and bind its commands."""
        instance = self._service.get_container().get(cls)

        target = parent
        if metadata.group is not None:
            target = self._service.create_group_command(metadata.group, parent)

        for attr, _ in _command_members(cls):
            method = getattr(instance, attr)
            descriptor = get_command_descriptor(method)
            assert descriptor is not None
            self._service.create_command(descriptor, fit_arguments(method), target)

        self.lg.debug(
            "scanned console class",
            extra={"class": cls.__name__, "node": target.prog},
        )
        return target
