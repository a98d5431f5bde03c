"""
Declarative command metadata.

Descriptors are created when a class or method is decorated and consumed when
the command tree is built. They are immutable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OptionDescriptor:
    """
    A command option in short/long flag syntax.

    Examples of ``flags``:
        ``"-p, --port <port>"``   option taking a value
        ``"-c, --color [name]"``  option with an optional value
        ``"-v, --verbose"``       boolean switch
        ``"--no-cache"``          negated switch (defaults to True)
    """

    flags: str
    description: str | None = None
    type: Callable[[str], Any] | None = None
    default: Any = None
    required: bool = False

    @classmethod
    def coerce(cls, value: OptionDescriptor | Mapping[str, Any]) -> OptionDescriptor:
        """Accept either a descriptor or a plain mapping of its fields."""
        if isinstance(value, OptionDescriptor):
            return value
        if isinstance(value, Mapping):
            return cls(**value)
        raise TypeError(
            f"Expected OptionDescriptor or mapping, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class CommandDescriptor:
    """Metadata of a leaf command: ``"name <required> [optional]"`` pattern."""

    command: str
    description: str | None = None
    alias: str | None = None
    options: tuple[OptionDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        command: str,
        description: str | None = None,
        alias: str | None = None,
        options: Iterable[OptionDescriptor | Mapping[str, Any]] | None = None,
    ) -> CommandDescriptor:
        return cls(
            command=command,
            description=description,
            alias=alias,
            options=tuple(OptionDescriptor.coerce(o) for o in options or ()),
        )


@dataclass(frozen=True)
class GroupDescriptor:
    """Metadata of a group: a named node whose children are the commands."""

    name: str
    description: str | None = None
    alias: str | None = None
    parent: str | None = None
