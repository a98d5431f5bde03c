"""
Group registration and lookup.

The registry keeps non-owning references to group nodes so they can be found
again by name or alias after the tree was built, e.g. to attach commands from
another class or to inspect the tree in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .parser import CommandNode


class CommandRegistry:
    """Name and alias to command node mapping."""

    def __init__(self, lg: Any | None = None) -> None:
        self._nodes: dict[str, CommandNode] = {}
        self._lg = lg

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def register(self, name: str, node: CommandNode) -> None:
        """
        Associate ``name`` with ``node``.

        An existing binding is replaced (last write wins).
        """
        previous = self._nodes.get(name)
        if previous is not None and previous is not node and self._lg is not None:
            self._lg.warning(
                "replacing registered command",
                extra={"name": name, "previous": previous.prog, "new": node.prog},
            )
        self._nodes[name] = node

    def lookup(self, name: str) -> CommandNode | None:
        """Get node by name or alias."""
        return self._nodes.get(name)

    def unregister(self, name: str) -> CommandNode | None:
        """Remove a binding, returning the node it pointed to."""
        return self._nodes.pop(name, None)

    def list_names(self) -> list[str]:
        """List all registered names and aliases."""
        return list(self._nodes.keys())

    def is_registered(self, name: str) -> bool:
        return name in self._nodes

    def clear(self) -> None:
        """Clear all bindings."""
        self._nodes.clear()
