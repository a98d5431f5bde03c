"""
Action handler wrapping.

User handlers may be plain functions or coroutines. The wrapper produced by
:func:`create_handler` always awaits, so dispatch sees a uniform
:class:`ActionResponse` regardless of how the handler was written.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .parser import CommandNode

# Handlers receive the positional argument values followed by the command node.
CommandActionHandler = Callable[..., Any]


@dataclass
class ActionResponse:
    """Result of one command invocation."""

    data: Any
    command: CommandNode


def create_handler(
    action: CommandActionHandler,
) -> Callable[..., Awaitable[ActionResponse]]:
    """
    Wrap an action handler so that it always resolves to an ActionResponse.

    The last positional argument passed to the wrapper must be the command
    node. Exceptions raised by ``action`` propagate unchanged.

    Args:
        action: Sync or async callable

    Returns:
        Coroutine function returning ActionResponse
    """

    async def handler(*args: Any) -> ActionResponse:
        command = args[-1]
        data = action(*args)
        if inspect.isawaitable(data):
            data = await data
        return ActionResponse(data=data, command=command)

    handler.__wrapped__ = action  # type: ignore[attr-defined]
    return handler
