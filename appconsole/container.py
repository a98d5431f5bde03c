"""
Object resolution for decorated console classes.

The service only needs one thing from a dependency-injection container: the
instance that handles the commands of a decorated class. Any object with a
``get(cls)`` method satisfies :class:`Container`; :class:`InstanceContainer`
is the default implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from .errors import ConfigurationError

T = TypeVar("T")


@runtime_checkable
class Container(Protocol):
    """Resolves the handler instance of a class."""

    def get(self, cls: type[T]) -> T: ...


class InstanceContainer:
    """
    Container holding at most one instance per class.

    Classes are resolved from a registered instance, then from a registered
    factory, and otherwise constructed without arguments. Resolved instances
    are cached.
    """

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}

    def register(
        self,
        cls: type[T],
        instance: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> InstanceContainer:
        """Register an instance or a factory for ``cls``."""
        if instance is None and factory is None:
            raise ValueError("Either instance or factory must be provided")
        if instance is not None:
            self._instances[cls] = instance
        else:
            assert factory is not None
            self._factories[cls] = factory
        return self

    def get(self, cls: type[T]) -> T:
        """
        Resolve ``cls``.

        Raises:
            ConfigurationError: If the class cannot be constructed
        """
        if cls in self._instances:
            return self._instances[cls]  # type: ignore[no-any-return]

        factory = self._factories.get(cls, cls)
        try:
            instance = factory()
        except TypeError as e:
            raise ConfigurationError(
                f"Cannot construct {cls.__name__}: {e}. "
                f"Register an instance or a factory for it."
            ) from e
        self._instances[cls] = instance
        return instance  # type: ignore[no-any-return]

    def has(self, cls: type) -> bool:
        return cls in self._instances or cls in self._factories
