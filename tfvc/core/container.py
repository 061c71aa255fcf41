"""
Service container for one tfvc invocation.

Services are keyed by the interface type they satisfy and backed by
dependency-injector providers:

- singletons: one shared instance, either given or built lazily
- transients: a new instance per resolve
- resources: built lazily like singletons, torn down by ``shutdown``

No container is shared between callers; ``bootstrap`` builds a new one.
"""

from collections.abc import Callable, Iterator
from typing import TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps interface types to dependency-injector providers."""

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance.

        Args:
            interface: Type used as the lookup key
            implementation: Ready-made instance
            factory: Called on first resolve when no instance is given

        Raises:
            ValueError: If neither an instance nor a factory is given
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        self._providers[interface] = providers.Factory(factory)

    def register_resource(self, interface: type[T], initializer: Callable[[], Iterator[T]]) -> None:
        """
        Register a service that holds something needing release.

        ``initializer`` is a generator function: it yields the service once,
        and the code after the ``yield`` runs on ``shutdown``.
        """
        self._providers[interface] = providers.Resource(initializer)

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def shutdown(self) -> None:
        """Release every resource that was resolved; unused ones are skipped."""
        for provider in self._providers.values():
            if isinstance(provider, providers.Resource):
                provider.shutdown()
