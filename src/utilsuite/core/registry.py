"""Factory Registry: injectable type-name → constructor lookup.

Constructing "a default instance of a named type" goes through an
explicit table instead of runtime reflection: callers register a
zero-argument factory under a name, and resolve it later by that name.

ARCHITECTURE
────────────
::

    FactoryRegistry
      ├── .register(name, factory)   ─ store factory
      ├── .create(name)              ─ build instance, raise on failure
      ├── .instantiate(name)         ─ build instance, None on failure
      ├── .has(name)                 ─ existence check
      └── .list_factories()          ─ all registered names

    Decorator (uses the global registry unless one is passed):
      @register_factory()            → registers a class under its __name__
      @register_factory("person")    → registers under an explicit name

    get_default_registry()     ─ module-level singleton
    reset_default_registry()   ─ clear for testing

BEST PRACTICES
──────────────
- Pass an explicit ``FactoryRegistry`` in tests.
- Call ``reset_default_registry()`` in test fixtures.

Tags:
    util-suite, registry, factory, instantiation
"""

from collections.abc import Callable
from typing import Any

from .errors import DuplicateFactoryError, FactoryNotFoundError
from .logging import get_logger

logger = get_logger(__name__)


class FactoryRegistry:
    """Injectable factory registry.

    Example:
        >>> registry = FactoryRegistry()
        >>> registry.register("list", list)
        >>> registry.create("list")
        []
        >>> registry.instantiate("missing") is None
        True
    """

    def __init__(self):
        self._factories: dict[str, Callable[[], Any]] = {}
        self._metadata: dict[str, dict[str, Any]] = {}

    def register(
        self,
        name: str,
        factory: Callable[[], Any],
        description: str | None = None,
        replace: bool = False,
    ) -> None:
        """Register a zero-argument factory.

        Args:
            name: Type identifier
            factory: Callable returning a new instance
            description: Optional description for listings
            replace: Overwrite an existing registration instead of raising

        Raises:
            DuplicateFactoryError: If ``name`` is taken and ``replace`` is False
        """
        if name in self._factories and not replace:
            raise DuplicateFactoryError(name)
        self._factories[name] = factory
        self._metadata[name] = {
            "name": name,
            "factory": getattr(factory, "__qualname__", repr(factory)),
            "description": description,
        }

    def get(self, name: str) -> Callable[[], Any]:
        """Get a factory.

        Raises:
            FactoryNotFoundError: If no factory is registered under ``name``
        """
        if name not in self._factories:
            raise FactoryNotFoundError(name, sorted(self._factories))
        return self._factories[name]

    def create(self, name: str) -> Any:
        """Build a new instance; constructor errors propagate."""
        return self.get(name)()

    def instantiate(self, name: str) -> Any | None:
        """Build a new instance, or ``None`` if unknown or construction fails."""
        factory = self._factories.get(name)
        if factory is None:
            logger.debug("registry.unknown_factory", name=name)
            return None
        try:
            return factory()
        except Exception as e:
            logger.warning("registry.instantiate_failed", name=name, error=str(e))
            return None

    def has(self, name: str) -> bool:
        """Check if a factory exists."""
        return name in self._factories

    def get_metadata(self, name: str) -> dict[str, Any] | None:
        return self._metadata.get(name)

    def list_factories(self) -> list[str]:
        return sorted(self._factories)

    def unregister(self, name: str) -> bool:
        """Unregister a factory.

        Returns:
            True if the factory was removed, False if not found
        """
        if name in self._factories:
            del self._factories[name]
            del self._metadata[name]
            return True
        return False

    def clear(self) -> None:
        """Clear all factories (for testing)."""
        self._factories.clear()
        self._metadata.clear()


# === GLOBAL DEFAULT REGISTRY ===

_default_registry: FactoryRegistry | None = None


def get_default_registry() -> FactoryRegistry:
    """Get the global default registry.

    Creates it lazily on first access.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = FactoryRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Reset the global registry (for testing)."""
    global _default_registry
    _default_registry = None


# === DECORATOR API ===


def register_factory(
    name: str | None = None,
    registry: FactoryRegistry | None = None,
    description: str | None = None,
):
    """Decorator to register a class (or zero-arg function) as a factory.

    Example:
        >>> @register_factory("point")
        ... class Point:
        ...     x: int = 0
    """

    def decorator(target: Callable[[], Any]) -> Callable[[], Any]:
        (registry or get_default_registry()).register(
            name or target.__name__,
            target,
            description=description or target.__doc__,
        )
        return target

    return decorator
