"""Named registries of fuels and provider factories.

Configuration files refer to fuels and providers by name; a registry maps
those names to the classes or factory callables that implement them.

Typical usage example:
    from powerplant.core.registry import ComponentRegistry

    fuels = ComponentRegistry("fuel")
    fuels.register("diesel", Diesel)
    fuel = fuels.get("diesel")
"""

from typing import Any

from powerplant.core.errors import PowerPlantError
from powerplant.core.logging_system import get_logger

logger = get_logger(__name__)


class RegistryError(PowerPlantError):
    """Raised when registry operations fail."""


class ComponentRegistry:
    """Registry of named implementations.

    Args:
        kind: What the registry holds ("fuel", "provider"); used in messages.

    Examples:
        >>> providers = ComponentRegistry("provider")
        >>> providers.register("omni_generator", build_omni_generator)
        >>> generator = providers.create("omni_generator", {"efficiency": 80})
    """

    def __init__(self, kind: str = "component") -> None:
        self.kind = kind
        self._components: dict[str, Any] = {}

    def register(self, name: str, implementation: Any) -> None:
        """Register an implementation under ``name``.

        Raises:
            RegistryError: If name is already registered.
        """
        if name in self._components:
            raise RegistryError(f"{self.kind.capitalize()} already registered: {name}")

        self._components[name] = implementation

        impl_name = getattr(implementation, "__name__", type(implementation).__name__)
        logger.info("Registered %s: %s -> %s", self.kind, name, impl_name)

    def unregister(self, name: str) -> None:
        """Remove ``name`` from the registry.

        Raises:
            RegistryError: If name is not registered.
        """
        if name not in self._components:
            raise RegistryError(f"{self.kind.capitalize()} not registered: {name}")

        del self._components[name]
        logger.info("Unregistered %s: %s", self.kind, name)

    def create(self, name: str, config: dict[str, Any]) -> Any:
        """Call the implementation registered under ``name`` with ``config``.

        Raises:
            RegistryError: If name is not registered or the factory rejects
                the configuration.
        """
        implementation = self.get(name)

        try:
            return implementation(config)
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryError(f"Failed to create {self.kind} {name}: {e}") from e

    def get(self, name: str) -> Any:
        """Get the implementation registered under ``name``.

        Raises:
            RegistryError: If name is not registered.
        """
        if name not in self._components:
            raise RegistryError(f"{self.kind.capitalize()} not registered: {name}")

        return self._components[name]

    def is_registered(self, name: str) -> bool:
        return name in self._components

    def list_components(self) -> list[str]:
        return list(self._components.keys())

    def clear(self) -> None:
        self._components.clear()
