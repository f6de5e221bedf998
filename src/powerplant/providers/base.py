"""Base class for energy providers.

An energy provider (a power plant, an engine, a generator) consumes a fuel
container and returns the energy produced, in the fuel's native unit.

Every provider shares the same energy arithmetic, implemented once in
``provide_energy_with_efficiency``:

    1. clamp the efficiency to [0, 100] percent
    2. total = density in BTU * amount
    3. scale by the efficiency, rounding half up
    4. convert the result back to the fuel's native unit

Concrete providers only decide which efficiency to apply in
``provide_energy``. The two shared methods cannot be overridden.

Typical usage:
    class SolarFarm(ProvideEnergy[LithiumBattery]):
        def provide_energy(self, container: FuelContainer) -> EnergyValue:
            return self.provide_energy_with_efficiency(container, 20)
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from powerplant.container import FuelContainer
from powerplant.core.errors import FuelCompatibilityError
from powerplant.core.params import specialize
from powerplant.fuels.base import Fuel, is_fuel
from powerplant.units import EnergyValue

MAX_EFFICIENCY = 100

_SHARED_METHODS = ("provide_energy_with_efficiency", "provide_energy_ideal")


def clamp_efficiency(efficiency: int) -> int:
    """Saturate an efficiency percent to the range [0, 100].

    Examples:
        >>> clamp_efficiency(150)
        100
        >>> clamp_efficiency(99)
        99
    """
    return max(0, min(int(efficiency), MAX_EFFICIENCY))


class ProvideEnergy(ABC):
    """Something that turns fuel into energy.

    ``ProvideEnergy[F]`` is a provider restricted to fuel ``F`` (and its
    subclasses); plain ``ProvideEnergy`` accepts any fuel. A provider already
    bound to a fuel, such as ``NuclearReactor``, cannot be subscribed again.

    Attributes:
        accepts: Fuel type this provider consumes, or None for any fuel.
    """

    accepts: ClassVar[type[Fuel] | None] = None

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        for name in _SHARED_METHODS:
            if name in cls.__dict__:
                raise TypeError(f"{cls.__name__} cannot override {name}()")

    def __class_getitem__(cls, fuel):
        if not is_fuel(fuel):
            raise TypeError(f"{cls.__name__} takes a fuel type, got {fuel!r}")
        if cls.accepts is not None:
            raise FuelCompatibilityError(
                f"{cls.__name__} is bound to {cls.accepts.__name__} and cannot be rebound"
            )
        return specialize(cls, (fuel,), {"accepts": fuel})

    @classmethod
    def accepts_fuel(cls, fuel: type[Fuel]) -> bool:
        """Whether this provider can consume ``fuel``."""
        return is_fuel(fuel) and (cls.accepts is None or issubclass(fuel, cls.accepts))

    @abstractmethod
    def provide_energy(self, container: FuelContainer) -> EnergyValue:
        """Consume the container and return the energy created.

        Reflects the provider's own efficiency model, including any decay.
        Stateless providers usually delegate to
        ``provide_energy_with_efficiency`` or ``provide_energy_ideal``.

        Args:
            container: Fuel to consume. It is not modified or retained.

        Returns:
            Energy in the unit of the container's fuel.

        Raises:
            FuelCompatibilityError: If the provider cannot consume this fuel.
        """

    def provide_energy_with_efficiency(
        self, container: FuelContainer, efficiency: int
    ) -> EnergyValue:
        """Convert the fuel in ``container`` at exactly ``efficiency`` percent.

        Efficiencies above 100 are treated as 100 and negative ones as 0.

        Args:
            container: Fuel to consume.
            efficiency: Efficiency percent.

        Returns:
            Energy in the unit of the container's fuel.

        Raises:
            FuelCompatibilityError: If the provider cannot consume this fuel.
        """
        if not isinstance(container, FuelContainer):
            raise TypeError(f"Expected a FuelContainer, got {container!r}")

        fuel = container.fuel
        if not self.accepts_fuel(fuel):
            raise FuelCompatibilityError(
                f"{type(self).__name__} cannot consume {fuel.__name__}"
            )

        efficiency = clamp_efficiency(efficiency)
        total_btu = fuel.energy_density_btu().value * container.amount
        adjusted_btu = (total_btu * efficiency + MAX_EFFICIENCY // 2) // MAX_EFFICIENCY

        return fuel.Output.from_btu(adjusted_btu)

    def provide_energy_ideal(self, container: FuelContainer) -> EnergyValue:
        """Same as ``provide_energy_with_efficiency`` at 100%."""
        return self.provide_energy_with_efficiency(container, MAX_EFFICIENCY)
