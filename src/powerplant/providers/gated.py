"""Providers restricted to fuels with a given capability.

Both engines run at ideal (100%) efficiency. The restriction is checked
once, when the engine class is parameterized with a fuel, rather than on
every call:

    GreenEngine[LithiumBattery]()          # fine, the battery is renewable
    GreenEngine[Diesel]                    # FuelCompatibilityError
    BritishEngine[Mixed[Diesel, Uranium]]  # fine, blends are measured in BTU
    BritishEngine[Uranium]                 # FuelCompatibilityError
"""

from powerplant.container import FuelContainer
from powerplant.core.errors import FuelCompatibilityError
from powerplant.core.params import specialize
from powerplant.fuels.base import Fuel, is_fuel, is_renewable, output_unit
from powerplant.providers.base import ProvideEnergy
from powerplant.units import BTU, EnergyValue


class _SingleFuelEngine(ProvideEnergy):
    """Ideal-efficiency engine bound to one fuel by subscription."""

    requirement = "a suitable fuel"

    def __class_getitem__(cls, fuel):
        if not is_fuel(fuel):
            raise TypeError(f"{cls.__name__} takes a fuel type, got {fuel!r}")
        if not cls.is_allowed(fuel):
            raise FuelCompatibilityError(
                f"{cls.__name__} requires {cls.requirement}; {fuel.__name__} does not qualify"
            )
        return specialize(cls, (fuel,), {"accepts": fuel})

    @classmethod
    def is_allowed(cls, fuel: type[Fuel]) -> bool:
        raise NotImplementedError

    def __init__(self) -> None:
        if self.accepts is None:
            raise TypeError(f"{type(self).__name__} needs a fuel: {type(self).__name__}[F]")

    def provide_energy(self, container: FuelContainer) -> EnergyValue:
        return self.provide_energy_ideal(container)


class GreenEngine(_SingleFuelEngine):
    """Perfectly efficient engine for renewable fuels only."""

    requirement = "a renewable fuel"

    @classmethod
    def is_allowed(cls, fuel: type[Fuel]) -> bool:
        return is_renewable(fuel)


class BritishEngine(_SingleFuelEngine):
    """Perfectly efficient engine for fuels measured in BTU only."""

    requirement = "a fuel measured in BTU"

    @classmethod
    def is_allowed(cls, fuel: type[Fuel]) -> bool:
        return output_unit(fuel) is BTU
