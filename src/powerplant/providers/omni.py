"""Fuel-agnostic generator."""

from typing import ClassVar

from powerplant.container import FuelContainer
from powerplant.core.params import specialize
from powerplant.fuels.mixed import Mixed
from powerplant.fuels.standard import Diesel, LithiumBattery
from powerplant.providers.base import ProvideEnergy
from powerplant.units import BTU, EnergyValue


class OmniGenerator(ProvideEnergy):
    """A device that consumes any fuel at a fixed efficiency.

    ``OmniGenerator[EFFICIENCY]`` applies the same percent (saturating at
    100) to every fuel type, blends included.

    Raises:
        TypeError: If the class is used without an efficiency.
    """

    efficiency: ClassVar[int | None] = None

    def __class_getitem__(cls, efficiency):
        if not isinstance(efficiency, int) or isinstance(efficiency, bool):
            raise TypeError(f"OmniGenerator efficiency must be an int, got {efficiency!r}")
        return specialize(cls, (efficiency,), {"efficiency": efficiency})

    def __init__(self) -> None:
        if self.efficiency is None:
            raise TypeError("OmniGenerator needs an efficiency: OmniGenerator[EFFICIENCY]")

    def provide_energy(self, container: FuelContainer) -> EnergyValue:
        return self.provide_energy_with_efficiency(container, self.efficiency)


def omni_80_energy(amount: int) -> BTU:
    """Energy from an 80% ``OmniGenerator`` fed an even Diesel/LithiumBattery blend.

    Examples:
        >>> omni_80_energy(10)
        BTU(value=1200)
    """
    container = FuelContainer[Mixed[Diesel, LithiumBattery]](amount)
    return OmniGenerator[80]().provide_energy(container).to_btu()
