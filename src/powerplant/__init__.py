"""Energy production from typed fuels.

Fuels are types with a native energy unit and a fixed energy density.
Providers consume a ``FuelContainer`` of a fuel and return the energy it
produced, in that fuel's unit:

    from powerplant import FuelContainer, NuclearReactor, Uranium

    energy = NuclearReactor().provide_energy(FuelContainer[Uranium](10))
    energy.to_btu()  # BTU(value=9900)
"""

from powerplant.container import FuelContainer
from powerplant.core.errors import FuelCompatibilityError, PowerPlantError
from powerplant.fuels import (
    CustomMixed,
    Diesel,
    Fuel,
    IsRenewable,
    LithiumBattery,
    Mixed,
    Uranium,
)
from powerplant.plant import PowerPlant
from powerplant.providers import (
    BritishEngine,
    GreenEngine,
    InternalCombustion,
    NuclearReactor,
    OmniGenerator,
    ProvideEnergy,
    omni_80_energy,
)
from powerplant.units import BTU, Calorie, EnergyValue, Joule, to_btu

__all__ = [
    "BTU",
    "BritishEngine",
    "Calorie",
    "CustomMixed",
    "Diesel",
    "EnergyValue",
    "Fuel",
    "FuelCompatibilityError",
    "FuelContainer",
    "GreenEngine",
    "InternalCombustion",
    "IsRenewable",
    "Joule",
    "LithiumBattery",
    "Mixed",
    "NuclearReactor",
    "OmniGenerator",
    "PowerPlant",
    "PowerPlantError",
    "ProvideEnergy",
    "Uranium",
    "omni_80_energy",
    "to_btu",
]
