"""Fuels package.

Provides the ``Fuel`` capability, the ``IsRenewable`` marker, the natural
fuels and the blended fuel types.
"""

from powerplant.fuels.base import Fuel, IsRenewable, is_fuel, is_renewable, output_unit
from powerplant.fuels.mixed import CustomMixed, Mixed
from powerplant.fuels.standard import Diesel, LithiumBattery, Uranium

__all__ = [
    "CustomMixed",
    "Diesel",
    "Fuel",
    "IsRenewable",
    "LithiumBattery",
    "Mixed",
    "Uranium",
    "is_fuel",
    "is_renewable",
    "output_unit",
]
