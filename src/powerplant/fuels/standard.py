"""Natural fuels shipped with the library.

Densities are defined in BTU and expressed in each fuel's native unit:

    Fuel            Unit     Density
    Diesel          Joule    100 BTU
    LithiumBattery  Calorie  200 BTU (renewable)
    Uranium         Joule    1000 BTU
"""

from powerplant.fuels.base import Fuel, IsRenewable
from powerplant.units import Calorie, Joule


class Diesel(Fuel):
    Output = Joule

    @classmethod
    def energy_density(cls) -> Joule:
        return Joule.from_btu(100)


class LithiumBattery(Fuel, IsRenewable):
    Output = Calorie

    @classmethod
    def energy_density(cls) -> Calorie:
        return Calorie.from_btu(200)


class Uranium(Fuel):
    Output = Joule

    @classmethod
    def energy_density(cls) -> Joule:
        return Joule.from_btu(1000)
