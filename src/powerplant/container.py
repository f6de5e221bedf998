"""Fuel containers.

A container holds an amount of one specific fuel. The fuel is bound by
subscription, mirroring a generic type:

    container = FuelContainer[Diesel](10)
    container.fuel    # Diesel
    container.amount  # 10

Containers are immutable and meant to be handed to a single provider call.
"""

from dataclasses import dataclass

from powerplant.core.params import specialize
from powerplant.fuels.base import Fuel, is_fuel


@dataclass(frozen=True)
class FuelContainer:
    """A quantity of a specific fuel.

    Attributes:
        fuel: The fuel type held.
        amount: Units of fuel. Zero is allowed and produces no energy.

    Raises:
        TypeError: If ``fuel`` is not a fuel type or ``amount`` is not an int.
        ValueError: If ``amount`` is negative.
    """

    fuel: type[Fuel]
    amount: int

    def __post_init__(self) -> None:
        if not is_fuel(self.fuel):
            raise TypeError(f"Container fuel must be a Fuel type, got {self.fuel!r}")
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError(f"Fuel amount must be an integer, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"Fuel amount cannot be negative, got {self.amount}")

    def __class_getitem__(cls, fuel):
        if not is_fuel(fuel):
            raise TypeError(f"FuelContainer takes a fuel type, got {fuel!r}")

        def __init__(self, amount: int) -> None:
            FuelContainer.__init__(self, fuel, amount)

        return specialize(cls, (fuel,), {"__init__": __init__})
