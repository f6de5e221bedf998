"""Base classes for fuels.

A fuel is a type, not an object: everything known about it (its native
energy unit and its energy density) is a fact about the class. Fuel classes
are never instantiated.

Typical usage:
    class Hydrogen(Fuel, IsRenewable):
        Output = Joule

        @classmethod
        def energy_density(cls) -> Joule:
            return Joule.from_btu(120)
"""

from typing import ClassVar

from powerplant.units import BTU, EnergyValue


class Fuel:
    """A technology for storing energy for later consumption.

    Subclasses declare:
        Output: The energy unit the fuel is measured in. Must convert to and
            from BTU (any ``EnergyValue`` subclass does).
        energy_density: Classmethod returning the energy held by one unit
            amount of fuel, expressed in ``Output``.

    Missing either declaration is reported when the subclass is defined.
    """

    Output: ClassVar[type[EnergyValue]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        output = getattr(cls, "Output", None)
        if not (isinstance(output, type) and issubclass(output, EnergyValue)):
            raise TypeError(f"Fuel {cls.__name__} must declare an EnergyValue Output unit")
        if getattr(cls.energy_density, "__func__", None) is Fuel.energy_density.__func__:
            raise TypeError(f"Fuel {cls.__name__} must define energy_density()")

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a fuel type and cannot be instantiated")

    @classmethod
    def energy_density(cls) -> EnergyValue:
        """The amount of energy contained in a single unit of fuel."""
        raise NotImplementedError

    @classmethod
    def energy_density_btu(cls) -> BTU:
        """Energy density converted to BTU (truncating)."""
        return cls.energy_density().to_btu()


class IsRenewable:
    """Marker for renewable fuels.

    Carries no data or behaviour; providers such as ``GreenEngine`` only
    accept fuels that inherit it.
    """


def is_fuel(candidate: object) -> bool:
    """Whether ``candidate`` is a fuel type."""
    return isinstance(candidate, type) and issubclass(candidate, Fuel)


def is_renewable(fuel: type[Fuel]) -> bool:
    """Whether ``fuel`` carries the ``IsRenewable`` marker."""
    return issubclass(fuel, IsRenewable)


def output_unit(fuel: type[Fuel]) -> type[EnergyValue]:
    """The native energy unit of ``fuel``."""
    return fuel.Output
