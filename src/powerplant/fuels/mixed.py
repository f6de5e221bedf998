"""Blended fuels.

A blend of two fuels is itself a fuel, measured in BTU, so it can be fed to
any provider or blended again:

    Mixed[Diesel, LithiumBattery]                 # even blend
    CustomMixed[70, Diesel, LithiumBattery]       # 70% Diesel, 30% battery
    Mixed[Uranium, Mixed[Diesel, LithiumBattery]] # blend of a blend

The density of a blend is recomputed from its components on every call.
A blend is renewable only when both of its components are.
"""

from typing import ClassVar

from powerplant.core.params import as_params, specialize
from powerplant.fuels.base import Fuel, IsRenewable, is_fuel, is_renewable
from powerplant.units import BTU


def _blend_bases(first: type[Fuel], second: type[Fuel]) -> tuple[type, ...]:
    if is_renewable(first) and is_renewable(second):
        return (IsRenewable,)
    return ()


def _check_components(name: str, fuels: tuple) -> None:
    if len(fuels) != 2 or not all(is_fuel(f) for f in fuels):
        raise TypeError(f"{name} takes two fuel types, got {fuels!r}")


class Mixed(Fuel):
    """Even blend of two fuels.

    Density is the truncated average of the two component densities, each
    first converted to BTU.
    """

    Output = BTU

    first: ClassVar[type[Fuel] | None] = None
    second: ClassVar[type[Fuel] | None] = None

    def __class_getitem__(cls, item):
        fuels = as_params(item)
        _check_components(cls.__name__, fuels)
        first, second = fuels
        return specialize(
            cls, fuels, {"first": first, "second": second}, _blend_bases(first, second)
        )

    @classmethod
    def energy_density(cls) -> BTU:
        if cls.first is None or cls.second is None:
            raise TypeError("Mixed needs two component fuels: Mixed[F1, F2]")

        density1 = cls.first.energy_density_btu().value
        density2 = cls.second.energy_density_btu().value
        return BTU((density1 + density2) // 2)


class CustomMixed(Fuel):
    """Weighted blend of two fuels.

    ``CustomMixed[C, F1, F2]`` weighs ``F1`` by ``C`` percent and ``F2`` by
    the remaining ``100 - C``. The result is truncated like the even blend,
    so ``CustomMixed[50, F1, F2]`` always matches ``Mixed[F1, F2]``.

    ``C`` must lie in [0, 100]; anything else is a programming error and
    fails an assertion when the density is requested.
    """

    Output = BTU

    weight: ClassVar[int | None] = None
    first: ClassVar[type[Fuel] | None] = None
    second: ClassVar[type[Fuel] | None] = None

    def __class_getitem__(cls, item):
        params = as_params(item)
        if len(params) != 3 or not isinstance(params[0], int) or isinstance(params[0], bool):
            raise TypeError(f"CustomMixed takes a percent and two fuel types, got {params!r}")
        weight, first, second = params
        _check_components(cls.__name__, (first, second))
        return specialize(
            cls,
            params,
            {"weight": weight, "first": first, "second": second},
            _blend_bases(first, second),
        )

    @classmethod
    def energy_density(cls) -> BTU:
        if cls.weight is None or cls.first is None or cls.second is None:
            raise TypeError("CustomMixed needs a weight and two fuels: CustomMixed[C, F1, F2]")
        assert 0 <= cls.weight <= 100, f"C is not between 0 and 100: {cls.weight}"

        density1 = cls.first.energy_density_btu().value
        density2 = cls.second.energy_density_btu().value
        return BTU((density1 * cls.weight + density2 * (100 - cls.weight)) // 100)
