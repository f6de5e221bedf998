"""Tests for the ProvideEnergy base class and its shared arithmetic."""

import pytest

from powerplant.container import FuelContainer
from powerplant.core.errors import FuelCompatibilityError, PowerPlantError
from powerplant.fuels.mixed import CustomMixed, Mixed
from powerplant.fuels.standard import Diesel, LithiumBattery, Uranium
from powerplant.providers.base import ProvideEnergy, clamp_efficiency
from powerplant.units import BTU, Calorie, Joule, to_btu

ALL_FUELS = [
    Diesel,
    LithiumBattery,
    Uranium,
    Mixed[Diesel, LithiumBattery],
    CustomMixed[30, Uranium, Mixed[Diesel, LithiumBattery]],
]


class AnyFuelProvider(ProvideEnergy):
    """Provider that runs at a fixed 50% for every fuel."""

    def provide_energy(self, container):
        return self.provide_energy_with_efficiency(container, 50)


class DieselOnlyProvider(ProvideEnergy[Diesel]):
    def provide_energy(self, container):
        return self.provide_energy_ideal(container)


class TestClampEfficiency:
    """Test efficiency saturation."""

    def test_in_range_unchanged(self):
        """Test values in [0, 100] pass through."""
        assert clamp_efficiency(0) == 0
        assert clamp_efficiency(42) == 42
        assert clamp_efficiency(100) == 100

    def test_saturates(self):
        """Test values outside the range saturate."""
        assert clamp_efficiency(150) == 100
        assert clamp_efficiency(255) == 100
        assert clamp_efficiency(-5) == 0


class TestProvideEnergyInterface:
    """Test the abstract interface."""

    def test_is_abstract(self):
        """Test ProvideEnergy cannot be instantiated directly."""
        with pytest.raises(TypeError):
            ProvideEnergy()  # type: ignore[abstract]

    def test_shared_methods_cannot_be_overridden(self):
        """Test subclasses may not replace the shared arithmetic."""
        with pytest.raises(TypeError, match="provide_energy_with_efficiency"):

            class Cheater(ProvideEnergy):
                def provide_energy(self, container):
                    return Joule(0)

                def provide_energy_with_efficiency(self, container, efficiency):
                    return Joule(0)

        with pytest.raises(TypeError, match="provide_energy_ideal"):

            class OtherCheater(ProvideEnergy):
                def provide_energy(self, container):
                    return Joule(0)

                def provide_energy_ideal(self, container):
                    return Joule(0)

    def test_fuel_restriction(self):
        """Test ProvideEnergy[F] only accepts F."""
        provider = DieselOnlyProvider()
        assert DieselOnlyProvider.accepts is Diesel
        assert provider.accepts_fuel(Diesel)
        assert not provider.accepts_fuel(Uranium)

        with pytest.raises(FuelCompatibilityError, match="cannot consume Uranium"):
            provider.provide_energy(FuelContainer[Uranium](1))

    def test_compatibility_error_hierarchy(self):
        """Test the rejection error is both a TypeError and a package error."""
        assert issubclass(FuelCompatibilityError, TypeError)
        assert issubclass(FuelCompatibilityError, PowerPlantError)

    def test_rejects_non_container(self):
        """Test a bare amount is not accepted."""
        with pytest.raises(TypeError):
            AnyFuelProvider().provide_energy(10)


class TestEfficiencyArithmetic:
    """Test provide_energy_with_efficiency and provide_energy_ideal."""

    @pytest.mark.parametrize("fuel", ALL_FUELS)
    @pytest.mark.parametrize("amount", [0, 1, 7, 10, 1000])
    def test_ideal_matches_density(self, fuel, amount):
        """Test ideal output equals density times amount in BTU."""
        energy = AnyFuelProvider().provide_energy_ideal(FuelContainer[fuel](amount))
        assert to_btu(energy) == fuel.energy_density_btu().value * amount

    @pytest.mark.parametrize("fuel", ALL_FUELS)
    def test_output_in_native_unit(self, fuel):
        """Test the result is expressed in the fuel's unit."""
        energy = AnyFuelProvider().provide_energy_ideal(FuelContainer[fuel](3))
        assert type(energy) is fuel.Output

    @pytest.mark.parametrize("fuel", ALL_FUELS)
    def test_efficiency_above_100_saturates(self, fuel):
        """Test 150% behaves exactly like 100%."""
        provider = AnyFuelProvider()
        assert provider.provide_energy_with_efficiency(
            FuelContainer[fuel](10), 150
        ) == provider.provide_energy_with_efficiency(FuelContainer[fuel](10), 100)

    def test_scaling_and_unit_conversion(self):
        """Test 99% of 10 Uranium is 9900 BTU, expressed in joules."""
        energy = AnyFuelProvider().provide_energy_with_efficiency(FuelContainer[Uranium](10), 99)
        assert energy == Joule(9900 * 1055)
        assert energy.to_btu() == 9900

    def test_rounds_half_up(self):
        """Test fractional BTU results round to nearest, halves up."""
        provider = AnyFuelProvider()
        # 100 BTU * 1 at 0% = 0
        assert provider.provide_energy_with_efficiency(FuelContainer[Diesel](1), 0) == Joule(0)
        # 200 BTU * 1 * 33% = 66
        assert provider.provide_energy_with_efficiency(
            FuelContainer[LithiumBattery](1), 33
        ) == Calorie(66 * 251)
        # 150 BTU * 1 * 1% = 1.5 -> 2
        assert provider.provide_energy_with_efficiency(
            FuelContainer[Mixed[Diesel, LithiumBattery]](1), 1
        ) == BTU(2)
        # 150 BTU * 1 * 3% = 4.5 -> 5
        assert provider.provide_energy_with_efficiency(
            FuelContainer[Mixed[Diesel, LithiumBattery]](1), 3
        ) == BTU(5)

    def test_zero_efficiency_and_amount(self):
        """Test either zero yields no energy."""
        provider = AnyFuelProvider()
        assert provider.provide_energy_with_efficiency(FuelContainer[Uranium](10), 0) == Joule(0)
        assert provider.provide_energy_ideal(FuelContainer[Uranium](0)) == Joule(0)

    def test_container_not_modified(self):
        """Test the provider leaves the container untouched."""
        container = FuelContainer[Diesel](10)
        AnyFuelProvider().provide_energy(container)
        assert container.amount == 10
        assert container.fuel is Diesel
