"""Tests for blended fuels."""

import itertools

import pytest

from powerplant.fuels.base import is_renewable
from powerplant.fuels.mixed import CustomMixed, Mixed
from powerplant.fuels.standard import Diesel, LithiumBattery, Uranium
from powerplant.units import BTU

NATURAL_FUELS = [Diesel, LithiumBattery, Uranium]
ALL_PAIRS = list(itertools.product(NATURAL_FUELS + [Mixed[Diesel, Uranium]], repeat=2))


class TestMixed:
    """Test even blends."""

    def test_density_is_average(self):
        """Test the Diesel/battery blend averages 100 and 200 BTU."""
        assert Mixed[Diesel, LithiumBattery].energy_density() == BTU(150)

    def test_output_is_btu(self):
        """Test blends are measured in BTU."""
        assert Mixed[Diesel, LithiumBattery].Output is BTU

    def test_average_truncates(self):
        """Test odd sums are truncated."""
        blend = Mixed[Diesel, Mixed[Diesel, LithiumBattery]]
        # (100 + 150) / 2 = 125
        assert blend.energy_density() == 125
        odd = Mixed[Mixed[Diesel, LithiumBattery], Mixed[Diesel, Mixed[Diesel, LithiumBattery]]]
        # (150 + 125) / 2 = 137.5
        assert odd.energy_density() == 137

    @pytest.mark.parametrize("first,second", ALL_PAIRS)
    def test_symmetric(self, first, second):
        """Test component order does not matter."""
        assert Mixed[first, second].energy_density() == Mixed[second, first].energy_density()

    def test_subscription_is_cached(self):
        """Test the same components give the same class."""
        assert Mixed[Diesel, Uranium] is Mixed[Diesel, Uranium]
        assert Mixed[Diesel, Uranium] is not Mixed[Uranium, Diesel]

    def test_rejects_non_fuels(self):
        """Test components must be fuel types."""
        with pytest.raises(TypeError):
            Mixed[Diesel, int]
        with pytest.raises(TypeError):
            Mixed[Diesel]

    def test_unparameterized_has_no_density(self):
        """Test bare Mixed cannot report a density."""
        with pytest.raises(TypeError):
            Mixed.energy_density()

    def test_renewable_only_when_both_are(self):
        """Test the renewable marker propagates through blends."""
        assert is_renewable(Mixed[LithiumBattery, LithiumBattery])
        assert not is_renewable(Mixed[LithiumBattery, Diesel])

    def test_density_follows_components(self):
        """Test the density is computed from the components each time."""
        blend = Mixed[Uranium, Diesel]
        assert blend.energy_density() == (1000 + 100) // 2


class TestCustomMixed:
    """Test weighted blends."""

    def test_weighted_density(self):
        """Test a 70/30 blend of Diesel and battery."""
        # 100 * 0.7 + 200 * 0.3 = 130
        assert CustomMixed[70, Diesel, LithiumBattery].energy_density() == BTU(130)

    def test_extremes(self):
        """Test 100 and 0 percent select a single component."""
        assert CustomMixed[100, Diesel, Uranium].energy_density() == 100
        assert CustomMixed[0, Diesel, Uranium].energy_density() == 1000

    def test_half_matches_even_blend(self):
        """Test C=50 equals the even blend for the standard pair."""
        assert CustomMixed[50, Diesel, LithiumBattery].energy_density() == Mixed[
            Diesel, LithiumBattery
        ].energy_density()
        assert CustomMixed[50, Diesel, LithiumBattery].energy_density() == 150

    @pytest.mark.parametrize("first,second", ALL_PAIRS)
    def test_half_matches_even_blend_for_all_pairs(self, first, second):
        """Test C=50 equals the even blend for every pair, odd sums included."""
        assert (
            CustomMixed[50, first, second].energy_density()
            == Mixed[first, second].energy_density()
        )

    def test_weight_out_of_range_is_assertion(self):
        """Test an invalid weight is a programming error."""
        with pytest.raises(AssertionError, match="between 0 and 100"):
            CustomMixed[101, Diesel, Uranium].energy_density()

    def test_requires_int_weight(self):
        """Test the first parameter must be the percent."""
        with pytest.raises(TypeError):
            CustomMixed[Diesel, Uranium, 50]

    def test_rejects_bool_weight(self):
        """Test True is not taken as a 1% weight."""
        with pytest.raises(TypeError):
            CustomMixed[True, Diesel, Uranium]

    def test_blend_of_blends(self):
        """Test weighted blends accept blended components."""
        blend = CustomMixed[25, Mixed[Diesel, LithiumBattery], Uranium]
        # 150 * 0.25 + 1000 * 0.75 = 787.5
        assert blend.energy_density() == 787
