"""Tests for standing wave current/voltage distributions."""
import math

import numpy as np
import pytest

from antenna_model import AntennaParameters
from cache import ResultCache
from distribution import DistributionCalculator, field_amplitudes, sample_positions


@pytest.fixture
def calc():
    return DistributionCalculator()


@pytest.fixture
def mirrored_positions():
    xs = np.array([0.5, 1.3, 4.0, 7.7, 10.0])
    return np.concatenate([-xs[::-1], xs])


class TestFieldAmplitudes:
    """Tests for the per-position amplitude formula."""

    def test_feed_point(self):
        k = 2 * math.pi / 40
        current, voltage = field_amplitudes(k, [0.0])
        assert current[0] == pytest.approx(2.0)
        assert voltage[0] == 0.0

    def test_half_wave_ends(self):
        """At the ends of a half-wave dipole current is zero and voltage peaks."""
        k = 2 * math.pi / 40
        current, voltage = field_amplitudes(k, [-10.0, 10.0])
        assert current == pytest.approx([0.0, 0.0], abs=1e-12)
        assert voltage[0] == pytest.approx(-4.0)
        assert voltage[1] == pytest.approx(4.0)

    def test_amplitudes_within_limits(self):
        k = 2 * math.pi / 10
        current, voltage = field_amplitudes(k, np.linspace(-50, 50, 1001))
        assert np.all(np.abs(current) <= 10)
        assert np.all(np.abs(voltage) <= 10)


class TestSymmetry:
    """Current is symmetric and voltage antisymmetric about the center."""

    def test_center_fed_symmetry(self, calc, mirrored_positions):
        dist = calc.calculate_spatial_distributions(AntennaParameters(), mirrored_positions)
        left_i, right_i = dist['current'][:5], dist['current'][5:]
        left_v, right_v = dist['voltage'][:5], dist['voltage'][5:]
        np.testing.assert_array_equal(left_i[::-1], right_i)
        np.testing.assert_array_equal(left_v[::-1], -right_v)


class TestDistributionCalculator:
    """Tests for memoization and result shape."""

    def test_result_shape(self, calc):
        positions = sample_positions(20.0, 21)
        dist = calc.calculate_spatial_distributions(AntennaParameters(), positions)
        assert len(dist['current']) == 21
        assert len(dist['voltage']) == 21
        np.testing.assert_array_equal(dist['positions'], positions)
        assert dist['positions'][0] == pytest.approx(-10.0)
        assert dist['positions'][-1] == pytest.approx(10.0)

    def test_cached_by_sample_count(self, calc):
        """The key is (length, frequency, count): same count returns the stored result."""
        first = calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, 11))
        again = calc.calculate_spatial_distributions(AntennaParameters(), np.zeros(11))
        assert again is first
        assert len(calc.cache) == 1

    def test_feed_and_diameter_not_in_key(self, calc):
        positions = sample_positions(20, 11)
        calc.calculate_spatial_distributions(AntennaParameters(), positions)
        calc.calculate_spatial_distributions(
            AntennaParameters(feed_position=0.2, wire_diameter=4.0), positions)
        assert len(calc.cache) == 1

    def test_new_count_new_entry(self, calc):
        calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, 11))
        calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, 12))
        assert len(calc.cache) == 2

    def test_cached_arrays_read_only(self, calc):
        dist = calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, 5))
        with pytest.raises(ValueError):
            dist['current'][0] = 1.0

    def test_caller_positions_not_frozen(self, calc):
        positions = sample_positions(20, 5)
        calc.calculate_spatial_distributions(AntennaParameters(), positions)
        positions[0] = 0.0

    def test_optional_bound(self):
        calc = DistributionCalculator(max_entries=2)
        for n in (5, 6, 7):
            calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, n))
        assert len(calc.cache) == 2
        assert (20.0, 7.5, 5) not in calc.cache

    def test_injected_cache(self):
        cache = ResultCache("shared", max_entries=3)
        calc = DistributionCalculator(cache=cache)
        calc.calculate_spatial_distributions(AntennaParameters(), sample_positions(20, 5))
        assert calc.cache is cache
        assert len(cache) == 1

    def test_injected_cache_with_bound_rejected(self):
        with pytest.raises(ValueError):
            DistributionCalculator(cache=ResultCache("shared"), max_entries=2)
