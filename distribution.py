# Antenna-Insyght — Wire Antenna Designer
# Copyright (C) 2026 Insyght B.V.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Standing wave current and voltage amplitude along the wire."""

import numpy as np
from loguru import logger

from cache import ResultCache
from config import (
    CURRENT_PEAK, VOLTAGE_PEAK, DISTRIBUTION_LIMIT, DISTRIBUTION_CACHE_MAX, wave_number,
)


def field_amplitudes(k, positions):
    """Current and voltage amplitude at positions (m from the wire center).

    Current is symmetric about the center, voltage antisymmetric: the sign
    of x (+1 at x = 0) flips the voltage on the left half.
    """
    x = np.asarray(positions, dtype=float)
    electrical_distance = k * np.abs(x)
    phase_sign = np.where(x >= 0, 1.0, -1.0)

    current = np.clip(CURRENT_PEAK * np.cos(electrical_distance),
                      -DISTRIBUTION_LIMIT, DISTRIBUTION_LIMIT)
    voltage = np.clip(VOLTAGE_PEAK * phase_sign * np.sin(electrical_distance),
                      -DISTRIBUTION_LIMIT, DISTRIBUTION_LIMIT)
    return current, voltage


def sample_positions(length, n_points):
    """Evenly spaced positions from -length/2 to +length/2 (left to right)."""
    half = length / 2
    return np.linspace(-half, half, n_points)


class DistributionCalculator:
    """Memoized spatial distributions keyed on (length, frequency, sample count).

    The sample positions themselves are not part of the key: callers are
    expected to sample the same wire the same way for a given count.

    max_entries bounds the cache built here (DISTRIBUTION_CACHE_MAX when
    omitted). An injected cache keeps its own bound, so passing both is an
    error.
    """

    def __init__(self, cache=None, max_entries=None):
        if cache is not None:
            if max_entries is not None:
                raise ValueError("max_entries cannot be combined with an injected cache")
            self.cache = cache
        else:
            if max_entries is None:
                max_entries = DISTRIBUTION_CACHE_MAX
            self.cache = ResultCache('distribution', max_entries)

    @staticmethod
    def cache_key(params, n_points):
        return (params.length, params.frequency, n_points)

    def calculate_spatial_distributions(self, params, positions):
        positions = np.asarray(positions, dtype=float)
        key = self.cache_key(params, len(positions))
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        k = wave_number(params.frequency)
        current, voltage = field_amplitudes(k, positions)
        positions = positions.copy()
        for arr in (current, voltage, positions):
            arr.setflags(write=False)

        logger.debug(f"Distribution miss {key}")
        return self.cache.put(key, {
            'current': current,
            'voltage': voltage,
            'positions': positions,
        })
