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

"""
Closed-form feed-point impedance of a straight wire antenna.

Three feed regimes are modelled, chosen by exact comparison of the feed
position (fraction of the wire length):
  - center fed (0.5): short dipole, near half-wave and general sinusoidal
    current approximations
  - end fed (0 or 1): quarter-wave monopole, end-fed half-wave and a
    transmission-line style general case
  - off center (anything else): the center-fed value transformed by the
    current ratio between the center and the feed point

A feed position of 0.4999999 is off center, not center fed. Results are
clamped to the resistance/reactance limits in config and memoized per
(length, frequency, feed_position, wire_diameter).
"""

import math
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from cache import ResultCache
from config import (
    DIPOLE_BASE_RESISTANCE, FREE_SPACE_IMPEDANCE,
    MIN_RESISTANCE, MAX_RESISTANCE, MIN_REACTANCE, MAX_REACTANCE,
    SINGULARITY_EPS, CENTER_FED_SINGULAR_R, END_FED_SINGULAR_R,
    END_FED_HALF_WAVE_R, END_FED_MAX_R, THIN_WIRE_LOG_REF,
    CENTER_FEED, END_FEEDS,
    electrical_length, wave_number, length_to_radius_ratio,
)
from utils import (
    clamp, log10, calculate_phase_angle, calculate_impedance_magnitude, is_resonant,
)


@dataclass(frozen=True)
class Impedance:
    """Feed-point impedance R + jX in ohms."""
    resistance: float
    reactance: float

    @property
    def magnitude(self):
        return calculate_impedance_magnitude(self.resistance, self.reactance)

    @property
    def phase_angle(self):
        return calculate_phase_angle(self.resistance, self.reactance)

    @property
    def is_resonant(self):
        return is_resonant(self.resistance, self.reactance)

    def as_complex(self):
        return complex(self.resistance, self.reactance)


class FeedRegime(Enum):
    CENTER = 'center'
    END = 'end'
    OFF_CENTER = 'off_center'


def feed_regime(feed_position):
    """Exact-equality feed regime selection shared by impedance and classification."""
    if feed_position == CENTER_FEED:
        return FeedRegime.CENTER
    if feed_position in END_FEEDS:
        return FeedRegime.END
    return FeedRegime.OFF_CENTER


def limit_impedance(resistance, reactance):
    """Clamp raw model output into the physical limits."""
    return Impedance(
        clamp(resistance, MIN_RESISTANCE, MAX_RESISTANCE),
        clamp(reactance, MIN_REACTANCE, MAX_REACTANCE),
    )


def calculate_phase_relationship(impedance):
    """Phase angle between current and voltage and the resonance flag."""
    phase_angle = impedance.phase_angle
    return {
        'phase_angle': phase_angle,
        'phase_degrees': math.degrees(phase_angle),
        'is_resonant': impedance.is_resonant,
    }


class ImpedanceCalculator:
    """Memoized feed-point impedance for AntennaParameters-like objects.

    Any object with length, frequency, feed_position and wire_diameter
    attributes can be passed in.
    """

    def __init__(self, cache=None):
        self.cache = cache if cache is not None else ResultCache('impedance')

    @staticmethod
    def cache_key(params):
        return (params.length, params.frequency, params.feed_position, params.wire_diameter)

    def calculate_impedance(self, params):
        key = self.cache_key(params)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        length = params.length
        e_len = electrical_length(length, params.frequency)
        k = wave_number(params.frequency)
        l_to_r = length_to_radius_ratio(length, params.wire_diameter)

        regime = feed_regime(params.feed_position)
        if regime is FeedRegime.CENTER:
            r, x = self._center_fed(length, e_len, k, l_to_r)
        elif regime is FeedRegime.END:
            r, x = self._end_fed(length, e_len, k, l_to_r)
        else:
            r, x = self._off_center(length, e_len, k, l_to_r, params.feed_position)

        impedance = limit_impedance(r, x)
        logger.debug(f"Impedance miss {key}: {regime.value}, eLen={e_len:.4f} -> "
                     f"{impedance.resistance:.2f} {impedance.reactance:+.2f}j")
        return self.cache.put(key, impedance)

    def _center_fed(self, length, e_len, k, l_to_r):
        thickness = log10(l_to_r) - THIN_WIRE_LOG_REF

        # Short dipole: triangular current distribution
        if e_len < 0.1:
            resistance = max(20 * math.pi ** 2 * e_len ** 2, MIN_RESISTANCE)
            reactance = -119.9 * thickness / (e_len * 2 * math.pi)
            return resistance, reactance

        # Near half-wave: only a small wire thickness correction on X
        if abs(e_len - 0.5) < 0.05:
            return DIPOLE_BASE_RESISTANCE, 42.5 * thickness * 0.02

        beta = k * length / 2
        sin_beta = math.sin(beta)
        cos_beta = math.cos(beta)

        # Current node at the feed: full-wave style high impedance
        if abs(sin_beta) < SINGULARITY_EPS:
            return CENTER_FED_SINGULAR_R, 0.0

        resistance = DIPOLE_BASE_RESISTANCE * sin_beta ** 2
        reactance = (43.1 * (cos_beta - math.cos(k * length)) / sin_beta
                     + 42.5 * thickness * 0.1)
        return resistance, reactance

    def _end_fed(self, length, e_len, k, l_to_r):
        if abs(e_len - 0.25) < 0.02:
            # Quarter-wave monopole: half the dipole values
            return (DIPOLE_BASE_RESISTANCE / 2,
                    21.25 * (log10(l_to_r) - THIN_WIRE_LOG_REF))

        if abs(e_len - 0.5) < 0.02:
            return END_FED_HALF_WAVE_R, 0.0

        beta = k * length
        sin_beta = math.sin(beta)
        cos_beta = math.cos(beta)

        if abs(sin_beta) < SINGULARITY_EPS:
            return END_FED_SINGULAR_R, 0.0

        resistance = min(DIPOLE_BASE_RESISTANCE / cos_beta ** 2, END_FED_MAX_R)
        reactance = clamp(FREE_SPACE_IMPEDANCE * math.tan(beta / 2),
                          MIN_REACTANCE, MAX_REACTANCE)
        return resistance, reactance

    def _off_center(self, length, e_len, k, l_to_r, feed_position):
        center_r, center_x = self._center_fed(length, e_len, k, l_to_r)
        offset = abs(feed_position - CENTER_FEED)
        electrical_offset = offset * k * length
        current_scaling = math.cos(electrical_offset)

        if offset < 0.1:
            transform = 1 + offset * 2
        else:
            transform = 1 / current_scaling ** 2

        resistance = center_r * transform
        reactance = center_x * math.sqrt(transform) * current_scaling
        return resistance, reactance
