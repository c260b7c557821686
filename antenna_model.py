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
Parametric straight-wire antenna model.

AntennaModel owns the design parameters (length in m, frequency in MHz,
feed position as a fraction of the length, wire diameter in mm and an
optional matching network) and answers impedance, matching, standing wave
and classification queries through a PhysicsEngine that holds the result
caches.

Inputs are validated at the setters; the physics below them assumes
length, frequency and wire diameter > 0 and 0 <= feed_position <= 1.
"""

import math
import numbers
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Optional

from loguru import logger

from config import (
    DEFAULT_PARAMS, CENTER_FEED,
    wavelength, electrical_length, wave_number, length_to_radius_ratio,
)
from distribution import DistributionCalculator
from impedance import (
    ImpedanceCalculator, FeedRegime, feed_regime, calculate_phase_relationship,
)
from matching_network import apply_matching, is_known_network
from utils import round_half_up


class InvalidParameterError(ValueError):
    """Raised when an antenna parameter is outside its physical range."""


def _check_number(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")


def _check_positive(name, value):
    _check_number(name, value)
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value!r}")


def _check_feed_position(value):
    _check_number('feed_position', value)
    if not 0 <= value <= 1:
        raise InvalidParameterError(f"feed_position must be within [0, 1], got {value!r}")


def _check_matching_network(value):
    if value is not None and not is_known_network(value):
        raise InvalidParameterError(f"Unknown matching network: {value!r}")


_VALIDATORS = {
    'length': lambda v: _check_positive('length', v),
    'frequency': lambda v: _check_positive('frequency', v),
    'feed_position': _check_feed_position,
    'wire_diameter': lambda v: _check_positive('wire_diameter', v),
    'matching_network': _check_matching_network,
}


def validate_param(name, value):
    try:
        _VALIDATORS[name](value)
    except InvalidParameterError as e:
        logger.warning(str(e))
        raise


@dataclass(frozen=True)
class AntennaParameters:
    """Snapshot of the antenna design parameters."""
    length: float = DEFAULT_PARAMS['length']
    frequency: float = DEFAULT_PARAMS['frequency']
    feed_position: float = DEFAULT_PARAMS['feed_position']
    wire_diameter: float = DEFAULT_PARAMS['wire_diameter']
    matching_network: Optional[str] = DEFAULT_PARAMS['matching_network']

    def validate(self):
        for name, value in asdict(self).items():
            validate_param(name, value)
        return self


# ============================================================
# Classification
# ============================================================

class AntennaType(Enum):
    SHORT_DIPOLE = 'Short Dipole'
    HALF_WAVE_DIPOLE = 'Half-Wave Dipole'
    NEAR_HALF_WAVE_DIPOLE = 'Near Half-Wave Dipole'
    FULL_WAVE_LOOP = 'Full-Wave Loop'
    LONG_DIPOLE = 'Long Dipole'
    MULTI_WAVE_DIPOLE = 'Multi-Wave Dipole'
    SHORT_MONOPOLE = 'Short Monopole'
    QUARTER_WAVE_MONOPOLE = 'Quarter-Wave Monopole'
    END_FED_HALF_WAVE = 'End-Fed Half-Wave'
    LONG_MONOPOLE = 'Long Monopole'
    MULTI_WAVE_END_FED = 'Multi-Wave End-Fed'
    NEAR_CENTER_FED_DIPOLE = 'Near Center-Fed Dipole'
    OCF_DIPOLE = 'OCF Dipole'
    OFF_CENTER_FED = 'Off-Center Fed'


@dataclass(frozen=True)
class AntennaClass:
    regime: FeedRegime
    kind: AntennaType
    feed_percent: Optional[int] = None

    @property
    def label(self):
        if self.feed_percent is None:
            return self.kind.value
        return f'{self.kind.value} ({self.feed_percent}%)'


def _classify_center_fed(e_len, resonant):
    if e_len < 0.1:
        return AntennaType.SHORT_DIPOLE
    if abs(e_len - 0.5) < 0.1:
        return AntennaType.HALF_WAVE_DIPOLE if resonant else AntennaType.NEAR_HALF_WAVE_DIPOLE
    if abs(e_len - 1.0) < 0.05:
        return AntennaType.FULL_WAVE_LOOP
    return AntennaType.LONG_DIPOLE if e_len < 1.0 else AntennaType.MULTI_WAVE_DIPOLE


def _classify_end_fed(e_len, resonant):
    if e_len < 0.1:
        return AntennaType.SHORT_MONOPOLE
    if abs(e_len - 0.25) < 0.02 and resonant:
        return AntennaType.QUARTER_WAVE_MONOPOLE
    if abs(e_len - 0.5) < 0.02:
        return AntennaType.END_FED_HALF_WAVE
    return AntennaType.LONG_MONOPOLE if e_len < 1.0 else AntennaType.MULTI_WAVE_END_FED


def _classify_off_center(e_len, feed_position):
    offset_percent = round_half_up(abs(feed_position - CENTER_FEED) * 200)
    if offset_percent < 10:
        return AntennaType.NEAR_CENTER_FED_DIPOLE, None
    feed_percent = round_half_up(feed_position * 100)
    if abs(e_len - 0.5) < 0.1:
        return AntennaType.OCF_DIPOLE, feed_percent
    return AntennaType.OFF_CENTER_FED, feed_percent


# ============================================================
# Physics Engine
# ============================================================

class PhysicsEngine:
    """Impedance and distribution calculators plus their caches."""

    def __init__(self, impedance_calculator=None, distribution_calculator=None):
        self.impedance_calculator = impedance_calculator or ImpedanceCalculator()
        self.distribution_calculator = distribution_calculator or DistributionCalculator()

    def calculate_impedance(self, params):
        return self.impedance_calculator.calculate_impedance(params)

    def calculate_spatial_distributions(self, params, positions):
        return self.distribution_calculator.calculate_spatial_distributions(params, positions)

    def apply_matching_network(self, impedance, network_id):
        return apply_matching(impedance, network_id)

    def classify_antenna_type(self, params, impedance):
        e_len = electrical_length(params.length, params.frequency)
        regime = feed_regime(params.feed_position)
        if regime is FeedRegime.CENTER:
            return AntennaClass(regime, _classify_center_fed(e_len, impedance.is_resonant))
        if regime is FeedRegime.END:
            return AntennaClass(regime, _classify_end_fed(e_len, impedance.is_resonant))
        kind, feed_percent = _classify_off_center(e_len, params.feed_position)
        return AntennaClass(regime, kind, feed_percent)

    def clear_cache(self):
        self.impedance_calculator.cache.clear()
        self.distribution_calculator.cache.clear()
        logger.debug("Physics caches cleared")

    def get_cache_stats(self):
        """Size, hits and misses of both caches, flattened per cache name."""
        stats = {}
        for name, cache in (('impedance', self.impedance_calculator.cache),
                            ('distribution', self.distribution_calculator.cache)):
            cache_stats = cache.stats()
            for field in ('size', 'hits', 'misses'):
                stats[f'{name}_cache_{field}'] = cache_stats[field]
        return stats


# ============================================================
# Antenna Model
# ============================================================

class AntennaModel:
    """Straight-wire antenna with validated, mutable design parameters."""

    def __init__(self, params=None, physics=None):
        params = (params or AntennaParameters()).validate()
        self._length = float(params.length)
        self._frequency = float(params.frequency)
        self._feed_position = float(params.feed_position)
        self._wire_diameter = float(params.wire_diameter)
        self._matching_network = params.matching_network
        self.physics = physics or PhysicsEngine()

    def __repr__(self):
        return (f'AntennaModel(length={self._length}, frequency={self._frequency}, '
                f'feed_position={self._feed_position}, wire_diameter={self._wire_diameter}, '
                f'matching_network={self._matching_network!r})')

    # --- Parameters ---

    @property
    def length(self):
        return self._length

    @length.setter
    def length(self, value):
        validate_param('length', value)
        self._length = float(value)

    @property
    def frequency(self):
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        validate_param('frequency', value)
        self._frequency = float(value)

    @property
    def feed_position(self):
        return self._feed_position

    @feed_position.setter
    def feed_position(self, value):
        validate_param('feed_position', value)
        self._feed_position = float(value)

    @property
    def wire_diameter(self):
        return self._wire_diameter

    @wire_diameter.setter
    def wire_diameter(self, value):
        validate_param('wire_diameter', value)
        self._wire_diameter = float(value)

    @property
    def matching_network(self):
        return self._matching_network

    @matching_network.setter
    def matching_network(self, value):
        validate_param('matching_network', value)
        self._matching_network = value

    @property
    def parameters(self):
        return AntennaParameters(
            length=self._length,
            frequency=self._frequency,
            feed_position=self._feed_position,
            wire_diameter=self._wire_diameter,
            matching_network=self._matching_network,
        )

    def update(self, **changes):
        """Apply several parameter changes at once; nothing changes if any is invalid."""
        unknown = set(changes) - set(_VALIDATORS)
        if unknown:
            raise InvalidParameterError(f"Unknown antenna parameters: {sorted(unknown)!r}")
        new_params = replace(self.parameters, **changes).validate()
        self._length = float(new_params.length)
        self._frequency = float(new_params.frequency)
        self._feed_position = float(new_params.feed_position)
        self._wire_diameter = float(new_params.wire_diameter)
        self._matching_network = new_params.matching_network

    # --- Derived geometry ---

    @property
    def wavelength(self):
        return wavelength(self._frequency)

    @property
    def electrical_length(self):
        return electrical_length(self._length, self._frequency)

    @property
    def wave_number(self):
        return wave_number(self._frequency)

    @property
    def length_to_radius_ratio(self):
        return length_to_radius_ratio(self._length, self._wire_diameter)

    # --- Physics ---

    def calculate_impedance(self):
        return self.physics.calculate_impedance(self.parameters)

    def apply_matching(self, impedance):
        return self.physics.apply_matching_network(impedance, self._matching_network)

    def get_phase_relationship(self):
        return calculate_phase_relationship(self.calculate_impedance())

    def get_phase_angle(self):
        return self.get_phase_relationship()['phase_angle']

    def classify(self):
        return self.physics.classify_antenna_type(self.parameters, self.calculate_impedance())

    def get_antenna_type(self):
        return self.classify().label

    def get_spatial_distributions(self, positions):
        return self.physics.calculate_spatial_distributions(self.parameters, positions)

    def get_cache_stats(self):
        return self.physics.get_cache_stats()

    def clear_cache(self):
        self.physics.clear_cache()
