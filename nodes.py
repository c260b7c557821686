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
Standing wave nodes/antinodes and resonance analysis.

Positions are in m from the wire center. The current standing wave has
nodes at the open wire ends and at odd quarter-wavelength spacings
(n + 0.5) * pi / k from the center; the voltage wave is shifted by a
quarter wavelength relative to the current.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import (
    FREE_SPACE_IMPEDANCE, RESONANCE_MIN_REACTANCE, TUNING_SCALE,
    NODE_EDGE_MARGIN, MAX_HARMONIC_TERMS, RESONANT_COLOR, NOT_RESONANT_COLOR,
)
from utils import round_half_up


class ResonanceStatus(Enum):
    RESONANT = 'Resonant'
    NOT_RESONANT = 'Not Resonant'


@dataclass(frozen=True)
class ResonanceGuidance:
    status: ResonanceStatus
    text: str
    color_hint: str
    length_adjustment: Optional[float] = None
    reactance: Optional[float] = None


# (fraction of a wavelength, display name)
RESONANT_LENGTHS = [
    (0.25, 'λ/4 (Quarter Wave)'),
    (0.5,  'λ/2 (Half Wave)'),
    (0.75, '3λ/4 (Three Quarter)'),
    (1.0,  'λ (Full Wave)'),
    (1.5,  '3λ/2 (One and Half)'),
]

HARMONIC_NAMES = [
    '', '1st (Fundamental)', '2nd', '3rd', '4th', '5th',
    '6th', '7th', '8th', '9th', '10th',
]


def _odd_quarter_positions(k):
    """(n + 0.5) * pi / k for n = 0..7."""
    return [((n + 0.5) * math.pi) / k for n in range(MAX_HARMONIC_TERMS)]


def _half_wave_positions(k):
    """n * pi / k for n = 1..7."""
    return [(n * math.pi) / k for n in range(1, MAX_HARMONIC_TERMS)]


def _mirrored(base, candidates, upper, lower=None):
    """base plus +/- each candidate inside (lower, upper), sorted and unique."""
    points = list(base)
    for p in candidates:
        if p < upper and (lower is None or p > lower):
            points.append(p)
            points.append(-p)
    return sorted(set(points))


def harmonic_number(electrical_length):
    harmonic = round_half_up(electrical_length * 2)
    return 1 if harmonic <= 0 else harmonic


class NodesCalculator:
    """Node/antinode extraction and tuning guidance for an AntennaModel."""

    def calculate_nodes_and_antinodes(self, model):
        half_length = model.length / 2
        k = model.wave_number
        upper = half_length - NODE_EDGE_MARGIN
        ends = (-half_length, half_length)

        return {
            'current': {
                'nodes': _mirrored(ends, _odd_quarter_positions(k), upper),
                'antinodes': _mirrored((0.0,), _half_wave_positions(k), upper),
            },
            'voltage': {
                'nodes': _mirrored((0.0,), _half_wave_positions(k), upper),
                'antinodes': _mirrored(ends, _odd_quarter_positions(k), upper,
                                       lower=NODE_EDGE_MARGIN),
            },
            'harmonic': harmonic_number(model.electrical_length),
            'is_resonant': model.calculate_impedance().is_resonant,
        }

    def get_resonance_guidance(self, model):
        """Length correction hint from the sign and size of the feed reactance.

        Capacitive reactance (X < -15) reads as a wire that is too short,
        inductive reactance (X > 15) as one that is too long. The suggested
        change is (|X| / 377) * 0.1 wavelengths.
        """
        impedance = model.calculate_impedance()
        reactance = impedance.reactance

        if impedance.is_resonant:
            return ResonanceGuidance(
                status=ResonanceStatus.RESONANT,
                text='Antenna is well-matched',
                color_hint=RESONANT_COLOR,
            )

        current_length = model.length
        if reactance < -RESONANCE_MIN_REACTANCE:
            adjustment = abs(reactance) / FREE_SPACE_IMPEDANCE * model.wavelength * TUNING_SCALE
            target = current_length + adjustment
            text = f'Too Short - Add ~{adjustment:.1f}m wire (Target: {target:.1f}m)'
        elif reactance > RESONANCE_MIN_REACTANCE:
            adjustment = reactance / FREE_SPACE_IMPEDANCE * model.wavelength * TUNING_SCALE
            target = current_length - adjustment
            text = f'Too Long - Remove ~{adjustment:.1f}m wire (Target: {target:.1f}m)'
        else:
            adjustment = 0.0
            text = 'Nearly Resonant - Minor adjustment needed'

        return ResonanceGuidance(
            status=ResonanceStatus.NOT_RESONANT,
            text=text,
            color_hint=NOT_RESONANT_COLOR,
            length_adjustment=adjustment,
            reactance=reactance,
        )

    def find_closest_resonant_length(self, model):
        wavelength = model.wavelength
        current_length = model.length

        best_fraction, best_name = RESONANT_LENGTHS[0]
        best_length = wavelength * best_fraction
        for fraction, name in RESONANT_LENGTHS[1:]:
            candidate = wavelength * fraction
            if abs(current_length - candidate) < abs(current_length - best_length):
                best_name, best_length = name, candidate

        difference = current_length - best_length
        return {
            'name': best_name,
            'length': best_length,
            'difference': difference,
            'percent_off': difference / best_length * 100,
        }

    def get_detailed_resonance_info(self, model):
        info = self.calculate_nodes_and_antinodes(model)
        info['guidance'] = self.get_resonance_guidance(model)
        info['impedance'] = model.calculate_impedance()
        info['closest_resonant'] = self.find_closest_resonant_length(model)
        return info

    @staticmethod
    def get_harmonic_name(harmonic):
        # Past 10 the suffix is always 'th' ('21th', '22th')
        if 0 < harmonic < len(HARMONIC_NAMES):
            return HARMONIC_NAMES[harmonic]
        return f'{harmonic}th'
