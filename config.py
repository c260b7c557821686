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
Central configuration for the straight-wire antenna model.
Lengths in m, frequencies in MHz, wire diameter in mm.
"""

import math

# --- Physical Constants ---
C_MHZ_M = 300.0                 # speed of light in MHz*m (wavelength = C / f)
Z0 = 50.0                       # ohm, reference feed line impedance
FREE_SPACE_IMPEDANCE = 377.0    # ohm
DIPOLE_BASE_RESISTANCE = 73.1   # ohm, half-wave dipole radiation resistance

# --- Output Limits ---
MIN_RESISTANCE = 0.1            # ohm
MAX_RESISTANCE = 50000.0        # ohm
MIN_REACTANCE = -5000.0         # ohm
MAX_REACTANCE = 5000.0          # ohm
MIN_SWR = 1.0
MAX_SWR = 999.0
SWR_GAMMA_CEILING = 0.999       # |gamma| at or above this reports MAX_SWR

# Standing wave amplitude clamp (arbitrary display units)
DISTRIBUTION_LIMIT = 10.0
CURRENT_PEAK = 2.0
VOLTAGE_PEAK = 4.0

# --- Numeric Guards ---
SINGULARITY_EPS = 0.001         # |sin(beta)| below this is a high-Z resonance
CENTER_FED_SINGULAR_R = 2000.0  # ohm
END_FED_SINGULAR_R = 5000.0     # ohm
END_FED_HALF_WAVE_R = 2500.0    # ohm
END_FED_MAX_R = 15000.0         # ohm

# Wire thickness correction: log10(L/r) is referenced to this value
THIN_WIRE_LOG_REF = 2.25

# --- Resonance ---
# An antenna is resonant when |X| < max(RESONANCE_MIN_REACTANCE, R * RESONANCE_RESISTANCE_FRACTION)
RESONANCE_MIN_REACTANCE = 15.0  # ohm
RESONANCE_RESISTANCE_FRACTION = 0.2
TUNING_SCALE = 0.1              # fraction of a wavelength per unit X/377

# --- Node Search ---
NODE_EDGE_MARGIN = 0.1          # m, keep interior nodes this far from the wire ends
MAX_HARMONIC_TERMS = 8          # n = 0..7 standing wave terms

# --- Feed Positions ---
CENTER_FEED = 0.5
END_FEEDS = (0.0, 1.0)

# --- Matching Networks ---
# id -> ratio, display name, transformer type
MATCHING_NETWORKS = {
    'use1to1Balun': {'ratio': 1, 'name': '1:1 Balun', 'type': 'balun'},
    'use4to1Balun': {'ratio': 4, 'name': '4:1 Balun', 'type': 'balun'},
    'use4to1UnUn':  {'ratio': 4, 'name': '4:1 UnUn', 'type': 'unun'},
    'use9to1UnUn':  {'ratio': 9, 'name': '9:1 UnUn', 'type': 'unun'},
    'use49to1UnUn': {'ratio': 49, 'name': '49:1 UnUn', 'type': 'unun'},
}

# --- Default Design (40m band half-wave dipole) ---
DEFAULT_PARAMS = {
    'length': 20.0,             # m
    'frequency': 7.5,           # MHz
    'feed_position': 0.5,       # fraction of length
    'wire_diameter': 2.0,       # mm
    'matching_network': None,
}

# --- Match Quality Bands ---
# (max SWR, label, display colour), checked in order
QUALITY_BANDS = [
    (1.2,  'Excellent',                  '#00ff00'),
    (1.5,  'Very Good',                  '#88ff00'),
    (2.0,  'Good',                       '#ffaa00'),
    (2.5,  'Acceptable',                 '#ffaa00'),
    (3.0,  'Fair - Tuner Helpful',       '#ff6600'),
    (5.0,  'Poor - Tuner Needed',        '#ff6600'),
    (10.0, 'Bad - Matching Required',    '#ff3366'),
]
QUALITY_WORST = ('Very Poor - Major Mismatch', '#ff3366')

RESONANT_COLOR = '#00ff00'
NOT_RESONANT_COLOR = '#ff6600'

# --- Plotting ---
PLOT_POINTS = 201               # standing wave samples from end to end

# --- Caching ---
# Maximum distribution cache entries; None keeps every entry until cleared
DISTRIBUTION_CACHE_MAX = None


def wavelength(freq_mhz):
    """Free-space wavelength in m for a frequency in MHz."""
    return C_MHZ_M / freq_mhz


def electrical_length(length_m, freq_mhz):
    """Physical length in wavelengths."""
    return length_m / wavelength(freq_mhz)


def wave_number(freq_mhz):
    """Free-space wave number k = 2*pi / lambda, in rad/m."""
    return 2 * math.pi / wavelength(freq_mhz)


def length_to_radius_ratio(length_m, wire_diameter_mm):
    """Slenderness L / r with the wire radius converted from mm diameter to m."""
    wire_radius_m = wire_diameter_mm / 2000.0
    return length_m / wire_radius_m
