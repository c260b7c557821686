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
Utility functions for the wire antenna model:
- Numeric helpers and impedance formulas (SWR, phase, magnitude)
- Resonance test and display labels
- Standing wave plotting
"""

import os
import math
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from distribution import sample_positions
from config import (
    Z0, MAX_SWR, SWR_GAMMA_CEILING,
    RESONANCE_MIN_REACTANCE, RESONANCE_RESISTANCE_FRACTION,
    QUALITY_BANDS, QUALITY_WORST, PLOT_POINTS,
)


# ============================================================
# Numeric Helpers
# ============================================================

def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def log10(x):
    return math.log10(x)


def round_half_up(x):
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))


# ============================================================
# Impedance Formulas
# ============================================================

def calculate_swr(resistance, reactance, z0=Z0):
    """SWR on a z0 line terminated in R + jX.

    Returns MAX_SWR once |gamma| reaches SWR_GAMMA_CEILING instead of
    dividing by (1 - |gamma|) ~ 0, and never more than MAX_SWR.
    """
    z = complex(resistance, reactance)
    gamma = abs(z - z0) / abs(z + z0)
    if gamma >= SWR_GAMMA_CEILING:
        return MAX_SWR
    return min((1 + gamma) / (1 - gamma), MAX_SWR)


def calculate_phase_angle(resistance, reactance):
    """Current/voltage phase angle in radians."""
    return math.atan2(reactance, resistance)


def calculate_impedance_magnitude(resistance, reactance):
    return math.hypot(resistance, reactance)


def format_impedance(resistance, reactance):
    """Format R + jX rounded to whole ohms, e.g. '73 +j12 Ω', '36 -j4 Ω' or '50 Ω'."""
    r = round_half_up(resistance)
    x = round_half_up(reactance)
    if abs(x) < 1:
        return f'{r} Ω'
    sign = '+' if x >= 0 else '-'
    return f'{r} {sign}j{abs(x)} Ω'


def is_resonant(resistance, reactance):
    """True when the feed point is close to purely resistive.

    |X| < max(15, 0.2 * R). Every resonance decision in the model goes
    through this function.
    """
    threshold = max(RESONANCE_MIN_REACTANCE, resistance * RESONANCE_RESISTANCE_FRACTION)
    return abs(reactance) < threshold


# ============================================================
# Display Labels
# ============================================================

def match_quality(swr):
    """Return (label, colour) describing how well an SWR value is matched."""
    for max_swr, label, color in QUALITY_BANDS:
        if swr <= max_swr:
            return label, color
    return QUALITY_WORST


def describe_feed_position(feed_position):
    percentage = round_half_up(feed_position * 100)
    if percentage == 0:
        return 'Left End Fed (0%)'
    if percentage == 50:
        return 'Center Fed (50%)'
    if percentage == 100:
        return 'Right End Fed (100%)'
    return f'Off-Center Fed ({percentage}%)'


# ============================================================
# Plotting Functions
# ============================================================

def plot_distribution(model, n_points=PLOT_POINTS, save_path=None):
    """Plot current and voltage amplitude along the wire with node markers.

    Args:
        model: AntennaModel to sample
        n_points: number of evenly spaced samples from end to end
        save_path: PNG path, or None to skip saving
    """
    from nodes import NodesCalculator

    positions = sample_positions(model.length, n_points)
    distribution = model.get_spatial_distributions(positions)
    nodes_info = NodesCalculator().calculate_nodes_and_antinodes(model)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(positions, distribution['current'], 'b-', linewidth=2, label='Current')
    ax.plot(positions, distribution['voltage'], 'r-', linewidth=2, label='Voltage')

    i_nodes = nodes_info['current']['nodes']
    v_nodes = nodes_info['voltage']['nodes']
    ax.plot(i_nodes, np.zeros(len(i_nodes)), 'bo', markersize=7, label='Current nodes')
    ax.plot(v_nodes, np.zeros(len(v_nodes)), 'rs', markersize=6, label='Voltage nodes')

    ax.axhline(0, color='black', lw=0.6, zorder=0)
    ax.set_xlabel('Position from feed center (m)', fontsize=12)
    ax.set_ylabel('Relative amplitude', fontsize=12)
    ax.set_title(f'{model.get_antenna_type()}: {model.length:.1f} m at '
                 f'{model.frequency:.2f} MHz', fontsize=14)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=10)
    plt.tight_layout()

    if save_path:
        save_dir = os.path.dirname(save_path)
        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
        fig.savefig(save_path, dpi=150)
        print(f"  Saved: {save_path}")
    plt.close(fig)
    return fig
