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
Text readout of the current antenna design.

build_readout() gathers every value the display panel shows as
preformatted strings:
- Basic parameters and derived geometry
- Antenna and system (after matching) impedance, SWR and match quality
- Antenna type, harmonic and standing wave node counts
- Resonance status, tuning guidance and closest resonant length

Run as a script to print the summary of a design and save its standing
wave plot:
    python report.py --length 20 --frequency 7.5 --feed 0.5 --output results
"""

import math
import os

from config import MIN_SWR, MAX_SWR, DEFAULT_PARAMS, MATCHING_NETWORKS, PLOT_POINTS
from nodes import NodesCalculator, ResonanceStatus
from utils import (
    clamp, calculate_swr, format_impedance, match_quality,
    describe_feed_position, round_half_up, plot_distribution,
)


def build_readout(model, nodes_calculator=None):
    """Return a dict of display strings for an AntennaModel."""
    nodes_calculator = nodes_calculator or NodesCalculator()

    antenna_z = model.calculate_impedance()
    match = model.apply_matching(antenna_z)
    system_z = match.impedance

    swr = clamp(calculate_swr(system_z.resistance, system_z.reactance), MIN_SWR, MAX_SWR)
    swr_text = f'{swr:.1f}:1'
    # Quality follows the SWR as displayed (one decimal)
    quality, quality_color = match_quality(float(swr_text.split(':')[0]))

    info = nodes_calculator.get_detailed_resonance_info(model)
    guidance = info['guidance']
    closest = info['closest_resonant']
    sign = '+' if closest['difference'] > 0 else ''
    cache_stats = model.get_cache_stats()

    return {
        'length': f'{model.length:.1f}m',
        'frequency': f'{model.frequency:.2f} MHz',
        'wavelength': f'{model.wavelength:.1f}m',
        'electrical_length': f'{model.electrical_length:.3f}λ',
        'wire_diameter': f'{model.wire_diameter:.1f}mm',
        'feed_position': describe_feed_position(model.feed_position),
        'antenna_impedance': format_impedance(antenna_z.resistance, antenna_z.reactance),
        'system_impedance': format_impedance(system_z.resistance, system_z.reactance),
        'matching_type': match.matching_type,
        'swr': swr_text,
        'quality': quality,
        'quality_color': quality_color,
        'antenna_type': model.get_antenna_type(),
        'harmonic': nodes_calculator.get_harmonic_name(info['harmonic']),
        'current_nodes': str(len(info['current']['nodes'])),
        'current_antinodes': str(len(info['current']['antinodes'])),
        'voltage_nodes': str(len(info['voltage']['nodes'])),
        'voltage_antinodes': str(len(info['voltage']['antinodes'])),
        'resonance_status': guidance.status.value,
        'resonance_guidance': guidance.text,
        'resonance_color': guidance.color_hint,
        'closest_resonant': (f"{closest['name']} "
                             f"({sign}{closest['difference']:.1f}m)"),
        'phase_degrees': f'{round_half_up(math.degrees(antenna_z.phase_angle))}°',
        'impedance_cache': f"{cache_stats['impedance_cache_size']} entries",
        'distribution_cache': f"{cache_stats['distribution_cache_size']} entries",
    }


def print_summary(model, nodes_calculator=None):
    """Print a design summary to stdout."""
    r = build_readout(model, nodes_calculator)

    print(f"\n{'='*60}")
    print(f"  {r['antenna_type'].upper()} SUMMARY")
    print(f"{'='*60}")
    print(f"  Length: {r['length']}  Frequency: {r['frequency']}  "
          f"Wavelength: {r['wavelength']} ({r['electrical_length']})")
    print(f"  Wire: {r['wire_diameter']}  Feed: {r['feed_position']}")
    print(f"  Antenna Z: {r['antenna_impedance']}  Phase: {r['phase_degrees']}")
    print(f"  Matching: {r['matching_type']}  System Z: {r['system_impedance']}")
    print(f"  SWR: {r['swr']} ({r['quality']})")
    print(f"  Harmonic: {r['harmonic']}")
    print(f"  Current nodes/antinodes: {r['current_nodes']}/{r['current_antinodes']}  "
          f"Voltage nodes/antinodes: {r['voltage_nodes']}/{r['voltage_antinodes']}")
    print(f"\n  Resonance: [{r['resonance_status']}] {r['resonance_guidance']}")
    if r['resonance_status'] != ResonanceStatus.RESONANT.value:
        print(f"  Closest: {r['closest_resonant']}")
    print(f"  Cache: Z {r['impedance_cache']}, distribution {r['distribution_cache']}")
    print(f"{'='*60}\n")
    return r


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(description='Straight-wire antenna summary and standing wave plot')
    parser.add_argument('--length', type=float, default=DEFAULT_PARAMS['length'], help='Wire length (m)')
    parser.add_argument('--frequency', type=float, default=DEFAULT_PARAMS['frequency'],
                        help='Frequency (MHz)')
    parser.add_argument('--feed', type=float, default=DEFAULT_PARAMS['feed_position'],
                        help='Feed position as a fraction of the length')
    parser.add_argument('--diameter', type=float, default=DEFAULT_PARAMS['wire_diameter'],
                        help='Wire diameter (mm)')
    parser.add_argument('--network', choices=sorted(MATCHING_NETWORKS), default=None,
                        help='Matching network')
    parser.add_argument('--points', type=int, default=PLOT_POINTS, help='Plot samples')
    parser.add_argument('--output', default='results', help='Output directory')
    args = parser.parse_args(argv)

    from antenna_model import AntennaModel, AntennaParameters
    model = AntennaModel(AntennaParameters(
        length=args.length,
        frequency=args.frequency,
        feed_position=args.feed,
        wire_diameter=args.diameter,
        matching_network=args.network,
    ))

    readout = print_summary(model)
    plot_distribution(model, n_points=args.points,
                      save_path=os.path.join(args.output, 'standing_waves.png'))
    return readout


if __name__ == '__main__':
    main()
