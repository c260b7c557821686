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
Feed-point matching transformers (baluns and ununs).
A transformer with ratio N:1 presents Z/N to the feed line.
"""

from typing import NamedTuple, Optional

from config import MATCHING_NETWORKS
from impedance import Impedance


class MatchResult(NamedTuple):
    impedance: Impedance
    matching_type: str


def is_known_network(network_id):
    return network_id in MATCHING_NETWORKS


def apply_ratio(impedance, ratio):
    """Divide both R and X by the transformer ratio."""
    return Impedance(impedance.resistance / ratio, impedance.reactance / ratio)


def apply_matching(impedance: Impedance, network_id: Optional[str]) -> MatchResult:
    """Transform an antenna impedance through the named matching network.

    No network gives type 'None'; an unrecognised id passes the impedance
    through with type 'Unknown'. A 1:1 balun only chokes common-mode current,
    so the impedance is left as-is.
    """
    if not network_id:
        return MatchResult(impedance, 'None')

    network = MATCHING_NETWORKS.get(network_id)
    if network is None:
        return MatchResult(impedance, 'Unknown')

    if network['ratio'] == 1:
        return MatchResult(impedance, network['name'])

    return MatchResult(apply_ratio(impedance, network['ratio']), network['name'])
