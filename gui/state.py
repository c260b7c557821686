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

"""Central design state model for the antenna designer GUI."""

from dataclasses import asdict

from PySide6.QtCore import QObject, Signal

from antenna_model import (
    AntennaModel, AntennaParameters, InvalidParameterError, validate_param,
)
from report import build_readout


class DesignState(QObject):
    """Holds the AntennaModel that the controls edit.

    Emits signals when state changes so the rendering and display panels can
    re-query the model.
    """

    params_changed = Signal()
    matching_changed = Signal(object)
    cache_cleared = Signal()

    # Control ranges (min, max), inclusive
    PARAM_BOUNDS = {
        'length': (1.0, 200.0),
        'frequency': (1.0, 30.0),
        'feed_position': (0.0, 1.0),
        'wire_diameter': (0.5, 10.0),
    }

    def __init__(self, model=None, parent=None):
        super().__init__(parent)
        self.model = model or AntennaModel()

    @property
    def params(self):
        return self.model.parameters

    def set_param(self, key, value):
        """Set a geometry parameter.

        Raises InvalidParameterError for values the model rejects or that
        fall outside the control range.
        """
        if key not in self.PARAM_BOUNDS:
            raise KeyError(key)
        validate_param(key, value)
        lo, hi = self.PARAM_BOUNDS[key]
        if not lo <= value <= hi:
            raise InvalidParameterError(f"{key} must be within [{lo}, {hi}], got {value!r}")
        if getattr(self.model, key) != value:
            setattr(self.model, key, value)
            self.params_changed.emit()

    def set_feed_percent(self, percent):
        """Feed slider works in percent of the wire length."""
        self.set_param('feed_position', percent / 100)

    def set_matching_network(self, network_id):
        if self.model.matching_network != network_id:
            self.model.matching_network = network_id
            self.matching_changed.emit(network_id)

    def reset(self):
        self.model.update(**asdict(AntennaParameters()))
        self.model.clear_cache()
        self.cache_cleared.emit()
        self.params_changed.emit()

    def readout(self):
        return build_readout(self.model)
