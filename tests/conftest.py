"""Shared pytest fixtures for all test modules."""
import math

import pytest
import matplotlib
matplotlib.use("Agg")

from antenna_model import AntennaModel, AntennaParameters, PhysicsEngine


# === Model Fixtures ===

@pytest.fixture
def default_model():
    """20 m wire at 7.5 MHz, center fed, 2 mm wire: a half-wave dipole."""
    return AntennaModel()


@pytest.fixture
def make_model():
    """Factory for models that differ from the defaults."""
    def _make(**changes):
        return AntennaModel(AntennaParameters(**changes))
    return _make


@pytest.fixture
def engine():
    return PhysicsEngine()


# === Stubs ===

class StubModel:
    """Minimal stand-in exposing what NodesCalculator reads from a model."""

    def __init__(self, impedance, length=20.0, wavelength=40.0):
        self._impedance = impedance
        self.length = length
        self.wavelength = wavelength
        self.wave_number = 2 * math.pi / wavelength
        self.electrical_length = length / wavelength

    def calculate_impedance(self):
        return self._impedance


@pytest.fixture
def stub_model():
    return StubModel


# === Qt ===

@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
