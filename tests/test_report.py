"""Tests for the display readout and printed summary."""
import pytest

from antenna_model import InvalidParameterError
from report import build_readout, print_summary, main


class TestBuildReadout:
    """Tests for the display strings of a design."""

    def test_half_wave_dipole(self, default_model):
        r = build_readout(default_model)
        assert r['length'] == "20.0m"
        assert r['frequency'] == "7.50 MHz"
        assert r['wavelength'] == "40.0m"
        assert r['electrical_length'] == "0.500λ"
        assert r['wire_diameter'] == "2.0mm"
        assert r['feed_position'] == "Center Fed (50%)"
        assert r['antenna_impedance'] == "73 +j2 Ω"
        assert r['system_impedance'] == "73 +j2 Ω"
        assert r['matching_type'] == "None"
        assert r['antenna_type'] == "Half-Wave Dipole"
        assert r['harmonic'] == "1st (Fundamental)"
        assert r['resonance_status'] == "Resonant"
        assert r['resonance_guidance'] == "Antenna is well-matched"
        assert r['phase_degrees'] == "1°"

    def test_swr_and_quality(self, default_model):
        """73.1 + j1.7 on 50 ohm is about 1.46:1, shown as 1.5:1 and 'Very Good'."""
        r = build_readout(default_model)
        assert r['swr'] == "1.5:1"
        assert r['quality'] == "Very Good"
        assert r['quality_color'] == "#88ff00"

    def test_node_counts(self, default_model):
        r = build_readout(default_model)
        assert (r['current_nodes'], r['current_antinodes']) == ("2", "1")
        assert (r['voltage_nodes'], r['voltage_antinodes']) == ("1", "2")

    def test_matched_end_fed(self, make_model):
        """End-fed half-wave (2500 ohm) through 4:1 is still badly mismatched."""
        model = make_model(feed_position=0.0, matching_network="use4to1UnUn")
        r = build_readout(model)
        assert r['antenna_impedance'] == "2500 Ω"
        assert r['system_impedance'] == "625 Ω"
        assert r['matching_type'] == "4:1 UnUn"
        assert r['swr'] == "12.5:1"
        assert r['quality'] == "Very Poor - Major Mismatch"

    def test_matched_with_49_to_1(self, make_model):
        model = make_model(feed_position=0.0, matching_network="use49to1UnUn")
        r = build_readout(model)
        assert r['system_impedance'] == "51 Ω"
        assert r['quality'] == "Excellent"

    def test_not_resonant_guidance(self, make_model):
        r = build_readout(make_model(length=2.0))
        assert r['resonance_status'] == "Not Resonant"
        assert r['resonance_guidance'].startswith("Too Short - Add ~")
        assert r['closest_resonant'].startswith("λ/4 (Quarter Wave) (-8.0m)")

    def test_cache_entries(self, default_model):
        r = build_readout(default_model)
        assert r['impedance_cache'] == "1 entries"
        assert r['distribution_cache'] == "0 entries"


class TestPrintSummary:
    def test_prints_banner(self, default_model, capsys):
        r = print_summary(default_model)
        out = capsys.readouterr().out
        assert "HALF-WAVE DIPOLE SUMMARY" in out
        assert "SWR: 1.5:1 (Very Good)" in out
        assert "Closest:" not in out
        assert r['antenna_type'] == "Half-Wave Dipole"

    def test_prints_closest_when_not_resonant(self, make_model, capsys):
        print_summary(make_model(length=2.0))
        out = capsys.readouterr().out
        assert "Closest: λ/4 (Quarter Wave)" in out


class TestMain:
    """Tests for the command line driver."""

    def test_default_design(self, tmp_path, capsys):
        r = main(["--output", str(tmp_path)])
        out = capsys.readouterr().out
        assert "HALF-WAVE DIPOLE SUMMARY" in out
        assert (tmp_path / "standing_waves.png").exists()
        assert r['antenna_type'] == "Half-Wave Dipole"

    def test_end_fed_with_network(self, tmp_path, capsys):
        r = main(["--feed", "0", "--network", "use49to1UnUn", "--points", "51",
                  "--output", str(tmp_path)])
        assert r['antenna_type'] == "End-Fed Half-Wave"
        assert r['system_impedance'] == "51 Ω"
        assert "Saved:" in capsys.readouterr().out

    def test_invalid_length_rejected(self, tmp_path):
        with pytest.raises(InvalidParameterError):
            main(["--length", "-5", "--output", str(tmp_path)])

    def test_unknown_network_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--network", "use3to1UnUn", "--output", str(tmp_path)])
