"""Tests for the weather-quant command line."""

import pytest
from click.testing import CliRunner

from weather_quant import __version__
from weather_quant.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestInfoCommands:
    """Version and pipeline listing."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_pipelines(self, runner):
        result = runner.invoke(main, ["pipelines"])

        assert result.exit_code == 0
        for identifier in ("ASOS_5MIN", "METAR_HOURLY", "CELSIUS_NATIVE"):
            assert identifier in result.output


class TestRangeCommand:
    """weather-quant range VALUE."""

    def test_asos(self, runner):
        result = runner.invoke(main, ["range", "79"])

        assert result.exit_code == 0
        assert "77.5° – 79.5°" in result.output
        assert "26" in result.output

    def test_metar(self, runner):
        result = runner.invoke(main, ["range", "79", "--pipeline", "metar"])

        assert result.exit_code == 0
        assert "77.9° – 79.7°" in result.output

    def test_celsius_shows_fahrenheit(self, runner):
        result = runner.invoke(main, ["range", "25", "-p", "CELSIUS_NATIVE"])

        assert result.exit_code == 0
        assert "24.5° – 25.5°" in result.output
        assert "76.1° – 77.9°" in result.output

    def test_unreachable_warns(self, runner):
        result = runner.invoke(main, ["range", "33"])

        assert result.exit_code == 0
        assert "not producible" in result.output

    def test_unknown_pipeline(self, runner):
        result = runner.invoke(main, ["range", "79", "--pipeline", "SYNOP"])

        assert result.exit_code == 1
        assert "SYNOP" in result.output

    def test_nan(self, runner):
        result = runner.invoke(main, ["range", "nan"])
        assert result.exit_code == 1

    def test_negative_value(self, runner):
        result = runner.invoke(main, ["range", "-3", "-p", "CELSIUS_NATIVE"])

        assert result.exit_code == 0
        assert "-3.5° – -2.5°" in result.output

    def test_negative_value_after_option(self, runner):
        result = runner.invoke(main, ["range", "-p", "METAR_HOURLY", "-4"])

        assert result.exit_code == 0
        assert "-4.9° – -3.1°" in result.output


class TestSimulateCommand:
    """weather-quant simulate VALUE."""

    def test_asos(self, runner):
        result = runner.invoke(main, ["simulate", "77.6"])

        assert result.exit_code == 0
        assert "celsius_exact" in result.output
        assert "Displayed: 79" in result.output

    def test_negative_value(self, runner):
        result = runner.invoke(main, ["simulate", "-2.5", "-p", "CELSIUS_NATIVE"])

        assert result.exit_code == 0
        assert "Displayed: -2" in result.output


class TestEdgesCommand:
    """weather-quant edges."""

    ARGS = [
        "edges",
        "-f", "GFS=70", "-f", "ECMWF=71", "-f", "NWS=73",
        "-b", "69° or below=20",
        "-b", "70-71°=20",
        "-b", "72-73°=30",
        "-b", ">=74=30",
    ]

    def test_table(self, runner):
        result = runner.invoke(main, self.ARGS)

        assert result.exit_code == 0
        assert "Consensus" in result.output
        assert "70-71°" in result.output
        assert "underpriced" in result.output
        assert "overpriced" in result.output

    def test_min_edge_filters(self, runner):
        result = runner.invoke(main, self.ARGS + ["--min-edge", "101"])

        assert result.exit_code == 0
        assert "No brackets meet the edge threshold" in result.output

    def test_bad_forecast(self, runner):
        result = runner.invoke(main, ["edges", "-f", "GFS", "-b", "70-71°=20"])
        assert result.exit_code == 2

    def test_bad_bracket(self, runner):
        result = runner.invoke(main, ["edges", "-f", "GFS=70", "-b", "sunny=20"])
        assert result.exit_code == 2

    def test_repeated_labels_are_distinct(self, runner):
        # Ids are positional, so identical labels are still distinct brackets
        result = runner.invoke(main, ["edges", "-f", "GFS=70", "-b", "70-71°=20", "-b", "70-71°=20"])
        assert result.exit_code == 0
