"""Tests for the pipeline registry, unit helpers and logging setup."""

import logging

import pytest

from weather_quant.core import PipelineKind, TemperatureUnit, UnknownPipelineError
from weather_quant.core.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    fahrenheit_to_whole_celsius,
    round_half_up,
    round_to,
)
from weather_quant.config import (
    ASOS_5MIN,
    CELSIUS_NATIVE,
    DEFAULT_PIPELINE,
    METAR_HOURLY,
    get_pipeline,
    list_pipelines,
)
from weather_quant.utils import setup_logging


class TestPipelineRegistry:
    """Tests for get_pipeline / list_pipelines."""

    def test_list(self):
        assert list_pipelines() == ["ASOS_5MIN", "METAR_HOURLY", "CELSIUS_NATIVE"]

    @pytest.mark.parametrize("identifier", ["ASOS_5MIN", "asos_5min", "asos-5min", "asos", " ASOS "])
    def test_asos_identifiers(self, identifier):
        assert get_pipeline(identifier) is ASOS_5MIN

    def test_kind(self):
        assert get_pipeline(PipelineKind.METAR_HOURLY) is METAR_HOURLY

    def test_pipeline_passes_through(self):
        assert get_pipeline(CELSIUS_NATIVE) is CELSIUS_NATIVE

    def test_unknown(self):
        with pytest.raises(UnknownPipelineError) as exc_info:
            get_pipeline("SYNOP")
        assert exc_info.value.identifier == "SYNOP"
        assert "METAR_HOURLY" in exc_info.value.available

    def test_non_string(self):
        with pytest.raises(UnknownPipelineError):
            get_pipeline(42)

    def test_default(self):
        assert DEFAULT_PIPELINE is ASOS_5MIN

    def test_units(self):
        assert ASOS_5MIN.reporting_unit == TemperatureUnit.FAHRENHEIT
        assert METAR_HOURLY.quantized_unit == TemperatureUnit.CELSIUS
        assert CELSIUS_NATIVE.reporting_unit == TemperatureUnit.CELSIUS

    def test_pipelines_are_immutable(self):
        with pytest.raises(AttributeError):
            ASOS_5MIN.name = "changed"


class TestUnits:
    """Conversion and rounding helpers."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.49) == 2

    def test_round_half_up_just_below_half(self):
        # 0.49999999999999994 + 0.5 is 1.0 in floating point
        assert round_half_up(0.49999999999999994) == 0
        assert round_half_up(-0.5000000000000001) == -1

    @pytest.mark.parametrize("fahrenheit,expected", [
        (77.9, 26),
        (77.9 - 1e-10, 25),
        (76.1, 25),
        (76.1 - 1e-10, 24),
        (78, 26),
        (-40, -40),
    ])
    def test_whole_celsius_bins(self, fahrenheit, expected):
        assert fahrenheit_to_whole_celsius(fahrenheit) == expected

    def test_conversions_are_normalised(self):
        assert celsius_to_fahrenheit(25.5) == 77.9
        assert fahrenheit_to_celsius(77.9) == 25.5
        assert celsius_to_fahrenheit(-40) == -40

    def test_round_to(self):
        assert round_to(77.45) == 77.5
        assert round_to(0.9000000000000057) == 0.9
        assert round_to(77.45, 0) == 77.0


class TestSetupLogging:
    """Logging entry point."""

    def test_sets_package_level(self):
        logger = logging.getLogger("weather_quant")
        previous = logger.level
        try:
            setup_logging("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
