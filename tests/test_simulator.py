"""
Tests for the forward simulator and the analyzer/simulator round trip.
"""

import math

import numpy as np
import pytest

from weather_quant.core import InvalidInputError, TemperatureUnit, UnknownPipelineError
from weather_quant.core.units import celsius_to_fahrenheit
from weather_quant.core.validation import TEMPERATURE_LIMIT
from weather_quant.config import ASOS_5MIN, CELSIUS_NATIVE, METAR_HOURLY, PIPELINES
from weather_quant.rounding import analyze, simulate


# =============================================================================
# STEP RECORDING
# =============================================================================


class TestAsosSimulation:
    """Tests for the ASOS double conversion replay."""

    def test_77_6_displays_79(self):
        result = simulate(77.6, ASOS_5MIN)

        assert [s.name for s in result] == [
            "original_f", "rounded_f", "celsius_exact",
            "rounded_c", "fahrenheit_exact", "displayed_f",
        ]
        assert result.step("rounded_f").value == 78
        assert result.step("celsius_exact").value == pytest.approx(25.5556, abs=1e-4)
        assert result.step("rounded_c").value == 26
        assert result.step("fahrenheit_exact").value == pytest.approx(78.8)
        assert result.final_value == 79

    def test_quantized_values(self):
        result = simulate(77.6, ASOS_5MIN)
        assert result.quantized_values == (78.0, 26.0, 79.0)

    def test_step_units(self):
        result = simulate(77.6, ASOS_5MIN)
        units = [s.unit for s in result]
        assert units[0] == TemperatureUnit.FAHRENHEIT
        assert units[2] == TemperatureUnit.CELSIUS
        assert units[-1] == TemperatureUnit.FAHRENHEIT

    def test_indices_are_sequential(self):
        result = simulate(50.0, ASOS_5MIN)
        assert [s.index for s in result] == list(range(len(result)))

    def test_half_rounds_up(self):
        assert simulate(77.5, ASOS_5MIN).step("rounded_f").value == 78
        assert simulate(-0.5, ASOS_5MIN).step("rounded_f").value == 0

    def test_unknown_step_name(self):
        with pytest.raises(KeyError):
            simulate(77.6, ASOS_5MIN).step("nope")


class TestMetarSimulation:
    """Tests for the METAR single conversion replay."""

    def test_78_displays_79(self):
        result = simulate(78.0, METAR_HOURLY)

        assert [s.name for s in result] == [
            "original_f", "sensor_celsius", "rounded_c",
            "fahrenheit_exact", "displayed_f",
        ]
        assert result.step("rounded_c").value == 26
        assert result.final_value == 79

    def test_sensor_tie_rounds_up(self):
        # 77.9°F is 25.5°C exactly after normalisation
        assert simulate(77.9, METAR_HOURLY).step("rounded_c").value == 26


class TestCelsiusSimulation:
    """Tests for the Celsius native replay."""

    def test_single_rounding(self):
        result = simulate(24.5, CELSIUS_NATIVE)
        assert [s.name for s in result] == ["original_c", "displayed_c"]
        assert result.final_value == 25

    def test_negative_half(self):
        assert simulate(-2.5, CELSIUS_NATIVE).final_value == -2


class TestSimulationValidation:
    """Input checks and determinism."""

    @pytest.mark.parametrize("bad", [math.nan, math.inf, "70", None, False])
    def test_rejects_bad_values(self, bad):
        with pytest.raises(InvalidInputError):
            simulate(bad, ASOS_5MIN)

    def test_unknown_pipeline(self):
        with pytest.raises(UnknownPipelineError):
            simulate(70, "SYNOP")

    def test_deterministic(self):
        assert simulate(63.37, ASOS_5MIN) == simulate(63.37, ASOS_5MIN)

    def test_true_value_recorded(self):
        result = simulate(63.37, METAR_HOURLY)
        assert result.true_value == 63.37
        assert result.step("original_f").value == 63.37


# =============================================================================
# ROUND TRIP
# =============================================================================

# -40.00 to 130.00 in hundredths
GRID = np.round(np.arange(-4000, 13001) / 100, 2)


class TestRoundTrip:
    """Every simulated display maps back to a range containing its source."""

    @pytest.mark.parametrize("pipeline", list(PIPELINES.values()), ids=list(PIPELINES))
    def test_dense_grid(self, pipeline):
        cache = {}
        misses = []
        for true_value in GRID.tolist():
            displayed = simulate(true_value, pipeline).final_value
            if displayed not in cache:
                cache[displayed] = analyze(displayed, pipeline)
            result = cache[displayed]
            if not (result.reachable and result.contains(true_value)):
                misses.append((true_value, displayed))
        assert misses == []

    def test_asos_neighbourhood_is_at_least_as_wide_as_metar(self):
        """
        ASOS ranges alternate between one and two whole °F, so compare the
        widest ASOS range near each display with the METAR range there.
        """
        for displayed in range(-30, 111):
            metar = analyze(displayed, METAR_HOURLY)
            if not metar.reachable:
                continue
            nearby = [analyze(d, ASOS_5MIN) for d in range(displayed - 2, displayed + 3)]
            widest = max(r.interval.width for r in nearby if r.reachable)
            assert widest >= metar.interval.width


def _assert_round_trips(pipeline, true_values):
    misses = []
    for true_value in true_values:
        displayed = simulate(true_value, pipeline).final_value
        result = analyze(displayed, pipeline)
        if not (result.reachable and result.contains(true_value)):
            misses.append((true_value, displayed, result.lower_bound, result.upper_bound))
    assert misses == []


def _around(edge):
    return [
        edge - 1e-10,
        math.nextafter(edge, -math.inf),
        edge,
        math.nextafter(edge, math.inf),
        edge + 1e-10,
    ]


class TestSegmentEdges:
    """Values a hair either side of a rounding boundary land on the same side both ways."""

    def test_metar_celsius_edges(self):
        values = []
        for c in range(-41, 56):
            values.extend(_around(celsius_to_fahrenheit(c + 0.5)))
        _assert_round_trips(METAR_HOURLY, values)

    @pytest.mark.parametrize("pipeline", [ASOS_5MIN, CELSIUS_NATIVE], ids=["ASOS_5MIN", "CELSIUS_NATIVE"])
    def test_half_degree_edges(self, pipeline):
        values = []
        for n in range(-41, 131):
            values.extend(_around(n + 0.5))
        _assert_round_trips(pipeline, values)

    def test_just_below_77_9_stays_at_25c(self):
        result = simulate(77.9 - 1e-10, METAR_HOURLY)
        assert result.step("rounded_c").value == 25
        assert result.final_value == 77
        assert analyze(77, METAR_HOURLY).upper_bound == 77.9

    def test_just_below_76_1_stays_at_24c(self):
        assert simulate(76.1 - 1e-10, METAR_HOURLY).step("rounded_c").value == 24
        assert simulate(76.1, METAR_HOURLY).step("rounded_c").value == 25

    def test_asos_whole_fahrenheit_edge(self):
        below = simulate(math.nextafter(77.5, 0), ASOS_5MIN)
        assert below.step("rounded_f").value == 77
        assert simulate(77.5, ASOS_5MIN).step("rounded_f").value == 78


# =============================================================================
# MAGNITUDE LIMIT
# =============================================================================


class TestMagnitudeLimit:
    """Temperatures beyond any thermometer are rejected, not overflowed."""

    @pytest.mark.parametrize("pipeline", list(PIPELINES.values()), ids=list(PIPELINES))
    @pytest.mark.parametrize("value", [1e308, -1e308, 1e7])
    def test_rejected(self, pipeline, value):
        with pytest.raises(InvalidInputError):
            simulate(value, pipeline)

    def test_limit_itself_is_accepted(self):
        assert simulate(TEMPERATURE_LIMIT, CELSIUS_NATIVE).final_value == TEMPERATURE_LIMIT
