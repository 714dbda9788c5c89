"""
Forward Simulator

Replays a station pipeline step by step for a hypothetical true
temperature. The final step is the value the station would display; the
analyzer inverts exactly these operations, so any true value fed through
here must land inside analyze(final_value).

True values are expressed in the pipeline's reporting unit: °F for
ASOS_5MIN and METAR_HOURLY (the METAR sensor reading is the exact °C
conversion of that value), °C for CELSIUS_NATIVE.
"""

import logging
from typing import Callable, Dict, List, Tuple, Union

from weather_quant.core import (
    MeasurementPipeline,
    PipelineKind,
    SimulationResult,
    StepResult,
    TemperatureUnit,
)
from weather_quant.core.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    fahrenheit_to_whole_celsius,
    round_half_up,
)
from weather_quant.core.validation import require_temperature
from weather_quant.config import DEFAULT_PIPELINE, get_pipeline

logger = logging.getLogger(__name__)

F = TemperatureUnit.FAHRENHEIT
C = TemperatureUnit.CELSIUS

# (name, value, unit, quantized)
_Step = Tuple[str, float, TemperatureUnit, bool]


def _simulate_asos(original_f: float) -> List[_Step]:
    rounded_f = round_half_up(original_f)              # OMO whole °F
    celsius_exact = fahrenheit_to_celsius(rounded_f)
    rounded_c = fahrenheit_to_whole_celsius(rounded_f)
    fahrenheit_exact = celsius_to_fahrenheit(rounded_c)  # shown on NWS graph
    displayed_f = round_half_up(fahrenheit_exact)        # shown on NWS list
    return [
        ("original_f", original_f, F, False),
        ("rounded_f", float(rounded_f), F, True),
        ("celsius_exact", celsius_exact, C, False),
        ("rounded_c", float(rounded_c), C, True),
        ("fahrenheit_exact", fahrenheit_exact, F, False),
        ("displayed_f", float(displayed_f), F, True),
    ]


def _simulate_metar(original_f: float) -> List[_Step]:
    sensor_celsius = fahrenheit_to_celsius(original_f)
    # Binned on the raw reading; sensor_celsius is normalised for display
    rounded_c = fahrenheit_to_whole_celsius(original_f)
    fahrenheit_exact = celsius_to_fahrenheit(rounded_c)
    displayed_f = round_half_up(fahrenheit_exact)
    return [
        ("original_f", original_f, F, False),
        ("sensor_celsius", sensor_celsius, C, False),
        ("rounded_c", float(rounded_c), C, True),
        ("fahrenheit_exact", fahrenheit_exact, F, False),
        ("displayed_f", float(displayed_f), F, True),
    ]


def _simulate_celsius(original_c: float) -> List[_Step]:
    return [
        ("original_c", original_c, C, False),
        ("displayed_c", float(round_half_up(original_c)), C, True),
    ]


_SIMULATORS: Dict[PipelineKind, Callable[[float], List[_Step]]] = {
    PipelineKind.ASOS_5MIN: _simulate_asos,
    PipelineKind.METAR_HOURLY: _simulate_metar,
    PipelineKind.CELSIUS_NATIVE: _simulate_celsius,
}


def simulate(
    true_value: float,
    pipeline: Union[str, PipelineKind, MeasurementPipeline] = DEFAULT_PIPELINE,
) -> SimulationResult:
    """
    Run a true temperature forward through a pipeline.

    Args:
        true_value: Physical temperature in the pipeline's reporting unit
        pipeline: Pipeline, PipelineKind or identifier string

    Returns:
        SimulationResult with one StepResult per recorded value, the
        original value first and the displayed value last

    Raises:
        InvalidInputError: If true_value is not a finite temperature
        UnknownPipelineError: If the pipeline identifier is not registered
    """
    pipeline = get_pipeline(pipeline)
    true_value = require_temperature(true_value, "true value")

    raw_steps = _SIMULATORS[pipeline.kind](true_value)
    steps = tuple(
        StepResult(index=i, name=name, value=value, unit=unit, quantized=quantized)
        for i, (name, value, unit, quantized) in enumerate(raw_steps)
    )

    logger.debug(
        f"Simulated {pipeline.identifier}: "
        + " -> ".join(f"{s.name}={s.value:g}" for s in steps)
    )

    return SimulationResult(true_value=true_value, pipeline=pipeline, steps=steps)
