"""
Station reporting pipelines.

Each pipeline is a fixed, versioned constant. Add new pipelines here and
give them a handler in the analyzer and the simulator.
"""

from typing import Dict, Union

from weather_quant.core import (
    MeasurementPipeline,
    PipelineKind,
    TemperatureUnit,
    UnknownPipelineError,
)
from weather_quant.config.settings import DEFAULT_PIPELINE_ID


# =============================================================================
# PIPELINE DEFINITIONS
# =============================================================================

ASOS_5MIN = MeasurementPipeline(
    kind=PipelineKind.ASOS_5MIN,
    name="ASOS 5-minute",
    version="1",
    description=(
        "Precise °F is rounded to whole °F, converted to °C and rounded, "
        "then converted back to °F (NWS graph) and rounded again (NWS list)."
    ),
    steps=(
        "round to whole °F",
        "convert to °C",
        "round to whole °C",
        "convert to °F",
        "round to whole °F",
    ),
    reporting_unit=TemperatureUnit.FAHRENHEIT,
    quantized_unit=TemperatureUnit.CELSIUS,
)

METAR_HOURLY = MeasurementPipeline(
    kind=PipelineKind.METAR_HOURLY,
    name="METAR hourly",
    version="1",
    description="Sensor °C is rounded to whole °C, converted to °F and rounded.",
    steps=(
        "round to whole °C",
        "convert to °F",
        "round to whole °F",
    ),
    reporting_unit=TemperatureUnit.FAHRENHEIT,
    quantized_unit=TemperatureUnit.CELSIUS,
)

CELSIUS_NATIVE = MeasurementPipeline(
    kind=PipelineKind.CELSIUS_NATIVE,
    name="Celsius native",
    version="1",
    description="Celsius is the native unit; one rounding to whole °C.",
    steps=("round to whole °C",),
    reporting_unit=TemperatureUnit.CELSIUS,
    quantized_unit=TemperatureUnit.CELSIUS,
)


# =============================================================================
# PIPELINE REGISTRY
# =============================================================================

PIPELINES: Dict[str, MeasurementPipeline] = {
    ASOS_5MIN.identifier: ASOS_5MIN,
    METAR_HOURLY.identifier: METAR_HOURLY,
    CELSIUS_NATIVE.identifier: CELSIUS_NATIVE,
}

# Short names used by station feeds ("asos" / "metar")
ALIASES: Dict[str, str] = {
    "ASOS": ASOS_5MIN.identifier,
    "METAR": METAR_HOURLY.identifier,
    "CELSIUS": CELSIUS_NATIVE.identifier,
}


def get_pipeline(identifier: Union[str, PipelineKind, MeasurementPipeline]) -> MeasurementPipeline:
    """
    Resolve a pipeline by identifier.

    Args:
        identifier: Pipeline id (e.g., "ASOS_5MIN", case-insensitive), short
            alias ("asos"), PipelineKind, or an already-resolved pipeline.

    Returns:
        The registered MeasurementPipeline

    Raises:
        UnknownPipelineError: If the identifier is not registered
    """
    if isinstance(identifier, MeasurementPipeline):
        return identifier
    if isinstance(identifier, PipelineKind):
        return PIPELINES[identifier.value]
    if not isinstance(identifier, str):
        raise UnknownPipelineError(identifier, PIPELINES.keys())

    key = identifier.strip().upper().replace("-", "_")
    key = ALIASES.get(key, key)
    if key not in PIPELINES:
        raise UnknownPipelineError(identifier, PIPELINES.keys())
    return PIPELINES[key]


def list_pipelines() -> list[str]:
    """Return list of registered pipeline identifiers."""
    return list(PIPELINES.keys())


DEFAULT_PIPELINE = get_pipeline(DEFAULT_PIPELINE_ID)
