"""Core data models and exceptions."""

from weather_quant.core.exceptions import (
    WeatherQuantError,
    InvalidInputError,
    UnknownPipelineError,
    DegenerateDistributionWarning,
)

from weather_quant.core.models import (
    # Enums
    PipelineKind,
    TemperatureUnit,
    BracketType,
    Confidence,
    Signal,
    Magnitude,
    # Data classes
    MeasurementPipeline,
    Interval,
    RoundingResult,
    StepResult,
    SimulationResult,
    ForecastPoint,
    Bracket,
    ConsensusSummary,
    BracketDistribution,
    EdgeResult,
    EdgeReport,
)

__all__ = [
    "WeatherQuantError",
    "InvalidInputError",
    "UnknownPipelineError",
    "DegenerateDistributionWarning",
    "PipelineKind",
    "TemperatureUnit",
    "BracketType",
    "Confidence",
    "Signal",
    "Magnitude",
    "MeasurementPipeline",
    "Interval",
    "RoundingResult",
    "StepResult",
    "SimulationResult",
    "ForecastPoint",
    "Bracket",
    "ConsensusSummary",
    "BracketDistribution",
    "EdgeResult",
    "EdgeReport",
]
