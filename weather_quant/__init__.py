"""
weather-quant - Station rounding analysis and forecast-vs-market edges.

Given a displayed station temperature, recovers the range of true
temperatures its reporting pipeline could have started from. Given several
model forecasts and a market's bracket quotes, finds where the market
diverges from model consensus.
"""

__version__ = "0.1.0"

from weather_quant.core import (
    # Enums
    PipelineKind,
    TemperatureUnit,
    BracketType,
    Confidence,
    Signal,
    Magnitude,
    # Data classes
    MeasurementPipeline,
    RoundingResult,
    SimulationResult,
    ForecastPoint,
    Bracket,
    ConsensusSummary,
    BracketDistribution,
    EdgeResult,
    EdgeReport,
    # Errors
    InvalidInputError,
    UnknownPipelineError,
    DegenerateDistributionWarning,
)

from weather_quant.config import (
    ASOS_5MIN,
    METAR_HOURLY,
    CELSIUS_NATIVE,
    RoundingConfig,
    EngineConfig,
    get_pipeline,
    list_pipelines,
)

from weather_quant.rounding import (
    RoundingAnalyzer,
    analyze,
    simulate,
)

from weather_quant.engine import (
    EdgeDetector,
    summarize,
    distribution_over_brackets,
    compute_edge,
    compute_all_edges,
)

__all__ = [
    # Version
    "__version__",
    # Enums
    "PipelineKind",
    "TemperatureUnit",
    "BracketType",
    "Confidence",
    "Signal",
    "Magnitude",
    # Data classes
    "MeasurementPipeline",
    "RoundingResult",
    "SimulationResult",
    "ForecastPoint",
    "Bracket",
    "ConsensusSummary",
    "BracketDistribution",
    "EdgeResult",
    "EdgeReport",
    # Errors
    "InvalidInputError",
    "UnknownPipelineError",
    "DegenerateDistributionWarning",
    # Config
    "ASOS_5MIN",
    "METAR_HOURLY",
    "CELSIUS_NATIVE",
    "RoundingConfig",
    "EngineConfig",
    "get_pipeline",
    "list_pipelines",
    # Rounding
    "RoundingAnalyzer",
    "analyze",
    "simulate",
    # Engine
    "EdgeDetector",
    "summarize",
    "distribution_over_brackets",
    "compute_edge",
    "compute_all_edges",
]
