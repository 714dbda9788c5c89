"""Configuration module for weather-quant."""

from weather_quant.config.pipelines import (
    ASOS_5MIN,
    METAR_HOURLY,
    CELSIUS_NATIVE,
    PIPELINES,
    DEFAULT_PIPELINE,
    get_pipeline,
    list_pipelines,
)

from weather_quant.config.engine import (
    RoundingConfig,
    EngineConfig,
    DEFAULT_ROUNDING_CONFIG,
    DEFAULT_ENGINE_CONFIG,
)

from weather_quant.config.settings import (
    # Rounding
    BOUNDARY_EPSILON,
    REPORT_DECIMALS,
    DEFAULT_PIPELINE_ID,
    # Forecast Parameters
    MIN_STD_DEV,
    HIGH_CONFIDENCE_SPREAD,
    MEDIUM_CONFIDENCE_SPREAD,
    # Edge Parameters
    FAIR_EDGE_THRESHOLD,
    MEDIUM_EDGE_THRESHOLD,
    LARGE_EDGE_THRESHOLD,
    SIGNIFICANT_EDGE_THRESHOLD,
    # Logging
    LOG_LEVEL,
    LOG_FORMAT,
)

__all__ = [
    # Pipelines
    "ASOS_5MIN",
    "METAR_HOURLY",
    "CELSIUS_NATIVE",
    "PIPELINES",
    "DEFAULT_PIPELINE",
    "get_pipeline",
    "list_pipelines",
    # Injectable configs
    "RoundingConfig",
    "EngineConfig",
    "DEFAULT_ROUNDING_CONFIG",
    "DEFAULT_ENGINE_CONFIG",
    # Rounding
    "BOUNDARY_EPSILON",
    "REPORT_DECIMALS",
    "DEFAULT_PIPELINE_ID",
    # Forecast Parameters
    "MIN_STD_DEV",
    "HIGH_CONFIDENCE_SPREAD",
    "MEDIUM_CONFIDENCE_SPREAD",
    # Edge Parameters
    "FAIR_EDGE_THRESHOLD",
    "MEDIUM_EDGE_THRESHOLD",
    "LARGE_EDGE_THRESHOLD",
    "SIGNIFICANT_EDGE_THRESHOLD",
    # Logging
    "LOG_LEVEL",
    "LOG_FORMAT",
]
