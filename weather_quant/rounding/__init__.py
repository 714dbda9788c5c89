"""
Station rounding-chain analysis.

Contains the analyzer (displayed value -> range of true values) and the
forward simulator (true value -> every intermediate value).
"""

from weather_quant.rounding.analyzer import (
    RoundingAnalyzer,
    analyze,
    find_range,
    format_range,
    UNREACHABLE_HALF_WIDTH,
)
from weather_quant.rounding.simulator import simulate

__all__ = [
    "RoundingAnalyzer",
    "analyze",
    "find_range",
    "format_range",
    "UNREACHABLE_HALF_WIDTH",
    "simulate",
]
