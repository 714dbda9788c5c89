"""
Consensus and edge engine for weather-quant.

Contains modules for summarizing model forecasts, building bracket
distributions and comparing them with market quotes.
"""

from weather_quant.engine.normal import erf, normal_cdf

from weather_quant.engine.probability import (
    BracketProbabilityCalculator,
    calculate_distribution,
    classify_confidence,
    normalize_to_percentages,
    summarize_forecasts,
)

from weather_quant.engine.edge_detector import (
    EdgeDetector,
    summarize,
    distribution_over_brackets,
    compute_edge,
    compute_all_edges,
    find_significant_edges,
)

__all__ = [
    # Numerics
    "erf",
    "normal_cdf",
    # Probability
    "BracketProbabilityCalculator",
    "calculate_distribution",
    "classify_confidence",
    "normalize_to_percentages",
    "summarize_forecasts",
    # Edges
    "EdgeDetector",
    "summarize",
    "distribution_over_brackets",
    "compute_edge",
    "compute_all_edges",
    "find_significant_edges",
]
