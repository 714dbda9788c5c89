"""
Injectable configuration for the analyzer and the edge engine.

Both configs are immutable. Pass a customised instance to
RoundingAnalyzer / EdgeDetector to tune thresholds without touching
module constants.
"""

from dataclasses import dataclass

from weather_quant.config.settings import (
    BOUNDARY_EPSILON,
    REPORT_DECIMALS,
    MIN_STD_DEV,
    HIGH_CONFIDENCE_SPREAD,
    MEDIUM_CONFIDENCE_SPREAD,
    FAIR_EDGE_THRESHOLD,
    MEDIUM_EDGE_THRESHOLD,
    LARGE_EDGE_THRESHOLD,
    SIGNIFICANT_EDGE_THRESHOLD,
)


@dataclass(frozen=True)
class RoundingConfig:
    """Numeric tolerances for the rounding-chain analyzer."""
    boundary_epsilon: float = BOUNDARY_EPSILON
    report_decimals: int = REPORT_DECIMALS

    def __post_init__(self):
        if not 0.0 <= self.boundary_epsilon < 0.5:
            raise ValueError(f"boundary_epsilon must be in [0, 0.5), got {self.boundary_epsilon}")
        if self.report_decimals < 0:
            raise ValueError(f"report_decimals must be >= 0, got {self.report_decimals}")


@dataclass(frozen=True)
class EngineConfig:
    """
    Policy constants for consensus and edge classification.

    Edge thresholds are in percentage points:
    - |edge| <= fair_edge_threshold -> fair
    - |edge| > large_edge_threshold -> large, > medium_edge_threshold -> medium
    """
    std_dev_floor: float = MIN_STD_DEV
    high_confidence_spread: float = HIGH_CONFIDENCE_SPREAD
    medium_confidence_spread: float = MEDIUM_CONFIDENCE_SPREAD
    fair_edge_threshold: float = FAIR_EDGE_THRESHOLD
    medium_edge_threshold: float = MEDIUM_EDGE_THRESHOLD
    large_edge_threshold: float = LARGE_EDGE_THRESHOLD
    significant_edge_threshold: float = SIGNIFICANT_EDGE_THRESHOLD

    def __post_init__(self):
        if self.std_dev_floor <= 0:
            raise ValueError(f"std_dev_floor must be > 0, got {self.std_dev_floor}")
        if not 0 <= self.high_confidence_spread <= self.medium_confidence_spread:
            raise ValueError(
                "confidence spreads must satisfy 0 <= high <= medium, got "
                f"{self.high_confidence_spread} / {self.medium_confidence_spread}"
            )
        if self.fair_edge_threshold < 0:
            raise ValueError(f"fair_edge_threshold must be >= 0, got {self.fair_edge_threshold}")
        if not 0 <= self.medium_edge_threshold < self.large_edge_threshold:
            raise ValueError(
                "edge magnitudes must satisfy 0 <= medium < large, got "
                f"{self.medium_edge_threshold} / {self.large_edge_threshold}"
            )
        if self.significant_edge_threshold < 0:
            raise ValueError(
                f"significant_edge_threshold must be >= 0, got {self.significant_edge_threshold}"
            )


DEFAULT_ROUNDING_CONFIG = RoundingConfig()
DEFAULT_ENGINE_CONFIG = EngineConfig()
