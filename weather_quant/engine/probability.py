"""
Probability Engine

Consensus Summary
- Mean, min, max and spread across forecast models
- Confidence bucket from the spread (fixed policy thresholds)

Bracket Distribution
- Fits a normal distribution to the model forecasts (population std dev,
  floored so that agreeing models do not produce a spike)
- Integrates it over each market bracket with the normal CDF
- Normalizes to whole percentages that sum to exactly 100
"""

import logging
import math
from typing import Dict, Optional, Sequence, Union

import numpy as np

from weather_quant.core import (
    Bracket,
    BracketDistribution,
    Confidence,
    ConsensusSummary,
    DegenerateDistributionWarning,
    ForecastPoint,
    InvalidInputError,
)
from weather_quant.core.validation import require_temperature
from weather_quant.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from weather_quant.engine.normal import normal_cdf

logger = logging.getLogger(__name__)

ForecastInput = Union[ForecastPoint, float, int]


def forecast_values(forecasts: Sequence[ForecastInput]) -> np.ndarray:
    """
    Extract forecast temperatures as a float array.

    Accepts ForecastPoint objects or bare numbers; anything non-finite
    raises InvalidInputError instead of leaking NaN into the statistics,
    as does a magnitude no thermometer could report.
    """
    values = []
    for i, forecast in enumerate(forecasts):
        if isinstance(forecast, ForecastPoint):
            values.append(forecast.value)
        else:
            values.append(require_temperature(forecast, f"forecast #{i}"))
    return np.array(values, dtype=float)


# =============================================================================
# CONSENSUS SUMMARY
# =============================================================================


def classify_confidence(spread: Optional[float], config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> Confidence:
    """Map a model spread to a confidence bucket."""
    if spread is None:
        return Confidence.UNKNOWN
    if spread <= config.high_confidence_spread:
        return Confidence.HIGH
    if spread <= config.medium_confidence_spread:
        return Confidence.MEDIUM
    return Confidence.LOW


def summarize_forecasts(
    forecasts: Sequence[ForecastInput],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> ConsensusSummary:
    """
    Summarize model agreement.

    An empty list is not an error here: every statistic is None and the
    confidence is UNKNOWN, so a display can render "no data".
    """
    if not forecasts:
        logger.warning("No forecasts to summarize")
        return ConsensusSummary(
            mean=None, min=None, max=None, spread=None,
            confidence=Confidence.UNKNOWN, count=0,
        )

    values = forecast_values(forecasts)
    low = float(np.min(values))
    high = float(np.max(values))
    spread = high - low

    return ConsensusSummary(
        mean=float(np.mean(values)),
        min=low,
        max=high,
        spread=spread,
        confidence=classify_confidence(spread, config),
        count=len(values),
    )


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_to_percentages(
    raw: Dict[str, float],
    fallback_id: Optional[str] = None,
) -> Dict[str, int]:
    """
    Scale raw probabilities to whole percentages summing to exactly 100.

    Largest remainder method: every bracket gets the floor of its share,
    then the missing points go one each to the brackets with the largest
    fractional parts (ties keep bracket order).

    Args:
        raw: Raw probability per bracket id, any non-negative scale
        fallback_id: Bracket that takes all 100 points if every raw value
            is zero

    Returns:
        Whole-percent probability per bracket id, in input order
    """
    if not raw:
        return {}

    total = sum(raw.values())
    if total <= 0:
        target = fallback_id if fallback_id in raw else next(iter(raw))
        logger.warning(f"All raw bracket probabilities are zero; assigning 100 to {target}")
        return {key: (100 if key == target else 0) for key in raw}

    scaled = {key: value / total * 100.0 for key, value in raw.items()}
    result = {key: int(math.floor(value)) for key, value in scaled.items()}

    remainder = 100 - sum(result.values())
    order = sorted(
        enumerate(raw),
        key=lambda item: (-(scaled[item[1]] - result[item[1]]), item[0]),
    )
    for _, key in order[:remainder]:
        result[key] += 1

    return result


# =============================================================================
# BRACKET PROBABILITY CALCULATOR
# =============================================================================


class BracketProbabilityCalculator:
    """
    Calculates a model-implied probability for each market bracket.

    Bracket boundary logic:
    - BETWEEN [lower, upper): CDF(upper) - CDF(lower)
    - LESS_THAN (-inf, upper): CDF(upper)
    - GREATER_THAN [lower, +inf): 1 - CDF(lower)
    """

    def __init__(self, config: EngineConfig = None):
        """
        Initialize the calculator.

        Args:
            config: Engine configuration (std dev floor). Uses
                DEFAULT_ENGINE_CONFIG if None.
        """
        self.config = config or DEFAULT_ENGINE_CONFIG

    def calculate_bracket_probability(self, bracket: Bracket, mean: float, std_dev: float) -> float:
        """
        Calculate the raw probability (0.0 to 1.0) for a single bracket.
        """
        lower = -math.inf if bracket.lower is None else bracket.lower
        upper = math.inf if bracket.upper is None else bracket.upper
        prob = normal_cdf(upper, mean, std_dev) - normal_cdf(lower, mean, std_dev)
        return max(0.0, prob)

    def distribution(
        self,
        forecasts: Sequence[ForecastInput],
        brackets: Sequence[Bracket],
    ) -> BracketDistribution:
        """
        Build the model distribution over a set of brackets.

        Args:
            forecasts: Model point forecasts (at least one)
            brackets: Market brackets, normally a partition of the outcomes

        Returns:
            BracketDistribution mapping bracket id -> whole percent

        Raises:
            InvalidInputError: If there are no forecasts, a forecast is not
                finite, or two brackets share an id
        """
        if not forecasts:
            raise InvalidInputError("At least one forecast is required for a distribution")

        ids = [b.bracket_id for b in brackets]
        if len(set(ids)) != len(ids):
            raise InvalidInputError(f"Duplicate bracket ids: {ids}")

        values = forecast_values(forecasts)
        mean = float(np.mean(values))
        raw_std_dev = float(np.std(values))
        std_dev = max(self.config.std_dev_floor, raw_std_dev)

        degenerate = bool(np.all(values == values[0]))
        warnings = ()
        if degenerate:
            message = (
                f"All {len(values)} forecasts are {values[0]:g}; "
                f"distribution width comes from the {self.config.std_dev_floor:g}° floor"
            )
            logger.warning(message)
            warnings = (DegenerateDistributionWarning(message),)

        raw = {
            b.bracket_id: self.calculate_bracket_probability(b, mean, std_dev)
            for b in brackets
        }

        nearest = min(brackets, key=lambda b: b.distance_to(mean)).bracket_id if brackets else None
        probabilities = normalize_to_percentages(raw, fallback_id=nearest)

        logger.info(
            f"Distribution over {len(brackets)} brackets: "
            f"mean={mean:.1f}°, std={std_dev:.2f}° (raw {raw_std_dev:.2f}°), "
            f"raw_total={sum(raw.values()):.1%}"
        )

        return BracketDistribution(
            probabilities=probabilities,
            mean=mean,
            std_dev=std_dev,
            raw_std_dev=raw_std_dev,
            degenerate=degenerate,
            warnings=warnings,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def calculate_distribution(
    forecasts: Sequence[ForecastInput],
    brackets: Sequence[Bracket],
    config: EngineConfig = None,
) -> BracketDistribution:
    """
    Convenience function to build a bracket distribution.

    Args:
        forecasts: Model point forecasts
        brackets: Market brackets
        config: Optional engine configuration

    Returns:
        BracketDistribution
    """
    return BracketProbabilityCalculator(config).distribution(forecasts, brackets)
