"""
Edge Detector Module

Responsible for:
1. Summarizing model consensus.
2. Turning the model forecasts into a probability per market bracket.
3. Comparing model probabilities vs market quotes (both 0-100).
4. Classifying each difference as underpriced / overpriced / fair and
   small / medium / large.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from weather_quant.core import (
    Bracket,
    BracketDistribution,
    ConsensusSummary,
    EdgeReport,
    EdgeResult,
    Magnitude,
    Signal,
)
from weather_quant.core.validation import require_finite
from weather_quant.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from weather_quant.engine.probability import (
    BracketProbabilityCalculator,
    ForecastInput,
    summarize_forecasts,
)

logger = logging.getLogger(__name__)


class EdgeDetector:
    """
    Consensus and edge engine.

    Orchestrates the pipeline:
    Forecasts -> Summary / Normal fit -> Bracket Distribution -> Edges
    All thresholds come from the injected EngineConfig.
    """

    def __init__(self, config: EngineConfig = None):
        self.config = config or DEFAULT_ENGINE_CONFIG
        self.prob_calculator = BracketProbabilityCalculator(self.config)

    def summarize(self, forecasts: Sequence[ForecastInput]) -> ConsensusSummary:
        """Mean, min, max, spread and confidence across forecasts."""
        return summarize_forecasts(forecasts, self.config)

    def distribution_over_brackets(
        self,
        forecasts: Sequence[ForecastInput],
        brackets: Sequence[Bracket],
    ) -> BracketDistribution:
        """Model probability per bracket id, whole percent summing to 100."""
        return self.prob_calculator.distribution(forecasts, brackets)

    def classify_signal(self, edge: float) -> Signal:
        if edge > self.config.fair_edge_threshold:
            return Signal.UNDERPRICED
        if edge < -self.config.fair_edge_threshold:
            return Signal.OVERPRICED
        return Signal.FAIR

    def classify_magnitude(self, edge: float) -> Magnitude:
        abs_edge = abs(edge)
        if abs_edge > self.config.large_edge_threshold:
            return Magnitude.LARGE
        if abs_edge > self.config.medium_edge_threshold:
            return Magnitude.MEDIUM
        return Magnitude.SMALL

    def compute_edge(self, model_probability: float, market_probability: float) -> EdgeResult:
        """
        Compare a model probability with a market quote.

        Args:
            model_probability: Model-implied probability (0-100)
            market_probability: Market-quoted probability (0-100)

        Returns:
            EdgeResult with edge = model - market

        Raises:
            InvalidInputError: If either probability is not a finite number
        """
        model_probability = require_finite(model_probability, "model probability")
        market_probability = require_finite(market_probability, "market probability")

        edge = model_probability - market_probability
        return EdgeResult(
            model_probability=model_probability,
            market_probability=market_probability,
            edge=edge,
            signal=self.classify_signal(edge),
            magnitude=self.classify_magnitude(edge),
        )

    def compute_all_edges(
        self,
        forecasts: Sequence[ForecastInput],
        brackets: Sequence[Bracket],
    ) -> EdgeReport:
        """
        Compute the edge for every bracket in one pass.

        Args:
            forecasts: Model point forecasts
            brackets: Market brackets with their quoted probabilities

        Returns:
            EdgeReport mapping bracket id -> EdgeResult
        """
        distribution = self.distribution_over_brackets(forecasts, brackets)
        edges = {
            b.bracket_id: self.compute_edge(distribution[b.bracket_id], b.market_probability)
            for b in brackets
        }

        actionable = sum(1 for e in edges.values() if e.is_actionable)
        logger.info(f"Computed edges for {len(edges)} brackets, {actionable} actionable")

        return EdgeReport(edges=edges, distribution=distribution)

    def find_significant_edges(
        self,
        forecasts: Sequence[ForecastInput],
        brackets: Sequence[Bracket],
        min_edge: Optional[float] = None,
    ) -> List[Tuple[Bracket, EdgeResult]]:
        """
        Find brackets with a significant edge.

        Args:
            forecasts: Model point forecasts
            brackets: Market brackets
            min_edge: Minimum |edge| in percentage points (default from config)

        Returns:
            (bracket, edge) pairs sorted by |edge|, largest first
        """
        if min_edge is None:
            min_edge = self.config.significant_edge_threshold
        report = self.compute_all_edges(forecasts, brackets)

        significant = [
            (b, report[b.bracket_id]) for b in brackets
            if report[b.bracket_id].abs_edge >= min_edge
        ]
        significant.sort(key=lambda pair: pair[1].abs_edge, reverse=True)
        return significant


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_default_detector = EdgeDetector()


def summarize(forecasts: Sequence[ForecastInput]) -> ConsensusSummary:
    """Summarize forecasts with the default configuration."""
    return _default_detector.summarize(forecasts)


def distribution_over_brackets(
    forecasts: Sequence[ForecastInput],
    brackets: Sequence[Bracket],
) -> BracketDistribution:
    """Bracket distribution with the default configuration."""
    return _default_detector.distribution_over_brackets(forecasts, brackets)


def compute_edge(model_probability: float, market_probability: float) -> EdgeResult:
    """Edge with the default thresholds."""
    return _default_detector.compute_edge(model_probability, market_probability)


def compute_all_edges(
    forecasts: Sequence[ForecastInput],
    brackets: Sequence[Bracket],
) -> EdgeReport:
    """Edges for every bracket with the default configuration."""
    return _default_detector.compute_all_edges(forecasts, brackets)


def find_significant_edges(
    forecasts: Sequence[ForecastInput],
    brackets: Sequence[Bracket],
    min_edge: Optional[float] = None,
) -> List[Tuple[Bracket, EdgeResult]]:
    """Significant edges with the default configuration."""
    return _default_detector.find_significant_edges(forecasts, brackets, min_edge)
