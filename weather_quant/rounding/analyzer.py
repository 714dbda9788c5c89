"""
Rounding-Chain Analyzer

Takes the temperature a station displayed and works back through the
reporting pipeline that produced it, returning the half-open range of
physical temperatures that would have been displayed the same way.

ASOS_5MIN rounds twice in °F and once in °C in between, so a displayed
value maps to at most one whole °C and one or two whole °F readings
(about ±1°F). METAR_HOURLY rounds the sensor °C once before converting,
giving a fixed 1.8°F wide range (about ±0.9°F). CELSIUS_NATIVE is a single
rounding.

Inverting a rounding step gives [n - 0.5, n + 0.5); inverting a conversion
is exact. Whole intermediate degrees that convert into the outer window are
candidates, and the result is the union of the segments behind them.
"""

import logging
import math
from typing import Callable, Dict, List, Tuple, Union

from weather_quant.core import (
    Interval,
    MeasurementPipeline,
    PipelineKind,
    RoundingResult,
)
from weather_quant.core.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    round_half_up,
    round_to,
)
from weather_quant.core.validation import require_temperature
from weather_quant.config import (
    DEFAULT_PIPELINE,
    DEFAULT_ROUNDING_CONFIG,
    RoundingConfig,
    get_pipeline,
)

logger = logging.getLogger(__name__)

PipelineRef = Union[str, PipelineKind, MeasurementPipeline]

# Half-width of the fallback range used when a displayed value cannot be
# produced by the pipeline at all
UNREACHABLE_HALF_WIDTH = 1.0


class RoundingAnalyzer:
    """
    Inverts station rounding pipelines.

    One handler per pipeline variant; each returns the candidate
    intermediate integers and the segment of true values behind each one.
    """

    def __init__(self, config: RoundingConfig = None):
        """
        Initialize the analyzer.

        Args:
            config: Numeric tolerances. Uses DEFAULT_ROUNDING_CONFIG if None.
        """
        self.config = config or DEFAULT_ROUNDING_CONFIG
        self._handlers: Dict[PipelineKind, Callable[[float], Tuple[List[int], List[Interval]]]] = {
            PipelineKind.ASOS_5MIN: self._invert_asos,
            PipelineKind.METAR_HOURLY: self._invert_metar,
            PipelineKind.CELSIUS_NATIVE: self._invert_celsius,
        }

    # -------------------------------------------------------------------------
    # Candidate enumeration
    # -------------------------------------------------------------------------

    @staticmethod
    def _celsius_candidates(f_low: float, f_high: float) -> List[int]:
        """Whole °C values whose °F conversion falls in [f_low, f_high)."""
        c_low = fahrenheit_to_celsius(f_low)
        c_high = fahrenheit_to_celsius(f_high)
        candidates = []
        for c in range(math.floor(c_low), math.ceil(c_high) + 1):
            converted_f = celsius_to_fahrenheit(c)
            if f_low <= converted_f < f_high:
                candidates.append(c)
        return candidates

    def _invert_asos(self, displayed_f: float) -> Tuple[List[int], List[Interval]]:
        # The list value is the graph value rounded
        candidates = self._celsius_candidates(displayed_f - 0.5, displayed_f + 0.5)

        eps = self.config.boundary_epsilon
        segments = []
        for c in candidates:
            # OMO °F values whose conversion rounds to c
            f_min_for_c = celsius_to_fahrenheit(c - 0.5)
            f_max_for_c = celsius_to_fahrenheit(c + 0.5)

            # Whole °F in [f_min_for_c, f_max_for_c)
            min_int_f = math.ceil(f_min_for_c - eps)
            max_int_f = math.floor(f_max_for_c - eps)
            if min_int_f > max_int_f:
                logger.debug(f"ASOS candidate {c}°C has no whole °F reading, skipping")
                continue

            # Each whole °F covers [F - 0.5, F + 0.5) of true values
            segments.append(Interval(min_int_f - 0.5, max_int_f + 0.5))

        return candidates, segments

    def _invert_metar(self, displayed_f: float) -> Tuple[List[int], List[Interval]]:
        # Whole °C values that convert into the displayed window
        candidates = self._celsius_candidates(displayed_f - 0.5, displayed_f + 0.5)

        # Sensor °C in [c - 0.5, c + 0.5), expressed in °F
        segments = [
            Interval(celsius_to_fahrenheit(c - 0.5), celsius_to_fahrenheit(c + 0.5))
            for c in candidates
        ]
        return candidates, segments

    def _invert_celsius(self, displayed_c: float) -> Tuple[List[int], List[Interval]]:
        return [round_half_up(displayed_c)], [Interval(displayed_c - 0.5, displayed_c + 0.5)]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def analyze(
        self,
        displayed_value: float,
        pipeline: PipelineRef = DEFAULT_PIPELINE,
    ) -> RoundingResult:
        """
        Find the range of true temperatures behind a displayed value.

        Args:
            displayed_value: Value shown by the station, in the pipeline's
                reporting unit
            pipeline: Pipeline, PipelineKind or identifier string

        Returns:
            RoundingResult with bounds, uncertainty and candidate
            intermediate whole degrees

        Raises:
            InvalidInputError: If displayed_value is not a finite temperature
            UnknownPipelineError: If the pipeline identifier is not registered
        """
        pipeline = get_pipeline(pipeline)
        displayed = require_temperature(displayed_value, "displayed value")

        candidates, segments = self._handlers[pipeline.kind](displayed)

        reachable = bool(candidates) and bool(segments)
        if not reachable:
            # No whole degree can produce this display under this pipeline
            logger.warning(
                f"{displayed:g}° cannot be produced by {pipeline.identifier}; "
                f"using ±{UNREACHABLE_HALF_WIDTH:g}° fallback range"
            )
            candidates = [round_half_up(fahrenheit_to_celsius(displayed))]
            segments = [
                Interval(displayed - UNREACHABLE_HALF_WIDTH, displayed + UNREACHABLE_HALF_WIDTH)
            ]

        return self._build_result(displayed, pipeline, candidates, segments, reachable)

    def _build_result(
        self,
        displayed: float,
        pipeline: MeasurementPipeline,
        candidates: List[int],
        segments: List[Interval],
        reachable: bool,
    ) -> RoundingResult:
        decimals = self.config.report_decimals

        # Round for display; uncertainty comes from the rounded bounds
        rounded_segments = tuple(sorted(
            (Interval(round_to(s.lower, decimals), round_to(s.upper, decimals)) for s in segments),
            key=lambda s: (s.lower, s.upper),
        ))
        lower = min(s.lower for s in rounded_segments)
        upper = max(s.upper for s in rounded_segments)
        uncertainty = round_to((upper - lower) / 2, decimals)

        result = RoundingResult(
            displayed_value=displayed,
            pipeline=pipeline,
            lower_bound=lower,
            upper_bound=upper,
            uncertainty=uncertainty,
            quantized_intermediates=tuple(sorted(candidates)),
            segments=rounded_segments,
            reachable=reachable,
        )

        if not result.is_contiguous:
            logger.warning(
                f"Non-contiguous range for {displayed:g}° under {pipeline.identifier}: "
                + ", ".join(f"[{s.lower}, {s.upper})" for s in rounded_segments)
            )

        logger.debug(
            f"{pipeline.identifier} {displayed:g}° -> [{lower}, {upper}) "
            f"±{uncertainty}, intermediates={result.quantized_intermediates}"
        )
        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_default_analyzer = RoundingAnalyzer()


def analyze(
    displayed_value: float,
    pipeline: PipelineRef = DEFAULT_PIPELINE,
) -> RoundingResult:
    """
    Convenience function to analyze a displayed value with default settings.

    Args:
        displayed_value: Displayed station temperature
        pipeline: Pipeline, PipelineKind or identifier string

    Returns:
        RoundingResult
    """
    return _default_analyzer.analyze(displayed_value, pipeline)


def find_range(displayed_f: float, observation_type: str = "asos") -> RoundingResult:
    """
    Get the range for a displayed °F value by observation type.

    Args:
        displayed_f: Displayed temperature in Fahrenheit
        observation_type: "asos" (5-minute) or "metar" (hourly)

    Returns:
        RoundingResult
    """
    return analyze(displayed_f, observation_type)


def format_range(lower: float, upper: float) -> str:
    """Format a temperature range for display, e.g. ``"77.5° – 79.5°"``."""
    return f"{lower:.1f}° – {upper:.1f}°"
