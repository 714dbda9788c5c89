"""
Core data models for weather-quant.

ALL MODULES IMPORT FROM HERE.
Every value type is frozen so results can be shared between threads.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from weather_quant.core.exceptions import (
    DegenerateDistributionWarning,
    InvalidInputError,
)
from weather_quant.core.validation import (
    optional_finite,
    require_probability,
    require_temperature,
)
from weather_quant.core.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    round_to,
)


# =============================================================================
# ENUMS
# =============================================================================

class PipelineKind(Enum):
    """Closed set of station reporting pipelines."""
    ASOS_5MIN = "ASOS_5MIN"            # F -> C -> F double conversion
    METAR_HOURLY = "METAR_HOURLY"      # C -> F single conversion
    CELSIUS_NATIVE = "CELSIUS_NATIVE"  # whole-degree Celsius only


class TemperatureUnit(Enum):
    """Temperature unit."""
    FAHRENHEIT = "F"
    CELSIUS = "C"


class BracketType(Enum):
    """Shape of a market bracket interval."""
    BETWEEN = "between"             # [lower, upper)
    LESS_THAN = "less_than"         # (-inf, upper)
    GREATER_THAN = "greater_than"   # [lower, +inf)


class Confidence(Enum):
    """Model agreement level derived from forecast spread."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class Signal(Enum):
    """Direction of the market mispricing relative to the models."""
    UNDERPRICED = "underpriced"   # market undervalues the outcome
    OVERPRICED = "overpriced"     # market overvalues the outcome
    FAIR = "fair"


class Magnitude(Enum):
    """Size bucket of an edge."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# =============================================================================
# DATA CLASSES - ROUNDING
# =============================================================================

@dataclass(frozen=True)
class MeasurementPipeline:
    """
    A named, versioned description of a station's rounding chain.

    Pipelines are fixed constants (see weather_quant.config.pipelines), not
    user data. ``steps`` is descriptive only; the analyzer and simulator
    dispatch on ``kind``.
    """
    kind: PipelineKind
    name: str
    version: str
    description: str
    steps: Tuple[str, ...]
    reporting_unit: TemperatureUnit     # unit of displayed and true values
    quantized_unit: TemperatureUnit     # unit of the legally significant integers

    @property
    def identifier(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Interval:
    """Half-open interval [lower, upper)."""
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


@dataclass(frozen=True)
class RoundingResult:
    """
    Range of true temperatures consistent with one displayed value.

    ``lower_bound <= true value < upper_bound`` holds for every true value
    that the pipeline could have turned into ``displayed_value``. Bounds are
    rounded for reporting and ``uncertainty`` is derived from the rounded
    bounds, so it can be reproduced from them alone.
    """
    displayed_value: float
    pipeline: MeasurementPipeline
    lower_bound: float
    upper_bound: float
    uncertainty: float
    quantized_intermediates: Tuple[int, ...]
    segments: Tuple[Interval, ...] = ()
    reachable: bool = True

    @property
    def unit(self) -> TemperatureUnit:
        return self.pipeline.reporting_unit

    @property
    def primary_intermediate(self) -> Optional[int]:
        """The first candidate integer, or None if there is none."""
        return self.quantized_intermediates[0] if self.quantized_intermediates else None

    @property
    def is_contiguous(self) -> bool:
        """False when the candidate segments leave a gap inside the outer bounds."""
        for previous, current in zip(self.segments, self.segments[1:]):
            if current.lower > previous.upper:
                return False
        return True

    @property
    def interval(self) -> Interval:
        return Interval(self.lower_bound, self.upper_bound)

    def contains(self, value: float) -> bool:
        return self.lower_bound <= value < self.upper_bound

    def to_unit(self, unit: TemperatureUnit, decimals: int = 1) -> Tuple[float, float]:
        """Return (lower, upper) expressed in ``unit``."""
        if unit == self.unit:
            return (self.lower_bound, self.upper_bound)
        convert = (
            celsius_to_fahrenheit if unit == TemperatureUnit.FAHRENHEIT
            else fahrenheit_to_celsius
        )
        return (
            round_to(convert(self.lower_bound), decimals),
            round_to(convert(self.upper_bound), decimals),
        )


@dataclass(frozen=True)
class StepResult:
    """Value recorded after one step of a forward simulation."""
    index: int
    name: str
    value: float
    unit: TemperatureUnit
    quantized: bool   # True if this step was a rounding operation


@dataclass(frozen=True)
class SimulationResult:
    """Ordered record of every step a true value passes through."""
    true_value: float
    pipeline: MeasurementPipeline
    steps: Tuple[StepResult, ...]

    @property
    def final_value(self) -> float:
        return self.steps[-1].value

    @property
    def quantized_values(self) -> Tuple[float, ...]:
        return tuple(step.value for step in self.steps if step.quantized)

    def step(self, name: str) -> StepResult:
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(name)

    def __iter__(self) -> Iterator[StepResult]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


# =============================================================================
# DATA CLASSES - FORECASTS & MARKETS
# =============================================================================

@dataclass(frozen=True)
class ForecastPoint:
    """One model's best estimate of the daily high (or low)."""
    model: str
    value: float

    def __post_init__(self):
        object.__setattr__(
            self, "value", require_temperature(self.value, f"forecast value for {self.model}")
        )


@dataclass(frozen=True)
class Bracket:
    """
    A market-defined temperature interval with its quoted probability.

    Boundary logic:
    - BETWEEN: lower <= temp < upper
    - LESS_THAN: temp < upper (``lower`` is None)
    - GREATER_THAN: temp >= lower (``upper`` is None)

    ``market_probability`` is on the 0-100 scale.
    """
    bracket_id: str
    lower: Optional[float]
    upper: Optional[float]
    market_probability: float = 0.0
    label: str = ""

    def __post_init__(self):
        lower = optional_finite(self.lower, f"lower bound of bracket {self.bracket_id}")
        upper = optional_finite(self.upper, f"upper bound of bracket {self.bracket_id}")
        if lower is None and upper is None:
            raise InvalidInputError(f"Bracket {self.bracket_id} has no bounds")
        if lower is not None and upper is not None and lower >= upper:
            raise InvalidInputError(
                f"Bracket {self.bracket_id} is empty: lower {lower} >= upper {upper}"
            )
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        object.__setattr__(
            self,
            "market_probability",
            require_probability(
                self.market_probability, f"market probability of bracket {self.bracket_id}"
            ),
        )
        if not self.label:
            object.__setattr__(self, "label", self.bracket_id)

    @classmethod
    def from_label(cls, bracket_id: str, label: str, market_probability: float = 0.0) -> "Bracket":
        """Build a bracket by parsing a market label such as ``"70-71°"``."""
        from weather_quant.markets import parse_bracket_label

        _, lower, upper = parse_bracket_label(label)
        return cls(
            bracket_id=bracket_id,
            lower=lower,
            upper=upper,
            market_probability=market_probability,
            label=label,
        )

    @property
    def bracket_type(self) -> BracketType:
        if self.lower is None:
            return BracketType.LESS_THAN
        if self.upper is None:
            return BracketType.GREATER_THAN
        return BracketType.BETWEEN

    def contains(self, temp: float) -> bool:
        """Check if a temperature would settle in this bracket."""
        if self.lower is not None and temp < self.lower:
            return False
        if self.upper is not None and temp >= self.upper:
            return False
        return True

    def distance_to(self, temp: float) -> float:
        """Distance from ``temp`` to the nearest point of the bracket (0 if inside)."""
        if self.lower is not None and temp < self.lower:
            return self.lower - temp
        if self.upper is not None and temp >= self.upper:
            return temp - self.upper
        return 0.0


# =============================================================================
# DATA CLASSES - CONSENSUS & EDGES
# =============================================================================

@dataclass(frozen=True)
class ConsensusSummary:
    """Summary statistics across forecast models."""
    mean: Optional[float]
    min: Optional[float]
    max: Optional[float]
    spread: Optional[float]
    confidence: Confidence
    count: int = 0

    @property
    def is_known(self) -> bool:
        return self.confidence != Confidence.UNKNOWN


@dataclass(frozen=True, eq=False)
class BracketDistribution(Mapping):
    """
    Model-implied probability per bracket id, in whole percent.

    Behaves as a read-only mapping; the values always sum to exactly 100
    for a non-empty bracket set.
    """
    probabilities: Dict[str, int]
    mean: float
    std_dev: float                  # value actually used, after the floor
    raw_std_dev: float              # population std dev of the forecasts
    degenerate: bool = False
    warnings: Tuple[DegenerateDistributionWarning, ...] = field(default=())

    def __getitem__(self, bracket_id: str) -> int:
        return self.probabilities[bracket_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self.probabilities)

    def __len__(self) -> int:
        return len(self.probabilities)

    @property
    def uses_std_dev_floor(self) -> bool:
        return self.std_dev > self.raw_std_dev


@dataclass(frozen=True)
class EdgeResult:
    """Model vs market comparison for one bracket."""
    model_probability: float
    market_probability: float
    edge: float                     # model_probability - market_probability
    signal: Signal
    magnitude: Magnitude

    @property
    def abs_edge(self) -> float:
        return abs(self.edge)

    @property
    def is_actionable(self) -> bool:
        return self.signal != Signal.FAIR


@dataclass(frozen=True, eq=False)
class EdgeReport(Mapping):
    """Edge per bracket id, together with the distribution it came from."""
    edges: Dict[str, EdgeResult]
    distribution: BracketDistribution

    def __getitem__(self, bracket_id: str) -> EdgeResult:
        return self.edges[bracket_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)
