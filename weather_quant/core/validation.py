"""Input validation shared by the analyzer and the edge engine."""

import math
from numbers import Real
from typing import Optional

from weather_quant.core.exceptions import InvalidInputError


def require_finite(value, name: str) -> float:
    """
    Return ``value`` as a float, or raise InvalidInputError.

    Booleans are rejected even though ``bool`` is an ``int`` subclass: a
    ``True`` temperature is always a caller bug.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return value


# Far outside any physical temperature, and small enough that unit
# conversion and rounding stay exact and overflow-free
TEMPERATURE_LIMIT = 1e6


def require_temperature(value, name: str) -> float:
    """require_finite, plus a magnitude bound of TEMPERATURE_LIMIT degrees."""
    value = require_finite(value, name)
    if abs(value) > TEMPERATURE_LIMIT:
        raise InvalidInputError(
            f"{name} must be within ±{TEMPERATURE_LIMIT:g} degrees, got {value:g}"
        )
    return value


def optional_finite(value, name: str) -> Optional[float]:
    """Like require_finite, but ``None`` passes through (open bracket end)."""
    if value is None:
        return None
    return require_finite(value, name)


def require_probability(value, name: str) -> float:
    """Validate a probability on the 0-100 scale."""
    value = require_finite(value, name)
    if not 0.0 <= value <= 100.0:
        raise InvalidInputError(f"{name} must be between 0 and 100, got {value}")
    return value
