"""
Market bracket parsing.

Turns the labels market-data feeds attach to temperature brackets into
numeric half-open intervals. Labels name whole degrees, so an inclusive
range "70-71°" covers [70, 72).
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from weather_quant.core import BracketType, InvalidInputError
from weather_quant.core.validation import require_finite

logger = logging.getLogger(__name__)

_NUM = r"(-?\d+(?:\.\d+)?)"

# Regex patterns for parsing bracket labels
BETWEEN_PATTERN = re.compile(
    _NUM + r"°?\s*(?:F)?\s*(?:to|–|-)\s*" + _NUM + r"°?\s*(?:F)?",
    re.IGNORECASE
)

# "≤63°", "<=63", "63° or below"
LESS_OR_EQUAL_PATTERN = re.compile(
    r"(?:(?:≤|<=)\s*" + _NUM + r"|" + _NUM + r"°?\s*(?:F)?\s*or\s*(?:below|less|lower))",
    re.IGNORECASE
)

# "below 63", "less than 63", "<63"
LESS_THAN_PATTERN = re.compile(
    r"(?:below|less\s*than|under|<)\s*" + _NUM,
    re.IGNORECASE
)

# "≥72°", ">=72", "72° or above"
GREATER_OR_EQUAL_PATTERN = re.compile(
    r"(?:(?:≥|>=)\s*" + _NUM + r"|" + _NUM + r"°?\s*(?:F)?\s*or\s*(?:above|more|higher))",
    re.IGNORECASE
)

# "above 72", "greater than 72", ">72"
GREATER_THAN_PATTERN = re.compile(
    r"(?:above|greater\s*than|over|>)\s*" + _NUM,
    re.IGNORECASE
)

ParsedBracket = Tuple[BracketType, Optional[float], Optional[float]]


def _first_group(match: re.Match) -> float:
    return float(next(g for g in match.groups() if g is not None))


def _less_or_equal(match: re.Match) -> ParsedBracket:
    return (BracketType.LESS_THAN, None, _first_group(match) + 1)


def _less_than(match: re.Match) -> ParsedBracket:
    return (BracketType.LESS_THAN, None, _first_group(match))


def _greater_or_equal(match: re.Match) -> ParsedBracket:
    return (BracketType.GREATER_THAN, _first_group(match), None)


def _greater_than(match: re.Match) -> ParsedBracket:
    return (BracketType.GREATER_THAN, _first_group(match) + 1, None)


def _between(match: re.Match) -> ParsedBracket:
    lower = float(match.group(1))
    upper = float(match.group(2)) + 1  # inclusive upper whole degree
    return (BracketType.BETWEEN, lower, upper)


# Order matters: "or below" / "<=" must be tried before bare "<", and the
# one-sided forms before BETWEEN so "below -5" is not read as a range.
_PARSERS: List[Tuple[re.Pattern, Callable[[re.Match], ParsedBracket]]] = [
    (LESS_OR_EQUAL_PATTERN, _less_or_equal),
    (GREATER_OR_EQUAL_PATTERN, _greater_or_equal),
    (LESS_THAN_PATTERN, _less_than),
    (GREATER_THAN_PATTERN, _greater_than),
    (BETWEEN_PATTERN, _between),
]


def parse_bracket_label(label: str) -> ParsedBracket:
    """
    Parse a bracket label to extract type and half-open bounds.

    Handles formats:
    - "70-71°" or "70° to 71°" -> BETWEEN [70, 72)
    - "≤63°" or "63° or below" -> LESS_THAN (-inf, 64)
    - "below 63" or "<63" -> LESS_THAN (-inf, 63)
    - "≥72°" or "72° or above" -> GREATER_THAN [72, +inf)
    - "above 72" or ">72" -> GREATER_THAN [73, +inf)

    Raises:
        InvalidInputError: If the label matches none of the formats
    """
    if not label or not isinstance(label, str):
        raise InvalidInputError(f"Could not parse bracket label: {label!r}")

    for pattern, build in _PARSERS:
        match = pattern.search(label)
        if match:
            parsed = build(match)
            logger.debug(f"Parsed bracket label {label!r} -> {parsed}")
            return parsed

    raise InvalidInputError(f"Could not parse bracket label: {label!r}")


def market_probability_from_quote(yes_bid: float, yes_ask: float) -> float:
    """
    Mid-market probability on the 0-100 scale from bid/ask cents.
    """
    yes_bid = require_finite(yes_bid, "yes bid")
    yes_ask = require_finite(yes_ask, "yes ask")
    if yes_bid == 0 and yes_ask == 0:
        return 0.0
    if yes_bid >= 100 or yes_ask >= 100:
        return 100.0
    return (yes_bid + yes_ask) / 2.0
