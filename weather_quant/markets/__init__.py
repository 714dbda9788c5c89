"""Market bracket label parsing and quote helpers."""

from weather_quant.markets.brackets import (
    parse_bracket_label,
    market_probability_from_quote,
)

__all__ = [
    "parse_bracket_label",
    "market_probability_from_quote",
]
