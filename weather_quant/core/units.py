"""Temperature unit conversions and rounding helpers."""

import math

# Converted values are normalised to this many decimal places before any
# rounding step so binary floating point noise cannot flip a .5 tie.
CONVERSION_PRECISION = 9


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return round((fahrenheit - 32.0) * 5.0 / 9.0, CONVERSION_PRECISION)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return round(celsius * 9.0 / 5.0 + 32.0, CONVERSION_PRECISION)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, sending exact halves toward +infinity.

    This matches how the station feeds round (2.5 -> 3, -2.5 -> -2), unlike
    Python's built-in round() which rounds halves to even.
    """
    # value - floor(value) is exact; value + 0.5 is not (0.49999999999999994)
    whole = math.floor(value)
    return int(whole) + 1 if value - whole >= 0.5 else int(whole)


def fahrenheit_to_whole_celsius(fahrenheit: float) -> int:
    """
    Whole °C a Fahrenheit reading rounds to.

    The °C bins are bounded by celsius_to_fahrenheit(c +/- 0.5), the same
    edges the analyzer reports, so a value just below an edge never lands
    in the bin above it.
    """
    celsius = round_half_up((fahrenheit - 32.0) * 5.0 / 9.0)
    while fahrenheit < celsius_to_fahrenheit(celsius - 0.5):
        celsius -= 1
    while fahrenheit >= celsius_to_fahrenheit(celsius + 0.5):
        celsius += 1
    return celsius


def round_to(value: float, decimals: int = 1) -> float:
    """Round half-up to a fixed number of decimal places for reporting."""
    factor = 10 ** decimals
    # Normalise first: 77.45 is stored as 77.4499999... and must still go up.
    scaled = round(value * factor, CONVERSION_PRECISION - decimals)
    return math.floor(scaled + 0.5) / factor
