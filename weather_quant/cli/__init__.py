"""CLI entry point for weather-quant."""

from weather_quant.cli.commands import main

__all__ = ["main"]
