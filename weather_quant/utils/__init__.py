"""Utility modules for weather-quant."""

from weather_quant.utils.logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
