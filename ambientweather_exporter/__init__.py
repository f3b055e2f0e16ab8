"""Ambient Weather station -> Prometheus exporter."""

__version__ = "0.1.0"

from .gauges import WeatherGauges, build_gauges, remove_series
from .translator import Translator

__all__ = ["WeatherGauges", "build_gauges", "remove_series", "Translator", "__version__"]
