"""
Core submodule for WeatherGraph.

Contains the weather data model, viewport state and sample windowing.
"""

from weathergraph.core.weather_data import Sample, WeatherData, DataSource
from weathergraph.core.viewport import Viewport, ViewportResolver, resolve_temperature_range
from weathergraph.core.windowing import window_samples

__all__ = [
    "Sample",
    "WeatherData",
    "DataSource",
    "Viewport",
    "ViewportResolver",
    "resolve_temperature_range",
    "window_samples",
]
