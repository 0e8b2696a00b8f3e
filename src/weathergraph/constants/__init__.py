"""
Provides centralized, immutable constants for the WeatherGraph package.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from weathergraph import constants

    # Minimum pixel gap between temperature gridlines
    constants.graph.MIN_VERTICAL_DISTANCE

    # Default chart style
    constants.config.defaults.DEFAULT_CONFIG
"""

from .app import app
from .color import color
from .config import config
from .fonts import fonts
from .graph import graph
from .logs import logs

__all__ = [
    "app",
    "color",
    "config",
    "fonts",
    "graph",
    "logs",
]
