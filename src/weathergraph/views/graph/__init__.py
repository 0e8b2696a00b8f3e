"""
Temperature chart rendering: geometry, ticks, shading, curve and the drawing surface.
"""

from weathergraph.views.graph.geometry import GraphGeometry, Margins, PixelBounds
from weathergraph.views.graph.graph import WeatherGraph
from weathergraph.views.graph.renderer import GraphRenderer

__all__ = ["GraphGeometry", "Margins", "PixelBounds", "WeatherGraph", "GraphRenderer"]
