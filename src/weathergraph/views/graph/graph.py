"""
The stateful temperature chart.

`WeatherGraph` ties one data source, one drawing surface and one viewport
together. Rescaling, focusing a day and resizing each trigger a full synchronous
redraw.
"""

import logging
from datetime import datetime
from typing import ContextManager, Optional, Protocol

from weathergraph.core.viewport import Viewport, ViewportResolver
from weathergraph.core.weather_data import DataSource
from weathergraph.utils.config import GraphStyle
from weathergraph.views.graph.canvas import Canvas
from weathergraph.views.graph.geometry import Margins, PixelBounds
from weathergraph.views.graph.renderer import GraphRenderer


class Surface(Protocol):
    """Something that can hand out a canvas of a given device pixel size."""

    def context(self, width: float, height: float) -> ContextManager[Canvas]: ...


class WeatherGraph:
    """
    A temperature chart bound to a data source and a drawing surface.

    Attributes:
        data_source: The weather data being charted.
        surface: Where each redraw is painted.
        bounds: Current surface size in device pixels.
        resolver: Owner of the current viewport.
        renderer: Draws one frame.
    """

    def __init__(self, data_source: DataSource, surface: Surface, bounds: PixelBounds,
                 style: Optional[GraphStyle] = None) -> None:
        self.logger = logging.getLogger("WeatherGraph.Graph")
        self.style = style or GraphStyle.default()
        self.data_source = data_source
        self.surface = surface
        self.bounds = bounds
        self.resolver = ViewportResolver(data_source, self.style.temp_scale_factor)
        self.renderer = GraphRenderer(self.style)
        self._drawing = False

    @classmethod
    def sized(cls, data_source: DataSource, surface: Surface, width: float, height: float,
              scale_factor: float = 1.0, style: Optional[GraphStyle] = None) -> "WeatherGraph":
        """Creates a graph from a logical surface size, applying the style's margins."""
        style = style or GraphStyle.default()
        bounds = PixelBounds(width, height, margins_from_style(style)).scaled(scale_factor)
        return cls(data_source, surface, bounds, style)

    @property
    def viewport(self) -> Viewport:
        return self.resolver.viewport

    def draw(self) -> None:
        """Redraws the whole chart onto a fresh canvas from the surface."""
        if self._drawing:
            raise RuntimeError("WeatherGraph.draw() is not re-entrant")
        self._drawing = True
        try:
            with self.surface.context(self.bounds.width, self.bounds.height) as canvas:
                self.renderer.render(canvas, self.data_source, self.resolver.viewport, self.bounds,
                                     self.resolver.samples)
        finally:
            self._drawing = False

    def rescale(self, new_min: datetime, new_max: datetime) -> Viewport:
        """Shows [new_min, new_max] and redraws."""
        viewport = self.resolver.rescale(new_min, new_max)
        self.logger.info("Viewport set to %s .. %s", new_min, new_max)
        self.draw()
        return viewport

    def focus_day(self, day_index: int) -> Viewport:
        """Shows one calendar day (0 = everything) and redraws."""
        viewport = self.resolver.focus_day(day_index)
        self.logger.info("Focused day %d: %s .. %s", day_index, viewport.min_x, viewport.max_x)
        self.draw()
        return viewport

    def resize(self, width: float, height: float, scale_factor: float = 1.0) -> None:
        """Adopts a new logical surface size and redraws."""
        self.bounds = PixelBounds(width, height, margins_from_style(self.style)).scaled(scale_factor)
        self.logger.debug("Resized to %.0fx%.0f device px", self.bounds.width, self.bounds.height)
        self.draw()


def margins_from_style(style: GraphStyle) -> Margins:
    return Margins(style.margin_top, style.margin_left, style.margin_bottom, style.margin_right)
