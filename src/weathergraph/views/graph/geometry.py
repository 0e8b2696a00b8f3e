"""
Coordinate transform between (time, temperature) and device pixels.
"""

from dataclasses import dataclass, field
from datetime import datetime

from weathergraph import constants
from weathergraph.core.viewport import Viewport


@dataclass(frozen=True)
class Margins:
    """Pixels reserved around the plot for axis labels."""
    top: float = constants.graph.MARGIN_TOP
    left: float = constants.graph.MARGIN_LEFT
    bottom: float = constants.graph.MARGIN_BOTTOM
    right: float = constants.graph.MARGIN_RIGHT


@dataclass(frozen=True)
class PixelBounds:
    """
    Size of the drawing surface in device pixels and the margins inside it.

    The plot area is the surface minus the margins and must be positive.
    """
    width: float
    height: float
    margins: Margins = field(default_factory=Margins)

    def __post_init__(self) -> None:
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ValueError(
                f"Surface {self.width}x{self.height} leaves no plot area inside margins {self.margins}")

    @property
    def plot_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def plot_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom

    def scaled(self, factor: float) -> "PixelBounds":
        """Converts logical pixels to device pixels."""
        m = self.margins
        return PixelBounds(
            self.width * factor,
            self.height * factor,
            Margins(m.top * factor, m.left * factor, m.bottom * factor, m.right * factor),
        )


@dataclass(frozen=True)
class GraphGeometry:
    """
    Maps chart values to pixels for one viewport on one surface.

    Callers guarantee a non-degenerate viewport; the resolver widens flat
    temperature windows before they get here.
    """
    viewport: Viewport
    bounds: PixelBounds

    def map_time(self, time: datetime) -> float:
        vp = self.viewport
        ratio = (time - vp.min_x) / (vp.max_x - vp.min_x)
        return self.bounds.margins.left + self.bounds.plot_width * ratio

    def map_temp(self, temperature: float) -> float:
        vp = self.viewport
        ratio = (temperature - vp.min_y) / (vp.max_y - vp.min_y)
        return self.bounds.margins.top + self.bounds.plot_height * (1 - ratio)

    @property
    def plot_left(self) -> float:
        return self.map_time(self.viewport.min_x)

    @property
    def plot_right(self) -> float:
        return self.map_time(self.viewport.max_x)

    @property
    def plot_top(self) -> float:
        return self.map_temp(self.viewport.max_y)

    @property
    def plot_bottom(self) -> float:
        return self.map_temp(self.viewport.min_y)
