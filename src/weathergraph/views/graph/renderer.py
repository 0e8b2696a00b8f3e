"""
Draws the temperature chart onto a Canvas.

One `render` call is a complete redraw: day/night background, temperature
gridlines, time gridlines, then the curve with its sample markers. Every piece is
recomputed from the viewport, the data and the surface size; nothing is cached
between redraws.
"""

import logging
from typing import Optional, Sequence

from weathergraph import constants
from weathergraph.core.viewport import Viewport
from weathergraph.core.weather_data import DataSource, Sample
from weathergraph.core.windowing import window_samples
from weathergraph.utils.config import GraphStyle
from weathergraph.views.graph.canvas import Canvas
from weathergraph.views.graph.curve import CurvePoint, BezierSegment, build_curve_points, build_segments
from weathergraph.views.graph.geometry import GraphGeometry, PixelBounds
from weathergraph.views.graph.shading import ShadeBand, compute_shade_bands
from weathergraph.views.graph.ticks import (
    TimeTick, plan_day_ticks, plan_hour_ticks, plan_temperature_ticks,
)


class GraphRenderer:
    """
    Renders a temperature chart with a given GraphStyle.

    The renderer holds no chart state of its own; the caller passes the viewport
    and bounds for every redraw.
    """

    def __init__(self, style: Optional[GraphStyle] = None, logger: Optional[logging.Logger] = None) -> None:
        self.style = style or GraphStyle.default()
        self.logger = logger or logging.getLogger("WeatherGraph.Renderer")

    def render(self, canvas: Canvas, data_source: DataSource, viewport: Viewport,
               bounds: PixelBounds, samples: Optional[Sequence[Sample]] = None) -> None:
        """
        Draws the full chart.

        `samples` may carry the already windowed samples for this viewport; they are
        windowed from `data_source` otherwise.
        """
        geometry = GraphGeometry(viewport, bounds)
        if samples is None:
            samples = window_samples(data_source, viewport.min_x, viewport.max_x)

        self.logger.debug("Rendering %s .. %s on %.0fx%.0f px with %d samples",
                          viewport.min_x, viewport.max_x, bounds.width, bounds.height, len(samples))

        self.draw_background(canvas, geometry, data_source)
        self.draw_temperature_scale(canvas, geometry)
        self.draw_time_scale(canvas, geometry)
        self.draw_temperature_curve(canvas, geometry, samples)

    # --- Background ---

    def draw_background(self, canvas: Canvas, geometry: GraphGeometry, data_source: DataSource) -> None:
        vp = geometry.viewport
        bands = compute_shade_bands(data_source.sunrise_time, data_source.sunset_time, vp.min_x, vp.max_x)
        for band in bands:
            self._draw_band(canvas, geometry, band)

    def _draw_band(self, canvas: Canvas, geometry: GraphGeometry, band: ShadeBand) -> None:
        canvas.fill_style = self.style.day_color if band.is_day else self.style.night_color
        left = geometry.map_time(band.start)
        canvas.fill_rect(left, geometry.plot_top, geometry.map_time(band.end) - left,
                         geometry.bounds.plot_height)

    # --- Axes ---

    def draw_temperature_scale(self, canvas: Canvas, geometry: GraphGeometry) -> None:
        canvas.stroke_style = self.style.ui_line_color
        canvas.line_width = self.style.ui_line_width
        label_x = geometry.plot_left - constants.graph.TEMPERATURE_LABEL_GAP

        for tick in plan_temperature_ticks(geometry, self.style.min_vertical_distance):
            canvas.begin_path()
            canvas.move_to(geometry.plot_left, tick.y)
            canvas.line_to(geometry.plot_right, tick.y)
            canvas.stroke()

            canvas.fill_style = self.style.ui_text_color
            canvas.font = self.style.ui_font
            canvas.text_align = "right"
            canvas.text_baseline = "middle"
            canvas.fill_text(tick.label, label_x, tick.y)

    def draw_time_scale(self, canvas: Canvas, geometry: GraphGeometry) -> None:
        canvas.stroke_style = self.style.ui_line_color
        canvas.line_width = self.style.ui_line_width
        canvas.fill_style = self.style.ui_text_color
        canvas.font = self.style.ui_font

        for tick in plan_day_ticks(geometry):
            self._draw_vertical_line(canvas, geometry, tick, constants.graph.DAY_LINE_EXTENSION)
            canvas.text_align = "left"
            canvas.text_baseline = "bottom"
            canvas.fill_text(tick.label, tick.x + constants.graph.DAY_LABEL_OFFSET_X,
                             geometry.plot_top + constants.graph.TIME_LABEL_OFFSET_Y)

        hour_ticks = plan_hour_ticks(geometry, self.style.min_horizontal_distance)
        if not hour_ticks:
            self.logger.debug("Hours too dense for labels, skipping hour lines")
        for tick in hour_ticks:
            self._draw_vertical_line(canvas, geometry, tick, 0)
            canvas.text_align = "center"
            canvas.text_baseline = "top"
            canvas.fill_text(tick.label, tick.x, geometry.plot_bottom + constants.graph.TIME_LABEL_OFFSET_Y)

    def _draw_vertical_line(self, canvas: Canvas, geometry: GraphGeometry, tick: TimeTick,
                            extra_length: float) -> None:
        canvas.begin_path()
        canvas.move_to(tick.x, geometry.plot_bottom)
        canvas.line_to(tick.x, geometry.plot_top - extra_length)
        canvas.stroke()

    # --- Curve ---

    def draw_temperature_curve(self, canvas: Canvas, geometry: GraphGeometry,
                               samples: Sequence[Sample]) -> None:
        points = build_curve_points(samples)
        for point in points:
            self._draw_point(canvas, geometry, point)

        canvas.stroke_style = self.style.graph_line_color
        canvas.line_width = self.style.graph_line_width
        for segment in build_segments(points):
            self._draw_segment(canvas, geometry, segment)

    def _draw_point(self, canvas: Canvas, geometry: GraphGeometry, point: CurvePoint) -> None:
        size = constants.graph.MARKER_SIZE
        canvas.fill_style = self.style.graph_line_color
        canvas.fill_rect(geometry.map_time(point.x) - size / 2, geometry.map_temp(point.y) - size / 2,
                         size, size)

    def _draw_segment(self, canvas: Canvas, geometry: GraphGeometry, segment: BezierSegment) -> None:
        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = segment.p0, segment.p1, segment.p2, segment.p3
        canvas.begin_path()
        canvas.move_to(geometry.map_time(x0), geometry.map_temp(y0))
        canvas.bezier_curve_to(
            geometry.map_time(x1), geometry.map_temp(y1),
            geometry.map_time(x2), geometry.map_temp(y2),
            geometry.map_time(x3), geometry.map_temp(y3),
        )
        canvas.stroke()
