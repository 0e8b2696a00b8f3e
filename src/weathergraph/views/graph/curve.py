"""
Temperature curve construction.

Estimates a slope at every sample and turns each pair of neighbouring samples
into one cubic Bezier segment. The segments form a cubic Hermite spline that
passes through every sample; slopes at local extrema are flattened so the curve
does not overshoot peaks and troughs.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Sequence, Tuple

import numpy as np

from weathergraph.core.weather_data import Sample

Point = Tuple[datetime, float]


@dataclass(frozen=True)
class CurvePoint:
    """A sample with its estimated slope in degrees per second."""
    x: datetime
    y: float
    dydx: float


@dataclass(frozen=True)
class BezierSegment:
    """Four control points in chart coordinates: start, two handles, end."""
    p0: Point
    p1: Point
    p2: Point
    p3: Point


def estimate_slopes(times: Sequence[datetime], values: Sequence[float]) -> List[float]:
    """
    Estimates dy/dx (per second) at every sample.

    Interior local extrema get a zero slope, other interior points the secant
    through both neighbours, and the two ends the secant to their only neighbour.
    """
    n = len(times)
    if n < 2:
        return [0.0] * n

    x = np.array([(t - times[0]).total_seconds() for t in times], dtype=float)
    y = np.asarray(values, dtype=float)

    slopes = np.empty(n, dtype=float)
    slopes[0] = (y[1] - y[0]) / (x[1] - x[0])
    slopes[-1] = (y[-1] - y[-2]) / (x[-1] - x[-2])

    if n > 2:
        prev_y, mid_y, next_y = y[:-2], y[1:-1], y[2:]
        secant = (next_y - prev_y) / (x[2:] - x[:-2])
        is_extremum = ((prev_y > mid_y) & (next_y > mid_y)) | ((prev_y < mid_y) & (next_y < mid_y))
        slopes[1:-1] = np.where(is_extremum, 0.0, secant)

    return slopes.tolist()


def build_curve_points(samples: Sequence[Sample]) -> List[CurvePoint]:
    times = [sample.time for sample in samples]
    values = [sample.temperature for sample in samples]
    slopes = estimate_slopes(times, values)
    return [CurvePoint(t, v, s) for t, v, s in zip(times, values, slopes)]


def hermite_to_bezier(start: CurvePoint, end: CurvePoint) -> BezierSegment:
    """Exact Bezier form of the cubic Hermite piece between two points."""
    h = (end.x - start.x) / 3
    h_seconds = h.total_seconds()
    return BezierSegment(
        (start.x, start.y),
        (start.x + h, start.y + h_seconds * start.dydx),
        (end.x - h, end.y - h_seconds * end.dydx),
        (end.x, end.y),
    )


def build_segments(points: Sequence[CurvePoint]) -> List[BezierSegment]:
    """One segment per consecutive pair; fewer than two points yield none."""
    return [hermite_to_bezier(a, b) for a, b in zip(points, points[1:])]
