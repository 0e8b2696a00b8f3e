"""
Viewport state for the temperature chart.

The `Viewport` is the visible time window plus the temperature range derived from
the samples inside it. `ViewportResolver` owns the current viewport for one chart
and is the only place it changes.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Sequence, Tuple

from weathergraph import constants
from weathergraph.core.weather_data import DataSource, Sample, group_by_day
from weathergraph.core.windowing import window_samples

logger = logging.getLogger("WeatherGraph.Viewport")


@dataclass(frozen=True)
class Viewport:
    """
    The visible chart window.

    Attributes:
        min_x: Start of the visible time span.
        max_x: End of the visible time span, strictly after `min_x`.
        min_y: Lowest plotted temperature.
        max_y: Highest plotted temperature, strictly above `min_y`.
    """
    min_x: datetime
    max_x: datetime
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x >= self.max_x:
            raise ValueError(f"Viewport start {self.min_x} must be before its end {self.max_x}")
        if self.min_y > self.max_y:
            raise ValueError(f"Viewport min_y {self.min_y} must not exceed max_y {self.max_y}")

    @property
    def span(self) -> timedelta:
        return self.max_x - self.min_x


def resolve_temperature_range(samples: Sequence[Sample],
                              factor: float = constants.graph.TEMP_SCALE_FACTOR) -> Tuple[float, float]:
    """
    Derives the plotted temperature range from the windowed samples.

    The data extremes are pushed away from their mean by `factor` so the curve never
    touches the plot border. A flat window is widened to a minimal span around its
    single value so the range can always be divided by.
    """
    if not samples:
        raise ValueError("Cannot derive a temperature range from no samples")

    temperatures = [sample.temperature for sample in samples]
    min_temp, max_temp = min(temperatures), max(temperatures)
    mean_temp = (min_temp + max_temp) / 2
    min_y = mean_temp + factor * (min_temp - mean_temp)
    max_y = mean_temp + factor * (max_temp - mean_temp)

    if max_y - min_y <= 0:
        half_span = constants.graph.DEGENERATE_HALF_SPAN
        logger.warning("Flat temperature window at %s, widening range by +/-%s", min_temp, half_span)
        return min_temp - half_span, min_temp + half_span
    return min_y, max_y


class ViewportResolver:
    """
    Owns the visible window of one chart and re-derives its temperature range.

    Attributes:
        data_source: The weather data being charted.
        factor: Temperature range expansion factor.
        viewport: The current viewport, replaced on every rescale.
        samples: The windowed samples behind the current viewport.
    """

    def __init__(self, data_source: DataSource,
                 factor: float = constants.graph.TEMP_SCALE_FACTOR) -> None:
        self.data_source = data_source
        self.factor = factor
        self.viewport: Viewport
        self.samples: List[Sample] = []
        self.reset()

    @property
    def full_span(self) -> Tuple[datetime, datetime]:
        """First and last sample times of the whole series."""
        return self.data_source.samples[0].time, self.data_source.samples[-1].time

    def reset(self) -> Viewport:
        """Shows the whole series."""
        start, end = self.full_span
        if start == end:
            # A single reading still needs a non-empty window around it.
            start, end = start - constants.graph.HOUR_LENGTH, end + constants.graph.HOUR_LENGTH
        return self.rescale(start, end)

    def rescale(self, new_min: datetime, new_max: datetime) -> Viewport:
        """Moves the visible window and re-derives the temperature range for it."""
        if new_min >= new_max:
            raise ValueError(f"Cannot rescale to an empty window: {new_min} .. {new_max}")

        self.samples = window_samples(self.data_source, new_min, new_max)
        min_y, max_y = resolve_temperature_range(self.samples, self.factor)
        self.viewport = Viewport(new_min, new_max, min_y, max_y)
        logger.debug("Rescaled to %s .. %s, temperature %.2f .. %.2f (%d samples)",
                     new_min, new_max, min_y, max_y, len(self.samples))
        return self.viewport

    def focus_day(self, day_index: int) -> Viewport:
        """
        Focuses one calendar day of the series.

        Day 0 shows the whole series; any other day shows midnight to midnight of
        the date of that day's first sample.
        """
        days = group_by_day(self.data_source.samples)
        if not 0 <= day_index < len(days):
            raise IndexError(f"Day index {day_index} out of range (0..{len(days) - 1})")
        if day_index == 0:
            return self.reset()

        first_time = days[day_index][0].time
        new_min = first_time.replace(hour=0, minute=0, second=0, microsecond=0)
        return self.rescale(new_min, new_min + constants.graph.DAY_LENGTH)

