"""
Weather data model for WeatherGraph.

Defines the immutable `Sample` record, the `DataSource` contract the chart
consumes, and `WeatherData`, an in-memory data source over an ordered series
of temperature samples plus one reference day's sunrise and sunset.
"""

from __future__ import annotations
import bisect
import logging
from dataclasses import dataclass, field
from datetime import datetime, date
from typing import List, Optional, Sequence, Protocol


@dataclass(frozen=True)
class Sample:
    """
    A single temperature reading.

    Attributes:
        time: The instant of the reading (naive local time).
        temperature: Temperature in degrees Celsius.
    """
    time: datetime
    temperature: float


class DataSource(Protocol):
    """The contract the chart consumes from whatever supplies weather data."""
    samples: Sequence[Sample]
    sunrise_time: datetime
    sunset_time: datetime

    def sample_at(self, instant: datetime) -> Sample:
        ...


@dataclass
class WeatherData:
    """
    In-memory data source backed by a list of samples ordered by time.

    Attributes:
        samples: Readings in strictly increasing time order. Must not be empty.
        sunrise_time: Sunrise on the reference day.
        sunset_time: Sunset on the reference day.
    """
    samples: List[Sample]
    sunrise_time: datetime
    sunset_time: datetime
    _times: List[datetime] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.samples:
            raise ValueError("WeatherData requires at least one sample")
        self.samples = list(self.samples)
        self._times = [sample.time for sample in self.samples]
        logging.getLogger("WeatherGraph.WeatherData").debug(
            "Loaded %d samples spanning %s .. %s", len(self.samples), self._times[0], self._times[-1])

    @property
    def first(self) -> Sample:
        return self.samples[0]

    @property
    def last(self) -> Sample:
        return self.samples[-1]

    def sample_at(self, instant: datetime) -> Sample:
        """
        Returns the temperature at an arbitrary instant.

        Inside the recorded span the value is linearly interpolated between the two
        bracketing samples. Outside it the nearest edge temperature is held. The
        returned sample always carries `instant` as its time.
        """
        index = bisect.bisect_left(self._times, instant)
        if index < len(self._times) and self._times[index] == instant:
            return Sample(instant, self.samples[index].temperature)
        if index == 0:
            return Sample(instant, self.first.temperature)
        if index == len(self._times):
            return Sample(instant, self.last.temperature)

        before, after = self.samples[index - 1], self.samples[index]
        ratio = (instant - before.time) / (after.time - before.time)
        return Sample(instant, before.temperature + ratio * (after.temperature - before.temperature))

    @property
    def days(self) -> List[List[Sample]]:
        """Samples grouped by calendar date, earliest day first."""
        return group_by_day(self.samples)


def group_by_day(samples: Sequence[Sample]) -> List[List[Sample]]:
    """Splits time-ordered samples into runs sharing one calendar date."""
    grouped: List[List[Sample]] = []
    current_day: Optional[date] = None
    for sample in samples:
        if sample.time.date() != current_day:
            current_day = sample.time.date()
            grouped.append([])
        grouped[-1].append(sample)
    return grouped
