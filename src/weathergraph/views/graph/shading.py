"""
Day/night background bands for the temperature chart.

The reference day's sunrise and sunset are repeated one day at a time across the
viewport, producing contiguous bands that alternate between day and night.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List

from weathergraph import constants


@dataclass(frozen=True)
class ShadeBand:
    """One background rectangle covering [start, end)."""
    start: datetime
    end: datetime
    is_day: bool


def compute_shade_bands(sunrise_time: datetime, sunset_time: datetime,
                        min_x: datetime, max_x: datetime) -> List[ShadeBand]:
    """
    Tiles [min_x, max_x) with alternating day and night bands.

    Assumes one fixed UTC offset for the whole span, so every day is the same length.
    """
    day_length = constants.graph.DAY_LENGTH

    # Move the reference transitions onto min_x's calendar date.
    day_offset = (min_x.date() - sunrise_time.date()).days
    sunrise = sunrise_time + day_offset * day_length
    sunset = sunset_time + day_offset * day_length
    # Anchor on the latest sunrise at or before min_x.
    while sunrise > min_x:
        sunrise -= day_length
        sunset -= day_length
    is_day = sunrise <= min_x < sunset

    # Both transitions must lie after min_x.
    while sunrise <= min_x:
        sunrise += day_length
    while sunset <= min_x:
        sunset += day_length
    start_time, end_time = min(sunrise, sunset), max(sunrise, sunset)

    if start_time >= max_x:
        return [ShadeBand(min_x, max_x, is_day)]

    bands = [ShadeBand(min_x, start_time, is_day)]
    is_day = not is_day
    while end_time < max_x:
        bands.append(ShadeBand(start_time, end_time, is_day))
        is_day = not is_day
        start_time, end_time = end_time, start_time + day_length
    bands.append(ShadeBand(start_time, max_x, is_day))
    return bands
