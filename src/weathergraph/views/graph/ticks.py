"""
Axis tick planning for the temperature chart.

Chooses gridline density per axis so labels stay at least a minimum pixel gap
apart, and lays out the resulting ticks in pixel space.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from weathergraph import constants
from weathergraph.views.graph.geometry import GraphGeometry


@dataclass(frozen=True)
class TemperatureTick:
    """A horizontal gridline at `value` degrees, drawn at pixel row `y`."""
    value: int
    y: float
    label: str


@dataclass(frozen=True)
class TimeTick:
    """A vertical gridline at `time`, drawn at pixel column `x`."""
    time: datetime
    x: float
    label: str


def choose_temperature_step(degree_height: float,
                            min_distance: float = constants.graph.MIN_VERTICAL_DISTANCE,
                            steps: Sequence[int] = constants.graph.TEMPERATURE_STEPS) -> int:
    """
    Smallest step whose gridlines are at least `min_distance` pixels apart.

    Falls back to the largest step even if it is still too dense.
    """
    for step in steps:
        if step * degree_height >= min_distance:
            return step
    return steps[-1]


def choose_hour_step(hour_width: float,
                     min_distance: float = constants.graph.MIN_HORIZONTAL_DISTANCE,
                     steps: Sequence[int] = constants.graph.HOUR_STEPS) -> Optional[int]:
    """Smallest hour step that clears `min_distance`, or None to draw no hour lines."""
    for step in steps:
        if step * hour_width >= min_distance:
            return step
    return None


def format_temperature(value: int) -> str:
    return f"{value}{constants.graph.TEMPERATURE_UNIT}"


def format_day(day: datetime) -> str:
    # isoweekday(): Monday=1 .. Sunday=7; the name table starts on Sunday.
    return constants.graph.DAY_NAMES[day.isoweekday() % 7]


def format_hour(hour: datetime) -> str:
    return f"{hour.hour:02d}:00"


def _midnight(time: datetime) -> datetime:
    return time.replace(hour=0, minute=0, second=0, microsecond=0)


def plan_temperature_ticks(geometry: GraphGeometry,
                           min_distance: float = constants.graph.MIN_VERTICAL_DISTANCE) -> List[TemperatureTick]:
    """Gridlines at every multiple of the chosen step from min_y up to (excluding) max_y."""
    vp = geometry.viewport
    degree_height = geometry.map_temp(vp.min_y) - geometry.map_temp(vp.min_y + 1)
    step = choose_temperature_step(degree_height, min_distance)

    ticks = []
    value = math.ceil(vp.min_y / step) * step
    while value < vp.max_y:
        ticks.append(TemperatureTick(value, geometry.map_temp(value), format_temperature(value)))
        value += step
    return ticks


def plan_day_ticks(geometry: GraphGeometry) -> List[TimeTick]:
    """Gridlines at each midnight strictly after min_x and before max_x."""
    vp = geometry.viewport
    day = _midnight(vp.min_x)
    if day <= vp.min_x:
        day += constants.graph.DAY_LENGTH

    ticks = []
    while day < vp.max_x:
        ticks.append(TimeTick(day, geometry.map_time(day), format_day(day)))
        day += constants.graph.DAY_LENGTH
    return ticks


def plan_hour_ticks(geometry: GraphGeometry,
                    min_distance: float = constants.graph.MIN_HORIZONTAL_DISTANCE) -> List[TimeTick]:
    """
    Gridlines every `step` hours, aligned to multiples of the step.

    The first line falls on the smallest step multiple after the viewport's start
    hour. Returns no ticks when even the widest step is too dense.
    """
    vp = geometry.viewport
    hour_width = geometry.map_time(vp.min_x + constants.graph.HOUR_LENGTH) - geometry.map_time(vp.min_x)
    step = choose_hour_step(hour_width, min_distance)
    if step is None:
        return []

    first_hour = math.ceil((vp.min_x.hour + 1) / step) * step
    hour = _midnight(vp.min_x) + timedelta(hours=first_hour)

    ticks = []
    while hour < vp.max_x:
        ticks.append(TimeTick(hour, geometry.map_time(hour), format_hour(hour)))
        hour += timedelta(hours=step)
    return ticks
