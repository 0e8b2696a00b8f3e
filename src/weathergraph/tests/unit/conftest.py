import os

# Qt needs a platform plugin even for off-screen QImage painting.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any, List, Tuple

import pytest
from PyQt6.QtWidgets import QApplication

from weathergraph.core.weather_data import Sample, WeatherData


class RecordingCanvas:
    """Canvas stand-in that records every drawing call with the style in effect."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self.stroke_style = "#000000"
        self.fill_style = "#000000"
        self.line_width = 1.0
        self.font = "16px sans-serif"
        self.text_align = "left"
        self.text_baseline = "bottom"

    def begin_path(self):
        self.calls.append(("begin_path", ()))

    def move_to(self, x, y):
        self.calls.append(("move_to", (x, y)))

    def line_to(self, x, y):
        self.calls.append(("line_to", (x, y)))

    def bezier_curve_to(self, cp1x, cp1y, cp2x, cp2y, x, y):
        self.calls.append(("bezier_curve_to", (cp1x, cp1y, cp2x, cp2y, x, y)))

    def stroke(self):
        self.calls.append(("stroke", (self.stroke_style, self.line_width)))

    def fill_rect(self, x, y, width, height):
        self.calls.append(("fill_rect", (x, y, width, height, self.fill_style)))

    def fill_text(self, text, x, y):
        self.calls.append(("fill_text", (text, x, y, self.text_align, self.text_baseline)))

    def of(self, name: str) -> List[Any]:
        return [args for call, args in self.calls if call == name]


class RecordingSurface:
    """Surface stand-in handing out a fresh RecordingCanvas per redraw."""

    def __init__(self) -> None:
        self.canvases: List[RecordingCanvas] = []
        self.sizes: List[Tuple[float, float]] = []

    @contextmanager
    def context(self, width, height):
        canvas = RecordingCanvas()
        self.canvases.append(canvas)
        self.sizes.append((width, height))
        yield canvas

    @property
    def last(self) -> RecordingCanvas:
        return self.canvases[-1]


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def start_time() -> datetime:
    # A Monday
    return datetime(2024, 3, 4, 0, 0)


@pytest.fixture
def weather_data(start_time) -> WeatherData:
    """Three days of 3-hourly readings oscillating between 10 and 20 degrees."""
    temperatures = [10, 12, 16, 20, 18, 14, 12, 11]
    samples = [
        Sample(start_time + timedelta(hours=3 * i), float(temperatures[i % len(temperatures)]))
        for i in range(3 * 8 + 1)
    ]
    return WeatherData(
        samples=samples,
        sunrise_time=start_time.replace(hour=6, minute=30),
        sunset_time=start_time.replace(hour=18, minute=45),
    )
