"""
Constants specific to the temperature chart: layout, tick density and curve geometry.
"""
from datetime import timedelta
from typing import Final, Tuple

from .color import color
from .fonts import fonts

class GraphConstants:
    """Defines constants for the temperature chart."""
    # --- Layout (device pixels) ---
    MARGIN_TOP: Final[int] = 20
    MARGIN_LEFT: Final[int] = 30
    MARGIN_BOTTOM: Final[int] = 13
    MARGIN_RIGHT: Final[int] = 10

    # --- Tick density ---
    MIN_VERTICAL_DISTANCE: Final[int] = 25
    MIN_HORIZONTAL_DISTANCE: Final[int] = 33
    TEMPERATURE_STEPS: Final[Tuple[int, ...]] = (1, 2, 5)
    HOUR_STEPS: Final[Tuple[int, ...]] = (2, 6)

    # --- Tick decoration ---
    DAY_LINE_EXTENSION: Final[int] = 12
    TEMPERATURE_LABEL_GAP: Final[int] = 2
    DAY_LABEL_OFFSET_X: Final[int] = 3
    TIME_LABEL_OFFSET_Y: Final[int] = 1
    TEMPERATURE_UNIT: Final[str] = "°C"
    DAY_NAMES: Final[Tuple[str, ...]] = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')

    # --- Scale ---
    TEMP_SCALE_FACTOR: Final[float] = 1.2
    DEGENERATE_HALF_SPAN: Final[float] = 0.5
    HOUR_LENGTH: Final[timedelta] = timedelta(hours=1)
    DAY_LENGTH: Final[timedelta] = timedelta(days=1)

    # --- Curve ---
    MARKER_SIZE: Final[int] = 4
    UI_LINE_WIDTH: Final[float] = 1.5
    GRAPH_LINE_WIDTH: Final[float] = 1.0

    # --- Colors and fonts ---
    UI_LINE_COLOR: Final[str] = color.UI_LINE_COLOR
    UI_TEXT_COLOR: Final[str] = color.UI_TEXT_COLOR
    GRAPH_LINE_COLOR: Final[str] = color.GRAPH_LINE_COLOR
    DAY_COLOR: Final[str] = color.DAY_COLOR
    NIGHT_COLOR: Final[str] = color.NIGHT_COLOR
    UI_FONT: Final[str] = fonts.UI_FONT

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if min(self.MARGIN_TOP, self.MARGIN_LEFT, self.MARGIN_BOTTOM, self.MARGIN_RIGHT) < 0:
            raise ValueError("Margins must not be negative")
        if self.MIN_VERTICAL_DISTANCE <= 0 or self.MIN_HORIZONTAL_DISTANCE <= 0:
            raise ValueError("Minimum tick distances must be positive")
        if list(self.TEMPERATURE_STEPS) != sorted(self.TEMPERATURE_STEPS) or not self.TEMPERATURE_STEPS:
            raise ValueError("TEMPERATURE_STEPS must be a non-empty ascending sequence")
        if list(self.HOUR_STEPS) != sorted(self.HOUR_STEPS) or not self.HOUR_STEPS:
            raise ValueError("HOUR_STEPS must be a non-empty ascending sequence")
        if any(24 % step for step in self.HOUR_STEPS):
            raise ValueError("HOUR_STEPS must divide a day evenly")
        if self.TEMP_SCALE_FACTOR < 1.0:
            raise ValueError("TEMP_SCALE_FACTOR must be >= 1.0")
        if self.DEGENERATE_HALF_SPAN <= 0:
            raise ValueError("DEGENERATE_HALF_SPAN must be positive")
        if len(self.DAY_NAMES) != 7:
            raise ValueError("DAY_NAMES must list seven days, Sunday first")

# Singleton instance for easy access
graph = GraphConstants()
