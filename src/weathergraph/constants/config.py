"""
Constants for chart style configuration defaults and constraints.
"""
from typing import Final, Dict, Any, Tuple

from .color import color
from .fonts import fonts
from .graph import graph

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_COLOR: Final[str] = "Invalid color '{value}' for {key}, resetting to default '{default}'"
    INVALID_FONT: Final[str] = "Invalid font '{value}' for {key}, resetting to default '{default}'"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all chart style settings."""
    CONFIG_FILENAME: Final[str] = "WeatherGraph_Config.json"

    # Allowed (min, max) ranges for numeric settings
    LINE_WIDTH_RANGE: Final[Tuple[float, float]] = (0.1, 10.0)
    DISTANCE_RANGE: Final[Tuple[int, int]] = (1, 500)
    MARGIN_RANGE: Final[Tuple[int, int]] = (0, 500)
    SCALE_FACTOR_RANGE: Final[Tuple[float, float]] = (1.0, 5.0)

    COLOR_KEYS: Final[Tuple[str, ...]] = (
        "ui_line_color", "ui_text_color", "graph_line_color", "day_color", "night_color",
    )
    MARGIN_KEYS: Final[Tuple[str, ...]] = ("margin_top", "margin_left", "margin_bottom", "margin_right")

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "ui_line_color": color.UI_LINE_COLOR,
        "ui_text_color": color.UI_TEXT_COLOR,
        "graph_line_color": color.GRAPH_LINE_COLOR,
        "day_color": color.DAY_COLOR,
        "night_color": color.NIGHT_COLOR,
        "ui_font": fonts.UI_FONT,
        "ui_line_width": graph.UI_LINE_WIDTH,
        "graph_line_width": graph.GRAPH_LINE_WIDTH,
        "min_vertical_distance": graph.MIN_VERTICAL_DISTANCE,
        "min_horizontal_distance": graph.MIN_HORIZONTAL_DISTANCE,
        "temp_scale_factor": graph.TEMP_SCALE_FACTOR,
        "margin_top": graph.MARGIN_TOP,
        "margin_left": graph.MARGIN_LEFT,
        "margin_bottom": graph.MARGIN_BOTTOM,
        "margin_right": graph.MARGIN_RIGHT,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        expected_keys = set(self.COLOR_KEYS) | set(self.MARGIN_KEYS) | {
            "ui_font", "ui_line_width", "graph_line_width", "min_vertical_distance",
            "min_horizontal_distance", "temp_scale_factor",
        }
        actual_keys = set(self.DEFAULT_CONFIG.keys())
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
