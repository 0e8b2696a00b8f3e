"""
Chart style configuration for WeatherGraph.

`ConfigManager` loads a JSON style file, merges it with the defaults and sanitizes
every value. `GraphStyle` is the immutable snapshot the renderer draws with.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from weathergraph import constants
from weathergraph.constants.color import is_hex_color
from weathergraph.constants.fonts import FONT_PATTERN
from weathergraph.utils.helpers import get_app_data_path


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


@dataclass(frozen=True)
class GraphStyle:
    """A snapshot of everything the renderer needs to know about appearance."""
    ui_line_color: str
    ui_text_color: str
    graph_line_color: str
    day_color: str
    night_color: str
    ui_font: str
    ui_line_width: float
    graph_line_width: float
    min_vertical_distance: float
    min_horizontal_distance: float
    temp_scale_factor: float
    margin_top: int
    margin_left: int
    margin_bottom: int
    margin_right: int

    def __post_init__(self) -> None:
        defaults = constants.config.defaults
        for key in defaults.COLOR_KEYS:
            if not is_hex_color(getattr(self, key)):
                raise ValueError(f"{key} must be a '#RRGGBB' or '#AARRGGBB' color, got {getattr(self, key)!r}")

        match = FONT_PATTERN.fullmatch(self.ui_font)
        if not match or not constants.fonts.FONT_SIZE_MIN <= float(match.group(1)) <= constants.fonts.FONT_SIZE_MAX:
            raise ValueError(f"ui_font must look like '<n>px <family>' with a legible size, got {self.ui_font!r}")

        ranges = {
            "ui_line_width": defaults.LINE_WIDTH_RANGE,
            "graph_line_width": defaults.LINE_WIDTH_RANGE,
            "min_vertical_distance": defaults.DISTANCE_RANGE,
            "min_horizontal_distance": defaults.DISTANCE_RANGE,
            "temp_scale_factor": defaults.SCALE_FACTOR_RANGE,
            **{key: defaults.MARGIN_RANGE for key in defaults.MARGIN_KEYS},
        }
        for key, (min_v, max_v) in ranges.items():
            if not min_v <= getattr(self, key) <= max_v:
                raise ValueError(f"{key} must be between {min_v} and {max_v}, got {getattr(self, key)}")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'GraphStyle':
        """Creates a GraphStyle from a config dictionary, filling gaps from the defaults."""
        defaults = constants.config.defaults.DEFAULT_CONFIG
        merged = {**defaults, **{k: v for k, v in config.items() if k in defaults}}
        try:
            return cls(
                ui_line_color=str(merged["ui_line_color"]),
                ui_text_color=str(merged["ui_text_color"]),
                graph_line_color=str(merged["graph_line_color"]),
                day_color=str(merged["day_color"]),
                night_color=str(merged["night_color"]),
                ui_font=str(merged["ui_font"]),
                ui_line_width=float(merged["ui_line_width"]),
                graph_line_width=float(merged["graph_line_width"]),
                min_vertical_distance=float(merged["min_vertical_distance"]),
                min_horizontal_distance=float(merged["min_horizontal_distance"]),
                temp_scale_factor=float(merged["temp_scale_factor"]),
                margin_top=int(merged["margin_top"]),
                margin_left=int(merged["margin_left"]),
                margin_bottom=int(merged["margin_bottom"]),
                margin_right=int(merged["margin_right"]),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid graph style configuration: {e}") from e

    @classmethod
    def default(cls) -> 'GraphStyle':
        return cls.from_dict({})


class ConfigManager:
    """
    Loads and validates the chart style configuration file.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path) if config_path else get_app_data_path() / constants.config.defaults.CONFIG_FILENAME
        self.logger = logging.getLogger("WeatherGraph.Config")

    def _validate_numeric(self, key: str, value: Any, default: Any, min_v: float, max_v: float) -> Union[int, float]:
        """Validates a numeric value is within a given range."""
        try:
            if isinstance(value, bool):
                raise ValueError("Booleans are not numbers here")
            num_value = float(value)
            if not (min_v <= num_value <= max_v):
                raise ValueError("Value out of range")
            return int(num_value) if isinstance(default, int) else num_value
        except (TypeError, ValueError):
            self.logger.warning(constants.config.messages.INVALID_NUMERIC.format(key=key, value=value, default=default))
            return default

    def _validate_color_hex(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a '#RRGGBB' or '#AARRGGBB' color string."""
        if isinstance(value, str) and is_hex_color(value):
            return value
        self.logger.warning(constants.config.messages.INVALID_COLOR.format(key=key, value=value, default=default))
        return default

    def _validate_font(self, key: str, value: Any, default: str) -> str:
        """Validates a '<n>px <family>' font string with a legible size."""
        match = FONT_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if match and constants.fonts.FONT_SIZE_MIN <= float(match.group(1)) <= constants.fonts.FONT_SIZE_MAX:
            return value
        self.logger.warning(constants.config.messages.INVALID_FONT.format(key=key, value=value, default=default))
        return default

    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        defaults = constants.config.defaults
        default_ref = defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        for key in defaults.COLOR_KEYS:
            validated[key] = self._validate_color_hex(key, validated.get(key), default_ref[key])

        validated["ui_font"] = self._validate_font("ui_font", validated.get("ui_font"), default_ref["ui_font"])

        for key in ("ui_line_width", "graph_line_width"):
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], *defaults.LINE_WIDTH_RANGE)
        for key in ("min_vertical_distance", "min_horizontal_distance"):
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], *defaults.DISTANCE_RANGE)
        for key in defaults.MARGIN_KEYS:
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], *defaults.MARGIN_RANGE)
        validated["temp_scale_factor"] = self._validate_numeric(
            "temp_scale_factor", validated.get("temp_scale_factor"), default_ref["temp_scale_factor"],
            *defaults.SCALE_FACTOR_RANGE)

        return {key: validated[key] for key in default_ref}

    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file %s not found. Using default style.", self.config_path)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file %s is corrupt. Using default style.", self.config_path)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file %s does not hold an object. Using default style.", self.config_path)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        return self._validate_config(config)

    def load_style(self) -> GraphStyle:
        """Loads the file and returns the validated GraphStyle."""
        return GraphStyle.from_dict(self.load())
