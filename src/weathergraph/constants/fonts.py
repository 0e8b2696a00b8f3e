"""
Constants related to the label font used on the chart axes.
"""
import re
from typing import Final

FONT_PATTERN: Final[re.Pattern] = re.compile(r"\s*(\d+(?:\.\d+)?)px\s+(.+?)\s*")

class FontConstants:
    """Defines the axis label font and its allowed pixel size range."""
    FONT_SIZE_MIN: Final[int] = 6
    FONT_SIZE_MAX: Final[int] = 48

    DEFAULT_FAMILY: Final[str] = "sans-serif"
    DEFAULT_PIXEL_SIZE: Final[int] = 16
    UI_FONT: Final[str] = f"{DEFAULT_PIXEL_SIZE}px {DEFAULT_FAMILY}"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.FONT_SIZE_MAX < self.FONT_SIZE_MIN:
            raise ValueError("FONT_SIZE_MAX must be >= FONT_SIZE_MIN")
        if not FONT_PATTERN.fullmatch(self.UI_FONT):
            raise ValueError("UI_FONT must look like '<n>px <family>'")

# Singleton instance for easy access
fonts = FontConstants()
