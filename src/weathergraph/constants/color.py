"""
Defines the named color palette used by the temperature chart.

Colors are Qt-style hex strings: '#RRGGBB' or '#AARRGGBB' when translucent.
"""
import re
from typing import Final

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

class ColorConstants:
    """Defines a static palette of named colors."""
    WHITE: Final[str] = "#FFFFFF"
    BLACK: Final[str] = "#000000"

    # Axis gridlines and labels
    UI_LINE_COLOR: Final[str] = "#4DFFFFFF"     # white @ 0.3
    UI_TEXT_COLOR: Final[str] = "#66000000"     # black @ 0.4

    # Temperature curve and sample markers
    GRAPH_LINE_COLOR: Final[str] = "#8CFFFFFF"  # white @ 0.55

    # Background shade bands
    DAY_COLOR: Final[str] = "#49839CBC"
    NIGHT_COLOR: Final[str] = "#64677191"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and is_hex_color(value)):
                    raise ValueError(f"Color '{attr_name}' must be a '#RRGGBB' or '#AARRGGBB' string.")


def is_hex_color(value: str) -> bool:
    """True for '#RRGGBB' and '#AARRGGBB' strings."""
    return bool(_HEX_COLOR.fullmatch(value))

# Singleton instance for easy access
color = ColorConstants()
