"""
Terminal Background Colors

The eight standard ANSI background colors plus the indexed 256-color palette.
Colors are parsed from user text and serialized to the escape-code fragment
used inside an SGR sequence.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ColorParseError(ValueError):
    """Raised when text does not name a known color or a valid palette index"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NamedColor(Enum):
    """Standard background colors, valued by their SGR code"""
    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    PURPLE = "45"
    CYAN = "46"
    WHITE = "47"

    @property
    def escape_fragment(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.escape_fragment


@dataclass(frozen=True)
class IndexedColor:
    """Background color from the extended 256-color palette"""
    index: int

    def __post_init__(self):
        if not 0 <= self.index <= 255:
            raise ValueError(f"Palette index out of range: {self.index}")

    @property
    def escape_fragment(self) -> str:
        return f"48;5;{self.index}"

    def __str__(self) -> str:
        return self.escape_fragment


Color = Union[NamedColor, IndexedColor]

DEFAULT_COLOR: Color = NamedColor.WHITE

_NAMES = {color.name.lower(): color for color in NamedColor}


def parse_color(text: str) -> Color:
    """
    Parse a color selector.

    Surrounding whitespace is ignored and names are case-insensitive. Text made
    only of decimal digits selects a palette index (0-255).

    Args:
        text: Color name ("red", " Cyan ") or palette index ("200")

    Returns:
        The parsed color

    Raises:
        ColorParseError: If the text is neither a known name nor a valid index
    """
    key = text.strip().lower()

    if key in _NAMES:
        return _NAMES[key]

    if all(c in string.digits for c in key):
        if not key:
            raise ColorParseError("cannot parse integer from empty string")
        index = int(key)
        if index > 255:
            raise ColorParseError("number too large to fit in target type")
        return IndexedColor(index)

    raise ColorParseError("Unknown color")


def to_escape_fragment(color: Color) -> str:
    """Get the SGR parameter for a color, e.g. "41" or "48;5;200" """
    return color.escape_fragment
