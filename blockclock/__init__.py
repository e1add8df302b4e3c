"""
Block Clock Rendering for the terminal
Draws the Unix time as block digits using ANSI escape sequences
"""

from .color import Color, NamedColor, IndexedColor, ColorParseError, parse_color, to_escape_fragment
from .digit import render_digit
from .clock import Clockface, render_clockface
from .stream import clock_stream

__all__ = [
    'Color',
    'NamedColor',
    'IndexedColor',
    'ColorParseError',
    'parse_color',
    'to_escape_fragment',
    'render_digit',
    'Clockface',
    'render_clockface',
    'clock_stream',
]
