"""Core value types: cursor positions, styles and colors."""

from ansi_console.core.cursor import Cursor
from ansi_console.core.style import Emphasis, Style, StyleColor, TextStyle
from ansi_console.core.color import Color, ColorMap, DefaultColorMap

__all__ = [
    "Cursor",
    "Emphasis",
    "Style",
    "StyleColor",
    "TextStyle",
    "Color",
    "ColorMap",
    "DefaultColorMap",
]
