"""
ansi-console: minimal cursor movement for redrawing terminal output

Turns "write this text at logical row/column" requests into the shortest
stream of relative ANSI cursor moves, while tracking where the terminal
cursor really is.

Quick Start:
    >>> import sys
    >>> from ansi_console import AnsiExecutor, Cursor, DefaultColorMap, TextStyle
    >>> executor = AnsiExecutor(sys.stdout, DefaultColorMap(), on_new_line_adjustment=lambda: None)
    >>> executor.write_at(Cursor.at(0, 0), lambda ctx: ctx
    ...     .with_style(TextStyle.SUCCESS, lambda c: c.a("OK"))
    ...     .a(" done")
    ...     .erase_forward())

Rows count upward from the bottom-most tracked line (row 0 is the bottom).
One character is assumed to occupy one terminal column.
"""

__version__ = "0.1.0"

# Core types
from ansi_console.core.cursor import Cursor
from ansi_console.core.style import Emphasis, Style, StyleColor, TextStyle
from ansi_console.core.color import Color, ColorMap, DefaultColorMap

# Escape builder
from ansi_console.codec.ansi import Ansi, AnsiMode

# Rendering
from ansi_console.render.context import AnsiContext
from ansi_console.render.executor import AnsiExecutor, AnsiOutputError

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cursor",
    "Emphasis",
    "Style",
    "StyleColor",
    "TextStyle",
    "Color",
    "ColorMap",
    "DefaultColorMap",
    # Escape builder
    "Ansi",
    "AnsiMode",
    # Rendering
    "AnsiContext",
    "AnsiExecutor",
    "AnsiOutputError",
]
