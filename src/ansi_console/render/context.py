"""Fluent write session handed to AnsiExecutor.write_at callbacks."""

from __future__ import annotations

from typing import Callable

from ansi_console.codec.ansi import Ansi, Erase
from ansi_console.core.color import Color, ColorMap, StyleKey
from ansi_console.core.cursor import Cursor

ContextAction = Callable[["AnsiContext"], object]


class AnsiContext:
    """
    Emits styled text into one write session.

    Every character and newline is reported back to the executor so its
    tracked cursor stays in step with the terminal. Each method returns the
    context itself so calls can be chained.

    Example:
        >>> executor.write_at(Cursor.at(1, 0), lambda ctx: (
        ...     ctx.with_style(TextStyle.HEADER, lambda c: c.a("> Task"))
        ...        .a(" running")
        ...        .erase_forward()))
    """

    def __init__(
        self,
        ansi: Ansi,
        color_map: ColorMap,
        characters_written: Callable[[int], Cursor],
        new_line_written: Callable[[], Cursor],
        cursor: Cursor,
    ):
        self._ansi = ansi
        self._color_map = color_map
        self._characters_written = characters_written
        self._new_line_written = new_line_written
        self._cursor = cursor.copy()

    @property
    def cursor(self) -> Cursor:
        """Current position of the session (a copy)."""
        return self._cursor.copy()

    def with_color(self, color: Color, action: ContextAction) -> AnsiContext:
        """Run action between color's on and off codes."""
        color.on(self._ansi)
        try:
            action(self)
        finally:
            color.off(self._ansi)
        return self

    def with_style(self, style: StyleKey, action: ContextAction) -> AnsiContext:
        return self.with_color(self._color_map.color_for(style), action)

    def a(self, text: str) -> AnsiContext:
        """Append literal text; one column per character."""
        self._ansi.a(text)
        self._cursor = self._characters_written(len(text))
        return self

    def newline(self) -> AnsiContext:
        self._ansi.newline()
        self._cursor = self._new_line_written()
        return self

    def erase_forward(self) -> AnsiContext:
        """Clear from the cursor to the end of the line."""
        self._ansi.erase_line(Erase.FORWARD)
        return self
