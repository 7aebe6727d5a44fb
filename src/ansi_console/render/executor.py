"""Move a real terminal's cursor with the fewest relative escape sequences."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from ansi_console.codec.ansi import Ansi, AnsiMode, ansi_enabled
from ansi_console.core.color import ColorMap
from ansi_console.core.cursor import Cursor
from ansi_console.render.context import AnsiContext, ContextAction

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """Append-only text destination, e.g. ``sys.stdout``."""

    def write(self, s: str) -> int:
        ...

    def flush(self) -> None:
        ...


class AnsiOutputError(Exception):
    """Writing to the output sink failed.

    The tracked cursor and the terminal may disagree afterwards; the
    executor should not be used again.
    """


class AnsiExecutor:
    """
    Positions the terminal cursor and runs styled write sessions.

    The executor keeps its own belief of where the terminal cursor sits
    (``write_cursor``) and only emits the relative moves needed to reach a
    requested position. Rows count upward from the bottom tracked line.

    ``on_new_line_adjustment`` is called whenever a newline is written on
    row 0: the terminal scrolls, and any row numbers tracked outside the
    executor have to shift.

    Not thread safe; all calls must come from a single writer.
    """

    def __init__(
        self,
        target: OutputSink,
        color_map: ColorMap,
        mode: AnsiMode = AnsiMode.AUTO,
        *,
        on_new_line_adjustment: Callable[[], None],
    ):
        self._target = target
        self._color_map = color_map
        self._mode = mode
        self._on_new_line_adjustment = on_new_line_adjustment
        self._ansi_enabled = ansi_enabled(mode, target)
        self._write_cursor = Cursor.origin()

    @property
    def mode(self) -> AnsiMode:
        return self._mode

    @property
    def ansi_enabled(self) -> bool:
        return self._ansi_enabled

    @property
    def write_cursor(self) -> Cursor:
        """Tracked terminal cursor position (a copy)."""
        return self._write_cursor.copy()

    def position_cursor_at(self, position: Cursor) -> None:
        """Move the terminal cursor to position and flush immediately."""
        _check_position(position)
        ansi = self._create()
        self._position_cursor_at(position, ansi)
        self._write(ansi)

    def write_at(self, write_pos: Cursor, action: ContextAction) -> Cursor:
        """
        Move to write_pos, run action with a write session, then flush.

        Returns the cursor position after the session. The passed cursor is
        not modified.

        Args:
            write_pos: Logical position to start writing at
            action: Callback receiving an AnsiContext
        """
        _check_position(write_pos)
        ansi = self._create()
        self._position_cursor_at(write_pos, ansi)
        context = AnsiContext(
            ansi,
            self._color_map,
            self._characters_written,
            self._new_line_written,
            self._write_cursor,
        )
        try:
            action(context)
        finally:
            self._write(ansi)
        return self._write_cursor.copy()

    def _characters_written(self, count: int) -> Cursor:
        self._write_cursor.col += count
        return self._write_cursor.copy()

    def _new_line_written(self) -> Cursor:
        self._write_cursor.col = 0

        # On the bottom row a newline scrolls the terminal; the row stays 0.
        if self._write_cursor.row > 0:
            self._write_cursor.row -= 1
        else:
            logger.debug("Newline on bottom row, terminal scrolled")
            self._on_new_line_adjustment()
        return self._write_cursor.copy()

    def _position_cursor_at(self, position: Cursor, ansi: Ansi) -> None:
        current = self._write_cursor
        if current.row == position.row:
            if current.col == position.col:
                return
            if current.col < position.col:
                ansi.cursor_right(position.col - current.col)
            else:
                ansi.cursor_left(current.col - position.col)
        else:
            # Vertical moves keep the column, so return to column 0 first
            if current.col > 0:
                ansi.cursor_left(current.col)
            if current.row < position.row:
                ansi.cursor_up(position.row - current.row)
            else:
                ansi.cursor_down(current.row - position.row)
            if position.col > 0:
                ansi.cursor_right(position.col)
        current.copy_from(position)

    def _create(self) -> Ansi:
        return Ansi(enabled=self._ansi_enabled)

    def _write(self, ansi: Ansi) -> None:
        try:
            self._target.write(str(ansi))
            self._target.flush()
        except (OSError, ValueError) as e:
            logger.debug("Failed to write to output sink: %s", e)
            raise AnsiOutputError(f"Failed to write to output sink: {e}") from e


def _check_position(position: Cursor) -> None:
    if position.row < 0 or position.col < 0:
        raise ValueError(f"Cursor position must not be negative, got {position}")
