"""ANSI escape sequence builder and terminal capability detection."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TextIO

from rich.console import Console

CSI = '\x1b['


class AnsiColor(IntEnum):
    """Basic terminal colors (offset from SGR 30 / 90)."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9


class Attribute(IntEnum):
    """SGR attribute codes."""
    INTENSITY_BOLD = 1
    INTENSITY_FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    NEGATIVE_ON = 7
    INTENSITY_BOLD_OFF = 22
    ITALIC_OFF = 23
    UNDERLINE_OFF = 24
    NEGATIVE_OFF = 27


class Erase(IntEnum):
    """Erase modes for the EL (erase in line) sequence."""
    FORWARD = 0
    BACKWARD = 1
    ALL = 2


class AnsiMode(Enum):
    """How an executor decides whether to emit escape sequences."""
    AUTO = "auto"     # Emit only when the target supports ANSI
    FORCE = "force"   # Always emit


def supports_ansi(target: TextIO) -> bool:
    """
    Check whether escape sequences written to target will be interpreted.

    Honours FORCE_COLOR, TTY_COMPATIBLE and TERM=dumb the same way rich does.
    """
    console = Console(file=target)
    return console.is_terminal and not console.is_dumb_terminal


def ansi_enabled(mode: AnsiMode, target: TextIO) -> bool:
    """Decide once whether builders for target should emit escapes."""
    return mode is AnsiMode.FORCE or supports_ansi(target)


class Ansi:
    """
    Accumulates text and escape sequences into a single string.

    Consecutive SGR attributes are merged into one sequence. A disabled
    builder drops every escape but keeps literal text and newlines, so the
    visible characters are identical in both modes.

    Example:
        >>> str(Ansi().cursor_up(2).fg(AnsiColor.RED).a("x").fg(AnsiColor.DEFAULT))
        '\\x1b[2A\\x1b[31mx\\x1b[39m'
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._parts: list[str] = []
        self._attributes: list[int] = []

    def cursor_up(self, n: int) -> "Ansi":
        if n < 0:
            return self.cursor_down(-n)
        return self._escape('A', n)

    def cursor_down(self, n: int) -> "Ansi":
        if n < 0:
            return self.cursor_up(-n)
        return self._escape('B', n)

    def cursor_right(self, n: int) -> "Ansi":
        if n < 0:
            return self.cursor_left(-n)
        return self._escape('C', n)

    def cursor_left(self, n: int) -> "Ansi":
        if n < 0:
            return self.cursor_right(-n)
        return self._escape('D', n)

    def erase_line(self, kind: Erase = Erase.ALL) -> "Ansi":
        if not self.enabled:
            return self
        self._flush_attributes()
        self._parts.append(f"{CSI}{kind.value}K")
        return self

    def attribute(self, attribute: Attribute) -> "Ansi":
        if self.enabled:
            self._attributes.append(attribute.value)
        return self

    def fg(self, color: AnsiColor) -> "Ansi":
        if self.enabled:
            self._attributes.append(30 + color.value)
        return self

    def fg_bright(self, color: AnsiColor) -> "Ansi":
        if self.enabled:
            self._attributes.append(90 + color.value)
        return self

    def a(self, text: str) -> "Ansi":
        """Append literal text."""
        self._flush_attributes()
        self._parts.append(text)
        return self

    def newline(self) -> "Ansi":
        self._flush_attributes()
        self._parts.append('\n')
        return self

    def _escape(self, command: str, n: int) -> "Ansi":
        if not self.enabled or n == 0:
            return self
        self._flush_attributes()
        self._parts.append(f"{CSI}{n}{command}")
        return self

    def _flush_attributes(self) -> None:
        if self._attributes:
            self._parts.append(f"{CSI}{';'.join(map(str, self._attributes))}m")
            self._attributes.clear()

    def __str__(self) -> str:
        self._flush_attributes()
        return ''.join(self._parts)
