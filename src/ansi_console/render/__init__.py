"""Cursor positioning and styled write sessions."""

from ansi_console.render.context import AnsiContext
from ansi_console.render.executor import AnsiExecutor, AnsiOutputError

__all__ = ["AnsiContext", "AnsiExecutor", "AnsiOutputError"]
