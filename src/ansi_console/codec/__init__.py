"""ANSI escape sequence generation."""

from ansi_console.codec.ansi import Ansi, AnsiColor, AnsiMode, Attribute, Erase

__all__ = ["Ansi", "AnsiColor", "AnsiMode", "Attribute", "Erase"]
