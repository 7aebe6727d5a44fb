"""Semantic text styles resolved to colors by a ColorMap."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TextStyle(Enum):
    """Named output styles used by console renderers."""
    NORMAL = "normal"
    HEADER = "header"
    USER_INPUT = "user_input"
    IDENTIFIER = "identifier"
    DESCRIPTION = "description"
    PROGRESS_STATUS = "progress_status"
    SUCCESS = "success"
    SUCCESS_HEADER = "success_header"
    FAILURE = "failure"
    FAILURE_HEADER = "failure_header"
    INFO = "info"
    ERROR = "error"


class Emphasis(Enum):
    BOLD = auto()
    ITALIC = auto()
    REVERSE = auto()


class StyleColor(Enum):
    DEFAULT = "default"
    GREY = "grey"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


@dataclass(frozen=True)
class Style:
    """
    A structural style: a set of emphases plus a foreground color.
    
    Example:
        >>> Style.of(Emphasis.BOLD, color=StyleColor.RED)
    """
    emphasis: frozenset[Emphasis] = field(default_factory=frozenset)
    color: StyleColor = StyleColor.DEFAULT
    
    NORMAL: ClassVar[Style]
    
    @classmethod
    def of(cls, *emphasis: Emphasis, color: StyleColor = StyleColor.DEFAULT) -> Style:
        return cls(frozenset(emphasis), color)


Style.NORMAL = Style()
