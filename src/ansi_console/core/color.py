"""Colors as on/off escape pairs, and the map from styles to colors."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Protocol, Union, runtime_checkable

from ansi_console.codec.ansi import Ansi, AnsiColor, Attribute
from ansi_console.core.style import Emphasis, Style, StyleColor, TextStyle

ENV_PREFIX = "ANSI_CONSOLE_COLOR_"
STATUS_BAR = "status_bar"

StyleKey = Union[TextStyle, Style]


@runtime_checkable
class Color(Protocol):
    """Something that can switch a visual decoration on and off."""

    def on(self, ansi: Ansi) -> None:
        ...

    def off(self, ansi: Ansi) -> None:
        ...


@runtime_checkable
class ColorMap(Protocol):
    """Resolves semantic styles to colors."""

    def color_for(self, style: StyleKey) -> Color:
        ...


class NoDecoration:
    """A color that emits nothing."""

    def on(self, ansi: Ansi) -> None:
        pass

    def off(self, ansi: Ansi) -> None:
        pass

    def __repr__(self) -> str:
        return "NoDecoration()"


NO_DECORATION = NoDecoration()


@dataclass(frozen=True)
class ForegroundColor:
    color: AnsiColor
    bright: bool = False

    def on(self, ansi: Ansi) -> None:
        if self.bright:
            ansi.fg_bright(self.color)
        else:
            ansi.fg(self.color)

    def off(self, ansi: Ansi) -> None:
        ansi.fg(AnsiColor.DEFAULT)


@dataclass(frozen=True)
class AttributeColor:
    """A decoration switched by a pair of SGR attributes (bold, italic, ...)."""
    on_attribute: Attribute
    off_attribute: Attribute

    def on(self, ansi: Ansi) -> None:
        ansi.attribute(self.on_attribute)

    def off(self, ansi: Ansi) -> None:
        ansi.attribute(self.off_attribute)


BOLD = AttributeColor(Attribute.INTENSITY_BOLD, Attribute.INTENSITY_BOLD_OFF)
ITALIC = AttributeColor(Attribute.ITALIC, Attribute.ITALIC_OFF)
REVERSE = AttributeColor(Attribute.NEGATIVE_ON, Attribute.NEGATIVE_OFF)
UNDERLINE = AttributeColor(Attribute.UNDERLINE, Attribute.UNDERLINE_OFF)
FAINT = AttributeColor(Attribute.INTENSITY_FAINT, Attribute.INTENSITY_BOLD_OFF)


@dataclass(frozen=True)
class CompositeColor:
    """Several colors applied together; switched off in reverse order."""
    colors: tuple[Color, ...]

    def on(self, ansi: Ansi) -> None:
        for color in self.colors:
            color.on(ansi)

    def off(self, ansi: Ansi) -> None:
        for color in reversed(self.colors):
            color.off(ansi)


_EMPHASIS_COLORS: dict[Emphasis, Color] = {
    Emphasis.BOLD: BOLD,
    Emphasis.ITALIC: ITALIC,
    Emphasis.REVERSE: REVERSE,
}

_NAMED_DECORATIONS: dict[str, Color] = {
    "default": NO_DECORATION,
    "bold": BOLD,
    "italic": ITALIC,
    "reverse": REVERSE,
    "underline": UNDERLINE,
    "faint": FAINT,
    "grey": ForegroundColor(AnsiColor.BLACK, bright=True),
}


def parse_color_spec(spec: str) -> Color:
    """
    Parse a color spec such as ``"red"``, ``"green-bold"`` or ``"default"``.

    Parts are separated by ``-`` and combined in order. Besides the basic color
    names, parts may be ``default``, ``grey``, ``bold``, ``faint``, ``italic``,
    ``underline`` or ``reverse``.
    """
    colors: list[Color] = []
    for part in spec.strip().lower().split('-'):
        if part in _NAMED_DECORATIONS:
            color = _NAMED_DECORATIONS[part]
        else:
            try:
                color = ForegroundColor(AnsiColor[part.upper()])
            except KeyError:
                raise ValueError(f"Unknown color in spec {spec!r}: {part!r}") from None
        if color is not NO_DECORATION:
            colors.append(color)

    if not colors:
        return NO_DECORATION
    if len(colors) == 1:
        return colors[0]
    return CompositeColor(tuple(colors))


def color_for_style(style: Style) -> Color:
    """Build the color for a structural style: emphases first, then foreground."""
    colors = [_EMPHASIS_COLORS[e] for e in Emphasis if e in style.emphasis]
    if style.color is not StyleColor.DEFAULT:
        colors.append(parse_color_spec(style.color.value))

    if not colors:
        return NO_DECORATION
    if len(colors) == 1:
        return colors[0]
    return CompositeColor(tuple(colors))


class DefaultColorMap:
    """
    Color map with built-in defaults and environment overrides.

    Each named style can be overridden with ``ANSI_CONSOLE_COLOR_<NAME>``,
    e.g. ``ANSI_CONSOLE_COLOR_PROGRESS_STATUS=cyan-bold``.
    """

    DEFAULTS: dict[str, str] = {
        TextStyle.NORMAL.value: "default",
        TextStyle.HEADER.value: "default",
        TextStyle.USER_INPUT.value: "bold",
        TextStyle.IDENTIFIER.value: "green",
        TextStyle.DESCRIPTION.value: "yellow",
        TextStyle.PROGRESS_STATUS.value: "yellow",
        TextStyle.SUCCESS.value: "green",
        TextStyle.SUCCESS_HEADER.value: "green-bold",
        TextStyle.FAILURE.value: "red",
        TextStyle.FAILURE_HEADER.value: "red-bold",
        TextStyle.INFO.value: "yellow",
        TextStyle.ERROR.value: "default",
        STATUS_BAR: "bold",
    }

    def __init__(
        self,
        use_color: bool = True,
        environ: Mapping[str, str] | None = None,
    ):
        self.use_color = use_color
        self._environ = os.environ if environ is None else environ
        self._colors: dict[str, Color] = {}

    def color_for(self, style: StyleKey) -> Color:
        if not self.use_color:
            return NO_DECORATION
        if isinstance(style, Style):
            return color_for_style(style)
        return self._named(style.value)

    @property
    def status_bar_color(self) -> Color:
        if not self.use_color:
            return NO_DECORATION
        return self._named(STATUS_BAR)

    def _named(self, name: str) -> Color:
        color = self._colors.get(name)
        if color is None:
            # An empty override counts as unset
            override = self._environ.get(ENV_PREFIX + name.upper(), "").strip()
            spec = override or self.DEFAULTS.get(name, "default")
            color = parse_color_spec(spec)
            self._colors[name] = color
        return color
