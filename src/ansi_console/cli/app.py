"""Typer CLI application."""

import sys
from typing import Annotated

from rich.console import Console

from ansi_console.codec.ansi import AnsiMode
from ansi_console.core.color import DefaultColorMap
from ansi_console.core.cursor import Cursor
from ansi_console.core.style import TextStyle
from ansi_console.render.executor import AnsiExecutor

try:
    import typer
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


class RowTracker:
    """Keeps rows written so far addressable after the terminal scrolls."""

    def __init__(self) -> None:
        self.rows: list[int] = []
        self.scrolls = 0

    def shift(self) -> None:
        self.rows = [row + 1 for row in self.rows]
        self.scrolls += 1


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer is required for CLI. Install with: uv pip install ansi-console[cli]")

    app = typer.Typer(
        name="ansi-console",
        help="Redraw terminal lines in place with minimal cursor movement.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    ModeOption = Annotated[
        AnsiMode,
        typer.Option("--mode", "-m", envvar="ANSI_CONSOLE_MODE", help="Emit escapes always (force) or only on a terminal (auto)"),
    ]
    NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable colors and emphasis")]

    @app.command()
    def demo(
        rows: Annotated[int, typer.Option("--rows", "-r", min=1, max=50, help="Number of status rows")] = 3,
        mode: ModeOption = AnsiMode.AUTO,
        no_color: NoColorOption = False,
    ) -> None:
        """Draw status rows, then repaint each one in place."""
        tracker = RowTracker()
        executor = AnsiExecutor(
            sys.stdout,
            DefaultColorMap(use_color=not no_color),
            mode,
            on_new_line_adjustment=tracker.shift,
        )

        cursor = Cursor.origin()
        for i in range(rows):
            tracker.rows.append(cursor.row)
            cursor = executor.write_at(cursor, lambda ctx, i=i: ctx
                .with_style(TextStyle.PROGRESS_STATUS, lambda c: c.a("WAIT"))
                .a(f" task {i}")
                .newline())

        for i, row in enumerate(tracker.rows):
            executor.write_at(Cursor.at(row, 0), lambda ctx, i=i: ctx
                .with_style(TextStyle.SUCCESS_HEADER, lambda c: c.a("DONE"))
                .a(f" task {i}")
                .erase_forward())

        executor.position_cursor_at(Cursor.origin())

        console.print(f"[dim]{tracker.scrolls} scroll adjustments[/]")

    @app.command()
    def styles(
        mode: ModeOption = AnsiMode.AUTO,
        no_color: NoColorOption = False,
    ) -> None:
        """Show every named text style in its resolved colors."""
        executor = AnsiExecutor(
            sys.stdout,
            DefaultColorMap(use_color=not no_color),
            mode,
            on_new_line_adjustment=lambda: None,
        )

        cursor = Cursor.origin()
        for style in TextStyle:
            cursor = executor.write_at(cursor, lambda ctx, style=style: ctx
                .with_style(style, lambda c: c.a(style.value))
                .newline())

    return app
