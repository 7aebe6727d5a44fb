"""Shared fixtures: recording sinks and executors wired to them."""

import io
from typing import Callable

import pytest

from ansi_console.codec.ansi import AnsiMode
from ansi_console.core.color import DefaultColorMap
from ansi_console.render.executor import AnsiExecutor


class RecordingSink:
    """Output sink that keeps every write separately."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flushes = 0

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def last(self) -> str:
        return self.writes[-1]

    def getvalue(self) -> str:
        return ''.join(self.writes)


class FailingSink:
    """Output sink whose writes always fail."""

    def write(self, s: str) -> int:
        raise OSError("stream closed")

    def flush(self) -> None:
        pass


class TtySink(io.StringIO):
    """In-memory sink that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


class ScrollCounter:
    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1


@pytest.fixture(autouse=True)
def clean_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep terminal detection independent of the environment running the tests."""
    for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "ANSI_CONSOLE_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def tty_sink() -> TtySink:
    return TtySink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def scrolls() -> ScrollCounter:
    return ScrollCounter()


@pytest.fixture
def color_map() -> DefaultColorMap:
    return DefaultColorMap(environ={})


@pytest.fixture
def make_executor(
    sink: RecordingSink,
    color_map: DefaultColorMap,
    scrolls: ScrollCounter,
) -> Callable[..., AnsiExecutor]:
    """Factory for executors writing to the recording sink."""

    def factory(mode: AnsiMode = AnsiMode.FORCE, target=None) -> AnsiExecutor:
        return AnsiExecutor(
            sink if target is None else target,
            color_map,
            mode,
            on_new_line_adjustment=scrolls,
        )

    return factory


@pytest.fixture
def executor(make_executor: Callable[..., AnsiExecutor]) -> AnsiExecutor:
    """Executor that always emits escapes."""
    return make_executor()
