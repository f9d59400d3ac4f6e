"""Shared fixtures for the termkit test suite."""

import io
import re
import termios
import tty
from collections.abc import Iterator

import pytest

from termkit import set_color_enabled
from termkit.colors import get_color_enabled

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR color sequences from text."""
    return ANSI_ESCAPE.sub("", text)


class FakeTty(io.StringIO):
    """In-memory input stream that claims to be a terminal."""

    FD = 99

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return self.FD


@pytest.fixture(autouse=True)
def colors_on() -> Iterator[None]:
    """Force colors on regardless of NO_COLOR in the test environment."""
    previous = get_color_enabled()
    set_color_enabled(True)
    yield
    set_color_enabled(previous)


@pytest.fixture
def fake_termios(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    """Record terminal mode changes instead of touching a real terminal.

    Returns:
        List of recorded calls, in order
    """
    calls: list[tuple] = []
    saved_attrs = ["cooked"]

    def tcgetattr(fd):
        calls.append(("tcgetattr", fd))
        return saved_attrs

    def setraw(fd, when=termios.TCSAFLUSH):
        calls.append(("setraw", fd))

    def tcsetattr(fd, when, attrs):
        calls.append(("tcsetattr", fd, attrs))

    monkeypatch.setattr(termios, "tcgetattr", tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", tcsetattr)
    monkeypatch.setattr(tty, "setraw", setraw)
    return calls
