"""Scoped raw-mode handling of the controlling terminal (POSIX only)."""

import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from .diagnostics import get_logger

_diagnostics = get_logger(__name__)


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[TextIO]:
    """Put the terminal behind a stream into raw mode for the duration of a block.

    In raw mode each keystroke is delivered immediately, without echo and
    without signal generation, so Ctrl-C arrives as ETX. The saved terminal
    attributes are restored when the block exits, however it exits
    (including ``SystemExit`` and ``KeyboardInterrupt``).

    Streams that are not attached to a terminal are yielded unchanged.

    Args:
        stream: Input stream, typically sys.stdin

    Yields:
        The same stream
    """
    if not stream.isatty():
        yield stream
        return

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    _diagnostics.debug("Raw mode entered", fd=fd)

    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        _diagnostics.debug("Raw mode restored", fd=fd)
