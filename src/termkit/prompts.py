"""Interactive line and password prompts.

``password`` reads keystrokes one at a time in raw mode and echoes at most
five masking symbols, so neither the typed characters nor the true length of
the secret show on screen. Backspace is not special: it becomes part of the
password like any other character.
"""

import sys
from collections.abc import Mapping
from typing import Any, Final, TextIO

from .colors import rgb8
from .config import PasswordPromptConfig
from .diagnostics import get_logger
from .terminal import raw_mode

CARRIAGE_RETURN: Final = "\r"
# Ctrl-C and Ctrl-D
INTERRUPT_CHARS: Final = frozenset({"\x03", "\x04"})
MAX_MASK_LENGTH: Final = 5

_diagnostics = get_logger(__name__)


def input(
        message: str | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None
) -> str:
    """Read one line of text, optionally after writing a prompt message.

    Args:
        message:    Prompt written before reading, without a trailing newline
        stdin:      Input stream, sys.stdin by default
        stdout:     Output stream, sys.stdout by default

    Returns:
        The line with surrounding whitespace removed, or "" at end of input
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if message:
        stdout.write(message)
        stdout.flush()

    return stdin.readline().strip()


def password(
        message: str,
        options: Mapping[str, Any] | PasswordPromptConfig | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None
) -> str:
    """Read a password without echoing it.

    Reading stops at carriage return or end of input. Ctrl-C or Ctrl-D exits
    the process with status 1, after the terminal has been restored.

    Args:
        message:    Prompt written before reading and on every re-render
        options:    ``ast`` (masking symbol, or False for no echo) and ``color``
        stdin:      Input stream, sys.stdin by default
        stdout:     Output stream, sys.stdout by default

    Returns:
        The characters typed before carriage return or end of input

    Raises:
        ValueError: If an option is unknown or invalid
        SystemExit: On Ctrl-C or Ctrl-D
    """
    config = PasswordPromptConfig.merge(options)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    secret = ""
    with raw_mode(stdin):
        stdout.write(message)
        stdout.flush()

        while True:
            char = stdin.read(1)
            if not char:
                _diagnostics.debug("End of input during password prompt", length=len(secret))
                break

            if char == CARRIAGE_RETURN:
                break

            if char in INTERRUPT_CHARS:
                _diagnostics.info("Password prompt interrupted", char=ord(char))
                sys.exit(1)

            secret += char
            stdout.write(f"\r{message}{_mask(secret, config)}")
            stdout.flush()

    stdout.write("\n")
    stdout.flush()
    return secret


def _mask(secret: str, config: PasswordPromptConfig) -> str:
    if config.ast is False:
        return ""
    return rgb8(config.ast * min(len(secret), MAX_MASK_LENGTH), config.color_code)


class Prompts:
    """Namespace access to the prompt functions."""

    input = staticmethod(input)
    password = staticmethod(password)
