"""ANSI 8-bit color table and escape helpers.

Colors are applied with 256-color SGR sequences (``ESC[38;5;<n>m`` for the
foreground, ``ESC[48;5;<n>m`` for the background). Coloring can be switched
off for the whole process, and starts off when ``NO_COLOR`` is set.
"""

import math
import os
from enum import IntEnum
from typing import Final, Literal

import colorama

PromptColor = Literal["cyan", "green", "grey"]


class Colors(IntEnum):
    """Symbolic names for the 8-bit color codes used by termkit."""

    BLACK = 0
    MAROON = 1
    GREEN = 2
    BLUE = 4
    PURPLE = 5
    LIGHT_GREY = 7
    GREY = 8
    RED = 9
    LIGHT_GREEN = 10
    YELLOW = 11
    CYAN = 14
    WHITE = 15


PROMPT_COLORS: Final = {
    "cyan": Colors.CYAN,
    "green": Colors.GREEN,
    "grey": Colors.GREY,
}

_FG_CLOSE: Final = "\x1b[39m"
_BG_CLOSE: Final = "\x1b[49m"

_color_enabled = "NO_COLOR" not in os.environ

# No-op outside legacy Windows consoles
colorama.just_fix_windows_console()


def set_color_enabled(value: bool) -> None:
    """Turn color output on or off for the whole process."""
    global _color_enabled
    _color_enabled = bool(value)


def get_color_enabled() -> bool:
    """Return whether color output is currently enabled."""
    return _color_enabled


def rgb8(text: str, color: float) -> str:
    """Wrap text in an 8-bit foreground color.

    Args:
        text:   Text to color
        color:  Color code, clamped to 0..255

    Returns:
        Text wrapped in escape sequences, or the text itself if colors are disabled
    """
    code = _clamp_code(color)
    if not _color_enabled:
        return text
    return f"\x1b[38;5;{code}m{text}{_FG_CLOSE}"


def bg_rgb8(text: str, color: float) -> str:
    """Wrap text in an 8-bit background color.

    Args:
        text:   Text to color
        color:  Color code, clamped to 0..255

    Returns:
        Text wrapped in escape sequences, or the text itself if colors are disabled
    """
    code = _clamp_code(color)
    if not _color_enabled:
        return text
    return f"\x1b[48;5;{code}m{text}{_BG_CLOSE}"


def prompt_color_code(name: PromptColor) -> int:
    """Look up the color code of a prompt color name.

    Raises:
        ValueError: If the name is not a known prompt color
    """
    try:
        return int(PROMPT_COLORS[name])
    except KeyError as e:
        msg = (
            f"Invalid prompt color: {name!r}. "
            f"Must be one of: {', '.join(sorted(PROMPT_COLORS))}"
        )
        raise ValueError(msg) from e


def _clamp_code(color: float) -> int:
    # Out-of-range codes are clamped to 0..255 and fractions truncated
    if isinstance(color, bool) or not isinstance(color, int | float) or math.isnan(color):
        msg = f"Invalid 8-bit color code: {color!r}. Must be a number"
        raise ValueError(msg)
    return math.trunc(max(min(color, 255), 0))
