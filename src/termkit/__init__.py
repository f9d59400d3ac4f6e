"""Colorized console logging and interactive prompts for the terminal.

This package provides two small terminal utilities: a leveled console logger
with printf-style formatting and ANSI 8-bit colors, and line/password prompts
that read from standard input.

Key Features:
    - Four severity levels (0 log, 1 info, 2 warn, 3 error) with silent suppression
    - ``error`` and ``inverse`` output that is never suppressed
    - printf-style formatting with a configurable default format
    - Separator rules with optional framed messages
    - Password input in raw mode with a capped, colored mask
    - TOML-based logger configuration with sensible defaults
    - Process-wide color switch honoring ``NO_COLOR``

Basic Usage:
    ```python
    from termkit import Logger, Prompts

    logger = Logger({"format": "Logger: %s"})
    logger.info("This is info message")
    logger.warn("My name is %s and my salary is: %d", "Deepak", 2000)

    # Only warnings and errors from now on
    logger.level = 2
    logger.info("This will not print")
    logger.error("This always prints")

    logger.line("This will print inside line")

    name = Prompts.input("Name: ")
    secret = Prompts.password("Password: ", {"ast": "-", "color": "cyan"})
    ```

Configuration:
    A logger can be created from a TOML file with the following structure:

    ```toml
    [logger]
    level = 1               # 0 log, 1 info, 2 warn, 3 error
    format = "app: %s"
    new_line = true
    ```

    All fields are optional with the defaults shown in ``LoggerConfig``.

Implementation Notes:
    - Output goes to stdout; termkit's own diagnostics go to stderr through
      structlog (set ``TERMKIT_LOG_LEVEL=DEBUG`` to see them)
    - Invalid levels raise ValueError instead of being clamped
    - Password prompts restore the terminal on every exit path; Ctrl-C and
      Ctrl-D exit the process with status 1
    - Raw mode relies on termios and is POSIX only
"""

from .colors import Colors, bg_rgb8, get_color_enabled, rgb8, set_color_enabled
from .config import DiagnosticsConfig, LoggerConfig, PasswordPromptConfig
from .diagnostics import configure_diagnostics, get_logger
from .log_levels import LogLevel
from .logger import Logger
from .prompts import Prompts, password
from .prompts import input as prompt_input

__version__ = "1.0.0"

__all__ = [
    "Colors",
    "DiagnosticsConfig",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "PasswordPromptConfig",
    "Prompts",
    "bg_rgb8",
    "configure_diagnostics",
    "get_color_enabled",
    "get_logger",
    "password",
    "prompt_input",
    "rgb8",
    "set_color_enabled",
]
