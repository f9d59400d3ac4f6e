"""Leveled, colorized console logger with printf-style formatting.

Every emitting method accepts either a single message, which is substituted
into the logger's default format string, or an explicit format string
followed by its arguments::

    logger = Logger({"format": "app: %s"})
    logger.info("started")                      # app: started
    logger.info("%s earns %d", "Deepak", 2000)  # Deepak earns 2000

``error`` and ``inverse`` are always written, whatever the level.
"""

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

from .colors import Colors, bg_rgb8, rgb8
from .config import LoggerConfig
from .diagnostics import get_logger
from .log_levels import LogLevel, validate_log_level

SEPARATOR = "=" * 58

_diagnostics = get_logger(__name__)


class Logger:
    """Console logger writing colored lines to standard output.

    Attributes:
        COLORS: Color table shared by all loggers
    """

    COLORS: ClassVar[type[Colors]] = Colors

    def __init__(self, options: Mapping[str, Any] | LoggerConfig | None = None) -> None:
        """Initialize the logger from partial options merged over the defaults.

        Args:
            options: ``level``, ``format`` and ``new_line`` overrides, or a LoggerConfig

        Raises:
            ValueError: If an option is unknown or invalid
        """
        config = LoggerConfig.merge(options)
        self._level: LogLevel = config.level
        self._format: str = config.format
        self._new_line: bool = config.new_line
        _diagnostics.debug("Logger created", level=self._level, format=self._format)

    @classmethod
    def from_toml(cls, config_path: str | Path) -> "Logger":
        """Create a logger from the ``[logger]`` table of a TOML file."""
        return cls(LoggerConfig.from_toml(Path(config_path)))

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        self._level = validate_log_level(value)

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, value: str) -> None:
        if not isinstance(value, str):
            msg = f"format must be a string, got {type(value).__name__}"
            raise ValueError(msg)
        self._format = value

    @property
    def new_line(self) -> bool:
        return self._new_line

    @new_line.setter
    def new_line(self, value: bool) -> None:
        self._new_line = bool(value)

    @property
    def config(self) -> LoggerConfig:
        """Snapshot of the current settings."""
        return LoggerConfig(level=self._level, format=self._format, new_line=self._new_line)

    def log(self, fmt: str, *args: Any) -> None:
        """Print in grey when the level is 0."""
        if self._level > 0:
            return
        self.raw(self._render(fmt, args), Colors.GREY)

    def info(self, fmt: str, *args: Any) -> None:
        """Print in cyan when the level is 1 or lower."""
        if self._level > 1:
            return
        self.raw(self._render(fmt, args), Colors.CYAN)

    def warn(self, fmt: str, *args: Any) -> None:
        """Print in yellow when the level is 2 or lower."""
        if self._level > 2:
            return
        self.raw(self._render(fmt, args), Colors.YELLOW)

    def error(self, fmt: str, *args: Any) -> None:
        """Print in red, at any level."""
        self.raw(self._render(fmt, args), Colors.RED)

    def inverse(self, fmt: str, *args: Any) -> None:
        """Print grey text on a white background, at any level."""
        self.raw(bg_rgb8(self._render(fmt, args), Colors.WHITE), Colors.GREY)

    def raw(self, message: str, color: int = Colors.WHITE, newline: bool | None = None) -> None:
        """Write a colored message to standard output.

        Args:
            message:    Text to write, already formatted
            color:      8-bit foreground color code
            newline:    Append a newline; None follows the logger's preference
        """
        if newline is None:
            newline = self._new_line
        sys.stdout.write(rgb8(message, color) + ("\n" if newline else ""))
        sys.stdout.flush()

    def line(self, message: str | None = None) -> None:
        """Print a separator rule, or a message framed between two rules."""
        rows = [SEPARATOR, f"||\t{message}", SEPARATOR] if message else [SEPARATOR]
        self.raw("\n".join(rows))

    def _render(self, fmt: str, args: tuple[Any, ...]) -> str:
        # A lone argument is the message, formatted with the default format
        if not args:
            return self._format % (fmt,)
        return fmt % args
