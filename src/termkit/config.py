"""Configuration handling for the console logger and prompts.

This module provides the configuration classes for the logger, the password
prompt and termkit's own diagnostics. Every config is an immutable dataclass
validated on creation, and partial caller options are merged over defaults
by pure functions so that a config is always fully populated.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final

import tomllib

from .colors import PromptColor, prompt_color_code
from .log_levels import VALID_DIAGNOSTICS_LEVELS, DiagnosticsLevel, LogLevel, validate_log_level

# camelCase option names accepted as aliases
_OPTION_ALIASES: Final = {"newLine": "new_line"}


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """Settings of a console logger.

    Attributes:
        level:      Severity threshold, 0 (everything) to 3 (errors only)
        format:     Default format string applied to single-message calls
        new_line:   Append a newline after each emitted message
    """

    level: LogLevel = 0
    format: str = "%s"
    new_line: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values after initialization.

        Raises:
            ValueError: If the level is invalid or the format is not a string
        """
        validate_log_level(self.level)

        if not isinstance(self.format, str):
            msg = f"format must be a string, got {type(self.format).__name__}"
            raise ValueError(msg)

    @classmethod
    def merge(cls, options: "Mapping[str, Any] | LoggerConfig | None" = None) -> "LoggerConfig":
        """Create a complete config from partial options laid over the defaults.

        Args:
            options: Partial options (``level``, ``format``, ``new_line``),
                     an existing config, or None for the defaults

        Returns:
            Fully populated LoggerConfig

        Raises:
            ValueError: If an option name is unknown or a value is invalid
        """
        if options is None:
            return cls()

        if isinstance(options, LoggerConfig):
            return options

        overrides = {_OPTION_ALIASES.get(key, key): value for key, value in options.items()}
        unknown = set(overrides) - {f.name for f in fields(cls)}
        if unknown:
            msg = f"Unknown logger option(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        if "new_line" in overrides:
            overrides["new_line"] = bool(overrides["new_line"])

        return replace(cls(), **overrides)

    @classmethod
    def from_toml(cls, config_path: Path) -> "LoggerConfig":
        """Create a LoggerConfig from the ``[logger]`` table of a TOML file.

        Every key of the table is optional; a missing table yields the defaults.

        Args:
            config_path: Path to the TOML configuration file

        Returns:
            Configured LoggerConfig instance

        Raises:
            FileNotFoundError:  If the configuration file doesn't exist
            TOMLDecodeError:    If the TOML file is malformed
            ValueError:         If a key is unknown or a value is invalid
        """
        config_data = cls._load_toml(config_path)

        try:
            return cls.merge(config_data.get("logger", {}))

        except (TypeError, ValueError) as e:
            msg = f"Invalid value in configuration file: {e!s}"
            raise ValueError(msg) from e

    @staticmethod
    def _load_toml(config_path: Path) -> dict:
        """Load and parse the TOML configuration file.

        Args:
            config_path: Path to the TOML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError:  If the configuration file doesn't exist
            TOMLDecodeError:    If the TOML file is malformed
        """
        try:
            with Path(config_path).open("rb") as f:
                return tomllib.load(f)

        except FileNotFoundError as e:
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg) from e

        except tomllib.TOMLDecodeError as e:
            msg = f"Failed to parse TOML file {config_path}"
            raise tomllib.TOMLDecodeError(msg) from e


@dataclass(frozen=True, slots=True)
class PasswordPromptConfig:
    """Settings of a single password prompt.

    Attributes:
        ast:    Masking symbol echoed per typed character, or False to echo nothing
        color:  Color name of the masking symbols
    """

    ast: str | bool = "*"
    color: PromptColor = "grey"

    def __post_init__(self) -> None:
        """Validate configuration values after initialization.

        Raises:
            ValueError: If ast is neither a string nor False, or the color is unknown
        """
        if not isinstance(self.ast, str) and self.ast is not False:
            msg = f"ast must be a string or False, got {self.ast!r}"
            raise ValueError(msg)

        prompt_color_code(self.color)

    @property
    def color_code(self) -> int:
        """8-bit color code of the masking symbols."""
        return prompt_color_code(self.color)

    @classmethod
    def merge(
            cls,
            options: "Mapping[str, Any] | PasswordPromptConfig | None" = None
    ) -> "PasswordPromptConfig":
        """Create a complete prompt config from partial options.

        Args:
            options: Partial options (``ast``, ``color``), a config, or None

        Returns:
            Fully populated PasswordPromptConfig

        Raises:
            ValueError: If an option name is unknown or a value is invalid
        """
        if options is None:
            return cls()

        if isinstance(options, PasswordPromptConfig):
            return options

        unknown = set(options) - {f.name for f in fields(cls)}
        if unknown:
            msg = f"Unknown password prompt option(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        return replace(cls(), **options)


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    """Settings of termkit's internal diagnostics output.

    Attributes:
        level:              Threshold of the diagnostics logger
        colors:             Enable colored diagnostics (requires 'colorama' library)
        rich_tracebacks:    Enable rich tracebacks formatting (requires 'rich' library)
    """

    level: DiagnosticsLevel = "WARNING"
    colors: bool = True
    rich_tracebacks: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values after initialization.

        Raises:
            ValueError: If the diagnostics level is invalid
        """
        if self.level in VALID_DIAGNOSTICS_LEVELS:
            return
        msg = (
            f"Invalid diagnostics level: {self.level!r}. "
            f"Must be one of: {', '.join(sorted(VALID_DIAGNOSTICS_LEVELS))}"
        )
        raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DiagnosticsConfig":
        """Create a DiagnosticsConfig from environment variables.

        Reads ``TERMKIT_LOG_LEVEL`` (default WARNING, also when empty) and
        ``TERMKIT_LOG_COLORS`` (default on; "0", "false", "no" and "off" turn it off). Colors are also
        off when ``NO_COLOR`` is set.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Configured DiagnosticsConfig instance
        """
        env = os.environ if environ is None else environ
        colors_flag = env.get("TERMKIT_LOG_COLORS", "1").strip().lower()

        return cls(
            level=env.get("TERMKIT_LOG_LEVEL", "").strip().upper() or "WARNING",
            colors=colors_flag not in {"0", "false", "no", "off"} and "NO_COLOR" not in env,
        )
