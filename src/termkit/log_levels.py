"""Log level definitions and validation constants."""

from typing import Literal, get_args

LogLevel = Literal[0, 1, 2, 3]
VALID_LOG_LEVELS = frozenset(get_args(LogLevel))

DiagnosticsLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DIAGNOSTICS_LEVELS = frozenset(get_args(DiagnosticsLevel))


def validate_log_level(level: object) -> LogLevel:
    """Check that a value is an accepted logger level.

    Args:
        level: Candidate level

    Returns:
        The level, unchanged

    Raises:
        ValueError: If the level is not one of 0, 1, 2 or 3
    """
    # bool is an int subclass, True would otherwise pass as 1
    if isinstance(level, int) and not isinstance(level, bool) and level in VALID_LOG_LEVELS:
        return level
    msg = (
        f"Invalid logging level: {level!r}. "
        f"Must be one of: {', '.join(str(lvl) for lvl in sorted(VALID_LOG_LEVELS))}"
    )
    raise ValueError(msg)
