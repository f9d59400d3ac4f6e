"""Internal diagnostics for termkit itself.

termkit writes its user-facing output to stdout, so its own diagnostics go
through structlog and the standard library ``logging`` module to stderr
instead. The handler is attached to the ``termkit`` logger only and does not
propagate, leaving the application's root logger alone.

Diagnostics are configured from the environment on first use
(``TERMKIT_LOG_LEVEL``, ``TERMKIT_LOG_COLORS``) and can be reconfigured at any
time with :func:`configure_diagnostics`.
"""

import logging
import sys
import threading
from typing import Final, TextIO

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from .config import DiagnosticsConfig

PACKAGE_LOGGER_NAME: Final = "termkit"

# Default processor configurations
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_TIMESTAMP_UTC = False

_lock: Final = threading.Lock()
_configured = False


def create_shared_processors() -> list[Processor]:
    """Processors run on every diagnostics event before rendering.

    Diagnostics only carry the key-value pairs passed at the call site, so
    neither context variables nor ``extra`` are merged in.
    """
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(
            fmt=DEFAULT_TIMESTAMP_FORMAT,
            utc=DEFAULT_TIMESTAMP_UTC
        ),
    ]


def create_console_handler(
        config: DiagnosticsConfig,
        shared_processors: list[Processor],
        stream: TextIO | None = None
) -> logging.Handler:
    """Create and configure the diagnostics console handler.

    Args:
        config:             Diagnostics configuration settings
        shared_processors:  List of shared structlog processors to use
        stream:             Output stream, stderr by default

    Returns:
        Configured StreamHandler instance
    """
    exception_formatter = (
        structlog.dev.rich_traceback if config.rich_tracebacks else structlog.dev.plain_traceback
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(
                colors=config.colors,
                exception_formatter=exception_formatter
            ),
        ],
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_diagnostics(
        config: DiagnosticsConfig | None = None,
        stream: TextIO | None = None
) -> None:
    """Configure termkit's diagnostics logger.

    Replaces any handler previously installed on the ``termkit`` logger.
    Invalid environment settings fall back to the defaults with a warning,
    since this runs when termkit is imported.

    Args:
        config: Diagnostics settings, read from the environment if None
        stream: Output stream, stderr by default
    """
    global _configured
    env_error = None
    if config is None:
        try:
            config = DiagnosticsConfig.from_env()
        except ValueError as e:
            env_error = e
            config = DiagnosticsConfig()

    handler = create_console_handler(config, create_shared_processors(), stream)

    with _lock:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        package_logger.handlers.clear()  # We only want our handler
        package_logger.addHandler(handler)
        package_logger.setLevel(config.level)
        package_logger.propagate = False
        _configured = True

    if env_error is not None:
        get_logger(__name__).warning(
            "Ignoring invalid diagnostics settings", error=str(env_error), fallback=config.level
        )


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a structlog logger writing to termkit's diagnostics handler.

    Loggers are wrapped individually rather than through ``structlog.configure``
    so the application's own structlog setup is left untouched.

    Args:
        name: Logger name under the ``termkit`` namespace (typically __name__)

    Returns:
        BoundLogger instance
    """
    if not _configured:
        configure_diagnostics()

    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            *create_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=BoundLogger,
    )
