"""Logging helpers for femtologging integration.

The client logs its diagnostics through these helpers so every message is
pre-formatted before it reaches the femtologging logger.

Example:
>>> from logsnag.logging import get_logger, log_debug
>>> logger = get_logger(__name__)
>>> log_debug(logger, "Sent %s", "log")

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import get_logger


class LogLevel(enum.StrEnum):
    """Levels the client emits."""

    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SupportsLog(typ.Protocol):
    """Protocol for femtologging-compatible loggers."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _log_at_level(
    logger: SupportsLog,
    level: LogLevel,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    """Format and log a message at the specified level."""
    message = template % args if args else template
    logger.log(str(level), message, exc_info=exc_info, stack_info=False)


def log_debug(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a DEBUG message with percent-style formatting.

    Parameters
    ----------
    logger : SupportsLog
        Logger that receives the formatted message.
    template : str
        Message template using percent-style placeholders.
    *args : object
        Values to interpolate into the template.
    exc_info : object | None, optional
        Exception information to attach to the log record.

    """
    _log_at_level(logger, LogLevel.DEBUG, template, args, exc_info)


def log_warning(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message with percent-style formatting."""
    _log_at_level(logger, LogLevel.WARNING, template, args, exc_info)


def log_error(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message with percent-style formatting."""
    _log_at_level(logger, LogLevel.ERROR, template, args, exc_info)


__all__ = [
    "LogLevel",
    "SupportsLog",
    "get_logger",
    "log_debug",
    "log_error",
    "log_warning",
]
