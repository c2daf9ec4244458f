"""Custom exceptions for LogSnag client operations."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _format_keys(keys: cabc.Iterable[object]) -> str:
    """Render keys as a bracketed, quoted list for error messages."""
    return "[" + ", ".join(repr(str(key)) for key in keys) + "]"


class LogSnagError(Exception):
    """Base exception for all LogSnag client errors.

    This provides a single catch point for every error the client raises.
    """


class LogSnagConfigError(LogSnagError):
    """Raised when client configuration is missing or invalid."""

    @classmethod
    def empty_value(cls, field: str) -> LogSnagConfigError:
        """Create error for a required setting assigned ``None`` or ``""``.

        Parameters
        ----------
        field
            Name of the setting being assigned.

        Returns
        -------
        LogSnagConfigError
            Error naming the rejected setting.

        """
        return cls(f"LogSnag {field} must be a non-empty string")

    @classmethod
    def not_configured(cls) -> LogSnagConfigError:
        """Create error for use of a config without token and project."""
        return cls(
            "LogSnag configuration not found. Set api_token and project "
            "on a LogSnagConfig before sending events."
        )

    @classmethod
    def missing_env(cls, variable: str) -> LogSnagConfigError:
        """Create error for a required environment variable that is unset."""
        return cls(f"{variable} environment variable is required")

    @classmethod
    def invalid_timeout(cls, value: object) -> LogSnagConfigError:
        """Create error for a non-positive or non-numeric timeout."""
        return cls(f"LogSnag timeout must be a positive number, got {value!r}")


class LogSnagValidationError(LogSnagError, ValueError):
    """Raised when event data fails payload validation.

    Attributes
    ----------
    keys
        Offending keys, when the failure concerns specific keys.

    """

    def __init__(self, message: str, *, keys: tuple[str, ...] = ()) -> None:
        """Initialise the error with message and offending keys."""
        self.keys = keys
        super().__init__(message)

    @classmethod
    def missing_keys(cls, keys: cabc.Sequence[str]) -> LogSnagValidationError:
        """Create error listing required keys absent from event data.

        Parameters
        ----------
        keys
            Missing keys in the order they were required.

        Returns
        -------
        LogSnagValidationError
            Error carrying the missing keys.

        """
        return cls(f"Missing required keys: {_format_keys(keys)}", keys=tuple(keys))

    @classmethod
    def invalid_keys(cls, keys: cabc.Sequence[str]) -> LogSnagValidationError:
        """Create error listing keys that are not allowed in event data."""
        return cls(f"Found invalid keys: {_format_keys(keys)}", keys=tuple(keys))

    @classmethod
    def not_a_value_map(cls, field: str, value: object) -> LogSnagValidationError:
        """Create error for a tags or properties field that is not a mapping."""
        msg = f"Invalid value for '{field}': '{value}'. Value must be a mapping."
        return cls(msg, keys=(field,))

    @classmethod
    def invalid_map_key(cls, key: object) -> LogSnagValidationError:
        """Create error for a tag or property key with the wrong shape."""
        msg = (
            f"Invalid key: '{key}'. Keys must be lowercase and may include dashes."
        )
        return cls(msg, keys=(str(key),))

    @classmethod
    def invalid_map_value(cls, key: object, value: object) -> LogSnagValidationError:
        """Create error for a tag or property value of an unsupported type."""
        msg = (
            f"Invalid value for '{key}': '{value}'. "
            "Values must be a string, boolean, or number."
        )
        return cls(msg, keys=(str(key),))

    @classmethod
    def invalid_insight_value(cls, value: object) -> LogSnagValidationError:
        """Create error for an insight value that is not a string or number."""
        msg = (
            f"Invalid value for Insight: '{value}'. "
            "Values must be a string or number."
        )
        return cls(msg, keys=("value",))

    @classmethod
    def invalid_mutation_value(cls, value: object) -> LogSnagValidationError:
        """Create error for an insight mutation value that is not a number."""
        msg = f"Invalid value for Insight mutation: '{value}'. Value must be a number."
        return cls(msg, keys=("value",))


class EventDataTypeError(LogSnagError, TypeError):
    """Raised when event data is not a mapping."""

    @classmethod
    def not_a_mapping(cls, data: object) -> EventDataTypeError:
        """Create error naming the type that was supplied instead."""
        return cls(f"`data` must be a mapping, got {type(data).__name__}")


class LogSnagTransportError(LogSnagError):
    """Raised by transports when no HTTP response could be obtained."""

    @classmethod
    def timeout(cls) -> LogSnagTransportError:
        """Create error for request timeouts."""
        return cls("LogSnag API request timed out")

    @classmethod
    def network_error(cls, detail: str) -> LogSnagTransportError:
        """Create error for network failures (DNS, connection, TLS, etc.).

        Parameters
        ----------
        detail
            Description of the network failure.

        Returns
        -------
        LogSnagTransportError
            Error indicating network failure.

        """
        return cls(f"LogSnag API network error: {detail}")
