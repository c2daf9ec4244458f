"""Uniform outcome of a LogSnag API call."""

from __future__ import annotations

import typing as typ

import msgspec


class LogSnagResult(msgspec.Struct, kw_only=True, frozen=True):
    """Outcome of a single LogSnag request.

    Successful results carry the parsed response body in ``data``; failed
    results carry ``error_message`` instead. ``status_code`` is ``None`` only
    when no HTTP response was received.

    Attributes
    ----------
    success
        Whether the API accepted the request.
    data
        Parsed response body for successful requests.
    error_message
        Error description for failed requests.
    status_code
        HTTP status code of the response, if any.

    """

    success: bool
    data: typ.Any = None
    error_message: str | None = None
    status_code: int | None = None

    @classmethod
    def ok(cls, data: object, status_code: int) -> LogSnagResult:
        """Create a successful result for a 2xx response."""
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def failure(
        cls,
        error_message: str,
        status_code: int | None = None,
    ) -> LogSnagResult:
        """Create a failed result for an error response or transport failure.

        Parameters
        ----------
        error_message
            Human-readable failure description.
        status_code
            HTTP status code, or ``None`` when the transport failed.

        Returns
        -------
        LogSnagResult
            Result with ``success`` false and no ``data``.

        """
        return cls(success=False, error_message=error_message, status_code=status_code)

    def is_success(self) -> bool:
        """Return True when the request succeeded."""
        return self.success

    def is_error(self) -> bool:
        """Return True when the request failed."""
        return not self.success
