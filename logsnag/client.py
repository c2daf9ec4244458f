"""Asynchronous LogSnag API client."""

from __future__ import annotations

import collections.abc as cabc
import enum
import typing as typ

from logsnag.config import LogSnagConfig
from logsnag.errors import LogSnagTransportError
from logsnag.events import IdentifyEvent, LogEvent, build_insight
from logsnag.logging import get_logger, log_debug, log_error, log_warning
from logsnag.result import LogSnagResult
from logsnag.transport import HttpxTransport

if typ.TYPE_CHECKING:
    import types

    from logsnag.transport import Transport, TransportResponse

logger = get_logger(__name__)


class Operation(enum.StrEnum):
    """LogSnag API operations supported by the client."""

    LOG = "log"
    IDENTIFY = "identify"
    INSIGHT = "insight"
    MUTATE_INSIGHT = "mutate_insight"


class Route(typ.NamedTuple):
    """HTTP method and path for an operation."""

    method: str
    path: str


ROUTES: cabc.Mapping[Operation, Route] = {
    Operation.LOG: Route("POST", "/v1/log"),
    Operation.IDENTIFY: Route("POST", "/v1/identify"),
    Operation.INSIGHT: Route("POST", "/v1/insight"),
    Operation.MUTATE_INSIGHT: Route("PATCH", "/v1/insight"),
}

_HTTP_SUCCESS_RANGE = range(200, 300)


def result_from_response(response: TransportResponse) -> LogSnagResult:
    """Convert a transport response into a :class:`LogSnagResult`.

    Parameters
    ----------
    response
        Response returned by the transport.

    Returns
    -------
    LogSnagResult
        Successful result carrying the parsed body for 2xx statuses,
        otherwise a failed result carrying the body's ``message`` field or
        the raw body text.

    """
    if response.status_code in _HTTP_SUCCESS_RANGE:
        data = response.parsed_body
        if data is None and response.raw_body:
            data = response.raw_body
        return LogSnagResult.ok(data, response.status_code)

    return LogSnagResult.failure(
        _error_message(response),
        status_code=response.status_code,
    )


def _error_message(response: TransportResponse) -> str:
    """Return the ``message`` field of an error body, else the raw text."""
    parsed = response.parsed_body
    if isinstance(parsed, cabc.Mapping):
        message = typ.cast("cabc.Mapping[str, object]", parsed).get("message")
        if message is not None:
            return str(message)
    return response.raw_body


class LogSnagClient:
    """Client for the LogSnag event-logging API.

    Each operation validates its input, sends one request and returns a
    :class:`~logsnag.result.LogSnagResult`. Invalid input raises before any
    request is made; network failures and error responses are returned as
    failed results instead of being raised.

    Parameters
    ----------
    config
        Configured credentials and project.
    transport
        Optional transport for testing or custom HTTP handling. If not
        provided, the client creates and owns an :class:`HttpxTransport`.

    Examples
    --------
    >>> import asyncio
    >>> from logsnag import LogSnagClient, LogSnagConfig
    >>> config = LogSnagConfig(api_token="token", project="my-saas")
    >>> async def main() -> None:
    ...     async with LogSnagClient(config) as client:
    ...         result = await client.log({"channel": "payments", "event": "Sale"})
    >>> # asyncio.run(main())

    """

    def __init__(
        self,
        config: LogSnagConfig,
        *,
        transport: Transport | None = None,
    ) -> None:
        """Initialise the client with configuration and transport."""
        self._config = config
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(config)
            transport = self._owned_transport
        self._transport: Transport = transport

    @classmethod
    def from_env(cls) -> LogSnagClient:
        """Build a client from ``LOGSNAG_*`` environment variables."""
        return cls(LogSnagConfig.from_env())

    @property
    def config(self) -> LogSnagConfig:
        """Read-only access to the client configuration."""
        return self._config

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> LogSnagClient:
        """Return the client for use in ``async with`` blocks."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        await self.aclose()

    async def log(self, data: cabc.Mapping[str, typ.Any]) -> LogSnagResult:
        """Send an event log.

        Parameters
        ----------
        data
            Event fields. ``channel`` and ``event`` are required; ``user_id``,
            ``description``, ``icon``, ``notify``, ``tags``, ``parser`` and
            ``timestamp`` (Unix seconds) are optional.

        Returns
        -------
        LogSnagResult
            Outcome of the request.

        Raises
        ------
        LogSnagValidationError
            If keys are missing or not allowed, or tags are malformed.
        LogSnagConfigError
            If the configuration lacks a token or project.

        """
        event = LogEvent.build(data, self._config)
        return await self._dispatch(Operation.LOG, event.to_dict())

    async def identify(self, data: cabc.Mapping[str, typ.Any]) -> LogSnagResult:
        """Attach key-value ``properties`` to the profile of ``user_id``."""
        event = IdentifyEvent.build(data, self._config)
        return await self._dispatch(Operation.IDENTIFY, event.to_dict())

    async def insight(self, data: cabc.Mapping[str, typ.Any]) -> LogSnagResult:
        """Publish an insight ``value`` (string or number) under ``title``."""
        event = build_insight(data, self._config)
        return await self._dispatch(Operation.INSIGHT, event.to_dict())

    async def mutate_insight(self, data: cabc.Mapping[str, typ.Any]) -> LogSnagResult:
        """Increment the numeric insight ``title`` by ``value``.

        The request body wraps ``value`` as ``{"$inc": value}``.
        """
        event = build_insight(data, self._config, mutate=True)
        return await self._dispatch(
            Operation.MUTATE_INSIGHT,
            event.to_patch_body(),
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.api_token}",
        }

    async def _dispatch(
        self,
        operation: Operation,
        body: dict[str, typ.Any],
    ) -> LogSnagResult:
        """Send ``body`` for ``operation`` and normalise the outcome."""
        route = ROUTES[operation]
        log_debug(logger, "LogSnag %s: %s %s", operation, route.method, route.path)
        try:
            response = await self._transport.send(
                route.method,
                route.path,
                self._headers(),
                body,
            )
        except LogSnagTransportError as exc:
            log_error(logger, "LogSnag %s failed: %s", operation, exc)
            return LogSnagResult.failure(str(exc))

        result = result_from_response(response)
        if result.is_error():
            log_warning(
                logger,
                "LogSnag %s rejected with HTTP %s: %s",
                operation,
                result.status_code,
                result.error_message,
            )
        return result
