"""HTTP transport used by the LogSnag client.

The client only depends on the :class:`Transport` protocol, so tests and
host applications can supply their own implementation. :class:`HttpxTransport`
is the default and sends requests with ``httpx.AsyncClient``.
"""

from __future__ import annotations

import json
import typing as typ

import httpx
import msgspec

from logsnag.errors import LogSnagTransportError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from logsnag.config import LogSnagConfig


class TransportResponse(msgspec.Struct, kw_only=True, frozen=True):
    """HTTP response as seen by the client.

    Attributes
    ----------
    status_code
        HTTP status code.
    parsed_body
        Decoded JSON body, or ``None`` when the body is not JSON.
    raw_body
        Response body text.

    """

    status_code: int
    parsed_body: typ.Any = None
    raw_body: str = ""


class Transport(typ.Protocol):
    """Interface for sending a single LogSnag request."""

    async def send(
        self,
        method: str,
        path: str,
        headers: cabc.Mapping[str, str],
        body: object,
    ) -> TransportResponse:
        """Send ``body`` as JSON and return the response.

        Raises
        ------
        LogSnagTransportError
            If no HTTP response could be obtained.

        """
        ...


def _parse_body(response: httpx.Response) -> object:
    """Return the decoded JSON body, or ``None`` when it is not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    Parameters
    ----------
    config
        Client configuration providing the base URL and timeout.
    http_client
        Optional httpx.AsyncClient for testing. If not provided, the
        instance creates and owns its own client.

    """

    def __init__(
        self,
        config: LogSnagConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the transport with configuration."""
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout_s,
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        headers: cabc.Mapping[str, str],
        body: object,
    ) -> TransportResponse:
        """Perform the HTTP request and capture the response.

        Parameters
        ----------
        method
            HTTP method, ``POST`` or ``PATCH``.
        path
            Request path relative to the API base URL.
        headers
            Request headers.
        body
            JSON-serializable request body.

        Returns
        -------
        TransportResponse
            Status code with parsed and raw response bodies.

        Raises
        ------
        LogSnagTransportError
            If a timeout or network error occurs.

        """
        try:
            response = await self._client.request(
                method,
                path,
                content=msgspec.json.encode(body),
                headers=dict(headers),
            )
        except httpx.TimeoutException as exc:
            raise LogSnagTransportError.timeout() from exc
        except httpx.RequestError as exc:
            raise LogSnagTransportError.network_error(str(exc)) from exc

        return TransportResponse(
            status_code=response.status_code,
            parsed_body=_parse_body(response),
            raw_body=response.text,
        )
