"""Asynchronous client for the LogSnag event-logging API.

Public API
----------
LogSnagClient
    Client exposing ``log``, ``identify``, ``insight`` and ``mutate_insight``.
LogSnagConfig
    API token, project and transport settings.
LogSnagResult
    Uniform success or failure outcome returned by every operation.
LogEvent, IdentifyEvent, InsightEvent, InsightMutation
    Validated request payloads.
HttpxTransport
    Default httpx-backed transport.
LogSnagError
    Base exception for all client errors.
LogSnagConfigError
    Exception for missing or invalid configuration.
LogSnagValidationError
    Exception for invalid event data.
EventDataTypeError
    Exception for event data that is not a mapping.
LogSnagTransportError
    Exception raised by transports when no response was received.

Examples
--------
>>> from logsnag import LogSnagClient, LogSnagConfig
>>> config = LogSnagConfig(api_token="token", project="my-saas")
>>> client = LogSnagClient(config)
>>> # result = await client.log({"channel": "payments", "event": "New sale"})
>>> # result.is_success()

"""

from __future__ import annotations

from logsnag.client import ROUTES, LogSnagClient, Operation, Route
from logsnag.config import LogSnagConfig
from logsnag.errors import (
    EventDataTypeError,
    LogSnagConfigError,
    LogSnagError,
    LogSnagTransportError,
    LogSnagValidationError,
)
from logsnag.events import (
    EventPayload,
    IdentifyEvent,
    InsightEvent,
    InsightMutation,
    LogEvent,
    build_insight,
)
from logsnag.result import LogSnagResult
from logsnag.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "ROUTES",
    "EventDataTypeError",
    "EventPayload",
    "HttpxTransport",
    "IdentifyEvent",
    "InsightEvent",
    "InsightMutation",
    "LogEvent",
    "LogSnagClient",
    "LogSnagConfig",
    "LogSnagConfigError",
    "LogSnagError",
    "LogSnagResult",
    "LogSnagTransportError",
    "LogSnagValidationError",
    "Operation",
    "Route",
    "Transport",
    "TransportResponse",
    "build_insight",
]
