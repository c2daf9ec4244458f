"""Validated event payloads for the LogSnag API.

Each payload type is built from caller data plus a
:class:`~logsnag.config.LogSnagConfig`. Building copies the caller data,
injects the configured ``project``, compacts nested tag or property maps and
runs the validation rules for that payload type. A payload either builds
completely or raises; the caller's mapping is never modified.

Payload types
-------------
LogEvent
    Event log sent to ``/v1/log``.
IdentifyEvent
    User properties sent to ``/v1/identify``.
InsightEvent
    Insight value sent to ``/v1/insight``.
InsightMutation
    Numeric insight increment sent as a PATCH to ``/v1/insight``.

Examples
--------
>>> from logsnag.config import LogSnagConfig
>>> config = LogSnagConfig(api_token="token", project="my-saas")
>>> event = LogEvent.build({"channel": "payments", "event": "New sale"}, config)
>>> event.to_dict()
{'channel': 'payments', 'event': 'New sale', 'project': 'my-saas'}

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import math
import types
import typing as typ

import msgspec

from logsnag.config import LogSnagConfig
from logsnag.errors import (
    EventDataTypeError,
    LogSnagConfigError,
    LogSnagValidationError,
)
from logsnag.validation import (
    compact_nested,
    validate_allowed_keys,
    validate_required_keys,
    validate_shallow_value_map,
)

_JSON_ENCODER = msgspec.json.Encoder()


class EventPayload(typ.Protocol):
    """Interface shared by every validated payload type."""

    @property
    def data(self) -> cabc.Mapping[str, typ.Any]:
        """Read-only view of the validated payload fields."""
        ...

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a fresh, mutable copy of the payload fields."""
        ...

    def to_json(self) -> bytes:
        """Return the JSON encoding of the payload fields."""
        ...


def _prepare(data: object, config: object) -> dict[str, typ.Any]:
    """Check the inputs shared by all payload types and inject ``project``.

    Parameters
    ----------
    data
        Caller-supplied event fields.
    config
        Client configuration supplying the project name.

    Returns
    -------
    dict[str, Any]
        Working copy of ``data`` with ``project`` set from ``config``.

    Raises
    ------
    EventDataTypeError
        If ``data`` is not a mapping.
    LogSnagConfigError
        If ``config`` is not a configured :class:`LogSnagConfig`.

    """
    if not isinstance(data, cabc.Mapping):
        raise EventDataTypeError.not_a_mapping(data)
    if not isinstance(config, LogSnagConfig) or not config.is_configured:
        raise LogSnagConfigError.not_configured()

    fields = dict(typ.cast("cabc.Mapping[str, typ.Any]", data))
    fields["project"] = config.project
    return fields


def _is_number(value: object) -> bool:
    """Return True for finite ints and floats, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _freeze(fields: dict[str, typ.Any]) -> cabc.Mapping[str, typ.Any]:
    return types.MappingProxyType(fields)


def _encode(fields: cabc.Mapping[str, typ.Any]) -> bytes:
    return _JSON_ENCODER.encode(dict(fields))


@dataclasses.dataclass(frozen=True, slots=True)
class LogEvent:
    """Event log payload.

    Required fields are ``channel`` and ``event``. Optional fields are
    ``user_id``, ``description``, ``icon``, ``notify``, ``tags``, ``parser``
    and ``timestamp``; anything else is rejected. ``tags`` entries whose value
    is ``None`` are dropped before validation.
    """

    REQUIRED_KEYS: typ.ClassVar[tuple[str, ...]] = ("project", "channel", "event")
    ALLOWED_KEYS: typ.ClassVar[frozenset[str]] = frozenset(
        (
            *REQUIRED_KEYS,
            "user_id",
            "description",
            "icon",
            "notify",
            "tags",
            "parser",
            "timestamp",
        )
    )

    data: cabc.Mapping[str, typ.Any]

    @classmethod
    def build(cls, data: object, config: object) -> LogEvent:
        """Validate ``data`` and return an event log payload.

        Raises
        ------
        EventDataTypeError
            If ``data`` is not a mapping.
        LogSnagConfigError
            If ``config`` is not configured.
        LogSnagValidationError
            If keys are missing or not allowed, or ``tags`` is malformed.

        """
        fields = _prepare(data, config)
        compact_nested(fields, "tags")
        validate_required_keys(cls.REQUIRED_KEYS, fields)
        validate_allowed_keys(cls.ALLOWED_KEYS, fields)
        validate_shallow_value_map(fields.get("tags"), field="tags")
        return cls(data=_freeze(fields))

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a fresh, mutable copy of the payload fields."""
        return dict(self.data)

    def to_json(self) -> bytes:
        """Return the JSON encoding of the payload fields."""
        return _encode(self.data)


@dataclasses.dataclass(frozen=True, slots=True)
class IdentifyEvent:
    """User identify payload carrying ``user_id`` and ``properties``."""

    REQUIRED_KEYS: typ.ClassVar[tuple[str, ...]] = ("project", "user_id", "properties")

    data: cabc.Mapping[str, typ.Any]

    @classmethod
    def build(cls, data: object, config: object) -> IdentifyEvent:
        """Validate ``data`` and return an identify payload.

        ``properties`` entries whose value is ``None`` are dropped; the
        remaining entries must pass :func:`validate_shallow_value_map`.
        """
        fields = _prepare(data, config)
        compact_nested(fields, "properties")
        validate_required_keys(cls.REQUIRED_KEYS, fields)
        validate_shallow_value_map(fields.get("properties"), field="properties")
        return cls(data=_freeze(fields))

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a fresh, mutable copy of the payload fields."""
        return dict(self.data)

    def to_json(self) -> bytes:
        """Return the JSON encoding of the payload fields."""
        return _encode(self.data)


@dataclasses.dataclass(frozen=True, slots=True)
class InsightEvent:
    """Insight payload whose ``value`` is a string or number.

    Extra keys such as ``icon`` are passed through without an allow-list.
    """

    REQUIRED_KEYS: typ.ClassVar[tuple[str, ...]] = ("project", "title", "value")

    data: cabc.Mapping[str, typ.Any]

    @classmethod
    def build(cls, data: object, config: object) -> InsightEvent:
        """Validate ``data`` and return an insight payload."""
        fields = _prepare(data, config)
        validate_required_keys(cls.REQUIRED_KEYS, fields)
        value = fields["value"]
        if not (isinstance(value, str) or _is_number(value)):
            raise LogSnagValidationError.invalid_insight_value(value)
        return cls(data=_freeze(fields))

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a fresh, mutable copy of the payload fields."""
        return dict(self.data)

    def to_json(self) -> bytes:
        """Return the JSON encoding of the payload fields."""
        return _encode(self.data)


@dataclasses.dataclass(frozen=True, slots=True)
class InsightMutation:
    """Insight mutation payload whose numeric ``value`` is an increment."""

    REQUIRED_KEYS: typ.ClassVar[tuple[str, ...]] = ("project", "title", "value")

    data: cabc.Mapping[str, typ.Any]

    @classmethod
    def build(cls, data: object, config: object) -> InsightMutation:
        """Validate ``data`` and return an insight mutation payload."""
        fields = _prepare(data, config)
        validate_required_keys(cls.REQUIRED_KEYS, fields)
        value = fields["value"]
        if not _is_number(value):
            raise LogSnagValidationError.invalid_mutation_value(value)
        return cls(data=_freeze(fields))

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a fresh, mutable copy of the payload fields."""
        return dict(self.data)

    def to_json(self) -> bytes:
        """Return the JSON encoding of the payload fields."""
        return _encode(self.data)

    def to_patch_body(self) -> dict[str, typ.Any]:
        """Return the PATCH body with ``value`` wrapped as ``{"$inc": value}``.

        Examples
        --------
        >>> from logsnag.config import LogSnagConfig
        >>> config = LogSnagConfig(api_token="token", project="p")
        >>> InsightMutation.build({"title": "t", "value": 5}, config).to_patch_body()
        {'title': 't', 'value': {'$inc': 5}, 'project': 'p'}

        """
        return {**self.data, "value": {"$inc": self.data["value"]}}


@typ.overload
def build_insight(
    data: object, config: object, *, mutate: typ.Literal[False] = False
) -> InsightEvent: ...


@typ.overload
def build_insight(
    data: object, config: object, *, mutate: typ.Literal[True]
) -> InsightMutation: ...


def build_insight(
    data: object,
    config: object,
    *,
    mutate: bool = False,
) -> InsightEvent | InsightMutation:
    """Build an insight payload, choosing the mutation rules when ``mutate``."""
    if mutate:
        return InsightMutation.build(data, config)
    return InsightEvent.build(data, config)


__all__ = [
    "EventPayload",
    "IdentifyEvent",
    "InsightEvent",
    "InsightMutation",
    "LogEvent",
    "build_insight",
]
