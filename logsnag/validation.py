"""Validation helpers for LogSnag event data.

These functions operate on plain mappings so event builders can run them in
sequence over the working copy of caller data. Every check raises
:class:`~logsnag.errors.LogSnagValidationError` on the first failure.

Example:
>>> from logsnag.validation import validate_shallow_value_map
>>> validate_shallow_value_map({"plan": "pro", "seats": 3})

"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from logsnag.errors import LogSnagValidationError

VALUE_MAP_KEY_PATTERN = re.compile(r"[a-z]+(-[a-z]+)*")

_VALUE_MAP_TYPES = (str, bool, int, float)


def validate_required_keys(
    required: cabc.Iterable[str],
    data: cabc.Mapping[str, typ.Any],
) -> None:
    """Ensure every required key is present in ``data``.

    Parameters
    ----------
    required
        Keys that must be present, in reporting order.
    data
        Mapping to validate.

    Raises
    ------
    LogSnagValidationError
        If any required key is missing. All missing keys are reported in the
        order they appear in ``required``.

    """
    missing = [key for key in required if key not in data]
    if missing:
        raise LogSnagValidationError.missing_keys(missing)


def validate_allowed_keys(
    allowed: cabc.Collection[str],
    data: cabc.Mapping[str, typ.Any],
) -> None:
    """Ensure ``data`` contains no keys outside ``allowed``.

    Raises
    ------
    LogSnagValidationError
        If extra keys are present, listed in ``data`` iteration order.

    """
    invalid = [key for key in data if key not in allowed]
    if invalid:
        raise LogSnagValidationError.invalid_keys(invalid)


def compact_nested(container: cabc.MutableMapping[str, typ.Any], key: str) -> None:
    """Drop ``None`` entries from the mapping stored at ``container[key]``.

    The nested mapping is replaced with a compacted copy, so a mapping shared
    with the caller is left untouched. Absent keys and non-mapping values are
    ignored. Running this twice has the same effect as running it once.
    """
    nested = container.get(key)
    if not isinstance(nested, cabc.Mapping):
        return
    container[key] = {
        nested_key: value for nested_key, value in nested.items() if value is not None
    }


def _is_value_map_scalar(value: object) -> bool:
    return isinstance(value, _VALUE_MAP_TYPES)


def validate_shallow_value_map(
    values: cabc.Mapping[str, typ.Any] | None,
    *,
    field: str = "values",
) -> None:
    """Validate tag and property maps attached to events.

    Keys must be lowercase letters with single internal dashes
    (``plan``, ``billing-cycle``); values must be strings, booleans or
    numbers. Entries are checked in iteration order and the key of an entry
    is checked before its value.

    Parameters
    ----------
    values
        Mapping to validate. ``None`` is accepted and skipped.
    field
        Name of the event field holding ``values``, used when ``values`` is
        not a mapping at all.

    Raises
    ------
    LogSnagValidationError
        Naming the first offending key, or key and value.

    """
    if values is None:
        return
    if not isinstance(values, cabc.Mapping):
        raise LogSnagValidationError.not_a_value_map(field, values)

    for key, value in values.items():
        if not isinstance(key, str) or VALUE_MAP_KEY_PATTERN.fullmatch(key) is None:
            raise LogSnagValidationError.invalid_map_key(key)
        if not _is_value_map_scalar(value):
            raise LogSnagValidationError.invalid_map_value(key, value)


__all__ = [
    "VALUE_MAP_KEY_PATTERN",
    "compact_nested",
    "validate_allowed_keys",
    "validate_required_keys",
    "validate_shallow_value_map",
]
