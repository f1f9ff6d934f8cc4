"""JSON codec for the four protocol parts.

An absent or empty mapping always encodes as the two bytes ``{}``. The
encoding is deterministic for a given input: key order follows the
insertion order of the mapping.

Only JSON-native values are accepted: strings, finite numbers, booleans,
None, and lists or string-keyed mappings of the same. Each JSON library
handles anything else differently (bytes become base64 text under msgspec,
NaN becomes null), so other values are rejected before encoding.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .. import json
from .errors import DecodeError, InvalidArgumentError


EMPTY = b"{}"


def check_value(value: Any, field: Optional[str] = None) -> None:
    """Raise :class:`InvalidArgumentError` unless *value* is JSON-native."""

    if value is None or isinstance(value, (str, bool, int)):
        return

    if isinstance(value, float):
        if math.isfinite(value):
            return
        raise InvalidArgumentError(field, f"non-finite number {value!r} cannot be encoded as JSON")

    if isinstance(value, (list, tuple)):
        for item in value:
            check_value(item, field)
        return

    try:
        items = value.items()
    except AttributeError:
        raise InvalidArgumentError(field, "cannot encode " + type(value).__name__ + " as JSON")

    for key, item in items:
        if not isinstance(key, str):
            raise InvalidArgumentError(field, "mapping keys must be strings, got " + type(key).__name__)
        check_value(item, field)


def encode_part(value: Optional[Mapping[str, Any]], field: Optional[str] = None) -> bytes:
    """Encode a mapping (or None) as UTF-8 JSON bytes."""

    if value is None or len(value) == 0:
        return EMPTY

    if not isinstance(value, dict):
        value = dict(value)

    check_value(value, field)

    try:
        return json.dumps(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(field, "cannot encode as JSON: " + str(e)) from e


def decode_part(data: bytes, field: Optional[str] = None) -> dict:
    """Decode UTF-8 JSON bytes into a dictionary."""

    if isinstance(data, memoryview):
        data = data.tobytes()

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(_describe(field, "invalid UTF-8: " + str(e))) from e
    except AttributeError:
        raise DecodeError(_describe(field, "expected bytes, got " + type(data).__name__))

    try:
        decoded = json.loads(text)
    except json.decode_errors as e:
        raise DecodeError(_describe(field, "invalid JSON: " + str(e))) from e

    if not isinstance(decoded, dict):
        raise DecodeError(_describe(field, "expected a JSON object, got " + type(decoded).__name__))

    return decoded


def _describe(field: Optional[str], text: str) -> str:
    if field is None:
        return text
    return f"{field}: {text}"
