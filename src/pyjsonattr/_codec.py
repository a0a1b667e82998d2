"""JSON text codec for attribute values."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pyjsonattr._constants import JSON_ALLOW_NAN, JSON_ENSURE_ASCII, JSON_SEPARATORS
from pyjsonattr._errors import ERR_MSG_DECODE_FAILED, ERR_MSG_ENCODE_FAILED, CodecError

logger = logging.getLogger(__name__)


def is_text(value: Any) -> bool:
    """Whether ``value`` is a serialized form that :func:`decode` parses."""
    return isinstance(value, (str, bytes, bytearray))


def is_container(value: Any) -> bool:
    """Whether ``value`` is a mapping or sequence that :func:`encode` serializes."""
    return isinstance(value, (Mapping, list, tuple))


def decode(value: Any) -> Any:
    """Decode JSON text into nested Python values.

    Non-text input is returned unchanged, so decoding an already decoded
    value is a no-op. Empty or blank text decodes to None.

    Raises:
        CodecError: If the text is not valid JSON.
    """
    if not is_text(value):
        return value
    if not value.strip():
        return None
    try:
        return json.loads(value)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are ValueError subclasses
        err = CodecError(ERR_MSG_DECODE_FAILED, f"cannot decode JSON text: {exc}", wrapped=exc)
        logger.debug("decode failed: %s", err.internal())
        raise err from exc


def _plain_json(value: Any) -> Any:
    """Copy ``value`` with every mapping turned into a dict and every sequence into a list.

    Keys must already be strings. JSON would turn an int key into text and
    the decoded value would no longer equal the original, or would lose an
    entry when ``1`` and ``"1"`` sit side by side.
    """
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"key {key!r} of type {type(key).__name__} is not a str")
            result[key] = _plain_json(item)
        return result
    if isinstance(value, (list, tuple)):
        return [_plain_json(item) for item in value]
    return value


def encode(value: Any) -> Any:
    """Encode a mapping or sequence as compact JSON text.

    Scalars, None and strings are returned unchanged. Nested mappings of
    any type are written as JSON objects.

    Raises:
        CodecError: If the value holds something JSON cannot represent or a
            key that is not a str.
    """
    if not is_container(value):
        return value
    try:
        return json.dumps(
            _plain_json(value),
            ensure_ascii=JSON_ENSURE_ASCII,
            separators=JSON_SEPARATORS,
            allow_nan=JSON_ALLOW_NAN,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        # ValueError covers NaN/Infinity; circular references exhaust the
        # recursion limit
        err = CodecError(ERR_MSG_ENCODE_FAILED, f"cannot encode {type(value).__name__}: {exc}", wrapped=exc)
        logger.debug("encode failed: %s", err.internal())
        raise err from exc
