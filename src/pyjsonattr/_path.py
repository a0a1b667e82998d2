"""Key path parsing and nested read/write traversal."""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from pyjsonattr._constants import DEFAULT_PATH_DELIMITER
from pyjsonattr._errors import (
    ERR_MSG_INVALID_DELIMITER,
    ERR_MSG_INVALID_PATH,
    ERR_MSG_INVALID_PATH_KEY,
    InvalidArgumentError,
    InvalidPathError,
)
from pyjsonattr._types import PathSpec

# Canonical decimal integers only: "07" and "+7" stay string keys.
INT_KEY_RE = re.compile(r"^(0|-?[1-9][0-9]*)$")

_MISSING = object()


@dataclass(frozen=True)
class PathLookup:
    """Result of a read traversal that keeps "found" apart from the value."""

    found: bool
    value: Any = None


_NOT_FOUND = PathLookup(found=False)


def validate_delimiter(delimiter: str) -> None:
    """Reject delimiters that cannot split a string path."""
    if not isinstance(delimiter, str) or not delimiter:
        raise InvalidArgumentError(
            ERR_MSG_INVALID_DELIMITER,
            f"delimiter must be a non-empty string, got {delimiter!r}",
        )


def _key_form(key: Any, path: Any) -> str:
    # bool is an int subclass but never a sensible key
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise InvalidPathError(
            ERR_MSG_INVALID_PATH_KEY,
            f"key {key!r} of type {type(key).__name__} in path {path!r}",
        )
    return key if isinstance(key, str) else str(key)


def parse_path(path: PathSpec, delimiter: str = DEFAULT_PATH_DELIMITER) -> tuple[str, ...]:
    """Parse a path into an ordered tuple of string keys.

    Strings are split on ``delimiter`` and empty segments are kept as ``""``
    keys. Lists and tuples are taken as already segmented; integer elements
    become their decimal string form.

    Raises:
        InvalidPathError: If the path or one of its keys has an unsupported type.
        InvalidArgumentError: If the delimiter is empty or not a string.
    """
    validate_delimiter(delimiter)
    if isinstance(path, str):
        return tuple(path.split(delimiter))
    if isinstance(path, (list, tuple)):
        return tuple(_key_form(key, path) for key in path)
    raise InvalidPathError(
        ERR_MSG_INVALID_PATH,
        f"path must be a string, list or tuple, got {type(path).__name__}",
    )


def _resolve_key(mapping: Mapping[Any, Any], key: str) -> Any:
    """Return the key under which ``mapping`` holds ``key``, or ``_MISSING``."""
    if key in mapping:
        return key
    if INT_KEY_RE.match(key):
        int_key = int(key)
        if int_key in mapping:
            return int_key
    return _MISSING


def _slot_key(mapping: Mapping[Any, Any], key: str) -> Any:
    resolved = _resolve_key(mapping, key)
    return key if resolved is _MISSING else resolved


def find_in_path(
    data: Any, path: PathSpec, delimiter: str = DEFAULT_PATH_DELIMITER
) -> PathLookup:
    """Walk ``path`` through ``data`` and report whether it was found.

    Descending into anything that is not a mapping, lists included, is a
    miss, as is a missing key. An empty path finds ``data`` itself.
    """
    current = data
    for key in parse_path(path, delimiter):
        if not isinstance(current, Mapping):
            return _NOT_FOUND
        resolved = _resolve_key(current, key)
        if resolved is _MISSING:
            return _NOT_FOUND
        current = current[resolved]
    return PathLookup(found=True, value=current)


def get_from_path(data: Any, path: PathSpec, delimiter: str = DEFAULT_PATH_DELIMITER) -> Any:
    """Return the value at ``path`` in ``data``, or None on a lookup miss.

    Lists are not indexed: ``"items.1"`` on ``{"items": [10, 20]}`` is a miss.
    """
    return find_in_path(data, path, delimiter).value


def set_in_path(
    data: Any, path: PathSpec, value: Any, delimiter: str = DEFAULT_PATH_DELIMITER
) -> Any:
    """Set ``value`` at ``path``, creating intermediate mappings as needed.

    Absent or non-mapping intermediate slots are overwritten with ``{}``.
    When ``data`` is a mutable mapping it is updated in place and returned;
    otherwise a new root mapping is returned. An empty path returns ``value``
    as the new root.

    Returns:
        The root structure after the write.
    """
    keys = parse_path(path, delimiter)
    if not keys:
        return value

    root = data if isinstance(data, MutableMapping) else {}
    current = root
    for key in keys[:-1]:
        slot = _slot_key(current, key)
        child = current.get(slot)
        if not isinstance(child, MutableMapping):
            child = {}
            current[slot] = child
        current = child

    current[_slot_key(current, keys[-1])] = value
    return root
