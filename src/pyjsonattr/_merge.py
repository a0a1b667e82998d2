"""Null-aware deep merge and flat-path defaults normalization."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pyjsonattr._constants import DEFAULT_PATH_DELIMITER
from pyjsonattr._errors import (
    ERR_MSG_DEFAULTS_REQUIRE_MAPPING,
    ERR_MSG_MERGE_REQUIRES_MAPPINGS,
    InvalidArgumentError,
)
from pyjsonattr._path import parse_path, set_in_path


def deep_merge(base: Mapping[Any, Any], defaults: Mapping[Any, Any]) -> dict[Any, Any]:
    """Fill gaps in ``base`` with values from ``defaults``.

    A key is filled when it is absent from ``base`` or holds None. Present
    non-null values are kept. When a default is itself a mapping the merge
    recurses, using ``base[key]`` if that is a mapping and ``{}`` otherwise.

    Neither argument is mutated. Values copied from ``defaults`` are deep
    copies.

    Example:
        >>> deep_merge({"a": 1, "b": None}, {"b": 2, "c": {"d": 3}})
        {'a': 1, 'b': 2, 'c': {'d': 3}}

    Raises:
        InvalidArgumentError: If either argument is not a mapping.
    """
    if not isinstance(base, Mapping) or not isinstance(defaults, Mapping):
        raise InvalidArgumentError(
            ERR_MSG_MERGE_REQUIRES_MAPPINGS,
            f"deep_merge got {type(base).__name__} and {type(defaults).__name__}",
        )

    result: dict[Any, Any] = dict(base)
    for key, default in defaults.items():
        if isinstance(default, Mapping):
            nested = result.get(key)
            if not isinstance(nested, Mapping):
                nested = {}
            result[key] = deep_merge(nested, default)
        elif result.get(key) is None:
            result[key] = copy.deepcopy(default)
    return result


def normalize_defaults(
    defaults: Mapping[Any, Any], delimiter: str = DEFAULT_PATH_DELIMITER
) -> dict[Any, Any]:
    """Expand a mapping of path keys into the equivalent nested structure.

    Example:
        >>> normalize_defaults({"proxy.enabled": False, ("limits", "daily"): 100})
        {'proxy': {'enabled': False}, 'limits': {'daily': 100}}

    Entries are applied in order with the same create-if-absent walk as
    :func:`set_in_path`, so siblings under a shared prefix coexist.

    Raises:
        InvalidArgumentError: If ``defaults`` is not a mapping.
        InvalidPathError: If a key is neither a string nor a key sequence.
    """
    if not isinstance(defaults, Mapping):
        raise InvalidArgumentError(
            ERR_MSG_DEFAULTS_REQUIRE_MAPPING,
            f"normalize_defaults got {type(defaults).__name__}",
        )

    result: Any = {}
    for path, value in defaults.items():
        keys = parse_path(path, delimiter)
        result = set_in_path(result, keys, copy.deepcopy(value))
    return result
