"""Registry of the JSON-valued attributes of a record type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyjsonattr._errors import (
    ERR_MSG_INVALID_REGISTRY,
    ERR_MSG_UNKNOWN_ATTRIBUTE,
    InvalidArgumentError,
    UnknownAttributeError,
)


class AttributeRegistry:
    """Immutable set of attribute names with O(1) membership checks."""

    def __init__(self, names: Iterable[str]) -> None:
        if isinstance(names, str):
            raise InvalidArgumentError(
                ERR_MSG_INVALID_REGISTRY,
                f"expected an iterable of attribute names, got the string {names!r}",
            )
        names = tuple(names)
        for name in names:
            if not isinstance(name, str) or not name:
                raise InvalidArgumentError(
                    ERR_MSG_INVALID_REGISTRY,
                    f"attribute name {name!r} is not a non-empty string",
                )
        self._names = tuple(dict.fromkeys(names))
        self._index: frozenset[str] = frozenset(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def require(self, name: str) -> None:
        """Raise UnknownAttributeError unless ``name`` is registered."""
        if not isinstance(name, str) or name not in self._index:
            raise UnknownAttributeError(
                ERR_MSG_UNKNOWN_ATTRIBUTE,
                f"attribute {name!r} is not one of {list(self._names)}",
            )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"AttributeRegistry({list(self._names)!r})"
