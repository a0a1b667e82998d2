"""Adapter functions for persistence framework save/load events.

The library never registers hooks itself. A framework integration calls
:func:`decode_attributes` after loading a record and
:func:`encode_attributes` before writing it, or wires the per-attribute
hooks from :func:`attribute_hooks` into its own event system.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pyjsonattr._codec import decode, encode, is_container, is_text
from pyjsonattr._constants import HOOK_NAME_PREFIX
from pyjsonattr._errors import ERR_MSG_NO_ATTRIBUTES, ERR_MSG_UNKNOWN_EVENT, InvalidArgumentError
from pyjsonattr.record import read_attribute, write_attribute
from pyjsonattr.registry import AttributeRegistry

logger = logging.getLogger(__name__)


class LifecycleEvent(enum.StrEnum):
    BEFORE_INSERT = "before_insert"
    BEFORE_UPDATE = "before_update"
    AFTER_FIND = "after_find"


ALL_EVENTS: tuple[LifecycleEvent, ...] = tuple(LifecycleEvent)


def _as_registry(attributes: AttributeRegistry | Iterable[str]) -> AttributeRegistry:
    if isinstance(attributes, AttributeRegistry):
        return attributes
    return AttributeRegistry(attributes)


def _registry_for(record: Any, attributes: AttributeRegistry | Iterable[str] | None) -> AttributeRegistry:
    if attributes is None:
        json_registry = getattr(type(record), "json_registry", None)
        if json_registry is None:
            raise InvalidArgumentError(
                ERR_MSG_NO_ATTRIBUTES,
                f"{type(record).__name__} has no json_registry and no attributes were passed",
            )
        return json_registry()
    return _as_registry(attributes)


def decode_attributes(
    record: Any, attributes: AttributeRegistry | Iterable[str] | None = None
) -> list[str]:
    """Decode every registered attribute of ``record`` that still holds text.

    Args:
        record: The freshly loaded record.
        attributes: Registry or names. Defaults to the record class registry
            when the class uses :class:`~pyjsonattr.record.JSONAttributeMixin`.

    Returns:
        Names of the attributes that were decoded.

    Raises:
        CodecError: If an attribute holds malformed JSON text.
    """
    decoded = []
    for name in _registry_for(record, attributes):
        value = read_attribute(record, name)
        if is_text(value):
            write_attribute(record, name, decode(value))
            decoded.append(name)
    logger.debug("decoded %s on %s", decoded, type(record).__name__)
    return decoded


def encode_attributes(
    record: Any, attributes: AttributeRegistry | Iterable[str] | None = None
) -> list[str]:
    """Encode every registered attribute of ``record`` that holds a mapping or sequence.

    Returns:
        Names of the attributes that were encoded.

    Raises:
        CodecError: If an attribute holds a value JSON cannot represent.
    """
    encoded = []
    for name in _registry_for(record, attributes):
        value = read_attribute(record, name)
        if is_container(value):
            write_attribute(record, name, encode(value))
            encoded.append(name)
    logger.debug("encoded %s on %s", encoded, type(record).__name__)
    return encoded


@dataclass(frozen=True)
class AttributeHook:
    """Converts one attribute for a framework lifecycle event.

    Calling the hook returns the converted value; the framework assigns it.
    """

    attribute: str
    events: tuple[LifecycleEvent, ...] = ALL_EVENTS

    def __call__(self, record: Any, event: LifecycleEvent | str) -> Any:
        try:
            event = LifecycleEvent(event)
        except ValueError as exc:
            raise InvalidArgumentError(
                ERR_MSG_UNKNOWN_EVENT, f"unknown lifecycle event {event!r}", wrapped=exc
            ) from exc
        if event not in self.events:
            raise InvalidArgumentError(
                ERR_MSG_UNKNOWN_EVENT,
                f"hook for {self.attribute!r} does not handle {event.value!r}",
            )

        value = read_attribute(record, self.attribute)
        if event is LifecycleEvent.AFTER_FIND:
            return decode(value)
        return encode(value)


def attribute_hooks(attributes: AttributeRegistry | Iterable[str]) -> dict[str, AttributeHook]:
    """Build one hook per attribute, keyed ``json_<attribute>``."""
    return {f"{HOOK_NAME_PREFIX}{name}": AttributeHook(name) for name in _as_registry(attributes)}
