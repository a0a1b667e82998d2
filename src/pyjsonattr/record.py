"""Path-based access to the JSON attributes of a record.

A record is anything that implements the :class:`Record` protocol, or any
plain object whose JSON attributes are ordinary Python attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from pyjsonattr._constants import DEFAULT_PATH_DELIMITER
from pyjsonattr._merge import deep_merge, normalize_defaults
from pyjsonattr._path import get_from_path, set_in_path, validate_delimiter
from pyjsonattr._types import PathSpec
from pyjsonattr.registry import AttributeRegistry

logger = logging.getLogger(__name__)


@runtime_checkable
class Record(Protocol):
    """Generic attribute access supplied by a model framework."""

    def get_attribute(self, name: str) -> Any: ...

    def set_attribute(self, name: str, value: Any) -> None: ...


def read_attribute(record: Any, name: str) -> Any:
    """Read ``name`` through the Record protocol, falling back to getattr."""
    if isinstance(record, Record):
        return record.get_attribute(name)
    return getattr(record, name, None)


def write_attribute(record: Any, name: str, value: Any) -> None:
    """Write ``name`` through the Record protocol, falling back to setattr."""
    if isinstance(record, Record):
        record.set_attribute(name, value)
    else:
        setattr(record, name, value)


class JSONAttributes:
    """Read and write nested values inside the registered attributes of records.

    Every operation checks the attribute name against the registry first and
    raises UnknownAttributeError for names outside it.
    """

    def __init__(
        self,
        attributes: AttributeRegistry | Iterable[str],
        *,
        delimiter: str = DEFAULT_PATH_DELIMITER,
    ) -> None:
        validate_delimiter(delimiter)
        if isinstance(attributes, AttributeRegistry):
            self.registry = attributes
        else:
            self.registry = AttributeRegistry(attributes)
        self.delimiter = delimiter

    def _current(self, record: Any, attr: str) -> Any:
        self.registry.require(attr)
        value = read_attribute(record, attr)
        return {} if value is None else value

    def get(
        self,
        record: Any,
        attr: str,
        path: PathSpec | None = None,
        default: Any = None,
    ) -> Any:
        """Return the value at ``path`` inside ``record.<attr>``.

        Args:
            record: The record holding the attribute.
            attr: A registered attribute name.
            path: ``"a.b.c"`` or ``["a", "b", "c"]``. None returns the whole
                attribute value.
            default: Returned when the path is missing or holds None.

        Raises:
            UnknownAttributeError: If ``attr`` is not registered.
            InvalidPathError: If ``path`` has an unsupported shape.
        """
        data = self._current(record, attr)
        if path is None:
            return data
        # A stored None is treated the same as a missing key.
        value = get_from_path(data, path, self.delimiter)
        return default if value is None else value

    def set(self, record: Any, attr: str, path: PathSpec, value: Any) -> None:
        """Set ``value`` at ``path`` inside ``record.<attr>``.

        Intermediate mappings are created as needed and non-mapping
        intermediates are replaced. Only the in-memory record changes.

        Raises:
            UnknownAttributeError: If ``attr`` is not registered.
            InvalidPathError: If ``path`` has an unsupported shape.
        """
        data = self._current(record, attr)
        write_attribute(record, attr, set_in_path(data, path, value, self.delimiter))

    def apply_defaults(self, record: Any, attr: str, defaults: Mapping[Any, Any]) -> Any:
        """Fill missing or null values of ``record.<attr>`` from flat-path defaults.

        Returns:
            The merged value, which is also written back to the record.
        """
        data = self._current(record, attr)
        merged = deep_merge(data, normalize_defaults(defaults, self.delimiter))
        write_attribute(record, attr, merged)
        logger.debug("applied %d defaults to %r", len(defaults), attr)
        return merged


class JSONAttributeMixin:
    """Adds JSON path access methods to a model class.

    Subclasses list their JSON attributes once::

        class Account(JSONAttributeMixin):
            json_attributes = ("settings", "options")

    The registry is built when the subclass is defined and does not change
    afterwards.
    """

    json_attributes: ClassVar[Iterable[str]] = ()
    json_path_delimiter: ClassVar[str] = DEFAULT_PATH_DELIMITER
    _json_access: ClassVar[JSONAttributes]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._json_access = JSONAttributes(cls.json_attributes, delimiter=cls.json_path_delimiter)

    @classmethod
    def json_registry(cls) -> AttributeRegistry:
        """Return the registry built for this class."""
        return cls._json_access.registry

    def get_json_attr(self, attr: str, path: PathSpec | None = None, default: Any = None) -> Any:
        """Read a nested value of a JSON attribute; see :meth:`JSONAttributes.get`."""
        return self._json_access.get(self, attr, path, default)

    def set_json_attr(self, attr: str, path: PathSpec, value: Any) -> None:
        """Write a nested value of a JSON attribute; see :meth:`JSONAttributes.set`."""
        self._json_access.set(self, attr, path, value)

    def apply_json_defaults(self, attr: str, defaults: Mapping[Any, Any]) -> Any:
        """Fill gaps in a JSON attribute from flat-path defaults."""
        return self._json_access.apply_defaults(self, attr, defaults)


JSONAttributeMixin._json_access = JSONAttributes(())
