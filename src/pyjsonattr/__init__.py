"""pyjsonattr - Path-based access to JSON data stored in record attributes."""

from __future__ import annotations

try:
    from pyjsonattr._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyjsonattr._codec import decode, encode
from pyjsonattr._errors import (
    CodecError,
    InvalidArgumentError,
    InvalidPathError,
    JSONAttributeError,
    UnknownAttributeError,
)
from pyjsonattr._merge import deep_merge, normalize_defaults
from pyjsonattr._path import PathLookup, find_in_path, get_from_path, parse_path, set_in_path
from pyjsonattr.lifecycle import (
    AttributeHook,
    LifecycleEvent,
    attribute_hooks,
    decode_attributes,
    encode_attributes,
)
from pyjsonattr.record import JSONAttributeMixin, JSONAttributes, Record
from pyjsonattr.registry import AttributeRegistry

__all__ = [
    "decode",
    "deep_merge",
    "encode",
    "find_in_path",
    "get_from_path",
    "normalize_defaults",
    "parse_path",
    "set_in_path",
    "attribute_hooks",
    "decode_attributes",
    "encode_attributes",
    "AttributeHook",
    "AttributeRegistry",
    "JSONAttributeMixin",
    "JSONAttributes",
    "LifecycleEvent",
    "PathLookup",
    "Record",
    "CodecError",
    "InvalidArgumentError",
    "InvalidPathError",
    "JSONAttributeError",
    "UnknownAttributeError",
]
