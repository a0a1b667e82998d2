"""Type aliases for key paths."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

PathKey: TypeAlias = str | int
PathSpec: TypeAlias = str | Sequence[PathKey]
"""A dotted string such as ``"a.b.c"`` or a sequence such as ``("a", "b", "c")``."""
