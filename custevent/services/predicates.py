"""Value predicates shared by the registry and the handle."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_PRIMITIVES = (str, bytes, int, float, complex, bool)


def is_plain_mapping(value: Any) -> bool:
    """Return True for dict-like payloads whose items should be merged."""
    return isinstance(value, Mapping)


def is_callable(value: Any) -> bool:
    return callable(value)


def is_primitive(value: Any) -> bool:
    """Return True for scalar values that can not own events."""
    return isinstance(value, _PRIMITIVES)
