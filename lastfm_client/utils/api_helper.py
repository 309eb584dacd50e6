"""Helpers for reading Last.fm response fragments."""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def map_list(callback: Callable[[Any], T], data: Any) -> list[T]:
    """Map a collection fragment, always treating it as a list.

    Last.fm collapses a one-element collection into the bare element, so
    ``{"tag": {"name": "rock"}}`` and ``{"tag": [{"name": "rock"}]}`` must be
    read the same way.
    """
    if not isinstance(data, list | tuple):
        data = [data]

    return [callback(item) for item in data]


def get_nested(data: Any, *keys: str) -> Any:
    """Follow a key path, returning None when any step is missing."""
    for key in keys:
        if not isinstance(data, dict) or key not in data:
            return None
        data = data[key]
    return data
