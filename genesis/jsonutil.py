"""JSON helpers: merging objects, building arrays and loading files."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any


def _json_equal(left: Any, right: Any) -> bool:
    """Compare JSON values, treating booleans, integers and floats as distinct kinds."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, float) != isinstance(right, float):
        return False
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            _json_equal(left[key], right[key]) for key in left
        )
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            _json_equal(a, b) for a, b in zip(left, right)
        )
    return type(left) is type(right) and left == right


def merge(dst: dict, data: dict) -> dict:
    """Copy every member of ``data`` into ``dst``; return ``dst``."""
    dst.update(data)
    return dst


def merge_changes(dst: dict, data: dict) -> dict:
    """Merge ``data`` into ``dst`` and return the members that were added or changed."""
    changes = {}
    for key, value in data.items():
        if key in dst and _json_equal(dst[key], value):
            continue
        dst[key] = value
        changes[key] = value
    return changes


def from_value(value: Any) -> list:
    """Wrap a single value in a JSON array."""
    return [value]


def from_list(items: Iterable[Any]) -> list:
    """Build a JSON array from the items."""
    return list(items)


def to_string_list(array: Iterable[Any]) -> list[str]:
    """Return the array's elements, which must all be strings."""
    result = []
    for item in array:
        if not isinstance(item, str):
            raise TypeError(f"array element is not a string: {item!r}")
        result.append(item)
    return result


def _load(path: str | os.PathLike) -> Any:
    with open(path, encoding="utf-8") as stream:
        return json.loads(stream.read())


def load_object(path: str | os.PathLike) -> dict:
    """Load a file that holds a JSON object."""
    value = _load(path)
    if not isinstance(value, dict):
        raise TypeError(f"{os.fspath(path)} does not hold a JSON object")
    return value


def load_array(path: str | os.PathLike) -> list:
    """Load a file that holds a JSON array."""
    value = _load(path)
    if not isinstance(value, list):
        raise TypeError(f"{os.fspath(path)} does not hold a JSON array")
    return value