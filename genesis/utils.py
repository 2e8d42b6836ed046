"""General helpers: sleeping, bit twiddling, container helpers, file system and file I/O."""

from __future__ import annotations

import os
import shutil
import time
from collections.abc import Hashable, Iterable, Mapping
from typing import Any, TypeVar

_T = TypeVar("_T")
_K = TypeVar("_K")
_V = TypeVar("_V")

_UINT32_MASK = 0xFFFFFFFF


def usleep(us: float) -> None:
    """Sleep for ``us`` microseconds."""
    time.sleep(us / 1_000_000)


def msleep(ms: float) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def sleep(s: float) -> None:
    """Sleep for ``s`` seconds."""
    time.sleep(s)


def _check_bit(bit: int) -> None:
    if not 0 <= bit <= 31:
        raise ValueError(f"bit index out of range 0..31: {bit}")


def bit_set(dst: int, bit: int) -> int:
    """Return the 32-bit value ``dst`` with ``bit`` set."""
    _check_bit(bit)
    return (dst | (1 << bit)) & _UINT32_MASK


def bit_clear(dst: int, bit: int) -> int:
    """Return the 32-bit value ``dst`` with ``bit`` cleared."""
    _check_bit(bit)
    return dst & ~(1 << bit) & _UINT32_MASK


def bit_assign(dst: int, value: bool, bit: int) -> int:
    """Return ``dst`` with ``bit`` set when ``value`` is true, cleared otherwise."""
    return bit_set(dst, bit) if value else bit_clear(dst, bit)


def to_set(items: Iterable[Hashable]) -> set:
    """Collect the items into a set."""
    return set(items)


def keys(mapping: Mapping[_K, _V]) -> list[_K]:
    """Return the keys of ``mapping`` in ascending order."""
    return sorted(mapping)


def values(mapping: Mapping[_K, _V]) -> list[_V]:
    """Return the values of ``mapping`` ordered by ascending key."""
    return [mapping[key] for key in sorted(mapping)]


def remove_all(items: list[_T], value: Any) -> int:
    """Remove every element equal to ``value`` from ``items`` in place.

    Returns the number of elements removed.
    """
    kept = [item for item in items if item != value]
    removed = len(items) - len(kept)
    items[:] = kept
    return removed


def file_exists(path: str | os.PathLike) -> bool:
    """Tell whether ``path`` exists."""
    return os.path.exists(path)


def file_dir_path(path: str) -> str:
    """Return the part of ``path`` before its last separator.

    ``/`` is tried first, then ``\\``; a separator at position 0 does not
    count, and a path without a usable separator is returned unchanged.
    """
    for separator in ("/", "\\"):
        position = path.rfind(separator)
        if position > 0:
            return path[:position]
    return path


def make_path(path: str | os.PathLike) -> bool:
    """Create ``path`` and any missing parents.

    Returns True when a directory was created, False when it already existed.
    """
    if os.path.isdir(path):
        return False
    os.makedirs(path)
    return True


def remove_path(path: str | os.PathLike) -> bool:
    """Remove a file or a whole directory tree.

    Returns True when something was removed, False when nothing was there.
    """
    if not os.path.lexists(path):
        return False
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)
    return True


def rename_file(src: str | os.PathLike, dest: str | os.PathLike) -> bool:
    """Rename ``src`` to ``dest``, replacing an existing file at ``dest``."""
    os.replace(src, dest)
    return True


def read_bytes(path: str | os.PathLike, length: int) -> bytes:
    """Read at most ``length`` bytes from the start of a file."""
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    with open(path, "rb") as stream:
        return stream.read(length)


def read_text(path: str | os.PathLike) -> str:
    """Read a whole text file."""
    with open(path, encoding="utf-8") as stream:
        return stream.read()


def write_bytes(path: str | os.PathLike, data: bytes) -> int:
    """Write ``data`` to a file, replacing its content; return the bytes written."""
    with open(path, "wb") as stream:
        return stream.write(data)


def write_text(path: str | os.PathLike, text: str) -> int:
    """Write ``text`` as UTF-8, replacing the file's content; return the bytes written."""
    return write_bytes(path, text.encode("utf-8"))