"""Stream-style message builders that hand their text to a handler."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Optional

MessageHandler = Callable[[str], Any]


def _sorted_if_possible(items: Any) -> list:
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def format_value(value: Any) -> str:
    """Render a value the way the message stream writes it.

    Lists and tuples become ``list(a, b)``, sets ``set(a, b)`` in sorted
    order, dicts ``dict({k,v}, ...)`` ordered by key; floats use ``%g``.
    """
    if isinstance(value, (list, tuple)):
        inner = ", ".join(format_value(item) for item in value)
        return f"{type(value).__name__}({inner})"
    if isinstance(value, (set, frozenset)):
        inner = ", ".join(format_value(item) for item in _sorted_if_possible(value))
        return f"set({inner})"
    if isinstance(value, dict):
        inner = ", ".join(
            "{" + format_value(key) + "," + format_value(value[key]) + "}"
            for key in _sorted_if_possible(value)
        )
        return f"dict({inner})"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, (bytes, bytearray)):
        return " ".join(str(byte) for byte in value)
    return str(value)


def format_json(value: Any) -> str:
    """Serialise a JSON value compactly."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _print_data(data: str) -> None:
    print(data)


class Debug:
    """Collects text with ``<<`` and hands it to the handler on flush.

    Used as a context manager it flushes on exit; an instance dropped
    without being flushed flushes when it is collected.
    """

    def __init__(self, handler: Optional[MessageHandler] = None) -> None:
        self._handler: MessageHandler = handler if handler is not None else _print_data
        self._parts: list[str] = []
        self._pending = True

    def __lshift__(self, value: Any) -> Debug:
        self._parts.append(format_value(value))
        self._pending = True
        return self

    def format(self, fmt: str, *args: Any) -> Debug:
        """Append text built from a printf-style format."""
        self._parts.append(fmt % args)
        self._pending = True
        return self

    @property
    def text(self) -> str:
        """The text collected so far."""
        return "".join(self._parts)

    def flush(self) -> None:
        """Hand the collected text to the handler and start afresh."""
        if not self._pending:
            return
        text = self.text
        self._parts.clear()
        self._pending = False
        self._handler(text)

    def __enter__(self) -> Debug:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()

    def __del__(self) -> None:
        try:
            self.flush()
        except Exception:
            pass


class NoDebug:
    """A message builder that discards everything, counting what it drops."""

    def __init__(self) -> None:
        self.discarded = 0

    def __lshift__(self, value: Any) -> NoDebug:
        self.discarded += 1
        return self

    def format(self, fmt: str, *args: Any) -> NoDebug:
        self.discarded += 1
        return self

    def flush(self) -> None:
        """Forget the count of discarded items."""
        self.discarded = 0

    def __enter__(self) -> NoDebug:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()