"""Signals that call connected receiver methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Signal:
    """Calls every connected slot, in connection order, with the emitted arguments."""

    def __init__(self) -> None:
        self._slots: list[tuple[Any, Callable[..., Any]]] = []

    def add_slot(self, receiver: Any, method: Callable[..., Any]) -> None:
        """Connect ``method`` of ``receiver``.

        ``method`` may be a plain function taking the receiver first, such as
        ``Receiver.func``, or a method already bound to ``receiver``.
        """
        if receiver is None or method is None:
            raise ValueError("receiver and method must not be None")
        self._slots.append((receiver, method))

    def remove_slot(self, receiver: Any) -> int:
        """Disconnect every slot whose receiver has exactly the receiver's type.

        ``receiver`` may be an instance or a class. Returns the number removed.
        """
        kind = receiver if isinstance(receiver, type) else type(receiver)
        kept = [slot for slot in self._slots if type(slot[0]) is not kind]
        removed = len(self._slots) - len(kept)
        self._slots = kept
        return removed

    def __call__(self, *args: Any) -> None:
        for receiver, method in list(self._slots):
            if getattr(method, "__self__", None) is receiver:
                method(*args)
            else:
                method(receiver, *args)

    def __len__(self) -> int:
        return len(self._slots)


def connect(sender: Any, signal: str, receiver: Any, method: Callable[..., Any]) -> None:
    """Connect ``method`` of ``receiver`` to the signal named ``signal`` on ``sender``."""
    getattr(sender, signal).add_slot(receiver, method)