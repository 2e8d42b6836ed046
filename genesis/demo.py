"""A small demonstration of signals connected to receiver methods."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .observer import Signal, connect


class Receiver1:
    def func(self, para: int) -> None:
        print(f"Receiver1::slotFunction({para})")


class Receiver2:
    def func(self, para: int) -> None:
        print(f"Receiver2::slotFunction({para})")


class Receiver3:
    def func(self, para: str) -> None:
        print(f"Receiver3::slotFunction({para})")


class SendObject:
    """Emits an integer signal and a string signal."""

    def __init__(self) -> None:
        self.signal1 = Signal()
        self.signal2 = Signal()

    def send_int(self, para: int) -> None:
        self.signal1(para)

    def send_string(self, para: str) -> None:
        self.signal2(para)


class MultiParamReceiver:
    """Receives signals carrying several arguments."""

    def on_event(self, event_id: int, name: str, value: float) -> None:
        print(f"MultiParamReceiver::onEvent({event_id}, {name}, {value:g})")

    def on_data_update(self, topic: str, count: int) -> None:
        print(f"MultiParamReceiver::onDataUpdate({topic}, {count})")


class EventSender:
    """Emits a three-argument and a two-argument signal."""

    def __init__(self) -> None:
        self.multi_param_signal = Signal()
        self.data_update_signal = Signal()

    def send_multi_param_event(self, event_id: int, name: str, value: float) -> None:
        self.multi_param_signal(event_id, name, value)

    def send_data_update(self, topic: str, count: int) -> None:
        self.data_update_signal(topic, count)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect the receivers to a sender and emit one value on each signal."""
    print("=== Test2511 ===")

    r1, r2, r3 = Receiver1(), Receiver2(), Receiver3()
    sender = SendObject()

    connect(sender, "signal1", r1, Receiver1.func)
    connect(sender, "signal1", r2, Receiver2.func)
    connect(sender, "signal2", r3, Receiver3.func)

    sender.send_int(222)
    sender.send_string("test 333")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())