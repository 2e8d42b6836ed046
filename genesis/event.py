"""Events and timers handled by the event loop."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

EventHandler = Callable[["Event"], Any]


class EventData:
    """Base class for custom data carried by an event."""


@dataclass
class Event:
    """An event of a given type, its JSON payload, extra data and handler."""

    event_type: int = 0
    json_data: Any = None
    event_data: Optional[EventData] = None
    handler: Optional[EventHandler] = None

    def is_empty(self) -> bool:
        """True when the event has no handler."""
        return self.handler is None

    def handle(self) -> None:
        """Pass the event to its handler, if it has one."""
        if self.handler is not None:
            self.handler(self)


@dataclass
class EventTimer:
    """A timer that produces events every ``interval`` milliseconds."""

    timer_id: int = 0
    interval: int = 1
    repeat: bool = False
    handler: Optional[EventHandler] = None
    last_triggered: int = 0