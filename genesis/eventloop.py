"""A thread-safe event loop with registered handlers and timers."""

from __future__ import annotations

import threading
from typing import Any, Optional

from .datetime import current_msec_since_epoch
from .event import Event, EventData, EventHandler, EventTimer


class EventLoop:
    """Queues events, fires timers and runs handlers on the looping thread."""

    def __init__(self) -> None:
        self.thread_id = threading.get_ident()
        self._lock = threading.Lock()
        self._condition = threading.Condition(self._lock)
        self._running = False
        self._handlers: dict[int, EventHandler] = {}
        self._timers: dict[int, EventTimer] = {}
        self._last_timer_id = 0
        self._events: list[Event] = []

    def add_event_handler(self, event_type: int, handler: EventHandler) -> None:
        """Register the handler for an event type.

        Raises ValueError when the type already has a handler.
        """
        if handler is None:
            raise ValueError("handler must not be None")
        with self._lock:
            if event_type in self._handlers:
                raise ValueError(f"event type {event_type} already has a handler")
            self._handlers[event_type] = handler

    def add_event(
        self,
        event_type: int,
        json_data: Any = None,
        event_data: Optional[EventData] = None,
        handler: Optional[EventHandler] = None,
    ) -> None:
        """Queue an event.

        Without ``handler`` the one registered for ``event_type`` is used;
        LookupError is raised when there is none.
        """
        with self._lock:
            if handler is None:
                try:
                    handler = self._handlers[event_type]
                except KeyError:
                    raise LookupError(
                        f"no handler registered for event type {event_type}"
                    ) from None
            self._events.append(Event(event_type, json_data, event_data, handler))
        with self._condition:
            self._condition.notify()

    def add_timer(self, interval: int, repeat: bool, handler: EventHandler) -> int:
        """Add a timer firing every ``interval`` milliseconds; return its id."""
        if interval <= 0:
            raise ValueError(f"interval must be positive: {interval}")
        if handler is None:
            raise ValueError("handler must not be None")
        with self._lock:
            self._last_timer_id += 1
            timer = EventTimer(self._last_timer_id, interval, bool(repeat), handler)
            self._timers[timer.timer_id] = timer
            return timer.timer_id

    def remove_timer(self, timer_id: int) -> None:
        """Remove a timer; unknown ids are ignored."""
        with self._lock:
            self._timers.pop(timer_id, None)

    def loop(self, n: int = -1, timeout: int = 20) -> None:
        """Run ``n`` iterations, or until :meth:`quit` when ``n`` is negative.

        Each iteration waits up to ``timeout`` milliseconds for an event,
        then handles queued events and checks the timers.
        """
        self._running = True
        while self._running and n != 0:
            if n > 0:
                n -= 1
            with self._condition:
                self._condition.wait_for(
                    lambda: bool(self._events) or not self._running,
                    timeout / 1000,
                )
            self._process_events()
            self._process_timers()
        self._process_events()

    def quit(self) -> None:
        """Stop the loop and wake any waiting thread."""
        with self._condition:
            self._running = False
            self._condition.notify_all()

    def _process_events(self) -> None:
        with self._lock:
            events, self._events = self._events, []
        for event in events:
            event.handle()

    def _process_timers(self) -> None:
        with self._lock:
            for timer_id, timer in list(self._timers.items()):
                current = current_msec_since_epoch()
                if abs(current - timer.last_triggered) < timer.interval:
                    continue
                self._events.append(Event(0, None, None, timer.handler))
                if timer.repeat:
                    timer.last_triggered = current
                else:
                    del self._timers[timer_id]