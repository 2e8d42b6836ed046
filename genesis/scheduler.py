"""A simple priority-ordered task scheduler."""

from __future__ import annotations

import heapq
import itertools
import time

_MIN_PRIORITY = 1
_MAX_PRIORITY = 5


class Task:
    """A named task with a priority from 1 (lowest) to 5 (highest)."""

    def __init__(self, name: str, priority: int, execution_time: float) -> None:
        self.name = name
        self.priority = min(max(priority, _MIN_PRIORITY), _MAX_PRIORITY)
        self.execution_time = execution_time

    def execute(self) -> None:
        """Run the task: announce it, wait its execution time, report completion."""
        print(f"Starting task: {self.name} (Priority: {self.priority})")
        time.sleep(self.execution_time)
        print(f"Task completed: {self.name}")

    def __lt__(self, other: Task) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority < other.priority

    def __repr__(self) -> str:
        return f"Task({self.name!r}, {self.priority}, {self.execution_time})"


class TaskScheduler:
    """Runs queued tasks highest priority first; equal priorities run in arrival order."""

    def __init__(self) -> None:
        self._queue: list[tuple[int, int, Task]] = []
        self._counter = itertools.count()

    def add_task(self, task: Task) -> None:
        """Queue a task."""
        heapq.heappush(self._queue, (-task.priority, next(self._counter), task))
        print(f"Task added: {len(self._queue)} tasks waiting for execution")

    def run_all_tasks(self) -> list[Task]:
        """Execute every queued task by priority; return them in the order run."""
        print(f"Starting all tasks, total of {len(self._queue)} tasks")
        executed = []
        while self._queue:
            _, _, task = heapq.heappop(self._queue)
            task.execute()
            executed.append(task)
        print("All tasks completed")
        return executed

    def __len__(self) -> int:
        return len(self._queue)