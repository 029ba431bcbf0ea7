"""Frame-driven scheduler for delayed and repeating callbacks.

Nothing here reads a clock. The host calls ``update(current_time)`` once per
frame (usually with ``pygame.time.get_ticks()``) and every task whose trigger
time has passed runs inline, on the caller's thread.
"""

from typing import Callable, List, Optional


class ScheduledTask:
    """Handle for a pending callback."""

    def __init__(self, callback: Callable[[], None], trigger_time: int,
                 interval: Optional[int] = None):
        self.callback = callback
        self.trigger_time = trigger_time
        self.interval = interval  # None for one-shot tasks
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self):
        """Stop the task from running again. Safe to call more than once."""
        self.cancelled = True


class Scheduler:
    """Pending tasks ordered by trigger time, advanced by the host."""

    def __init__(self, current_time: int = 0):
        self.current_time = current_time
        self.pending: List[ScheduledTask] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run `callback` once, `delay_ms` after the current time."""
        task = ScheduledTask(callback, self.current_time + delay_ms)
        self.pending.append(task)
        return task

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run `callback` every `interval_ms`, first time one interval from now."""
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        task = ScheduledTask(callback, self.current_time + interval_ms, interval_ms)
        self.pending.append(task)
        return task

    def update(self, current_time: int):
        """Advance the clock and run every due task in trigger order.

        A repeating task that fell several intervals behind runs once per
        missed interval, so a one-second tick never skips a second. Tasks
        scheduled by a callback run in this same pass if they are already due.
        """
        if current_time < self.current_time:
            current_time = self.current_time

        while True:
            task = self._next_due(current_time)
            if task is None:
                break
            # Run callbacks at their own trigger time so that anything they
            # schedule is measured from the moment they were due.
            self.current_time = task.trigger_time
            if task.repeating:
                task.trigger_time += task.interval
            else:
                self.pending.remove(task)
            task.callback()

        self.current_time = current_time
        self.pending = [task for task in self.pending if not task.cancelled]

    def _next_due(self, current_time: int) -> Optional[ScheduledTask]:
        due = None
        for task in self.pending:
            if task.cancelled or task.trigger_time > current_time:
                continue
            if due is None or task.trigger_time < due.trigger_time:
                due = task
        return due

    def __len__(self) -> int:
        return sum(1 for task in self.pending if not task.cancelled)
