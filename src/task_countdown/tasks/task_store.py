# src/task_countdown/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import datetime

from ..core.ports import Clock, TaskListener
from .task_models import Task
from .task_refresher import DEFAULT_INTERVAL_SECONDS, TaskRefresher
from .time_metrics import compute_metrics

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    Insertion order is display order and is never changed by a refresh.
    Positions are the only identity a task has; remove() takes an index.

    Refresh:
    - tick(now) recomputes every task's derived fields at `now`
    - start()/stop() run tick(clock()) once per interval on the running event loop
    - `async with store:` brackets start/stop

    Threading:
    - not thread-safe; every call is expected on the event loop thread
    """

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        self._clock: Clock = clock or datetime.now
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []
        self._refresher = TaskRefresher(self, self._clock, interval_seconds=interval_seconds)

    # ---- read access ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def now(self) -> datetime:
        return self._clock()

    # ---- mutations ----

    def add(self, name: str, due_date: datetime | None) -> Task | None:
        """
        Append a task with derived fields computed at the current instant.

        An empty name or a missing due date is ignored (returns None).
        """
        if not name or due_date is None:
            logger.debug("Ignoring add name=%r due_date=%r", name, due_date)
            return None

        task = Task.create(name, due_date, compute_metrics(due_date, self._clock()))
        self._tasks.append(task)
        logger.info("Task added index=%d name=%r due=%s", len(self._tasks) - 1, name, due_date)
        self._notify()
        return task

    def remove(self, index: int) -> Task | None:
        """Remove the task at `index`. Out-of-range (or negative) indexes are ignored."""
        if index < 0 or index >= len(self._tasks):
            logger.debug("Ignoring remove index=%s size=%d", index, len(self._tasks))
            return None

        task = self._tasks.pop(index)
        logger.info("Task removed index=%d name=%r", index, task.name)
        self._notify()
        return task

    def tick(self, now: datetime | None = None) -> None:
        """Recompute time_left / progress / urgency for every task at `now` (default: clock())."""
        if now is None:
            now = self._clock()

        refreshed: list[Task] = []
        for task in self._tasks:
            metrics = compute_metrics(task.due_date, now)
            refreshed.append(
                replace(
                    task,
                    time_left=metrics.time_left,
                    progress=metrics.progress,
                    urgency=metrics.urgency,
                )
            )
        self._tasks = refreshed
        self._notify()

    # ---- subscriptions ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """
        Call `listener(tasks)` after every add / remove / tick.
        Returns a callable that unsubscribes.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener failed: %r", listener)

    # ---- refresh loop ----

    @property
    def running(self) -> bool:
        return self._refresher.running

    def start(self) -> None:
        """Start the periodic refresh. Needs a running event loop; a second call is a no-op."""
        if self._refresher.running:
            return
        self._refresher.start()
        logger.info("TaskStore refresh started interval=%.3fs", self._refresher.interval_seconds)

    async def stop(self) -> None:
        """Cancel the periodic refresh. No tick fires once this returns. Idempotent."""
        was_running = self._refresher.running
        await self._refresher.stop()
        if was_running:
            logger.info("TaskStore refresh stopped tasks=%d", len(self._tasks))

    async def __aenter__(self) -> TaskStore:
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
