# src/task_countdown/tasks/task_refresher.py

from __future__ import annotations

"""
Task refresher.

A small timer loop that, once per interval:
- reads the clock,
- asks the store to recompute every task's derived fields.

The loop runs on the event loop thread, so a tick never overlaps another tick
or an add/remove issued on the same loop.
"""

import asyncio
import contextlib
import logging

from ..core.ports import Clock, TaskRepo

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 1.0


async def run_refresh_loop(
        task_store: TaskRepo,
        clock: Clock,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
) -> None:
    """
    Periodic refresh.

    Every interval_seconds:
    - now = clock()
    - task_store.tick(now)

    A failing tick is logged and the loop keeps going.
    To stop the loop, cancel the coroutine/task.
    """
    sleep_s = float(interval_seconds)
    if sleep_s <= 0:
        raise ValueError("interval_seconds must be positive")

    while True:
        await asyncio.sleep(sleep_s)

        try:
            task_store.tick(clock())
        except Exception:
            logger.exception("refresh tick failed")


class TaskRefresher:
    """
    Owns the asyncio task running run_refresh_loop.

    start() and stop() are an explicit pair: start() needs a running event loop,
    and once `await stop()` returns no further tick fires.
    """

    def __init__(
            self,
            task_store: TaskRepo,
            clock: Clock,
            *,
            interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._task_store = task_store
        self._clock = clock
        self._interval_seconds = float(interval_seconds)
        self._runner: asyncio.Task[None] | None = None

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def running(self) -> bool:
        return self._runner is not None and not self._runner.done()

    def start(self) -> None:
        if self.running:
            return
        self._runner = asyncio.get_running_loop().create_task(
            run_refresh_loop(
                self._task_store,
                self._clock,
                interval_seconds=self._interval_seconds,
            ),
            name="task-refresher",
        )
        logger.debug("Refresh loop started interval=%.3fs", self._interval_seconds)

    async def stop(self) -> None:
        runner, self._runner = self._runner, None
        if runner is None:
            return

        runner.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await runner
        logger.debug("Refresh loop stopped.")
