# src/task_countdown/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- wires the TaskStore into AppState from settings,
- runs the store (and its refresh loop) on an event loop in a background thread,
- lets the blocking console call into that loop, so every store operation runs on one thread.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_store = TaskStore(interval_seconds=float(getattr(settings, "refresh_interval_seconds", 1.0)))
    return AppState(settings=settings, task_store=task_store)


async def _run_store(state: AppState, stop_event: asyncio.Event) -> None:
    async with state.task_store:
        logger.info("Task store running.")
        await stop_event.wait()
    logger.info("Task store stopped.")


@dataclass
class StoreBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def call(self, fn: Callable[..., T], *args: Any, timeout: float | None = 10.0) -> T:
        """Run fn(*args) on the store's event loop and wait for its result."""

        async def _invoke() -> T:
            return fn(*args)

        return asyncio.run_coroutine_threadsafe(_invoke(), self.loop).result(timeout=timeout)

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            logger.debug("Store loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_store_in_background(state: AppState) -> StoreBackgroundRunner:
    """
    Start the task store's event loop in a background thread.

    Why a thread:
    - console REPL is blocking (input()).
    - the refresh loop is async and wants its own event loop.
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_run_store(state, stop_event))
        except Exception:
            logger.exception("Task store loop crashed.")
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="task-store", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        raise RuntimeError("Task store thread did not initialize properly.")

    logger.debug("Task store background thread started.")
    return StoreBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
