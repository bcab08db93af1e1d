# src/task_countdown/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations:
- the clock is injectable so ticks are deterministic in tests,
- the rendering side subscribes to task list changes without the store knowing about it.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class Clock(Protocol):
    """Current local wall-clock time (datetime.now by default)."""
    def __call__(self) -> datetime: ...


class TaskListener(Protocol):
    """
    Collaborator-side port: called with the current task snapshot
    after every add / remove / tick.
    """
    def __call__(self, tasks: Sequence[Task]) -> None: ...


class TaskRepo(Protocol):
    # Collaborator API
    def add(self, name: str, due_date: datetime | None) -> Task | None: ...
    def remove(self, index: int) -> Task | None: ...

    # Refresh loop API
    def tick(self, now: datetime | None = None) -> None: ...
