# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from task_countdown.tasks.task_models import Task


@dataclass(slots=True)
class FakeClock:
    """
    Manually advanced clock for deterministic ticks.
    """

    current: datetime

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> datetime:
        self.current = self.current + timedelta(**delta)
        return self.current


@dataclass(slots=True)
class RecordingListener:
    """
    Captures every snapshot the store publishes.
    """

    snapshots: list[tuple[Task, ...]] = field(default_factory=list)

    def __call__(self, tasks: Sequence[Task]) -> None:
        self.snapshots.append(tuple(tasks))
