# src/task_countdown/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Urgency(StrEnum):
    """
    Coarse classification of the time left before a task is due.

    The collaborator maps these to colors; the core only reports the level.
    """

    AMPLE = "ample"
    APPROACHING = "approaching"
    OVERDUE = "overdue"


@dataclass(slots=True, frozen=True)
class TaskMetrics:
    """Derived fields of a task, computed together at one instant."""

    time_left: str
    progress: float
    urgency: Urgency


@dataclass(slots=True, frozen=True)
class Task:
    name: str
    due_date: datetime

    # Derived: consistent with due_date as of the last refresh.
    time_left: str
    progress: float
    urgency: Urgency

    @classmethod
    def create(cls, name: str, due_date: datetime, metrics: TaskMetrics) -> Task:
        return cls(
            name=name,
            due_date=due_date,
            time_left=metrics.time_left,
            progress=metrics.progress,
            urgency=metrics.urgency,
        )

    @property
    def metrics(self) -> TaskMetrics:
        return TaskMetrics(time_left=self.time_left, progress=self.progress, urgency=self.urgency)
