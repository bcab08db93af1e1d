# src/task_countdown/tasks/time_metrics.py

"""
Countdown and urgency math.

Pure functions of (due_date, now). Every difference is taken in whole
milliseconds, and both progress and urgency are anchored on local midnight
of `now`'s day:

    total = due_date - now
    span  = due_date - start_of_day(now)

so tasks with different due dates are scaled against different spans, and
a due date before today's midnight gives a ratio of two negative numbers.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from .task_models import TaskMetrics, Urgency

TIME_IS_UP = "Time is up"

_MS = timedelta(milliseconds=1)
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def start_of_day(now: datetime) -> datetime:
    """Local midnight of the day `now` falls on."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _millis(delta: timedelta) -> int:
    return delta // _MS


def _total_and_span(due_date: datetime, now: datetime) -> tuple[int, int]:
    total = _millis(due_date - now)
    span = _millis(due_date - start_of_day(now))
    return total, span


def progress_fraction(due_date: datetime, now: datetime) -> float:
    """
    Time left as a fraction of the time between today's midnight and the due instant.

    Never negative. A zero span (due exactly at today's midnight) yields 0.0.
    """
    total, span = _total_and_span(due_date, now)
    if span == 0:
        return 0.0
    return max(0.0, total / span)


def remaining_time_text(due_date: datetime, now: datetime) -> str:
    total = _millis(due_date - now)
    if total <= 0:
        return TIME_IS_UP

    days = total // MS_PER_DAY
    hours = (total % MS_PER_DAY) // MS_PER_HOUR
    minutes = (total % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (total % MS_PER_MINUTE) // MS_PER_SECOND
    return f"{days}d {hours}h {minutes}m {seconds}s"


def urgency_level(due_date: datetime, now: datetime) -> Urgency:
    """
    OVERDUE once due; APPROACHING when at most half of the midnight-anchored span is left.
    """
    total, span = _total_and_span(due_date, now)
    if total <= 0:
        return Urgency.OVERDUE
    half_span = span / 2
    if total <= half_span:
        return Urgency.APPROACHING
    return Urgency.AMPLE


def compute_metrics(due_date: datetime, now: datetime) -> TaskMetrics:
    return TaskMetrics(
        time_left=remaining_time_text(due_date, now),
        progress=progress_fraction(due_date, now),
        urgency=urgency_level(due_date, now),
    )
