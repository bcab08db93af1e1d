# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from task_countdown.core.state import AppState
from task_countdown.tasks.task_store import TaskStore

from .fakes import FakeClock

# Tuesday morning; midnight is nine hours back.
NOW = datetime(2026, 3, 10, 9, 0, 0)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock)


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests independent of the environment.
    """
    return SimpleNamespace(
        app_name="task-countdown",
        date_format="%Y-%m-%d %H:%M",
        use_color=False,
        refresh_interval_seconds=1.0,
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
