# src/task_countdown/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, starts the task store (with its refresh
loop) in a background thread, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..cli.bootstrap import create_initial_state, start_store_in_background
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, watch_tasks
from ..connectors.render import render_tasks
from ..core.ports import TaskListener
from ..logging_setup import setup_logging
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    runner = start_store_in_background(state)

    def dispatch(line: str) -> str | None:
        return runner.call(command_registry.handle, state, line)

    def subscribe(listener: TaskListener) -> Callable[[], None]:
        unsubscribe = runner.call(state.task_store.subscribe, listener)
        return lambda: runner.call(unsubscribe)

    def render(tasks: Sequence[Task]) -> str:
        return render_tasks(tasks, date_format=settings.date_format, use_color=settings.use_color)

    try:
        run_console_loop(
            dispatch,
            app_name=settings.app_name,
            watch=lambda: watch_tasks(subscribe, render),
        )
    finally:
        runner.stop()
        runner.join(timeout=5.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
