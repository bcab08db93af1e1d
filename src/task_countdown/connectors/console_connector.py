# src/task_countdown/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from datetime import datetime

from ..core.ports import TaskListener
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

# Runs one input line as a command (on the store's loop) and returns the reply, if any.
CommandDispatcher = Callable[[str], str | None]

# Registers a listener with the store; returns the unsubscribe callable.
Subscriber = Callable[[TaskListener], Callable[[], None]]

# Blocks until the user leaves the live view.
Watcher = Callable[[], None]

_CLEAR_SCREEN = "\033[2J\033[H"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def watch_tasks(subscribe: Subscriber, render: Callable[[Sequence[Task]], str]) -> None:
    """
    Live view: redraw the task list on every store change until Enter is pressed.

    The listener runs on the store's thread; this function only blocks on input().
    """
    clear = _CLEAR_SCREEN if sys.stdout.isatty() else ""

    def redraw(tasks: Sequence[Task]) -> None:
        print(f"{clear}{render(tasks)}\n\n(watching - press Enter to stop)", flush=True)

    print("(watching - press Enter to stop)", flush=True)
    unsubscribe = subscribe(redraw)
    try:
        input()
    except (EOFError, KeyboardInterrupt):
        logger.debug("Watch interrupted.")
    finally:
        unsubscribe()
    logger.debug("Watch finished.")


def run_console_loop(
    dispatch: CommandDispatcher,
    *,
    app_name: str = "task-countdown",
    watch: Watcher | None = None,
) -> None:
    logger.info("Console connector started.")
    _print_ts(
        f"[{app_name}] Use /add to create a task, /list to see countdowns, /watch for a live view, "
        "/help for commands, /exit to quit.\n"
    )

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if watch is not None and user_input.lower() == "/watch":
            try:
                watch()
            except Exception:
                logger.exception("Live view crashed.")
                print("Internal error while watching tasks.")
            continue

        try:
            reply = dispatch(user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list them."

        print(reply)

    logger.info("Console connector finished.")
