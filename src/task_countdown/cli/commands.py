# src/task_countdown/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..connectors.render import render_tasks
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M"

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/add, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", DEFAULT_DATE_FORMAT) or DEFAULT_DATE_FORMAT)


def _use_color(state: AppState) -> bool:
    return bool(getattr(state.settings, "use_color", False))


def parse_due(tokens: list[str], date_format: str) -> tuple[datetime, list[str]]:
    """
    Split leading date/time tokens off `tokens`.

    The format decides how many whitespace-separated tokens the date takes
    ("%Y-%m-%d %H:%M" -> two). Raises ValueError if they do not parse.
    """
    n = len(date_format.split())
    if len(tokens) < n:
        raise ValueError("missing date")
    due = datetime.strptime(" ".join(tokens[:n]), date_format)
    return due, tokens[n:]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <date> <time> <name...>

    The due date must be in the future, like the date picker's minimum date.
    """
    date_format = _date_format(state)
    usage = f"Usage: /add <due as {date_format}> <task name>"

    try:
        due, name_parts = parse_due(args, date_format)
    except ValueError:
        return usage

    name = " ".join(name_parts)
    if not name:
        return usage

    if due <= state.task_store.now():
        logger.debug("Rejected /add with past due=%s", due)
        return "Due date must be in the future."

    task = state.task_store.add(name, due)
    if task is None:
        return usage
    return f'Added "{task.name}" ({task.time_left} left).'


def cmd_rm(state: AppState, args: list[str]) -> str:
    """/rm <n> -> delete the n-th task as shown by /list."""
    if len(args) != 1:
        return "Usage: /rm <task number>"
    try:
        position = int(args[0])
    except ValueError:
        return "Usage: /rm <task number>"

    task = state.task_store.remove(position - 1) if position > 0 else None
    if task is None:
        return f"No task #{position}."
    return f'Deleted "{task.name}".'


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(
        state.task_store.tasks,
        date_format=_date_format(state),
        use_color=_use_color(state),
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <date> <time> <name>.")
registry.register("rm", cmd_rm, help_text="Delete a task by its number: /rm <n>.", aliases=["del", "delete"])
registry.register("list", cmd_list, help_text="Show tasks with countdown and progress.", aliases=["ls"])
