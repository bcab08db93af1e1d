# tests/test_commands.py

from __future__ import annotations

from datetime import timedelta

from task_countdown.cli.commands import CommandRegistry, parse_due, registry

from .conftest import NOW


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [["x", "y"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_parse_due_splits_date_tokens_from_name() -> None:
    due, rest = parse_due(["2026-03-12", "18:30", "Buy", "milk"], "%Y-%m-%d %H:%M")
    assert due == NOW.replace(day=12, hour=18, minute=30)
    assert rest == ["Buy", "milk"]


def test_add_command_creates_task(state) -> None:
    reply = registry.handle(state, "/add 2026-03-12 09:00 Buy milk")

    assert reply == 'Added "Buy milk" (2d 0h 0m 0s left).'
    (task,) = state.task_store.tasks
    assert task.name == "Buy milk"
    assert task.due_date == NOW + timedelta(days=2)


def test_add_command_rejects_past_and_malformed_input(state) -> None:
    assert registry.handle(state, "/add 2026-03-10 08:59 Too late") == "Due date must be in the future."
    assert registry.handle(state, "/add 2026-03-10 09:00 Right now") == "Due date must be in the future."
    assert (registry.handle(state, "/add tomorrow Buy milk") or "").startswith("Usage:")
    assert (registry.handle(state, "/add 2026-03-12 09:00") or "").startswith("Usage:")
    assert len(state.task_store) == 0


def test_rm_command_uses_display_numbers(state) -> None:
    registry.handle(state, "/add 2026-03-11 09:00 first")
    registry.handle(state, "/add 2026-03-12 09:00 second")

    assert registry.handle(state, "/rm 1") == 'Deleted "first".'
    assert [t.name for t in state.task_store] == ["second"]

    assert registry.handle(state, "/rm 5") == "No task #5."
    assert registry.handle(state, "/rm 0") == "No task #0."
    assert registry.handle(state, "/rm x") == "Usage: /rm <task number>"
    assert len(state.task_store) == 1


def test_list_command_renders_current_tasks(state) -> None:
    assert "No tasks" in (registry.handle(state, "/list") or "")

    registry.handle(state, "/add 2026-03-12 09:00 Buy milk")
    state.task_store.tick(NOW + timedelta(days=1))
    listing = registry.handle(state, "/ls") or ""

    assert "1. Buy milk" in listing
    assert "Due: 2026-03-12 09:00" in listing
    assert "1d 0h 0m 0s" in listing
