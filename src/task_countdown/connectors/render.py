# src/task_countdown/connectors/render.py

"""Plain-text rendering of the task list for the console connector.

Urgency -> color is decided here, not in the core:
- ample: green, approaching: yellow, overdue: red
Colors are emitted as 256-color ANSI codes, or truecolor when COLORTERM says so.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from ..tasks.task_models import Task, Urgency

URGENCY_HEX: dict[Urgency, str] = {
    Urgency.AMPLE: "#28a745",
    Urgency.APPROACHING: "#ffc107",
    Urgency.OVERDUE: "#ff3333",
}

BAR_WIDTH = 20
BAR_FILLED = "#"
BAR_EMPTY = "-"

RESET = "\033[0m"
BOLD = "\033[1m"

_TRUECOLOR = any(tok in os.environ.get("COLORTERM", "").lower() for tok in ("truecolor", "24bit"))


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def ansi_from_hex(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"

    # Approximate RGB with the xterm 256-color cube.
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    return f"\033[38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}m"


def color(text: str, *styles: str, enabled: bool = True) -> str:
    if not enabled or not styles:
        return text
    return "".join(styles) + text + RESET


def progress_bar(progress: float, width: int = BAR_WIDTH) -> str:
    """Fixed-width bar. Progress above 1 (due after today) draws as full."""
    clamped = min(1.0, max(0.0, progress))
    filled = int(clamped * width)
    return "[" + BAR_FILLED * filled + BAR_EMPTY * (width - filled) + "]"


def render_task(
    position: int,
    task: Task,
    *,
    date_format: str = "%Y-%m-%d %H:%M",
    use_color: bool = True,
) -> str:
    tone = ansi_from_hex(URGENCY_HEX[task.urgency])
    lines = [
        color(f"{position}. {task.name}", BOLD, enabled=use_color),
        f"   Due: {task.due_date.strftime(date_format)}",
        "   " + color(progress_bar(task.progress), tone, enabled=use_color),
        "   " + color(task.time_left, tone, enabled=use_color),
    ]
    return "\n".join(lines)


def render_tasks(
    tasks: Sequence[Task],
    *,
    date_format: str = "%Y-%m-%d %H:%M",
    use_color: bool = True,
) -> str:
    """Numbered (1-based) listing in store order."""
    if not tasks:
        return "No tasks. Use /add <date> <time> <name> to create one."
    return "\n".join(
        render_task(i, t, date_format=date_format, use_color=use_color)
        for i, t in enumerate(tasks, start=1)
    )
