from __future__ import annotations

import html
from typing import Iterable

from workout_timer.models.workout import WorkoutTask


def task_row_html(task: WorkoutTask) -> str:
    """One progress row of the workout page. Names are user text, so they are escaped."""
    progress = (task.current_second / task.duration * 100) if task.duration else 100
    left = "Done" if task.is_done else f"{task.seconds_to_go}s"
    return (
        f"<div class='task-row'>"
        f"<div class='task-bar' style='width:{progress:.1f}%'></div>"
        f"<span class='task-name'>{html.escape(task.name)}</span>"
        f"<span class='task-left'>{left}</span>"
        f"</div>"
    )


def workout_rows_html(tasks: Iterable[WorkoutTask]) -> str:
    return "".join(task_row_html(t) for t in tasks)
