from __future__ import annotations

from workout_timer.models.workout import WorkoutTask
from workout_timer.services.display import task_row_html, workout_rows_html


def test_task_name_is_escaped() -> None:
    task = WorkoutTask(name="<b>Curl</b> & Press", duration=30, type="exercise")
    row = task_row_html(task)
    assert "&lt;b&gt;Curl&lt;/b&gt; &amp; Press" in row
    assert "<b>" not in row


def test_row_shows_progress_and_time_left() -> None:
    running = WorkoutTask(name="Squat", duration=40, current_second=10, type="exercise")
    assert "width:25.0%" in task_row_html(running)
    assert "<span class='task-left'>30s</span>" in task_row_html(running)

    done = WorkoutTask(name="Squat", duration=40, current_second=40, type="exercise")
    assert "<span class='task-left'>Done</span>" in task_row_html(done)
    assert workout_rows_html([running, done]).count("<div class='task-row'>") == 2
