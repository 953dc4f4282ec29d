from __future__ import annotations

from typing import Optional

from workout_timer.models.settings import Settings
from workout_timer.models.workout import Workout

FIVE_SECONDS_TO_GO = "5 seconds to go!"
HALFWAY_THROUGH = "Halfway through!"
DONE = "DONE!"


def next_task_repetitions(workout: Workout, task_index: int) -> int:
    """How many back-to-back tasks right after task_index share the next task's name."""
    tasks = workout.tasks
    if task_index + 1 >= len(tasks):
        return 0
    name = tasks[task_index + 1].name
    count = 0
    for task in tasks[task_index + 1:]:
        if task.name != name:
            break
        count += 1
    return count


def _sets_of(name: str, repetitions: int) -> str:
    if repetitions == 1:
        return name
    return f"{repetitions} sets of {name}"


def _next_up(current_name: str, next_name: str, repetitions: int) -> str:
    if next_name == current_name:
        if repetitions == 1:
            return "Next up: Same exercise one more time!"
        return f"Next up: Same exercise {repetitions} more times!"
    return f"Next up: {_sets_of(next_name, repetitions)}!"


def cue_for(workout: Workout, task_index: int, settings: Settings) -> Optional[str]:
    """Text to speak for a task at its current second, or None."""
    task = workout.tasks[task_index]
    next_task = workout.tasks[task_index + 1] if task_index + 1 < len(workout.tasks) else None

    seconds_to_go = task.duration - task.current_second
    just_started = task.current_second == 0
    just_ended = seconds_to_go == 0
    five_to_go = seconds_to_go == 5
    halfway = task.current_second == task.duration // 2
    repetitions = next_task_repetitions(workout, task_index)

    if task.type == "warmup":
        if just_started:
            return "Starting with warmup!"
        if halfway:
            return HALFWAY_THROUGH
        if five_to_go:
            return FIVE_SECONDS_TO_GO
    elif task.type == "initial-preparation":
        if just_started and next_task is not None:
            return f"Prepare {_sets_of(next_task.name, repetitions)}!"
        if five_to_go:
            return FIVE_SECONDS_TO_GO
    elif task.type == "exercise":
        offset = settings.next_exercise_announcement_offset
        if just_started:
            return "GO!"
        if task.current_second == task.duration - offset:
            # the 15s/5s checks are skipped at the announcement second
            if next_task is not None:
                return _next_up(task.name, next_task.name, repetitions)
        elif offset >= 25 and seconds_to_go == 15:
            return "15 seconds to go!"
        elif five_to_go:
            return FIVE_SECONDS_TO_GO
    elif task.type == "cooldown":
        if just_started:
            return "Go!"
        if halfway:
            return HALFWAY_THROUGH
        if task.duration >= 90 and seconds_to_go == 30:
            return "30 seconds to go!"
        if five_to_go:
            return FIVE_SECONDS_TO_GO

    if next_task is None and just_ended:
        return DONE
    return None
