from __future__ import annotations

import logging
from typing import Callable, List, Optional

from workout_timer.models.settings import Settings
from workout_timer.models.workout import Workout
from .cues import cue_for

logger = logging.getLogger(__name__)

Speak = Callable[[str], None]


def current_task_index(workout: Workout) -> Optional[int]:
    for i, task in enumerate(workout.tasks):
        if not task.is_done:
            return i
    return None


def workout_has_began(workout: Workout) -> bool:
    return any(task.current_second > 0 for task in workout.tasks)


def workout_has_ended(workout: Workout) -> bool:
    return all(task.is_done for task in workout.tasks)


def get_remaining_workout_time(workout: Workout) -> int:
    return sum(task.seconds_to_go for task in workout.tasks)


def get_total_workout_time(workout: Workout) -> int:
    return sum(task.duration for task in workout.tasks)


def reset_workout(workout: Workout) -> Workout:
    for task in workout.tasks:
        task.current_second = 0
    return workout


def opening_cue(workout: Workout, settings: Settings) -> Optional[str]:
    """Cue for the first task before any time has passed, spoken when play starts."""
    if not workout.tasks or workout_has_began(workout):
        return None
    return cue_for(workout, 0, settings)


def advance_one_second(workout: Workout, settings: Settings, speak: Optional[Speak] = None) -> List[str]:
    """Advance the first unfinished task by one second.

    Returns the cues to say, in order: the cue of the advanced task and, when that
    task has just finished, the cue of the task being entered. A finished workout
    is left untouched.
    """
    index = current_task_index(workout)
    if index is None:
        return []
    task = workout.tasks[index]
    task.current_second += 1

    cues: List[str] = []
    cue = cue_for(workout, index, settings)
    if cue:
        cues.append(cue)
    if task.current_second == task.duration and index + 1 < len(workout.tasks):
        entering = cue_for(workout, index + 1, settings)
        if entering:
            cues.append(entering)

    if cues:
        logger.debug("Task %d (%s) at %ds: %s", index, task.name, task.current_second, cues)
    if speak is not None:
        for text in cues:
            speak(text)
    return cues
