from __future__ import annotations

import random
from typing import Any, List, Optional

from workout_timer.errors import ExerciseNotFoundError, GroupNotFoundError
from workout_timer.models.exercise import Exercise, ExerciseGroup
from workout_timer.models.settings import Settings
from workout_timer.utils import new_identifier
from .defaults import default_settings
from .durations import resolve_exercise_duration

# Every edit returns a new Settings value; the input is never mutated.


def _group(settings: Settings, group_id: str) -> ExerciseGroup:
    for group in settings.exercise_groups:
        if group.identifier == group_id:
            return group
    raise GroupNotFoundError(group_id)


def find_exercise(settings: Settings, identifier: str) -> Exercise:
    for group in settings.exercise_groups:
        for exercise in group.exercises:
            if exercise.identifier == identifier:
                return exercise
    raise ExerciseNotFoundError(identifier)


def update_settings(settings: Settings, **changes: Any) -> Settings:
    """Set scalar fields, e.g. update_settings(s, warmup_duration=90).

    Values go through validation, so negative numbers are rejected.
    """
    unknown = sorted(set(changes) - set(Settings.model_fields))
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    data = settings.model_dump()
    data.update(changes)
    return Settings.model_validate(data)


def add_group(settings: Settings, name: str = "", rng: Optional[random.Random] = None) -> Settings:
    new = settings.model_copy(deep=True)
    new.exercise_groups.append(ExerciseGroup(identifier=new_identifier(rng), name=name))
    return new


def rename_group(settings: Settings, group_id: str, name: str) -> Settings:
    new = settings.model_copy(deep=True)
    _group(new, group_id).name = name
    return new


def remove_group(settings: Settings, group_id: str) -> Settings:
    new = settings.model_copy(deep=True)
    _group(new, group_id)
    new.exercise_groups = [g for g in new.exercise_groups if g.identifier != group_id]
    return new


def toggle_group_active(settings: Settings, group_id: str) -> Settings:
    new = settings.model_copy(deep=True)
    group = _group(new, group_id)
    group.active = not group.active
    return new


def add_exercise(settings: Settings, group_id: str, name: str = "", rng: Optional[random.Random] = None) -> Settings:
    new = settings.model_copy(deep=True)
    _group(new, group_id).exercises.append(Exercise(identifier=new_identifier(rng), name=name))
    return new


def rename_exercise(settings: Settings, exercise_id: str, name: str) -> Settings:
    new = settings.model_copy(deep=True)
    find_exercise(new, exercise_id).name = name
    return new


def remove_exercise(settings: Settings, exercise_id: str) -> Settings:
    new = settings.model_copy(deep=True)
    find_exercise(new, exercise_id)
    for group in new.exercise_groups:
        group.exercises = [e for e in group.exercises if e.identifier != exercise_id]
    return new


def update_duration_override(settings: Settings, exercise_id: str, value: str) -> Settings:
    new = settings.model_copy(deep=True)
    find_exercise(new, exercise_id).duration_override = value.strip()
    return new


def set_exercise_primary(settings: Settings, exercise_id: str, is_primary: bool) -> Settings:
    new = settings.model_copy(deep=True)
    find_exercise(new, exercise_id).is_primary = is_primary
    return new


def restore_defaults() -> Settings:
    return default_settings()


def duration_override_warnings(settings: Settings) -> List[Exercise]:
    """Exercises whose override expression does not parse, to highlight in the editor."""
    return [
        ex
        for group in settings.exercise_groups
        for ex in group.exercises
        if not resolve_exercise_duration(ex, settings).override_is_valid
    ]
