from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field

from .exercise import ExerciseGroup


CURRENT_SETTINGS_VERSION = 1


class Settings(BaseModel):
    version: int = CURRENT_SETTINGS_VERSION
    exercise_groups: List[ExerciseGroup] = Field(default_factory=list)

    # Durations in seconds; 0 omits the task
    warmup_duration: int = Field(60, ge=0)
    cooldown_duration: int = Field(120, ge=0)
    default_task_duration: int = Field(100, ge=0)
    first_exercise_preparation_duration: int = Field(20, ge=0)

    groups_per_workout: int = Field(2, ge=0)
    min_sets_per_group: int = Field(4, ge=0)
    max_sets_per_group: int = Field(7, ge=0)
    min_set_repetitions: int = Field(2, ge=0)
    max_set_repetitions: int = Field(3, ge=0)

    next_exercise_announcement_offset: int = Field(40, ge=0)
    rest_days_per_groups: int = Field(0, ge=0)
    show_extra_settings: bool = False
