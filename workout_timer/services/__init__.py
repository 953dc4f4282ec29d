from .durations import DurationResult, resolve_exercise_duration
from .activity_log import record_finished_workout, last_group_finish, last_finished_workout_time
from .rest_days import is_group_eligible, eligible_groups, group_rest_label
from .generator import generate_workout, set_distribution
from .cues import cue_for
from .engine import (
    advance_one_second,
    workout_has_began,
    workout_has_ended,
    get_remaining_workout_time,
    get_total_workout_time,
    reset_workout,
    opening_cue,
)
from .storage import JsonStore
from .player import WorkoutPlayer

__all__ = [
    "DurationResult",
    "resolve_exercise_duration",
    "record_finished_workout",
    "last_group_finish",
    "last_finished_workout_time",
    "is_group_eligible",
    "eligible_groups",
    "group_rest_label",
    "generate_workout",
    "set_distribution",
    "cue_for",
    "advance_one_second",
    "workout_has_began",
    "workout_has_ended",
    "get_remaining_workout_time",
    "get_total_workout_time",
    "reset_workout",
    "opening_cue",
    "JsonStore",
    "WorkoutPlayer",
]
