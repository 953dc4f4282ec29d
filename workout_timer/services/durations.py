from __future__ import annotations

import re
from typing import NamedTuple

from workout_timer.models.exercise import Exercise
from workout_timer.models.settings import Settings

_OFFSET_RE = re.compile(r"^[+-]\d+$")
_ABSOLUTE_RE = re.compile(r"^\d+$")
_MULTIPLIER_RE = re.compile(r"^x\d+$")


class DurationResult(NamedTuple):
    duration: int
    override_is_valid: bool


def resolve_exercise_duration(exercise: Exercise, settings: Settings) -> DurationResult:
    """Effective duration of an exercise in seconds.

    The override is one of:
    - "+N" / "-N": offset from the default task duration
    - "N": absolute seconds
    - "xN": multiple of the default task duration
    Anything else falls back to the default and is flagged invalid.
    The result is never below one second.
    """
    override = exercise.duration_override
    default = settings.default_task_duration
    if _OFFSET_RE.match(override):
        return DurationResult(max(1, default + int(override)), True)
    if _ABSOLUTE_RE.match(override):
        return DurationResult(max(1, int(override)), True)
    if _MULTIPLIER_RE.match(override):
        return DurationResult(max(1, default * int(override[1:])), True)
    return DurationResult(max(1, default), False)
