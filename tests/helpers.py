from __future__ import annotations

from typing import List

from workout_timer.models import Exercise, ExerciseGroup, Settings


def build_settings(groups: List[ExerciseGroup] | None = None, **overrides) -> Settings:
    values = dict(
        warmup_duration=60,
        cooldown_duration=120,
        default_task_duration=30,
        first_exercise_preparation_duration=0,
        groups_per_workout=1,
        min_sets_per_group=2,
        max_sets_per_group=2,
        min_set_repetitions=2,
        max_set_repetitions=2,
        next_exercise_announcement_offset=10,
        rest_days_per_groups=0,
    )
    values.update(overrides)
    return Settings(exercise_groups=groups or [], **values)


def build_group(identifier: str, *names: str, primary: tuple = (), active: bool = True) -> ExerciseGroup:
    return ExerciseGroup(
        identifier=identifier,
        name=identifier.title(),
        active=active,
        exercises=[
            Exercise(identifier=f"{identifier}-{i}", name=n, duration_override="+0", is_primary=n in primary)
            for i, n in enumerate(names)
        ],
    )


def squat_settings(**overrides) -> Settings:
    return build_settings([build_group("legs", "Squat")], **overrides)
