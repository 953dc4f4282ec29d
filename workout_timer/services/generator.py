from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import List, Optional

from workout_timer.config import get_config
from workout_timer.models.activity import ActivityLog
from workout_timer.models.exercise import Exercise, ExerciseGroup
from workout_timer.models.settings import Settings
from workout_timer.models.workout import Workout, WorkoutTask
from workout_timer.utils import random_int_inclusive, repeat_to_length, shuffle, unique_random_sample
from .durations import resolve_exercise_duration
from .rest_days import eligible_groups

logger = logging.getLogger(__name__)


def set_distribution(
    sets_num: int,
    settings: Settings,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> List[int]:
    """Split sets_num into consecutive blocks of repetitions of the same exercise.

    Block sizes are drawn from [min_set_repetitions, max_set_repetitions] until the
    sum reaches sets_num. Draws are retried until the sum is exact; once the attempts
    run out the last block is shrunk by the overshoot. Block sizes are at least 1,
    so the shrunk block is never empty.
    """
    if max_attempts is None:
        max_attempts = get_config().MAX_DISTRIBUTION_ATTEMPTS
    lo = max(1, settings.min_set_repetitions)
    hi = max(1, settings.max_set_repetitions)
    remaining_attempts = max(0, max_attempts)
    while True:
        count = 0
        result: List[int] = []
        while count < sets_num:
            n = random_int_inclusive(lo, hi, rng)
            result.append(n)
            count += n
        if count == sets_num:
            return result
        if remaining_attempts == 0:
            logger.debug("No exact distribution of %d sets found, shrinking last block by %d", sets_num, count - sets_num)
            result[-1] -= count - sets_num
            return result
        remaining_attempts -= 1


def _primaries_first(exercises: List[Exercise]) -> List[Exercise]:
    return sorted(exercises, key=lambda ex: not ex.is_primary)


def choose_exercises(group: ExerciseGroup, blocks: int, rng: Optional[random.Random] = None) -> List[Exercise]:
    if blocks <= len(group.exercises):
        return _primaries_first(unique_random_sample(group.exercises, blocks, rng))
    exercises = _primaries_first(shuffle(list(group.exercises), rng))
    return repeat_to_length(exercises, blocks)


def _group_tasks(group: ExerciseGroup, settings: Settings, rng: Optional[random.Random]) -> List[WorkoutTask]:
    if not group.exercises:
        return []
    sets_in_group = random_int_inclusive(settings.min_sets_per_group, settings.max_sets_per_group, rng)
    distribution = set_distribution(sets_in_group, settings, rng)
    exercises = choose_exercises(group, len(distribution), rng)
    tasks: List[WorkoutTask] = []
    for exercise, sets_num in zip(exercises, distribution):
        duration = resolve_exercise_duration(exercise, settings).duration
        for _ in range(sets_num):
            tasks.append(WorkoutTask(name=exercise.name, duration=duration, type="exercise"))
    return tasks


def create_main_tasks(
    settings: Settings,
    activity_log: ActivityLog,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[WorkoutTask]:
    candidates = eligible_groups(settings, activity_log, now=now)
    groups = unique_random_sample(candidates, settings.groups_per_workout, rng)
    if len(groups) < settings.groups_per_workout:
        logger.info("Only %d of %d requested groups are available", len(groups), settings.groups_per_workout)
    tasks: List[WorkoutTask] = []
    for group in groups:
        tasks.extend(_group_tasks(group, settings, rng))
    return tasks


def generate_workout(
    settings: Settings,
    activity_log: ActivityLog,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Workout:
    main_tasks = create_main_tasks(settings, activity_log, rng=rng, now=now)
    tasks: List[WorkoutTask] = []

    if settings.warmup_duration > 0:
        tasks.append(WorkoutTask(name="Warmup", duration=settings.warmup_duration, type="warmup"))

    if settings.first_exercise_preparation_duration > 0 and main_tasks:
        tasks.append(
            WorkoutTask(
                name=f"Prepare {main_tasks[0].name}",
                duration=settings.first_exercise_preparation_duration,
                type="initial-preparation",
            )
        )

    tasks.extend(main_tasks)

    if settings.cooldown_duration > 0:
        tasks.append(WorkoutTask(name="Cooldown", duration=settings.cooldown_duration, type="cooldown"))

    logger.info("Generated workout with %d tasks (%d exercise sets)", len(tasks), len(main_tasks))
    return Workout(tasks=tasks)
