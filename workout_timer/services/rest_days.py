from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from workout_timer.config import get_config
from workout_timer.models.activity import ActivityLog
from workout_timer.models.exercise import ExerciseGroup
from workout_timer.models.settings import Settings
from workout_timer.utils import days_difference, describe_last_time
from .activity_log import last_finished_workout_time, last_group_finish

logger = logging.getLogger(__name__)


def is_group_eligible(
    group: ExerciseGroup,
    settings: Settings,
    activity_log: ActivityLog,
    now: Optional[datetime] = None,
    count_next_day: Optional[bool] = None,
) -> bool:
    """Whether a group may be part of a new workout.
    Rules:
    - Inactive groups are never eligible.
    - Groups never worked are always eligible.
    - Otherwise at least settings.rest_days_per_groups calendar days must have
      passed since any of the group's exercises was last finished.
    With count_next_day (default from REST_DAYS_COUNT_NEXT_DAY) a workout
    already finished today counts the new one as tomorrow's.
    """
    if not group.active:
        return False
    last = last_group_finish(activity_log, group)
    if last is None:
        return True
    now = now or datetime.now()
    if count_next_day is None:
        count_next_day = get_config().REST_DAYS_COUNT_NEXT_DAY

    days_since = days_difference(last, now)
    if count_next_day:
        last_workout = last_finished_workout_time(activity_log)
        if last_workout is not None and days_difference(last_workout, now) == 0:
            days_since += 1
    eligible = days_since >= settings.rest_days_per_groups
    if not eligible:
        logger.debug("Group %r resting: %d of %d days", group.name, days_since, settings.rest_days_per_groups)
    return eligible


def eligible_groups(
    settings: Settings,
    activity_log: ActivityLog,
    now: Optional[datetime] = None,
    count_next_day: Optional[bool] = None,
) -> List[ExerciseGroup]:
    return [
        g for g in settings.exercise_groups
        if is_group_eligible(g, settings, activity_log, now=now, count_next_day=count_next_day)
    ]


def group_rest_label(
    group: ExerciseGroup,
    settings: Settings,
    activity_log: ActivityLog,
    now: Optional[datetime] = None,
    count_next_day: Optional[bool] = None,
) -> str:
    """When the group was last worked, e.g. "Yesterday (currently resting)"."""
    now = now or datetime.now()
    label = describe_last_time(last_group_finish(activity_log, group), now)
    if not is_group_eligible(group, settings, activity_log, now=now, count_next_day=count_next_day):
        label += " (currently resting)"
    return label
