from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from workout_timer.models.activity import ActivityLog, ExerciseLog
from workout_timer.models.exercise import ExerciseGroup
from workout_timer.models.workout import Workout


def record_finished_workout(activity_log: ActivityLog, workout: Workout, now: Optional[datetime] = None) -> ActivityLog:
    """Return a new log with every exercise of the workout stamped as finished at `now`."""
    stamp = now or datetime.now()
    entries: Dict[str, datetime] = {e.name: e.last_finished for e in activity_log.exercises}
    for task in workout.tasks:
        if task.type != "exercise":
            continue
        entries[task.name] = stamp
    return ActivityLog(exercises=[ExerciseLog(name=n, last_finished=t) for n, t in entries.items()])


def last_group_finish(activity_log: ActivityLog, group: ExerciseGroup) -> Optional[datetime]:
    names = {ex.name for ex in group.exercises}
    times = [e.last_finished for e in activity_log.exercises if e.name in names]
    return max(times) if times else None


def last_finished_workout_time(activity_log: ActivityLog) -> Optional[datetime]:
    if not activity_log.exercises:
        return None
    return max(e.last_finished for e in activity_log.exercises)
