from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from workout_timer.config import get_config
from workout_timer.errors import StorageError
from workout_timer.models.activity import ActivityLog
from workout_timer.models.settings import Settings
from workout_timer.models.workout import Workout, default_workout
from .defaults import default_settings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
WORKOUT_KEY = "currentWorkout"
ACTIVITY_LOG_KEY = "activityLog"

# Older stored shapes used camelCase keys
_CAMEL_TO_SNAKE = {
    "exerciseGroups": "exercise_groups",
    "warmupDuration": "warmup_duration",
    "cooldownDuration": "cooldown_duration",
    "defaultTaskDuration": "default_task_duration",
    "firstExercisePreparationDuration": "first_exercise_preparation_duration",
    "groupsPerWorkout": "groups_per_workout",
    "minSetsPerGroup": "min_sets_per_group",
    "maxSetsPerGroup": "max_sets_per_group",
    "minSetRepetitions": "min_set_repetitions",
    "maxSetRepetitions": "max_set_repetitions",
    "nextExerciseAnnouncementOffset": "next_exercise_announcement_offset",
    "restDaysPerGroups": "rest_days_per_groups",
    "showExtraSettings": "show_extra_settings",
    "durationOverride": "duration_override",
    "isPrimary": "is_primary",
    "currentSecond": "current_second",
    "lastFinished": "last_finished",
}


def _snake_keys(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {_CAMEL_TO_SNAKE.get(k, k): _snake_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_snake_keys(x) for x in obj]
    return obj


def migrate_settings(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Upgrade a stored settings document to the current field set."""
    data = _snake_keys(raw)
    data.setdefault("version", 1)
    data.setdefault("exercise_groups", [])
    data.setdefault("first_exercise_preparation_duration", 0)
    data.setdefault("min_set_repetitions", 2)
    data.setdefault("max_set_repetitions", 3)
    data.setdefault("next_exercise_announcement_offset", 30)
    data.setdefault("rest_days_per_groups", 0)
    data.setdefault("show_extra_settings", False)
    for group in data["exercise_groups"]:
        group.setdefault("active", True)
        group.setdefault("exercises", [])
        for exercise in group["exercises"]:
            exercise.setdefault("duration_override", "+0")
            exercise.setdefault("is_primary", False)
    return data


def migrate_workout(raw: Dict[str, Any]) -> Dict[str, Any]:
    data = _snake_keys(raw)
    data.setdefault("tasks", [])
    for task in data["tasks"]:
        task.setdefault("type", "exercise")
        task.setdefault("current_second", 0)
    return data


def migrate_activity_log(raw: Dict[str, Any]) -> Dict[str, Any]:
    data = _snake_keys(raw)
    data.setdefault("exercises", [])
    for entry in data["exercises"]:
        stamp = entry.get("last_finished")
        # browser timestamps were epoch milliseconds
        if isinstance(stamp, (int, float)):
            entry["last_finished"] = datetime.fromtimestamp(stamp / 1000).isoformat()
    return data


class JsonStore:
    """Keyed JSON documents in a directory, one file per key."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self.data_dir = Path(data_dir if data_dir is not None else get_config().DATA_DIR)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Stored '{key}' is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise StorageError(f"Stored '{key}' is not a JSON object.")
        return raw

    def _write(self, key: str, payload: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(path)

    def _validate(self, key: str, model: Any, data: Dict[str, Any]) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Stored '{key}' does not match the current schema: {e}") from e

    def load_settings(self) -> Settings:
        raw = self._read(SETTINGS_KEY)
        if raw is None:
            return default_settings()
        return self._validate(SETTINGS_KEY, Settings, migrate_settings(raw))

    def save_settings(self, settings: Settings) -> None:
        self._write(SETTINGS_KEY, settings.model_dump_json(indent=2))

    def load_workout(self) -> Workout:
        raw = self._read(WORKOUT_KEY)
        if raw is None:
            return default_workout()
        return self._validate(WORKOUT_KEY, Workout, migrate_workout(raw))

    def save_workout(self, workout: Workout) -> None:
        self._write(WORKOUT_KEY, workout.model_dump_json(indent=2))

    def load_activity_log(self) -> ActivityLog:
        raw = self._read(ACTIVITY_LOG_KEY)
        if raw is None:
            return ActivityLog()
        return self._validate(ACTIVITY_LOG_KEY, ActivityLog, migrate_activity_log(raw))

    def save_activity_log(self, activity_log: ActivityLog) -> None:
        self._write(ACTIVITY_LOG_KEY, activity_log.model_dump_json(indent=2))
        logger.debug("Saved activity log with %d exercises", len(activity_log.exercises))
