from .exercise import Exercise, ExerciseGroup
from .settings import Settings, CURRENT_SETTINGS_VERSION
from .workout import TaskType, WorkoutTask, Workout, default_workout
from .activity import ExerciseLog, ActivityLog

__all__ = [
    "Exercise",
    "ExerciseGroup",
    "Settings",
    "CURRENT_SETTINGS_VERSION",
    "TaskType",
    "WorkoutTask",
    "Workout",
    "default_workout",
    "ExerciseLog",
    "ActivityLog",
]
