from __future__ import annotations


class WorkoutTimerError(Exception):
    pass


class ExerciseNotFoundError(WorkoutTimerError, LookupError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"No exercise with identifier '{identifier}'.")
        self.identifier = identifier


class GroupNotFoundError(WorkoutTimerError, LookupError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"No exercise group with identifier '{identifier}'.")
        self.identifier = identifier


class StorageError(WorkoutTimerError):
    pass
