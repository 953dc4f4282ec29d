from __future__ import annotations

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class ExerciseLog(BaseModel):
    name: str
    last_finished: datetime


class ActivityLog(BaseModel):
    """Last time each exercise (by name) was part of a fully finished workout."""

    exercises: List[ExerciseLog] = Field(default_factory=list)

    def get(self, name: str) -> ExerciseLog | None:
        return next((e for e in self.exercises if e.name == name), None)
