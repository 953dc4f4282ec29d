from __future__ import annotations

from typing import List, Literal
from pydantic import BaseModel, Field, model_validator


TaskType = Literal["warmup", "initial-preparation", "exercise", "cooldown"]


class WorkoutTask(BaseModel):
    name: str
    duration: int = Field(..., ge=0)
    current_second: int = Field(0, ge=0)
    type: TaskType = "exercise"

    @model_validator(mode="after")
    def _progress_within_duration(self) -> "WorkoutTask":
        if self.current_second > self.duration:
            raise ValueError("current_second cannot exceed duration")
        return self

    @property
    def seconds_to_go(self) -> int:
        return self.duration - self.current_second

    @property
    def is_done(self) -> bool:
        return self.current_second >= self.duration


class Workout(BaseModel):
    tasks: List[WorkoutTask] = Field(default_factory=list)


def default_workout() -> Workout:
    return Workout(
        tasks=[
            WorkoutTask(name="Warmup", duration=60, type="warmup"),
            WorkoutTask(name="Cooldown", duration=120, type="cooldown"),
        ]
    )
