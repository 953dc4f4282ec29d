from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List


class Exercise(BaseModel):
    identifier: str = Field(..., description="Opaque ID, unique across the catalog")
    name: str
    duration_override: str = Field("+0", description="'+N'/'-N' offset, 'N' seconds or 'xN' multiplier")
    is_primary: bool = False

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "identifier": "0951374373098468",
                    "name": "Dumbbell Shoulder Press",
                    "duration_override": "+0",
                    "is_primary": True,
                }
            ]
        }
    }


class ExerciseGroup(BaseModel):
    identifier: str
    name: str
    exercises: List[Exercise] = Field(default_factory=list)
    # Manually disables the group regardless of rest days
    active: bool = True
