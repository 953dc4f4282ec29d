from __future__ import annotations

from typing import Dict, List

from workout_timer.models import Workout, WorkoutTask
from workout_timer.services.cues import cue_for, next_task_repetitions
from workout_timer.services.engine import (
    advance_one_second,
    current_task_index,
    get_remaining_workout_time,
    get_total_workout_time,
    opening_cue,
    reset_workout,
    workout_has_began,
    workout_has_ended,
)

from helpers import squat_settings


def squat_workout() -> Workout:
    return Workout(
        tasks=[
            WorkoutTask(name="Warmup", duration=60, type="warmup"),
            WorkoutTask(name="Squat", duration=30, type="exercise"),
            WorkoutTask(name="Squat", duration=30, type="exercise"),
            WorkoutTask(name="Cooldown", duration=120, type="cooldown"),
        ]
    )


def play(workout: Workout, settings, ticks: int) -> Dict[int, List[str]]:
    said: Dict[int, List[str]] = {}
    for tick in range(1, ticks + 1):
        cues = advance_one_second(workout, settings)
        if cues:
            said[tick] = cues
    return said


def test_full_cue_timeline() -> None:
    workout = squat_workout()
    settings = squat_settings(next_exercise_announcement_offset=10)
    assert opening_cue(workout, settings) == "Starting with warmup!"

    said = play(workout, settings, 240)
    assert said == {
        30: ["Halfway through!"],
        55: ["5 seconds to go!"],
        60: ["GO!"],
        80: ["Next up: Same exercise one more time!"],
        85: ["5 seconds to go!"],
        90: ["GO!"],
        110: ["Next up: Cooldown!"],
        115: ["5 seconds to go!"],
        120: ["Go!"],
        180: ["Halfway through!"],
        210: ["30 seconds to go!"],
        235: ["5 seconds to go!"],
        240: ["DONE!"],
    }
    assert workout_has_ended(workout)


def test_fifteen_seconds_cue_with_long_announcement_offset() -> None:
    workout = squat_workout()
    settings = squat_settings(next_exercise_announcement_offset=40)
    said = play(workout, settings, 90)
    # offset longer than the task: no announcement, 15s and 5s cues instead
    assert said[75] == ["15 seconds to go!"]
    assert said[85] == ["5 seconds to go!"]
    assert 80 not in said


def test_preparation_announces_upcoming_sets() -> None:
    workout = Workout(
        tasks=[
            WorkoutTask(name="Prepare Squat", duration=20, type="initial-preparation"),
            WorkoutTask(name="Squat", duration=30, type="exercise"),
            WorkoutTask(name="Squat", duration=30, type="exercise"),
            WorkoutTask(name="Row", duration=30, type="exercise"),
        ]
    )
    settings = squat_settings(next_exercise_announcement_offset=10)
    assert cue_for(workout, 0, settings) == "Prepare 2 sets of Squat!"
    assert next_task_repetitions(workout, 0) == 2
    assert next_task_repetitions(workout, 2) == 1
    assert next_task_repetitions(workout, 3) == 0

    workout.tasks[2].current_second = 20
    assert cue_for(workout, 2, settings) == "Next up: Row!"


def test_next_up_pluralizes_repeated_sets() -> None:
    workout = Workout(
        tasks=[WorkoutTask(name="Squat", duration=30, current_second=20, type="exercise")]
        + [WorkoutTask(name="Squat", duration=30, type="exercise") for _ in range(2)]
        + [WorkoutTask(name="Row", duration=30, type="exercise") for _ in range(3)]
    )
    settings = squat_settings(next_exercise_announcement_offset=10)
    assert cue_for(workout, 0, settings) == "Next up: Same exercise 2 more times!"
    workout.tasks[2].current_second = 20
    assert cue_for(workout, 2, settings) == "Next up: 3 sets of Row!"


def test_last_task_ending_says_done() -> None:
    workout = Workout(tasks=[WorkoutTask(name="Squat", duration=30, current_second=29, type="exercise")])
    assert advance_one_second(workout, squat_settings()) == ["DONE!"]


def test_progress_is_monotonic_one_second_per_tick() -> None:
    workout = squat_workout()
    settings = squat_settings()
    total = get_total_workout_time(workout)
    previous = [0] * len(workout.tasks)
    for tick in range(1, total + 5):
        advance_one_second(workout, settings)
        current = [t.current_second for t in workout.tasks]
        assert all(c >= p for c, p in zip(current, previous)), "progress went backwards"
        assert sum(current) == min(tick, total)
        assert all(t.current_second <= t.duration for t in workout.tasks)
        previous = current
    assert advance_one_second(workout, settings) == [], "ticks after the end are no-ops"


def test_inspection_is_idempotent() -> None:
    workout = squat_workout()
    settings = squat_settings()
    for _ in range(75):
        advance_one_second(workout, settings)
    first = (workout_has_began(workout), workout_has_ended(workout), get_remaining_workout_time(workout))
    for _ in range(3):
        assert (workout_has_began(workout), workout_has_ended(workout), get_remaining_workout_time(workout)) == first
    assert first == (True, False, 240 - 75)
    assert current_task_index(workout) == 1


def test_empty_workout_is_ended_and_not_began() -> None:
    workout = Workout()
    assert workout_has_ended(workout)
    assert not workout_has_began(workout)
    assert current_task_index(workout) is None
    assert advance_one_second(workout, squat_settings()) == []
    assert opening_cue(workout, squat_settings()) is None


def test_reset_returns_to_not_started() -> None:
    workout = squat_workout()
    settings = squat_settings()
    for _ in range(100):
        advance_one_second(workout, settings)
    reset_workout(workout)
    assert not workout_has_began(workout)
    assert get_remaining_workout_time(workout) == get_total_workout_time(workout)


def test_speak_receives_cues_in_order() -> None:
    workout = Workout(
        tasks=[
            WorkoutTask(name="Warmup", duration=1, type="warmup"),
            WorkoutTask(name="Squat", duration=30, type="exercise"),
        ]
    )
    spoken: List[str] = []
    advance_one_second(workout, squat_settings(), speak=spoken.append)
    assert spoken == ["GO!"]
