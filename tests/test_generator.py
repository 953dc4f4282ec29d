from __future__ import annotations

import random

from workout_timer.models import ActivityLog
from workout_timer.services.generator import choose_exercises, generate_workout, set_distribution

from helpers import build_group, build_settings, squat_settings


def _shape(workout) -> list:
    return [(t.name, t.duration, t.type) for t in workout.tasks]


def test_single_exercise_workout_is_deterministic() -> None:
    workout = generate_workout(squat_settings(), ActivityLog(), rng=random.Random(0))
    assert _shape(workout) == [
        ("Warmup", 60, "warmup"),
        ("Squat", 30, "exercise"),
        ("Squat", 30, "exercise"),
        ("Cooldown", 120, "cooldown"),
    ]
    assert all(t.current_second == 0 for t in workout.tasks)


def test_preparation_task_names_first_exercise() -> None:
    workout = generate_workout(squat_settings(first_exercise_preparation_duration=20), ActivityLog())
    prep = workout.tasks[1]
    assert (prep.name, prep.duration, prep.type) == ("Prepare Squat", 20, "initial-preparation")


def test_zero_durations_omit_tasks() -> None:
    settings = squat_settings(warmup_duration=0, cooldown_duration=0, first_exercise_preparation_duration=15)
    workout = generate_workout(settings, ActivityLog())
    assert [t.type for t in workout.tasks] == ["initial-preparation", "exercise", "exercise"]


def test_no_eligible_groups_gives_only_warmup_and_cooldown() -> None:
    settings = build_settings([build_group("legs", "Squat", active=False)], first_exercise_preparation_duration=20)
    workout = generate_workout(settings, ActivityLog())
    assert [t.name for t in workout.tasks] == ["Warmup", "Cooldown"], "no preparation without exercises"

    empty = build_settings([build_group("legs")], groups_per_workout=3)
    assert [t.name for t in generate_workout(empty, ActivityLog()).tasks] == ["Warmup", "Cooldown"]


def test_groups_per_workout_caps_selection() -> None:
    groups = [build_group(g, f"{g} move") for g in ["a", "b", "c"]]
    settings = build_settings(groups, groups_per_workout=2, min_sets_per_group=1, max_sets_per_group=1,
                              min_set_repetitions=1, max_set_repetitions=1)
    for seed in range(20):
        workout = generate_workout(settings, ActivityLog(), rng=random.Random(seed))
        names = [t.name for t in workout.tasks if t.type == "exercise"]
        assert len(names) == 2 and len(set(names)) == 2, f"seed {seed}: {names}"


def test_set_distribution_sums_to_requested_sets() -> None:
    settings = build_settings(min_set_repetitions=2, max_set_repetitions=3)
    rng = random.Random(11)
    for sets_num in range(0, 15):
        blocks = set_distribution(sets_num, settings, rng)
        assert sum(blocks) == sets_num, f"{blocks} does not sum to {sets_num}"
        assert all(b >= 1 for b in blocks)


def test_set_distribution_shrinks_last_block_when_no_exact_split() -> None:
    settings = build_settings(min_set_repetitions=3, max_set_repetitions=3)
    assert set_distribution(4, settings, random.Random(1), max_attempts=100) == [3, 1]
    assert set_distribution(4, settings, random.Random(1), max_attempts=0) == [3, 1]


def test_zero_repetition_range_still_terminates() -> None:
    settings = build_settings(min_set_repetitions=0, max_set_repetitions=0)
    assert set_distribution(3, settings, random.Random(1)) == [1, 1, 1]


def test_primary_exercises_come_first() -> None:
    group = build_group("push", "Press", "Fly", "Dip", primary=("Dip",))
    for seed in range(10):
        chosen = choose_exercises(group, 3, random.Random(seed))
        assert chosen[0].name == "Dip", f"seed {seed}: {[e.name for e in chosen]}"
        assert len({e.name for e in chosen}) == 3


def test_short_groups_repeat_exercises_cyclically() -> None:
    group = build_group("arms", "Curl", "Dip", primary=("Curl",))
    chosen = choose_exercises(group, 5, random.Random(4))
    assert [e.name for e in chosen] == ["Curl", "Dip", "Curl", "Dip", "Curl"]


def test_blocks_become_consecutive_sets() -> None:
    group = build_group("legs", "Squat", "Lunge")
    settings = build_settings([group], min_sets_per_group=4, max_sets_per_group=4,
                              min_set_repetitions=2, max_set_repetitions=2)
    workout = generate_workout(settings, ActivityLog(), rng=random.Random(8))
    names = [t.name for t in workout.tasks if t.type == "exercise"]
    assert len(names) == 4
    assert names[0] == names[1] and names[2] == names[3] and names[0] != names[2], names


def test_overrides_frozen_into_tasks() -> None:
    settings = squat_settings()
    settings.exercise_groups[0].exercises[0].duration_override = "x2"
    workout = generate_workout(settings, ActivityLog())
    settings.exercise_groups[0].exercises[0].duration_override = "+0"
    assert [t.duration for t in workout.tasks if t.type == "exercise"] == [60, 60]
