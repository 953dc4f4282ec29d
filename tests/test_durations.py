from __future__ import annotations

from workout_timer.models import Exercise
from workout_timer.services.durations import resolve_exercise_duration

from helpers import build_settings


def _resolve(override: str, default: int = 100):
    settings = build_settings(default_task_duration=default)
    return resolve_exercise_duration(Exercise(identifier="e", name="Row", duration_override=override), settings)


def test_override_expressions() -> None:
    expected = {"+10": 110, "-5": 95, "50": 50, "x2": 200}
    for override, duration in expected.items():
        result = _resolve(override)
        assert result.duration == duration, f"{override!r} resolved to {result.duration}"
        assert result.override_is_valid, f"{override!r} should be valid"


def test_invalid_override_falls_back_to_default() -> None:
    for override in ["abc", "", "x", "+", "1.5", "2x"]:
        result = _resolve(override)
        assert result.duration == 100
        assert not result.override_is_valid, f"{override!r} should be flagged"


def test_duration_never_below_one_second() -> None:
    assert _resolve("-500").duration == 1
    assert _resolve("0").duration == 1
    assert _resolve("x0").duration == 1
    assert _resolve("nope", default=0).duration == 1
