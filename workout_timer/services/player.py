from __future__ import annotations

import logging
import random
import time
from datetime import datetime
from typing import Callable, List, Optional

from workout_timer.config import get_config
from workout_timer.models.settings import Settings
from workout_timer.utils import describe_last_time, seconds_to_time_string
from .activity_log import last_finished_workout_time, record_finished_workout
from .engine import (
    Speak,
    advance_one_second,
    get_remaining_workout_time,
    get_total_workout_time,
    opening_cue,
    reset_workout,
    workout_has_began,
    workout_has_ended,
)
from .generator import generate_workout
from .storage import JsonStore

logger = logging.getLogger(__name__)


class WorkoutPlayer:
    """Play state for the one live workout.

    The host owns the player and delivers ticks; every change is persisted
    to the store straight away.
    """

    def __init__(self, store: JsonStore, speak: Optional[Speak] = None, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self.speak = speak
        self.rng = rng
        self.settings = store.load_settings()
        self.workout = store.load_workout()
        self.activity_log = store.load_activity_log()
        self.is_playing = False

    def _say(self, text: Optional[str]) -> None:
        if text and self.speak is not None:
            self.speak(text)

    def _flush_speech(self) -> None:
        # sinks that fetch audio do it here, outside the tick itself
        flush = getattr(self.speak, "flush", None)
        if flush is not None:
            flush()

    def update_settings(self, settings: Settings) -> None:
        self.settings = settings
        self.store.save_settings(settings)

    def new_workout(self, now: Optional[datetime] = None) -> None:
        self.workout = generate_workout(self.settings, self.activity_log, rng=self.rng, now=now)
        self.store.save_workout(self.workout)
        self.is_playing = False

    def reset(self) -> None:
        reset_workout(self.workout)
        self.store.save_workout(self.workout)
        self.is_playing = False

    def toggle_play(self) -> bool:
        if workout_has_ended(self.workout):
            return False
        self.is_playing = not self.is_playing
        if self.is_playing and not workout_has_began(self.workout):
            self._say(opening_cue(self.workout, self.settings))
            self._flush_speech()
        return self.is_playing

    def tick(self, now: Optional[datetime] = None) -> List[str]:
        if not self.is_playing:
            return []
        cues = advance_one_second(self.workout, self.settings, speak=self.speak)
        self.store.save_workout(self.workout)
        if workout_has_ended(self.workout):
            self.is_playing = False
            self.activity_log = record_finished_workout(self.activity_log, self.workout, now=now)
            self.store.save_activity_log(self.activity_log)
            logger.info("Workout finished after %s", seconds_to_time_string(get_total_workout_time(self.workout)))
        self._flush_speech()
        return cues

    def run(self, max_ticks: Optional[int] = None, sleep: Callable[[float], None] = time.sleep) -> int:
        """Blocking tick loop until paused, finished or max_ticks. Returns ticks delivered."""
        interval = get_config().TICK_SECONDS
        ticks = 0
        while self.is_playing and (max_ticks is None or ticks < max_ticks):
            sleep(interval)
            self.tick()
            ticks += 1
        return ticks

    def start_pause_label(self) -> str:
        total = seconds_to_time_string(get_total_workout_time(self.workout))
        remaining = seconds_to_time_string(get_remaining_workout_time(self.workout))
        if self.is_playing:
            return f"Pause ({remaining})"
        if workout_has_began(self.workout):
            if workout_has_ended(self.workout):
                return f"Done ({total})"
            return f"Continue ({remaining})"
        return f"Start ({total})"

    def last_finished_label(self, now: Optional[datetime] = None) -> str:
        return describe_last_time(last_finished_workout_time(self.activity_log), now or datetime.now())
