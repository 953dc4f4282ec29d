from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from workout_timer.models.settings import Settings

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "data" / "default_settings.json"


@lru_cache(maxsize=1)
def _load_default_settings() -> Settings:
    with DEFAULT_SETTINGS_PATH.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return Settings.model_validate(raw)


def default_settings() -> Settings:
    # callers get their own copy; the cached value is never handed out
    return _load_default_settings().model_copy(deep=True)
