from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Where settings, the current workout and the activity log are stored
    DATA_DIR: str = ".workout_timer"

    # Text-to-speech endpoint; cues are only logged when unset
    SPEECH_URL: Optional[str] = None
    SPEECH_VOICE: str = "echo"
    SPEECH_VOLUME: float = 3.0
    SPEECH_TIMEOUT_SECONDS: float = 0.5

    # Engine policies
    TICK_SECONDS: float = 1.0
    MAX_DISTRIBUTION_ATTEMPTS: int = 100
    REST_DAYS_COUNT_NEXT_DAY: bool = False


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    # Allow Streamlit secrets to override or provide env values
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in ["APP_ENV", "LOG_LEVEL", "DATA_DIR", "SPEECH_URL", "SPEECH_VOICE"]:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception:
        # no secrets.toml outside of a Streamlit runtime
        pass
    return AppConfig(**overrides)  # type: ignore[call-arg]


_logging_configured = False


def configure_logging(level: str | None = None) -> None:
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(
        level=(level or get_config().LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logging_configured = True
