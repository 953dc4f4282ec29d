from __future__ import annotations

import logging
from typing import Callable, List, Optional

import requests

from workout_timer.config import AppConfig, get_config

logger = logging.getLogger(__name__)


class LoggingSpeaker:
    """Cue sink that only logs, keeping the most recent cues for display."""

    def __init__(self, keep: int = 20) -> None:
        self.keep = keep
        self.history: List[str] = []

    def __call__(self, text: str) -> None:
        logger.info("Cue: %s", text)
        self.history.append(text)
        del self.history[:-self.keep]


def fetch_speech(text: str, config: AppConfig) -> Optional[bytes]:
    """Synthesize text via the configured speech endpoint. Returns audio bytes or None."""
    if not config.SPEECH_URL:
        return None
    params = {
        # leading pause keeps the engine from clipping the first word
        "text": f"[pause] {text}",
        "voice": config.SPEECH_VOICE,
        "volume": config.SPEECH_VOLUME,
    }
    try:
        resp = requests.get(config.SPEECH_URL, params=params, timeout=config.SPEECH_TIMEOUT_SECONDS)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Speech request failed for %r: %s", text, e)
        return None
    return resp.content or None


class HttpSpeaker(LoggingSpeaker):
    """Logs the cue and queues it for synthesis.

    Nothing is fetched while a tick is being computed; the host calls flush()
    once the tick is saved, and the audio goes to on_audio (e.g. a player widget).
    """

    def __init__(self, config: AppConfig, on_audio: Optional[Callable[[bytes], None]] = None, keep: int = 20) -> None:
        super().__init__(keep=keep)
        self.config = config
        self.on_audio = on_audio
        self.pending: List[str] = []

    def __call__(self, text: str) -> None:
        super().__call__(text)
        self.pending.append(text)

    def flush(self) -> int:
        """Fetch audio for the queued cues. Returns how many were played."""
        texts, self.pending = self.pending, []
        played = 0
        for text in texts:
            audio = fetch_speech(text, self.config)
            if audio is not None and self.on_audio is not None:
                self.on_audio(audio)
                played += 1
        return played


def make_speaker(config: Optional[AppConfig] = None, on_audio: Optional[Callable[[bytes], None]] = None) -> LoggingSpeaker:
    config = config or get_config()
    if config.SPEECH_URL:
        return HttpSpeaker(config, on_audio=on_audio)
    return LoggingSpeaker()
