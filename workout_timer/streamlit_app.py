from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `workout_timer.*` work
# when Streamlit runs this file from within the package directory.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import time
from typing import List

import streamlit as st

from workout_timer.config import configure_logging, get_config
from workout_timer.errors import StorageError
from workout_timer.services.display import workout_rows_html
from workout_timer.services.player import WorkoutPlayer
from workout_timer.services.storage import JsonStore
from workout_timer.speech import make_speaker

st.set_page_config(page_title="Workout Timer", page_icon="⏱️", layout="centered")
config = get_config()
configure_logging()

st.markdown("""
<style>
.task-row{ position:relative; height:2rem; border-top:2px solid #075985; user-select:none; }
.task-bar{ position:absolute; height:100%; background:#65a30d; transition: width .3s; }
.task-name{ position:absolute; left:.5rem; top:50%; transform:translateY(-50%); font-weight:700; white-space:nowrap; }
.task-left{ position:absolute; right:.5rem; top:50%; transform:translateY(-50%); }
.last-finished{ text-align:center; font-size:.85rem; color:#cbd5e1; margin:.5rem; }
</style>
""", unsafe_allow_html=True)


def _queue_audio(audio: bytes) -> None:
    # played on the next run; the current one is about to be replaced by st.rerun()
    st.session_state.setdefault("pending_audio", []).append(audio)


def get_player() -> WorkoutPlayer | None:
    if "player" not in st.session_state:
        try:
            st.session_state["player"] = WorkoutPlayer(JsonStore(config.DATA_DIR), speak=make_speaker(config, _queue_audio))
        except StorageError as e:
            st.error(f"Could not load saved data: {e}")
            return None
    return st.session_state["player"]


player = get_player()
if player is None:
    st.stop()

for audio in st.session_state.pop("pending_audio", []):
    st.audio(audio, format="audio/mpeg", autoplay=True)

st.title("Workout")

new_col, play_col, reset_col = st.columns([1, 3, 1])
with new_col:
    if st.button("New", use_container_width=True):
        player.new_workout()
        st.rerun()
with play_col:
    if st.button(player.start_pause_label(), use_container_width=True, type="primary"):
        player.toggle_play()
        st.rerun()
with reset_col:
    if st.button("Reset", use_container_width=True):
        player.reset()
        st.rerun()

st.markdown(f"<div class='last-finished'>Last Finished: {player.last_finished_label()}</div>", unsafe_allow_html=True)

st.markdown(workout_rows_html(player.workout.tasks), unsafe_allow_html=True)

history: List[str] = getattr(player.speak, "history", [])
if history:
    st.caption("Latest cue: " + history[-1])

if player.is_playing:
    time.sleep(config.TICK_SECONDS)
    player.tick()
    st.rerun()
