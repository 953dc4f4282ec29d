from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from workout_timer.errors import WorkoutTimerError
from workout_timer.services import settings_editor as editor
from workout_timer.services.durations import resolve_exercise_duration
from workout_timer.services.rest_days import group_rest_label

st.set_page_config(page_title="Settings", page_icon="⚙️")

st.title("Settings")

player = st.session_state.get("player")
if player is None:
    st.info("Open the workout page first so your saved settings are loaded.")
    st.stop()


def apply(new_settings) -> None:
    player.update_settings(new_settings)
    st.rerun()


settings = player.settings

NUMBER_FIELDS = [
    ("warmup_duration", "Warmup duration (s)"),
    ("default_task_duration", "Exercise duration (s)"),
    ("cooldown_duration", "Cooldown duration (s)"),
    ("groups_per_workout", "Groups per workout"),
    ("first_exercise_preparation_duration", "Preparation (s)"),
    ("next_exercise_announcement_offset", "Announce next at (s left)"),
    ("rest_days_per_groups", "Rest days per group"),
]

RANGE_FIELDS = [
    ("min_sets_per_group", "max_sets_per_group", "Sets per group"),
    ("min_set_repetitions", "max_set_repetitions", "Set repetitions"),
]

with st.form("global-settings"):
    values = {}
    for field, label in NUMBER_FIELDS:
        values[field] = st.number_input(label, min_value=0, step=1, value=getattr(settings, field))
    for lo_field, hi_field, label in RANGE_FIELDS:
        lo_col, hi_col = st.columns(2)
        values[lo_field] = lo_col.number_input(f"{label} (min)", min_value=0, step=1, value=getattr(settings, lo_field))
        values[hi_field] = hi_col.number_input(f"{label} (max)", min_value=0, step=1, value=getattr(settings, hi_field))
    values["show_extra_settings"] = st.checkbox("Show extra settings", value=settings.show_extra_settings)
    if st.form_submit_button("Save", use_container_width=True):
        try:
            apply(editor.update_settings(settings, **values))
        except ValidationError as e:
            st.error(f"Invalid settings: {e}")

for group in settings.exercise_groups:
    with st.container(border=True):
        name_col, active_col, remove_col = st.columns([6, 2, 2])
        new_name = name_col.text_input("Group", value=group.name, key=f"group-{group.identifier}", label_visibility="collapsed")
        name_col.caption(f"Last time: {group_rest_label(group, settings, player.activity_log)}")
        try:
            if new_name != group.name:
                apply(editor.rename_group(settings, group.identifier, new_name))
            if active_col.toggle("Active", value=group.active, key=f"active-{group.identifier}") != group.active:
                apply(editor.toggle_group_active(settings, group.identifier))
            if remove_col.button("Remove", key=f"remove-group-{group.identifier}"):
                apply(editor.remove_group(settings, group.identifier))

            for ex in group.exercises:
                cols = st.columns([6, 2, 2] if settings.show_extra_settings else [8, 2])
                ex_name = cols[0].text_input("Exercise", value=ex.name, key=f"ex-{ex.identifier}", label_visibility="collapsed")
                if ex_name != ex.name:
                    apply(editor.rename_exercise(settings, ex.identifier, ex_name))
                if settings.show_extra_settings:
                    result = resolve_exercise_duration(ex, settings)
                    override = cols[1].text_input(
                        f"{result.duration}s" if result.override_is_valid else "invalid",
                        value=ex.duration_override,
                        key=f"override-{ex.identifier}",
                    )
                    if override != ex.duration_override:
                        apply(editor.update_duration_override(settings, ex.identifier, override))
                    primary = cols[1].checkbox("Primary", value=ex.is_primary, key=f"primary-{ex.identifier}")
                    if primary != ex.is_primary:
                        apply(editor.set_exercise_primary(settings, ex.identifier, primary))
                if cols[-1].button("Remove", key=f"remove-ex-{ex.identifier}"):
                    apply(editor.remove_exercise(settings, ex.identifier))

            if st.button("Add Exercise", key=f"add-ex-{group.identifier}"):
                apply(editor.add_exercise(settings, group.identifier))
        except WorkoutTimerError:
            # edited concurrently from another tab; show the stored state instead
            st.rerun()

warnings = editor.duration_override_warnings(settings)
if warnings:
    st.warning("Invalid duration overrides: " + ", ".join(ex.name or "(unnamed)" for ex in warnings))

add_col, defaults_col = st.columns(2)
if add_col.button("Add Exercise Group", use_container_width=True):
    apply(editor.add_group(settings))
if defaults_col.button("Restore Defaults", use_container_width=True):
    apply(editor.restore_defaults())
