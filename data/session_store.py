"""Typed wrapper around st.session_state for the seat map controller."""

import streamlit as st
from typing import List, Optional

from models.aircraft import AircraftConfig
from models.selection import SelectionChange
from engine.selection import SelectionController
from config.defaults import DEFAULT_MAX_SELECTION


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "controller": None,
        "last_selection": SelectionChange(),
        "notifications": [],
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if st.session_state["controller"] is None:
        create_controller()


def create_controller(
    config: Optional[AircraftConfig] = None,
    blocked_seat_ids: Optional[List[str]] = None,
    max_selection: int = DEFAULT_MAX_SELECTION,
) -> SelectionController:
    """Build a fresh controller and wire its notifications into session state."""
    controller = SelectionController(
        config=config,
        blocked_seat_ids=blocked_seat_ids,
        max_selection=max_selection,
    )
    controller.on_selection_change(set_last_selection)
    controller.on_limit_exceeded(
        lambda limit: add_notification(f"You can only select {limit} seat(s)", "warning")
    )
    st.session_state["controller"] = controller
    st.session_state["last_selection"] = SelectionChange()
    return controller


# --- Getters ---

def get_controller() -> SelectionController:
    return st.session_state["controller"]


def get_last_selection() -> SelectionChange:
    return st.session_state.get("last_selection", SelectionChange())


# --- Setters ---

def set_last_selection(change: SelectionChange):
    st.session_state["last_selection"] = change


# --- Notifications ---

def add_notification(message: str, level: str = "info"):
    st.session_state["notifications"].append({"message": message, "level": level})


def pop_notifications() -> List[dict]:
    notes = st.session_state.get("notifications", [])
    st.session_state["notifications"] = []
    return notes
