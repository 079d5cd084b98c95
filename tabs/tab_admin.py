"""Tab 3: Admin — aircraft profile, blocked seats and activity log."""

import streamlit as st

from data.loader import (
    load_file, load_aircraft_config_json, parse_sections_df, parse_blocked_seats,
)
from data.validator import validate_sections_df, validate_blocked_seats
from data.sample_data import generate_sections_df, generate_blocked_seats
from data.session_store import get_controller, create_controller, add_notification
from engine.layout import LayoutConfigError, reference_aircraft_config
from components.tables import render_audit_table


def _apply_config(config):
    controller = get_controller()
    try:
        create_controller(
            config=config,
            blocked_seat_ids=controller.blocked_seat_ids,
            max_selection=controller.max_selection,
        )
    except LayoutConfigError as e:
        st.error(str(e))
        return False
    st.success(f"Loaded {config.model_name}: {config.total_rows} rows, {config.total_seats} seats.")
    return True


def _render_profile_section():
    st.subheader("Aircraft Profile")
    profile_file = st.file_uploader(
        "Sections table (CSV/XLSX) or profile JSON",
        type=["csv", "xlsx", "json"],
        key="upload_profile",
    )
    model_name = st.text_input("Model name (tables only)", value="Custom Aircraft", key="profile_model")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload_profile"):
            if not profile_file:
                st.warning("Please upload a profile file.")
            elif profile_file.name.lower().endswith(".json"):
                try:
                    _apply_config(load_aircraft_config_json(profile_file))
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
            else:
                try:
                    df = load_file(profile_file)
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
                    return
                result = validate_sections_df(df)
                for w in result.warnings:
                    st.warning(w)
                if not result.is_valid:
                    for e in result.errors:
                        st.error(e)
                else:
                    try:
                        _apply_config(parse_sections_df(df, model_name))
                    except ValueError as e:
                        st.error(f"Error loading file: {e}")

    with col_sample:
        if st.button("Load Boeing 737-800", key="btn_sample_profile"):
            _apply_config(reference_aircraft_config())

    with st.expander("Sample sections table"):
        st.dataframe(generate_sections_df(), use_container_width=True, hide_index=True)


def _render_blocked_section():
    controller = get_controller()
    st.subheader("Blocked Seats")
    text = st.text_area(
        "Blocked seat ids (comma or newline separated)",
        value=", ".join(controller.blocked_seat_ids),
        key="blocked_text",
    )

    col_apply, col_random, col_clear = st.columns(3)
    with col_apply:
        if st.button("Apply", type="primary", key="btn_apply_blocked"):
            ids = parse_blocked_seats(text)
            for w in validate_blocked_seats(ids, controller.store).warnings:
                st.warning(w)
            evicted = controller.set_blocked_seats(ids)
            if evicted:
                add_notification(f"Seats no longer available were removed: {', '.join(evicted)}", "warning")
            st.success(f"{len(ids)} seats blocked.")
    with col_random:
        if st.button("Simulate bookings (30%)", key="btn_random_blocked"):
            evicted = controller.set_blocked_seats(generate_blocked_seats(controller.store.seat_ids()))
            if evicted:
                add_notification(f"Seats no longer available were removed: {', '.join(evicted)}", "warning")
    with col_clear:
        if st.button("Clear", key="btn_clear_blocked"):
            controller.set_blocked_seats([])


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")
    _render_profile_section()
    st.divider()
    _render_blocked_section()
    st.divider()

    st.subheader("Activity Log")
    if st.button("Regenerate seat map", key="btn_regenerate"):
        get_controller().regenerate()
    render_audit_table(get_controller().audit_log)
