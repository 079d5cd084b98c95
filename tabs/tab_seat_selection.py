"""Tab 1: Seat Selection — pick seats on the cabin map."""

import streamlit as st

from data.session_store import get_controller, get_last_selection, pop_notifications
from components.seat_map import render_seat_grid, render_seat_info, render_legend, render_heat_map_grid
from components.metrics_cards import render_metric_row, render_notifications
from components.tables import render_selection_table
from engine.view import summarize_cabin


def render(sidebar_state):
    """Render the Seat Selection tab."""
    controller = get_controller()
    last = get_last_selection()
    st.header(f"Select Your Seats — {controller.config.model_name}")

    render_notifications(pop_notifications())

    summary = summarize_cabin(controller.store)
    render_metric_row([
        {"label": "Available", "value": summary["available_seats"]},
        {"label": "Occupied", "value": summary["occupied_seats"]},
        {"label": "Selected", "value": f"{summary['selected_seats']} / {controller.max_selection}"},
        {"label": "Total Price", "value": f"${last.total_price:,}"},
    ])

    render_legend(sidebar_state.show_heat_map)
    st.divider()

    col_map, col_info = st.columns([3, 1])

    with col_map:
        if sidebar_state.show_heat_map:
            render_heat_map_grid(controller.display_rows)
            st.divider()
        render_seat_grid(controller)

    with col_info:
        # Hover stand-in: inspecting a seat sets the controller's hovered seat
        options = ["—"] + controller.store.seat_ids()
        current = controller.hovered_seat.seat_id if controller.hovered_seat else "—"
        inspected = st.selectbox("Inspect seat", options, index=options.index(current), key="inspect_seat")
        if inspected == "—":
            if controller.hovered_seat is not None:
                controller.clear_hover()
        elif controller.hovered_seat is None or controller.hovered_seat.seat_id != inspected:
            controller.hover(inspected)

        render_seat_info(last.selected_seats, controller.hovered_seat, last.total_price)
        st.divider()
        render_selection_table(last.selected_seats)
