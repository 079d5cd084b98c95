"""Global sidebar controls for selection limit and heat-map mode."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import get_controller


@dataclass
class SidebarState:
    max_selection: int
    show_heat_map: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    controller = get_controller()
    with st.sidebar:
        st.title("Cabin Seat Map")
        st.caption(controller.config.model_name)
        st.divider()

        max_selection = st.number_input(
            "Max seats to select",
            min_value=1,
            max_value=999,
            value=controller.max_selection,
            step=1,
            key="sidebar_max_selection",
        )
        if int(max_selection) != controller.max_selection:
            controller.set_max_selection(int(max_selection))
            if len(controller.selected_seats) > controller.max_selection:
                st.info("Already-selected seats above the new limit are kept.")

        show_heat_map = st.toggle(
            "Show popularity heat map",
            value=controller.show_heat_map,
            key="sidebar_heat_map",
        )
        if show_heat_map != controller.show_heat_map:
            controller.set_heat_map(show_heat_map)

        st.divider()

        if len(controller.store):
            st.success(f"{len(controller.store)} seats loaded")
        else:
            st.warning("No aircraft loaded — go to Admin tab")

        st.caption(f"Selected: {len(controller.selected_seats)} / {controller.max_selection}")
        st.caption(f"Blocked: {len(controller.blocked_seat_ids)}")

    return SidebarState(
        max_selection=controller.max_selection,
        show_heat_map=controller.show_heat_map,
    )
