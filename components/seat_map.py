"""Seat grid, seat info panel and legend widgets."""

import streamlit as st
from typing import List, Optional

from engine.selection import SelectionController
from engine.popularity import HEAT_MAP_LEGEND
from engine.explainer import explain_popularity
from engine.view import group_rows_by_class, format_selected_seats
from models.seat import Seat
from config.defaults import LEGEND_ITEMS

SECTION_TITLES = {
    "business": "Business Class",
    "economy-plus": "Economy Plus",
    "economy": "Economy",
}


def _seat_help(seat: dict) -> str:
    parts = [
        f"Seat {seat['seat_id']}",
        seat["seat_class"].replace("-", " ").title(),
        seat["position"].capitalize(),
        f"${seat['price']:,}",
    ]
    if seat["is_emergency_exit"]:
        parts.append("Exit row")
    if seat["heat_map_color"]:
        parts.append(f"Popularity {seat['popularity_score']}")
    return " · ".join(parts)


def _seat_label(seat: dict) -> str:
    if seat["status"] == "occupied":
        return "✖"
    if seat["status"] == "selected":
        return f"✔ {seat['letter']}"
    return seat["letter"]


def _render_seat_button(controller: SelectionController, seat: dict):
    st.button(
        _seat_label(seat),
        key=f"seat_{seat['seat_id']}",
        help=_seat_help(seat),
        disabled=seat["status"] == "occupied",
        type="primary" if seat["status"] == "selected" else "secondary",
        on_click=controller.toggle_seat,
        args=(seat["seat_id"],),
        use_container_width=True,
    )


def _render_heat_cells(seats: List[dict]) -> str:
    cells = []
    for seat in seats:
        style = seat["heat_map_style"] or "background: #B0B0B0;"
        cells.append(
            f"<span class='{seat['computed_class']}' title='{seat['seat_id']}' "
            f"style='display:inline-block;width:28px;height:22px;margin:1px;border-radius:4px;"
            f"font-size:10px;text-align:center;{style}'>{seat['letter']}</span>"
        )
    return "".join(cells)


def render_heat_map_grid(display_rows: List[dict]):
    """Compact HTML rendering of the cabin colored by popularity."""
    lines = []
    for row in display_rows:
        marker = " 🚪" if row["is_emergency_row"] else ""
        lines.append(
            f"<div class='{row['row_class']}' style='white-space:nowrap'>"
            f"<span style='display:inline-block;width:28px'>{row['row_number']}</span>"
            f"{_render_heat_cells(row['left_seats'])}"
            f"<span class='{row['aisle_class']}' style='display:inline-block;width:20px'></span>"
            f"{_render_heat_cells(row['right_seats'])}{marker}</div>"
        )
    st.markdown("".join(lines), unsafe_allow_html=True)


def render_seat_grid(controller: SelectionController):
    """One button per seat, grouped by cabin section."""
    grouped = group_rows_by_class(controller.display_rows)
    for seat_class, rows in grouped.items():
        if not rows:
            continue
        st.markdown(f"#### {SECTION_TITLES.get(seat_class, seat_class)}")
        for row in rows:
            n_left, n_right = len(row["left_seats"]), len(row["right_seats"])
            cols = st.columns([1] + [2] * n_left + [1] + [2] * n_right + [1])
            with cols[0]:
                st.markdown(f"**{row['row_number']}**")
            for i, seat in enumerate(row["left_seats"]):
                with cols[1 + i]:
                    _render_seat_button(controller, seat)
            for i, seat in enumerate(row["right_seats"]):
                with cols[2 + n_left + i]:
                    _render_seat_button(controller, seat)
            if row["is_emergency_row"]:
                with cols[-1]:
                    st.caption("EXIT")


def render_seat_info(selected: List[Seat], hovered: Optional[Seat], total_price: int):
    """Selected seats summary and details of the inspected seat."""
    st.subheader("Your Seats")
    if selected:
        st.write(format_selected_seats(selected))
        st.metric("Total Price", f"${total_price:,}")
    else:
        st.caption("Click an available seat to select it.")

    if hovered is not None:
        st.divider()
        st.markdown(f"**Seat {hovered.seat_id}**")
        st.caption(f"{hovered.seat_class_label} · {hovered.position_label} · ${hovered.price:,}")
        if hovered.is_emergency_exit:
            st.caption("Emergency exit row")
        with st.expander("Why this popularity score?"):
            for step in explain_popularity(hovered):
                st.write(step)


def render_legend(show_heat_map: bool):
    items = HEAT_MAP_LEGEND if show_heat_map else LEGEND_ITEMS
    chips = "".join(
        f"<span style='display:inline-block;margin-right:12px'>"
        f"<span style='display:inline-block;width:14px;height:14px;border-radius:3px;"
        f"vertical-align:middle;background:{item['color']}'></span> {item['label']}</span>"
        for item in items
    )
    st.markdown(chips, unsafe_allow_html=True)
