"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List

from models.audit import AuditEntry
from models.seat import Seat


def selected_seats_df(seats: List[Seat]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Seat": s.seat_id,
        "Class": s.seat_class_label,
        "Position": s.position_label,
        "Exit Row": "Yes" if s.is_emergency_exit else "",
        "Price": s.price,
    } for s in seats])


def render_selection_table(seats: List[Seat]):
    """Selected seats in selection order, with a price total."""
    if not seats:
        st.caption("No seats selected.")
        return
    df = selected_seats_df(seats)
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.markdown(f"**Total: ${df['Price'].sum():,}**")


def render_audit_table(entries: List[AuditEntry]):
    """Render the selection activity log, newest first, with highlighted warnings."""
    if not entries:
        st.caption("No activity yet.")
        return

    df = pd.DataFrame([{
        "Time": e.timestamp.strftime("%H:%M:%S"),
        "Action": e.action,
        "Seat": e.seat_id or "—",
        "Detail": e.detail,
    } for e in reversed(entries)])

    def color_action(val):
        if val in ("limit_exceeded", "force_deselect"):
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        if val == "select":
            return "color: #155724; font-weight: bold"
        return ""

    styled = df.style.map(color_action, subset=["Action"])
    st.dataframe(styled, use_container_width=True, hide_index=True)
