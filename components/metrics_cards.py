"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_notifications(notifications: list[dict]):
    """Show queued controller notifications (e.g. selection limit warnings)."""
    for note in notifications:
        if note["level"] == "error":
            st.error(note["message"], icon="🔴")
        elif note["level"] == "warning":
            st.warning(note["message"], icon="🟡")
        else:
            st.info(note["message"], icon="🔵")
