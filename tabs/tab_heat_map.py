"""Tab 2: Popularity — predicted seat demand across the cabin."""

import streamlit as st
import pandas as pd

from data.session_store import get_controller
from engine.view import popularity_matrix, summarize_cabin
from engine.popularity import heat_map_bucket
from components.charts import popularity_heatmap, class_popularity_bar, occupancy_donut, score_distribution


def render(sidebar_state):
    """Render the Popularity tab."""
    st.header("Seat Popularity")
    controller = get_controller()
    seats = controller.store.seats()

    if not seats:
        st.info("No aircraft loaded. Please load one in the Admin tab.")
        return

    col1, col2 = st.columns([3, 2])

    with col1:
        matrix = popularity_matrix(controller.rows, controller.store)
        st.plotly_chart(popularity_heatmap(matrix), use_container_width=True)

    with col2:
        summary = summarize_cabin(controller.store)
        st.plotly_chart(
            occupancy_donut(summary["occupied_seats"], summary["total_seats"]),
            use_container_width=True,
        )
        st.plotly_chart(class_popularity_bar(summary["avg_popularity_by_class"]), use_container_width=True)

    st.plotly_chart(score_distribution([s.popularity_score for s in seats]), use_container_width=True)

    st.divider()

    # --- Most wanted seats still open ---
    st.subheader("Most Popular Open Seats")
    open_seats = sorted(
        (s for s in seats if s.is_available and not s.is_selected),
        key=lambda s: (-s.popularity_score, s.row, s.letter),
    )
    top = pd.DataFrame([{
        "Seat": s.seat_id,
        "Class": s.seat_class_label,
        "Position": s.position_label,
        "Score": s.popularity_score,
        "Demand": heat_map_bucket(s.popularity_score),
        "Price": s.price,
    } for s in open_seats[:15]])
    if not top.empty:
        st.dataframe(top, use_container_width=True, hide_index=True)
    else:
        st.success("Every seat is taken.")
