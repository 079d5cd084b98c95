"""Tests for derived view recomputation."""

import math
import random
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.seat_store import SeatStore
from engine.layout import generate_layout, reference_aircraft_config
from engine.popularity import apply_popularity_scores, heat_map_color
from engine.view import (
    build_display_rows,
    group_rows_by_class,
    summarize_cabin,
    popularity_matrix,
    format_selected_seats,
    seat_display_class,
    seat_heat_map_style,
)


def make_cabin(blocked=None, seed=11):
    store = SeatStore()
    rows = generate_layout(reference_aircraft_config(), blocked or [], store)
    apply_popularity_scores(store, random.Random(seed))
    return rows, store


class TestBuildDisplayRows:
    def test_idempotent(self):
        rows, store = make_cabin(blocked=["2B", "14E"])
        store.get("3A").is_selected = True
        for show_heat_map in (False, True):
            first = build_display_rows(rows, store, show_heat_map)
            second = build_display_rows(rows, store, show_heat_map)
            assert first == second

    def test_reads_current_store_state(self):
        rows, store = make_cabin()
        before = build_display_rows(rows, store, False)
        store.get("1A").is_selected = True
        after = build_display_rows(rows, store, False)

        assert before[0]["left_seats"][0]["is_selected"] is False
        assert after[0]["left_seats"][0]["is_selected"] is True

    def test_snapshots_are_copies(self):
        rows, store = make_cabin()
        display = build_display_rows(rows, store, False)
        display[0]["left_seats"][0]["is_selected"] = True
        assert not store.get("1A").is_selected

    def test_row_annotations(self):
        rows, store = make_cabin()
        display = build_display_rows(rows, store, False)
        by_number = {r["row_number"]: r for r in display}

        assert by_number[1]["aisle_class"] == "aisle business-aisle"
        assert by_number[1]["is_business_class"]
        assert by_number[5]["aisle_class"] == "aisle"
        assert by_number[5]["is_economy_plus"]
        assert by_number[8]["row_class"] == "seat-row emergency-row"
        assert by_number[9]["row_class"] == "seat-row"
        assert by_number[20]["is_emergency_row"]
        assert by_number[28]["is_economy"]
        assert len(by_number[2]["left_seats"]) == 2
        assert len(by_number[12]["right_seats"]) == 3

    def test_heat_map_only_on_available_seats(self):
        rows, store = make_cabin(blocked=["1A"])
        display = build_display_rows(rows, store, True)
        blocked_seat, open_seat = display[0]["left_seats"]

        assert blocked_seat["computed_class"] == "business"
        assert blocked_seat["heat_map_style"] == ""
        assert blocked_seat["heat_map_color"] is None
        assert open_seat["computed_class"] == "business heat-map-seat"
        color = heat_map_color(store.get("1B").popularity_score)
        assert open_seat["heat_map_style"] == f"background: {color} !important;"

    def test_heat_map_off(self):
        rows, store = make_cabin()
        display = build_display_rows(rows, store, False)
        for row in display:
            for seat in row["left_seats"] + row["right_seats"]:
                assert seat["computed_class"] == seat["seat_class"]
                assert seat["heat_map_style"] == ""


class TestSeatAnnotations:
    def test_display_class_and_style(self):
        _, store = make_cabin()
        seat = store.get("10B")
        assert seat_display_class(seat, False) == "economy"
        assert seat_display_class(seat, True) == "economy heat-map-seat"
        assert seat_heat_map_style(seat, False) == ""
        seat.is_available = False
        assert seat_display_class(seat, True) == "economy"


class TestGroupingAndSummary:
    def test_group_rows_by_class(self):
        rows, store = make_cabin()
        grouped = group_rows_by_class(build_display_rows(rows, store, False))
        assert [len(grouped[c]) for c in ["business", "economy-plus", "economy"]] == [3, 5, 20]

    def test_summarize_cabin(self):
        rows, store = make_cabin(blocked=["1A", "1B", "9C"])
        store.get("4A").is_selected = True
        summary = summarize_cabin(store)

        assert summary["total_seats"] == 162
        assert summary["available_seats"] == 159
        assert summary["occupied_seats"] == 3
        assert summary["selected_seats"] == 1
        assert set(summary["avg_popularity_by_class"]) == {"business", "economy-plus", "economy"}

    def test_summarize_empty_store(self):
        summary = summarize_cabin(SeatStore())
        assert summary["total_seats"] == 0
        assert summary["occupancy_pct"] == 0

    def test_popularity_matrix(self):
        rows, store = make_cabin()
        matrix = popularity_matrix(rows, store)

        assert matrix.shape == (28, 6)
        assert list(matrix.columns) == ["A", "B", "C", "D", "E", "F"]
        assert matrix.loc[12, "C"] == store.get("12C").popularity_score
        assert math.isnan(matrix.loc[1, "E"])

    def test_format_selected_seats(self):
        _, store = make_cabin()
        assert format_selected_seats([store.get("1A"), store.get("1B")]) == "1A, 1B"
        assert format_selected_seats([]) == ""


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
