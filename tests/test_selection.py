"""Tests for the selection controller."""

import random
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.aircraft import AircraftConfig
from engine.layout import LayoutConfigError
from engine.selection import (
    SelectionController,
    SELECTED,
    DESELECTED,
    LIMIT_EXCEEDED,
    IGNORED,
)


class Recorder:
    """Collects notifications from controller listeners."""

    def __init__(self, controller):
        self.selections = []
        self.limits = []
        self.hovers = []
        controller.on_selection_change(self.selections.append)
        controller.on_limit_exceeded(self.limits.append)
        controller.on_hover(self.hovers.append)


def make_controller(blocked=None, max_selection=999, **kwargs):
    controller = SelectionController(
        blocked_seat_ids=blocked,
        max_selection=max_selection,
        rng=random.Random(0),
        **kwargs,
    )
    return controller, Recorder(controller)


class TestToggleSeat:
    def test_select_and_deselect(self):
        controller, rec = make_controller()
        assert controller.toggle_seat("12C") == SELECTED
        assert controller.store.get("12C").is_selected
        assert controller.selected_seat_ids == ["12C"]

        assert controller.toggle_seat("12C") == DESELECTED
        assert not controller.store.get("12C").is_selected
        assert controller.selected_seat_ids == []
        assert len(rec.selections) == 2

    def test_limit_scenario(self):
        controller, rec = make_controller(max_selection=2)
        assert controller.toggle_seat("1A") == SELECTED
        assert controller.toggle_seat("1B") == SELECTED
        assert controller.toggle_seat("1C") == LIMIT_EXCEEDED

        assert controller.selected_seat_ids == ["1A", "1B"]
        assert not controller.store.get("1C").is_selected
        assert controller.total_price == 2400
        assert rec.limits == [2]
        # Rejected toggle emits no selection change
        assert len(rec.selections) == 2
        assert rec.selections[-1].seat_ids == ["1A", "1B"]
        assert rec.selections[-1].total_price == 2400

    def test_selection_holds_store_references(self):
        controller, rec = make_controller()
        controller.toggle_seat("5D")
        assert controller.selected_seats[0] is controller.store.get("5D")
        assert rec.selections[0].selected_seats[0] is controller.store.get("5D")

    def test_blocked_seat_ignored(self):
        controller, rec = make_controller(blocked=["8A"])
        assert not controller.store.get("8A").is_available
        assert controller.toggle_seat("8A") == IGNORED
        assert controller.selected_seat_ids == []
        assert rec.selections == []

    def test_unknown_seat_ignored(self):
        controller, rec = make_controller()
        assert controller.toggle_seat("99Z") == IGNORED
        assert controller.toggle_seat("") == IGNORED
        assert rec.selections == []

    def test_deselect_when_saturated(self):
        controller, rec = make_controller(max_selection=1)
        controller.toggle_seat("3A")
        assert controller.is_saturated
        assert controller.toggle_seat("3A") == DESELECTED
        assert controller.selected_seat_ids == []

    def test_selection_order_preserved(self):
        controller, _ = make_controller()
        for sid in ["20A", "2B", "11F"]:
            controller.toggle_seat(sid)
        controller.toggle_seat("2B")
        controller.toggle_seat("4C")
        assert controller.selected_seat_ids == ["20A", "11F", "4C"]

    def test_display_rows_follow_toggle(self):
        controller, _ = make_controller()
        controller.toggle_seat("1A")
        row_1 = controller.display_rows[0]
        assert row_1["left_seats"][0]["seat_id"] == "1A"
        assert row_1["left_seats"][0]["is_selected"]
        assert row_1["left_seats"][0]["status"] == "selected"

    def test_random_sequences_respect_limit_and_availability(self):
        rng = random.Random(7)
        blocked = ["1A", "4C", "8A", "8B", "20D", "28F"]
        controller, _ = make_controller(blocked=blocked, max_selection=5)
        candidates = controller.store.seat_ids()[:40] + blocked + ["0X", "30A"]

        for _ in range(500):
            controller.toggle_seat(rng.choice(candidates))
            assert len(controller.selected_seats) <= 5
            assert all(s.is_available for s in controller.selected_seats)
            assert len(set(controller.selected_seat_ids)) == len(controller.selected_seats)
            flagged = {s.seat_id for s in controller.store.selected_seats()}
            assert flagged == set(controller.selected_seat_ids)


class TestMaxSelection:
    def test_lowering_limit_keeps_selection(self):
        controller, _ = make_controller()
        for sid in ["1A", "1B", "1C"]:
            controller.toggle_seat(sid)
        controller.set_max_selection(1)

        assert controller.selected_seat_ids == ["1A", "1B", "1C"]
        assert controller.toggle_seat("2A") == LIMIT_EXCEEDED
        assert controller.toggle_seat("1B") == DESELECTED
        assert controller.selected_seat_ids == ["1A", "1C"]

    def test_raising_limit_allows_more(self):
        controller, _ = make_controller(max_selection=1)
        controller.toggle_seat("1A")
        controller.set_max_selection(2)
        assert controller.toggle_seat("1B") == SELECTED

    @pytest.mark.parametrize("value", [0, -3, 1.5, "2", True])
    def test_invalid_limit(self, value):
        controller, _ = make_controller()
        with pytest.raises(ValueError):
            controller.set_max_selection(value)

    def test_invalid_limit_at_construction(self):
        with pytest.raises(ValueError):
            SelectionController(max_selection=0)


class TestHover:
    def test_hover_and_clear(self):
        controller, rec = make_controller()
        seat = controller.hover("3A")
        assert seat is controller.store.get("3A")
        assert controller.hovered_seat is seat
        controller.clear_hover()
        assert controller.hovered_seat is None
        assert rec.hovers == ["3A", None]

    def test_hover_unknown_seat_keeps_current_hover(self):
        controller, rec = make_controller()
        controller.hover("3A")
        assert controller.hover("77Q").seat_id == "3A"
        assert controller.hovered_seat.seat_id == "3A"
        assert rec.hovers == ["3A"]

    def test_hover_unknown_seat_without_prior_hover(self):
        controller, rec = make_controller()
        assert controller.hover("77Q") is None
        assert controller.hovered_seat is None
        assert rec.hovers == []

    def test_hover_does_not_mutate(self):
        controller, _ = make_controller(blocked=["3A"])
        controller.hover("3A")
        seat = controller.store.get("3A")
        assert not seat.is_available
        assert not seat.is_selected


class TestBlockedSeatUpdates:
    def test_newly_blocked_selected_seat_is_deselected(self):
        controller, rec = make_controller()
        controller.toggle_seat("5A")
        controller.toggle_seat("5B")

        evicted = controller.set_blocked_seats(["5A", "9C"])

        assert evicted == ["5A"]
        assert controller.selected_seat_ids == ["5B"]
        seat = controller.store.get("5A")
        assert not seat.is_available
        assert not seat.is_selected
        assert rec.selections[-1].seat_ids == ["5B"]
        assert rec.selections[-1].total_price == 350
        assert any(e.action == "force_deselect" and e.seat_id == "5A" for e in controller.audit_log)

    def test_block_without_selection_impact_is_silent(self):
        controller, rec = make_controller()
        controller.toggle_seat("5B")
        count = len(rec.selections)
        assert controller.set_blocked_seats(["9C"]) == []
        assert len(rec.selections) == count

    def test_unblocking_makes_seat_selectable(self):
        controller, _ = make_controller(blocked=["8A"])
        controller.set_blocked_seats([])
        assert controller.toggle_seat("8A") == SELECTED

    def test_display_updated_after_block(self):
        controller, _ = make_controller()
        controller.set_blocked_seats(["1A"])
        assert controller.display_rows[0]["left_seats"][0]["status"] == "occupied"


class TestRegenerate:
    def test_regenerate_clears_selection(self):
        controller, rec = make_controller()
        controller.toggle_seat("1A")
        controller.hover("1A")
        controller.regenerate(blocked_seat_ids=["1A"])

        assert controller.selected_seat_ids == []
        assert controller.hovered_seat is None
        assert not controller.store.get("1A").is_available
        assert rec.selections[-1].seat_ids == []

    def test_invalid_config_keeps_current_layout(self):
        controller, _ = make_controller()
        controller.toggle_seat("2A")
        bad = AircraftConfig(
            model_name="Broken",
            business_rows=(1, 3),
            economy_plus_rows=None,
            economy_rows=(6, 10),
            columns_per_section={
                "business": (["A", "B"], ["C", "D"]),
                "economy": (["A", "B", "C"], ["D", "E", "F"]),
            },
        )
        with pytest.raises(LayoutConfigError):
            controller.regenerate(config=bad)

        assert len(controller.store) == 162
        assert controller.config.model_name == "Boeing 737-800"
        assert controller.selected_seat_ids == ["2A"]

    def test_heat_map_toggle(self):
        controller, _ = make_controller()
        assert controller.toggle_heat_map() is True
        seat = controller.display_rows[0]["left_seats"][0]
        assert "heat-map-seat" in seat["computed_class"]
        assert controller.toggle_heat_map() is False
        assert controller.display_rows[0]["left_seats"][0]["heat_map_style"] == ""

    def test_audit_trail(self):
        controller, _ = make_controller(max_selection=1)
        controller.toggle_seat("1A")
        controller.toggle_seat("1B")
        controller.toggle_seat("1A")
        actions = [e.action for e in controller.audit_log]
        assert actions == ["regenerate", "select", "limit_exceeded", "deselect"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
