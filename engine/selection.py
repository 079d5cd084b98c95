"""Seat selection controller — owns the seat store, selection list and hover state."""

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from loguru import logger

from models.aircraft import AircraftConfig
from models.audit import AuditEntry
from models.seat import Row, Seat
from models.selection import SelectionChange
from data.seat_store import SeatStore
from engine.layout import generate_layout, reference_aircraft_config
from engine.popularity import apply_popularity_scores
from engine.view import build_display_rows
from config.defaults import DEFAULT_MAX_SELECTION


# toggle_seat outcomes
SELECTED = "selected"
DESELECTED = "deselected"
LIMIT_EXCEEDED = "limit_exceeded"
IGNORED = "ignored"


class SelectionController:
    """Stateful core of the seat map.

    Every mutation of seat state goes through this object. Display rows are
    rebuilt from the store after each change and handed out as read-only
    snapshots; listeners are called synchronously, in registration order.
    """

    def __init__(
        self,
        config: Optional[AircraftConfig] = None,
        blocked_seat_ids: Optional[Iterable[str]] = None,
        max_selection: int = DEFAULT_MAX_SELECTION,
        show_heat_map: bool = False,
        rng=None,
        store: Optional[SeatStore] = None,
        popularity_weights: Optional[dict] = None,
    ):
        self.config = config or reference_aircraft_config()
        self.blocked_seat_ids: List[str] = list(blocked_seat_ids or [])
        self.max_selection = _check_max_selection(max_selection)
        self.show_heat_map = show_heat_map
        self.rng = rng
        self.popularity_weights = popularity_weights
        self.store = store if store is not None else SeatStore()

        self.rows: List[Row] = []
        self.selected_seats: List[Seat] = []
        self.hovered_seat: Optional[Seat] = None
        self.display_rows: List[dict] = []
        self.audit_log: List[AuditEntry] = []

        self._selection_listeners: List[Callable[[SelectionChange], None]] = []
        self._limit_listeners: List[Callable[[int], None]] = []
        self._hover_listeners: List[Callable[[Optional[str]], None]] = []

        self.regenerate()

    # --- Listener registration ---

    def on_selection_change(self, callback: Callable[[SelectionChange], None]):
        self._selection_listeners.append(callback)

    def on_limit_exceeded(self, callback: Callable[[int], None]):
        self._limit_listeners.append(callback)

    def on_hover(self, callback: Callable[[Optional[str]], None]):
        self._hover_listeners.append(callback)

    # --- Derived data ---

    @property
    def selected_seat_ids(self) -> List[str]:
        return [s.seat_id for s in self.selected_seats]

    @property
    def total_price(self) -> int:
        return sum(s.price for s in self.selected_seats)

    @property
    def is_saturated(self) -> bool:
        return len(self.selected_seats) >= self.max_selection

    def selection_change(self) -> SelectionChange:
        return SelectionChange(selected_seats=list(self.selected_seats), total_price=self.total_price)

    def refresh_display(self) -> List[dict]:
        self.display_rows = build_display_rows(self.rows, self.store, self.show_heat_map)
        return self.display_rows

    # --- Layout lifecycle ---

    def regenerate(
        self,
        config: Optional[AircraftConfig] = None,
        blocked_seat_ids: Optional[Iterable[str]] = None,
    ) -> List[Row]:
        """Rebuild the whole cabin, rescore it, and drop selection and hover.

        A malformed profile raises LayoutConfigError and leaves the current
        layout untouched.
        """
        config = config or self.config
        blocked = list(blocked_seat_ids) if blocked_seat_ids is not None else self.blocked_seat_ids

        rows = generate_layout(config, blocked, self.store)

        self.config = config
        self.blocked_seat_ids = blocked
        self.rows = rows
        had_selection = bool(self.selected_seats)
        self.selected_seats = []
        self.hovered_seat = None

        apply_popularity_scores(self.store, self.rng, self.popularity_weights)
        self.refresh_display()
        self._audit("regenerate", None, f"{config.model_name}: {len(self.store)} seats, {len(blocked)} blocked")
        logger.info(f"Seat map regenerated for {config.model_name} ({len(self.store)} seats)")

        if had_selection:
            self._notify_selection()
        return rows

    # --- Interactions ---

    def toggle_seat(self, seat_id: str) -> str:
        seat = self.store.get(seat_id)
        if seat is None or not seat.is_available:
            logger.debug(f"Ignoring toggle of {'unknown' if seat is None else 'unavailable'} seat {seat_id}")
            return IGNORED

        idx = next((i for i, s in enumerate(self.selected_seats) if s.seat_id == seat_id), None)
        if idx is not None:
            self.selected_seats.pop(idx)
            seat.is_selected = False
            outcome = DESELECTED
        else:
            if len(self.selected_seats) >= self.max_selection:
                logger.warning(f"Selection limit of {self.max_selection} reached; {seat_id} not selected")
                self._audit("limit_exceeded", seat_id, f"limit {self.max_selection}")
                for callback in self._limit_listeners:
                    callback(self.max_selection)
                return LIMIT_EXCEEDED
            self.selected_seats.append(seat)
            seat.is_selected = True
            outcome = SELECTED

        self._audit("select" if outcome == SELECTED else "deselect", seat_id, f"price {seat.price}")
        self.refresh_display()
        self._notify_selection()
        return outcome

    def hover(self, seat_id: str) -> Optional[Seat]:
        """Track the hovered seat. Unknown ids leave the current hover as is."""
        seat = self.store.get(seat_id)
        if seat is None:
            logger.debug(f"Ignoring hover of unknown seat {seat_id}")
            return self.hovered_seat
        self.hovered_seat = seat
        for callback in self._hover_listeners:
            callback(seat.seat_id)
        return seat

    def clear_hover(self):
        self.hovered_seat = None
        for callback in self._hover_listeners:
            callback(None)

    # --- Configuration updates ---

    def set_max_selection(self, n: int):
        """Change the limit for later toggles. Seats already selected are kept."""
        old = self.max_selection
        self.max_selection = _check_max_selection(n)
        if old != self.max_selection:
            self._audit("max_selection", None, f"{old} -> {self.max_selection}")

    def set_blocked_seats(self, blocked_seat_ids: Iterable[str]) -> List[str]:
        """Recompute availability in place.

        Selected seats that become blocked are deselected. Returns the ids that
        were force-deselected.
        """
        self.blocked_seat_ids = list(blocked_seat_ids or [])
        self.store.apply_blocked(self.blocked_seat_ids)

        evicted = [s for s in self.selected_seats if not s.is_available]
        for seat in evicted:
            seat.is_selected = False
            self._audit("force_deselect", seat.seat_id, "seat became blocked")
        if evicted:
            self.selected_seats = [s for s in self.selected_seats if s.is_available]
            logger.info(f"Deselected newly blocked seats: {[s.seat_id for s in evicted]}")

        self.refresh_display()
        if evicted:
            self._notify_selection()
        return [s.seat_id for s in evicted]

    def set_heat_map(self, enabled: bool):
        self.show_heat_map = bool(enabled)
        self.refresh_display()

    def toggle_heat_map(self) -> bool:
        self.set_heat_map(not self.show_heat_map)
        return self.show_heat_map

    # --- Internals ---

    def _notify_selection(self):
        change = self.selection_change()
        for callback in self._selection_listeners:
            callback(change)

    def _audit(self, action: str, seat_id: Optional[str], detail: str = ""):
        self.audit_log.append(AuditEntry(
            timestamp=datetime.now(),
            action=action,
            seat_id=seat_id,
            detail=detail,
        ))


def _check_max_selection(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"max_selection must be a positive integer (got {n!r})")
    return n
