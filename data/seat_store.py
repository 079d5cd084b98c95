"""Keyed collection of Seat entities — the single source of truth for seat state."""

from typing import Dict, Iterable, Iterator, List, Optional

from models.seat import Seat


class SeatStore:
    """Mapping from seat id to Seat.

    Seats are mutated in place by the selection controller and the popularity
    scorer. A layout regeneration swaps in a fully built mapping in one step, so
    callers never see a half-built store.
    """

    def __init__(self, seats: Optional[Iterable[Seat]] = None):
        self._seats: Dict[str, Seat] = {}
        if seats is not None:
            self.replace_all(seats)

    def get(self, seat_id: str) -> Optional[Seat]:
        return self._seats.get(seat_id)

    def __contains__(self, seat_id) -> bool:
        return seat_id in self._seats

    def __len__(self) -> int:
        return len(self._seats)

    def __iter__(self) -> Iterator[str]:
        return iter(self._seats)

    def seats(self) -> List[Seat]:
        """All seats in generation order."""
        return list(self._seats.values())

    def seat_ids(self) -> List[str]:
        return list(self._seats.keys())

    def replace_all(self, seats: Iterable[Seat]):
        """Clear and rebuild from scratch. Raises ValueError on duplicate ids."""
        rebuilt: Dict[str, Seat] = {}
        for seat in seats:
            if seat.seat_id in rebuilt:
                raise ValueError(f"Duplicate seat id: {seat.seat_id}")
            rebuilt[seat.seat_id] = seat
        self._seats = rebuilt

    def clear(self):
        self._seats = {}

    def apply_blocked(self, blocked_seat_ids: Iterable[str]) -> List[str]:
        """Recompute availability from a blocked-id list.

        Returns ids of seats that went from available to blocked.
        """
        blocked = set(blocked_seat_ids or [])
        newly_blocked = []
        for seat_id, seat in self._seats.items():
            is_available = seat_id not in blocked
            if seat.is_available and not is_available:
                newly_blocked.append(seat_id)
            seat.is_available = is_available
        return newly_blocked

    def available_seats(self) -> List[Seat]:
        return [s for s in self._seats.values() if s.is_available]

    def selected_seats(self) -> List[Seat]:
        return [s for s in self._seats.values() if s.is_selected]
