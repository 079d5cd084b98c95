from dataclasses import dataclass, field
from typing import List

from models.seat import Seat


@dataclass
class SelectionChange:
    """Payload of the selection-changed notification."""
    selected_seats: List[Seat] = field(default_factory=list)  # same objects as the store
    total_price: int = 0

    @property
    def seat_ids(self) -> List[str]:
        return [s.seat_id for s in self.selected_seats]
