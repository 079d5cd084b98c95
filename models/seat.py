from dataclasses import dataclass, field
from typing import List


@dataclass
class Seat:
    seat_id: str                  # f"{row}{letter}", e.g. "12C"
    row: int
    letter: str
    seat_class: str               # "business", "economy-plus", "economy"
    position: str                 # "window", "middle", "aisle"
    price: int
    is_emergency_exit: bool = False
    is_available: bool = True
    is_selected: bool = False
    popularity_score: int = 0     # 0-100

    @property
    def seat_class_label(self) -> str:
        """Display name of the class, e.g. 'Economy Plus'."""
        return self.seat_class.replace("-", " ").title()

    @property
    def position_label(self) -> str:
        return self.position.capitalize()

    @property
    def status(self) -> str:
        if not self.is_available:
            return "occupied"
        if self.is_selected:
            return "selected"
        return "available"


@dataclass
class Row:
    """One cabin row. Holds seat ids only; seat data lives in the SeatStore."""
    row_number: int
    seat_class: str
    left_seat_ids: List[str] = field(default_factory=list)
    right_seat_ids: List[str] = field(default_factory=list)
    is_emergency_row: bool = False

    @property
    def is_business_class(self) -> bool:
        return self.seat_class == "business"

    @property
    def is_economy_plus(self) -> bool:
        return self.seat_class == "economy-plus"

    @property
    def is_economy(self) -> bool:
        return self.seat_class == "economy"

    @property
    def seat_ids(self) -> List[str]:
        return self.left_seat_ids + self.right_seat_ids
