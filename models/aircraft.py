from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class CabinSection:
    """A contiguous range of rows sharing a seat class and column layout."""
    seat_class: str
    first_row: int
    last_row: int
    left_columns: List[str]
    right_columns: List[str]

    @property
    def row_numbers(self) -> range:
        return range(self.first_row, self.last_row + 1)

    @property
    def seats_per_row(self) -> int:
        return len(self.left_columns) + len(self.right_columns)

    @property
    def layout_label(self) -> str:
        return f"{len(self.left_columns)}-{len(self.right_columns)}"


@dataclass
class AircraftConfig:
    model_name: str
    business_rows: Optional[Tuple[int, int]]        # inclusive (first, last), None = no section
    economy_plus_rows: Optional[Tuple[int, int]]
    economy_rows: Optional[Tuple[int, int]]
    columns_per_section: Dict[str, Tuple[List[str], List[str]]]  # class -> (left, right)
    emergency_row_numbers: List[int] = field(default_factory=list)

    def sections(self) -> List[CabinSection]:
        """Cabin sections in front-to-back order, skipping absent ones."""
        ranges = [
            ("business", self.business_rows),
            ("economy-plus", self.economy_plus_rows),
            ("economy", self.economy_rows),
        ]
        result = []
        for seat_class, bounds in ranges:
            if bounds is None:
                continue
            left, right = self.columns_per_section.get(seat_class, ([], []))
            result.append(CabinSection(
                seat_class=seat_class,
                first_row=int(bounds[0]),
                last_row=int(bounds[1]),
                left_columns=list(left),
                right_columns=list(right),
            ))
        return result

    @property
    def total_rows(self) -> int:
        return sum(len(s.row_numbers) for s in self.sections())

    @property
    def total_seats(self) -> int:
        return sum(len(s.row_numbers) * s.seats_per_row for s in self.sections())
