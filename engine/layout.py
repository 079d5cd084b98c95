"""Cabin layout generation — rows, sections and seat entities from an aircraft profile."""

from typing import Iterable, List, Optional, Tuple

from loguru import logger

from models.aircraft import AircraftConfig, CabinSection
from models.seat import Row, Seat
from data.seat_store import SeatStore
from config.defaults import (
    SEAT_CLASSES, SEAT_PRICES, DEFAULT_SEAT_PRICE,
    MIN_SEATS_PER_SIDE, MAX_SEATS_PER_SIDE, REFERENCE_AIRCRAFT,
)


class LayoutConfigError(ValueError):
    """Raised when an aircraft profile cannot produce a valid cabin."""


def reference_aircraft_config() -> AircraftConfig:
    """The built-in Boeing 737-800 profile."""
    ref = REFERENCE_AIRCRAFT
    return AircraftConfig(
        model_name=ref["model_name"],
        business_rows=ref["business_rows"],
        economy_plus_rows=ref["economy_plus_rows"],
        economy_rows=ref["economy_rows"],
        columns_per_section={k: (list(l), list(r)) for k, (l, r) in ref["columns_per_section"].items()},
        emergency_row_numbers=list(ref["emergency_row_numbers"]),
    )


def get_seat_price(seat_class: str) -> int:
    return SEAT_PRICES.get(seat_class, DEFAULT_SEAT_PRICE)


def position_for_column(index: int, side_size: int, side: str) -> str:
    """Map a column's index within one side of the aisle to window/middle/aisle.

    Left side runs window -> aisle, right side runs aisle -> window.
    """
    outer = 0 if side == "left" else side_size - 1
    inner = side_size - 1 if side == "left" else 0
    if index == outer:
        return "window"
    if index == inner:
        return "aisle"
    return "middle"


def _validate_section(section: CabinSection) -> List[str]:
    errors = []
    label = section.seat_class
    if section.first_row < 1:
        errors.append(f"{label}: first row must be >= 1 (got {section.first_row})")
    if section.last_row < section.first_row:
        errors.append(f"{label}: last row {section.last_row} is before first row {section.first_row}")

    for side, columns in (("left", section.left_columns), ("right", section.right_columns)):
        if not MIN_SEATS_PER_SIDE <= len(columns) <= MAX_SEATS_PER_SIDE:
            errors.append(
                f"{label}: {side} side must have {MIN_SEATS_PER_SIDE}-{MAX_SEATS_PER_SIDE} "
                f"columns (got {len(columns)})"
            )
        for letter in columns:
            if not isinstance(letter, str) or not letter.isalpha() or not letter.isupper():
                errors.append(f"{label}: invalid column letter {letter!r}")

    letters = section.left_columns + section.right_columns
    dupes = sorted({c for c in letters if letters.count(c) > 1})
    if dupes:
        errors.append(f"{label}: duplicate column letters {dupes}")
    return errors


def validate_aircraft_config(config: AircraftConfig) -> List[CabinSection]:
    """Check an aircraft profile and return its sections. Raises LayoutConfigError."""
    errors = []
    unknown = sorted(set(config.columns_per_section) - set(SEAT_CLASSES))
    if unknown:
        errors.append(f"Unknown seat classes in column layout: {unknown}")

    sections = config.sections()
    if not sections:
        errors.append("Aircraft profile defines no cabin sections.")

    for section in sections:
        if section.seat_class not in config.columns_per_section:
            errors.append(f"{section.seat_class}: no column layout defined")
            continue
        errors.extend(_validate_section(section))

    # Sections must tile the cabin with no gaps or overlaps
    for prev, nxt in zip(sections, sections[1:]):
        if nxt.first_row != prev.last_row + 1:
            errors.append(
                f"{nxt.seat_class} starts at row {nxt.first_row}, expected {prev.last_row + 1} "
                f"(after {prev.seat_class})"
            )

    if sections and not errors:
        first, last = sections[0].first_row, sections[-1].last_row
        outside = sorted(r for r in config.emergency_row_numbers if not first <= r <= last)
        if outside:
            errors.append(f"Emergency rows outside cabin rows {first}-{last}: {outside}")

    if errors:
        raise LayoutConfigError(f"Invalid aircraft profile '{config.model_name}': " + "; ".join(errors))
    return sections


def create_seat(
    row: int,
    letter: str,
    seat_class: str,
    position: str,
    blocked: set,
    emergency_rows: set,
) -> Seat:
    seat_id = f"{row}{letter}"
    return Seat(
        seat_id=seat_id,
        row=row,
        letter=letter,
        seat_class=seat_class,
        position=position,
        price=get_seat_price(seat_class),
        is_emergency_exit=row in emergency_rows,
        is_available=seat_id not in blocked,
    )


def _build_section(
    section: CabinSection,
    blocked: set,
    emergency_rows: set,
) -> Tuple[List[Row], List[Seat]]:
    rows, seats = [], []
    for row_number in section.row_numbers:
        row = Row(
            row_number=row_number,
            seat_class=section.seat_class,
            is_emergency_row=row_number in emergency_rows,
        )
        for side, columns, target in (
            ("left", section.left_columns, row.left_seat_ids),
            ("right", section.right_columns, row.right_seat_ids),
        ):
            for idx, letter in enumerate(columns):
                position = position_for_column(idx, len(columns), side)
                seat = create_seat(row_number, letter, section.seat_class, position, blocked, emergency_rows)
                seats.append(seat)
                target.append(seat.seat_id)
        rows.append(row)
    return rows, seats


def generate_layout(
    config: AircraftConfig,
    blocked_seat_ids: Optional[Iterable[str]],
    store: SeatStore,
) -> List[Row]:
    """Build every row of the cabin and repopulate the store.

    The profile is fully validated and all seats built before the store is
    touched; an invalid profile leaves the previous store contents in place.
    """
    sections = validate_aircraft_config(config)
    blocked = set(blocked_seat_ids or [])
    emergency_rows = set(config.emergency_row_numbers)

    rows: List[Row] = []
    seats: List[Seat] = []
    for section in sections:
        section_rows, section_seats = _build_section(section, blocked, emergency_rows)
        rows.extend(section_rows)
        seats.extend(section_seats)

    store.replace_all(seats)
    logger.debug(
        f"Generated layout for {config.model_name}: {len(rows)} rows, {len(seats)} seats, "
        f"{sum(1 for s in seats if not s.is_available)} blocked"
    )
    return rows
