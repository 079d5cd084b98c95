"""Derived display data — read-only row projections rebuilt from the seat store."""

from dataclasses import asdict
from typing import Dict, List

import pandas as pd

from models.seat import Row, Seat
from data.seat_store import SeatStore
from engine.popularity import heat_map_color
from config.defaults import SEAT_CLASSES


def seat_display_class(seat: Seat, show_heat_map: bool) -> str:
    classes = seat.seat_class
    if show_heat_map and seat.is_available:
        classes += " heat-map-seat"
    return classes


def seat_heat_map_style(seat: Seat, show_heat_map: bool) -> str:
    if show_heat_map and seat.is_available:
        return f"background: {heat_map_color(seat.popularity_score)} !important;"
    return ""


def build_display_seat(seat: Seat, show_heat_map: bool) -> dict:
    """Snapshot of one seat plus its display annotations."""
    data = asdict(seat)
    data["status"] = seat.status
    data["computed_class"] = seat_display_class(seat, show_heat_map)
    data["heat_map_style"] = seat_heat_map_style(seat, show_heat_map)
    data["heat_map_color"] = heat_map_color(seat.popularity_score) if show_heat_map and seat.is_available else None
    return data


def build_display_rows(rows: List[Row], store: SeatStore, show_heat_map: bool) -> List[dict]:
    """Re-read every row's seats from the store and annotate them for display.

    Seat ids missing from the store are skipped.
    """
    display_rows = []
    for row in rows:
        left = [build_display_seat(store.get(sid), show_heat_map) for sid in row.left_seat_ids if sid in store]
        right = [build_display_seat(store.get(sid), show_heat_map) for sid in row.right_seat_ids if sid in store]
        display_rows.append({
            "row_number": row.row_number,
            "seat_class": row.seat_class,
            "left_seats": left,
            "right_seats": right,
            "is_business_class": row.is_business_class,
            "is_economy_plus": row.is_economy_plus,
            "is_economy": row.is_economy,
            "is_emergency_row": row.is_emergency_row,
            "row_class": "seat-row emergency-row" if row.is_emergency_row else "seat-row",
            "aisle_class": "aisle business-aisle" if row.is_business_class else "aisle",
        })
    return display_rows


def group_rows_by_class(display_rows: List[dict]) -> Dict[str, List[dict]]:
    grouped = {c: [] for c in SEAT_CLASSES}
    for r in display_rows:
        grouped.setdefault(r["seat_class"], []).append(r)
    return grouped


def summarize_cabin(store: SeatStore) -> dict:
    """Seat counts and popularity averages for KPI cards."""
    seats = store.seats()
    total = len(seats)
    available = sum(1 for s in seats if s.is_available)
    selected = sum(1 for s in seats if s.is_selected)

    avg_by_class = {}
    for seat_class in SEAT_CLASSES:
        scores = [s.popularity_score for s in seats if s.seat_class == seat_class]
        if scores:
            avg_by_class[seat_class] = sum(scores) / len(scores)

    return {
        "total_seats": total,
        "available_seats": available,
        "occupied_seats": total - available,
        "selected_seats": selected,
        "occupancy_pct": (total - available) / total if total > 0 else 0,
        "avg_popularity_by_class": avg_by_class,
    }


def popularity_matrix(rows: List[Row], store: SeatStore) -> pd.DataFrame:
    """Rows x column letters grid of popularity scores (NaN where a row has no such seat)."""
    letters = []
    for row in rows:
        for sid in row.seat_ids:
            seat = store.get(sid)
            if seat and seat.letter not in letters:
                letters.append(seat.letter)
    letters.sort()

    records = []
    for row in rows:
        record = {}
        for sid in row.seat_ids:
            seat = store.get(sid)
            if seat:
                record[seat.letter] = seat.popularity_score
        records.append(record)

    df = pd.DataFrame(records, columns=letters, index=[r.row_number for r in rows])
    df.index.name = "row"
    return df


def format_selected_seats(seats: List[Seat]) -> str:
    return ", ".join(s.seat_id for s in seats)
