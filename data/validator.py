"""Schema validation for uploaded aircraft profiles and blocked-seat lists."""

from dataclasses import dataclass, field
from typing import Iterable, List

import pandas as pd

from data.seat_store import SeatStore


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


SECTIONS_REQUIRED_COLUMNS = [
    "Section",
    "First Row",
    "Last Row",
    "Left Columns",
    "Right Columns",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_sections_df(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, SECTIONS_REQUIRED_COLUMNS, "Cabin Sections")
    if not result.is_valid:
        return result

    first_rows = pd.to_numeric(df["First Row"], errors="coerce")
    last_rows = pd.to_numeric(df["Last Row"], errors="coerce")
    if first_rows.isna().any() or last_rows.isna().any():
        result.is_valid = False
        result.errors.append("Cabin Sections: First Row and Last Row must be numbers.")
        return result

    if (first_rows < 1).any():
        result.is_valid = False
        result.errors.append("Cabin Sections: First Row must be at least 1.")

    if (last_rows < first_rows).any():
        result.is_valid = False
        result.errors.append("Cabin Sections: Last Row cannot be before First Row.")

    sections = df["Section"].astype(str).str.strip().str.lower()
    dupes = sections[sections.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Cabin Sections: Duplicate sections: {sorted(dupes.unique().tolist())}")

    if "Emergency Rows" not in df.columns:
        result.warnings.append("Cabin Sections: No 'Emergency Rows' column; no emergency rows will be marked.")

    return result


def validate_blocked_seats(seat_ids: Iterable[str], store: SeatStore) -> ValidationResult:
    """Blocked ids that match no seat are harmless but probably typos."""
    result = ValidationResult()
    unknown = [sid for sid in seat_ids if sid not in store]
    if unknown:
        result.warnings.append(
            f"Blocked seats not on this aircraft: {', '.join(unknown)}. These will be ignored."
        )
    return result
