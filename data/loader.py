"""Aircraft profile and blocked-seat parsing — JSON/CSV/XLSX into typed models."""

import json
from typing import Iterable, List, Optional, Union

import pandas as pd
from loguru import logger

from models.aircraft import AircraftConfig


# Recognized profile options; camelCase aliases map to the dataclass fields
CONFIG_KEY_ALIASES = {
    "modelName": "model_name",
    "businessRows": "business_rows",
    "economyPlusRows": "economy_plus_rows",
    "economyRows": "economy_rows",
    "columnsPerSection": "columns_per_section",
    "emergencyRowNumbers": "emergency_row_numbers",
}
CONFIG_FIELDS = set(CONFIG_KEY_ALIASES.values())

SECTION_ROW_FIELDS = {
    "business": "business_rows",
    "economy-plus": "economy_plus_rows",
    "economy": "economy_rows",
}

# Accepted spellings of seat classes in uploaded tables
SEAT_CLASS_ALIASES = {
    "business": "business",
    "business class": "business",
    "economy-plus": "economy-plus",
    "economy plus": "economy-plus",
    "economy_plus": "economy-plus",
    "economy": "economy",
    "economy class": "economy",
}


def _parse_row_range(value) -> Optional[tuple]:
    if value is None:
        return None
    if isinstance(value, str):
        parts = value.replace("–", "-").split("-")
        if len(parts) != 2:
            raise ValueError(f"Row range must look like '4-8' (got {value!r})")
        return int(parts[0]), int(parts[1])
    if isinstance(value, dict):
        return int(value["first"]), int(value["last"])
    first, last = value
    return int(first), int(last)


def _parse_columns(value) -> List[str]:
    if isinstance(value, str):
        value = value.strip()
        if " " in value or "," in value:
            return [c.upper() for c in value.replace(",", " ").split()]
        return [c.upper() for c in value]  # "ABC"
    return [str(c).strip().upper() for c in value]


def parse_aircraft_config(data: dict) -> AircraftConfig:
    """Build an AircraftConfig from a dict using snake_case or camelCase keys.

    Row ranges may be [first, last], "first-last" or {"first":..,"last":..};
    columns per section map a class to [left, right] where each side is a list
    of letters or a string like "ABC".
    """
    normalized = {}
    for key, value in data.items():
        field_name = CONFIG_KEY_ALIASES.get(key, key)
        if field_name not in CONFIG_FIELDS:
            logger.warning(f"Ignoring unrecognized aircraft option: {key}")
            continue
        normalized[field_name] = value

    columns = {}
    for seat_class, sides in (normalized.get("columns_per_section") or {}).items():
        canonical = SEAT_CLASS_ALIASES.get(str(seat_class).strip().lower(), seat_class)
        if isinstance(sides, dict):
            left, right = sides.get("left", []), sides.get("right", [])
        else:
            left, right = sides
        columns[canonical] = (_parse_columns(left), _parse_columns(right))

    return AircraftConfig(
        model_name=str(normalized.get("model_name", "Custom Aircraft")),
        business_rows=_parse_row_range(normalized.get("business_rows")),
        economy_plus_rows=_parse_row_range(normalized.get("economy_plus_rows")),
        economy_rows=_parse_row_range(normalized.get("economy_rows")),
        columns_per_section=columns,
        emergency_row_numbers=[int(r) for r in normalized.get("emergency_row_numbers") or []],
    )


def load_aircraft_config_json(source) -> AircraftConfig:
    """Load a profile from a JSON file path or file-like object."""
    if hasattr(source, "read"):
        raw = source.read()
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        data = json.loads(raw)
    else:
        with open(source, encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("Aircraft profile JSON must be an object.")
    return parse_aircraft_config(data)


def _parse_emergency_cell(value) -> List[int]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return []
    if isinstance(value, str):
        return [int(float(v)) for v in value.replace(";", ",").split(",") if v.strip()]
    return [int(value)]


def parse_sections_df(df: pd.DataFrame, model_name: str = "Custom Aircraft") -> AircraftConfig:
    """Convert a sections table into an AircraftConfig.

    One row per cabin section with columns: Section, First Row, Last Row,
    Left Columns, Right Columns and optionally Emergency Rows.
    """
    data = {"model_name": model_name, "columns_per_section": {}, "emergency_row_numbers": []}
    for _, row in df.iterrows():
        seat_class = SEAT_CLASS_ALIASES.get(str(row["Section"]).strip().lower())
        if seat_class is None:
            raise ValueError(f"Unknown section: {row['Section']}")
        data[SECTION_ROW_FIELDS[seat_class]] = (int(row["First Row"]), int(row["Last Row"]))
        data["columns_per_section"][seat_class] = (
            str(row["Left Columns"]).strip(),
            str(row["Right Columns"]).strip(),
        )
        if "Emergency Rows" in df.columns:
            data["emergency_row_numbers"].extend(_parse_emergency_cell(row.get("Emergency Rows")))
    return parse_aircraft_config(data)


def parse_blocked_seats(value: Union[None, str, Iterable[str], pd.DataFrame]) -> List[str]:
    """Normalize a blocked-seat list: upper-cased, de-duplicated, order kept."""
    if value is None:
        return []
    if isinstance(value, pd.DataFrame):
        if "Seat ID" not in value.columns:
            raise ValueError("Blocked seat table needs a 'Seat ID' column.")
        items = value["Seat ID"].dropna().astype(str).tolist()
    elif isinstance(value, str):
        items = value.replace(";", ",").replace("\n", ",").split(",")
    else:
        items = [str(v) for v in value]

    seen = []
    for item in items:
        seat_id = item.strip().upper()
        if seat_id and seat_id not in seen:
            seen.append(seat_id)
    return seen


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
