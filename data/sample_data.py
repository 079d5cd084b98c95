"""Generate sample aircraft profiles and blocked-seat lists for the Cabin Seat Map."""

import json
import os
import random
from typing import Iterable, List

import pandas as pd

from config.defaults import REFERENCE_AIRCRAFT


def generate_sections_df() -> pd.DataFrame:
    """Cabin sections table for the reference Boeing 737-800."""
    ref = REFERENCE_AIRCRAFT
    emergency = ref["emergency_row_numbers"]
    rows = []
    for label, key, seat_class in [
        ("Business", "business_rows", "business"),
        ("Economy Plus", "economy_plus_rows", "economy-plus"),
        ("Economy", "economy_rows", "economy"),
    ]:
        first, last = ref[key]
        left, right = ref["columns_per_section"][seat_class]
        rows.append({
            "Section": label,
            "First Row": first,
            "Last Row": last,
            "Left Columns": "".join(left),
            "Right Columns": "".join(right),
            "Emergency Rows": ",".join(str(r) for r in emergency if first <= r <= last),
        })
    return pd.DataFrame(rows)


def generate_aircraft_json() -> dict:
    """The reference profile in the camelCase JSON form accepted by the loader."""
    ref = REFERENCE_AIRCRAFT
    return {
        "modelName": ref["model_name"],
        "businessRows": list(ref["business_rows"]),
        "economyPlusRows": list(ref["economy_plus_rows"]),
        "economyRows": list(ref["economy_rows"]),
        "columnsPerSection": {k: [list(l), list(r)] for k, (l, r) in ref["columns_per_section"].items()},
        "emergencyRowNumbers": list(ref["emergency_row_numbers"]),
    }


def generate_blocked_seats(seat_ids: Iterable[str], fraction: float = 0.3, seed: int = 42) -> List[str]:
    """Randomly block a fraction of the given seats, keeping their original order."""
    ids = list(seat_ids)
    rng = random.Random(seed)
    count = round(len(ids) * fraction)
    chosen = set(rng.sample(ids, count)) if count else set()
    return [sid for sid in ids if sid in chosen]


def generate_sample_files(output_dir: str):
    """Write a sections CSV and a profile JSON to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_sections_df().to_csv(os.path.join(output_dir, "boeing_737_800_sections.csv"), index=False)
    with open(os.path.join(output_dir, "boeing_737_800.json"), "w", encoding="utf-8") as fh:
        json.dump(generate_aircraft_json(), fh, indent=2)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_files(out)
    print("Sample aircraft profiles generated in sample_files/")
