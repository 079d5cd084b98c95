"""Seat popularity scoring and heat-map color mapping."""

import math
import random
from typing import Dict, Optional

from loguru import logger

from models.seat import Seat
from data.seat_store import SeatStore
from config.defaults import (
    POPULARITY_BASE_SCORE, POPULARITY_WINDOW_BONUS, POPULARITY_AISLE_BONUS,
    POPULARITY_BUSINESS_BONUS, POPULARITY_FRONT_ROW_LIMIT, POPULARITY_FRONT_ROW_BONUS,
    POPULARITY_FORWARD_ROW_LIMIT, POPULARITY_FORWARD_ROW_BONUS, POPULARITY_EMERGENCY_BONUS,
    POPULARITY_MIDDLE_PENALTY, POPULARITY_BACK_ROW_THRESHOLD, POPULARITY_BACK_ROW_PENALTY,
    POPULARITY_JITTER_SPAN, POPULARITY_JITTER_OFFSET,
    POPULARITY_MIN_SCORE, POPULARITY_MAX_SCORE, HEAT_MAP_BUCKETS,
)


def score_components(seat: Seat, weights: Optional[dict] = None) -> Dict[str, int]:
    """Deterministic heuristic contributions for a seat, keyed by factor."""
    cfg = weights or {}
    components = {"base": cfg.get("base_score", POPULARITY_BASE_SCORE)}

    if seat.position == "window":
        components["window"] = cfg.get("window_bonus", POPULARITY_WINDOW_BONUS)
    elif seat.position == "aisle":
        components["aisle"] = cfg.get("aisle_bonus", POPULARITY_AISLE_BONUS)

    if seat.seat_class == "business":
        components["business"] = cfg.get("business_bonus", POPULARITY_BUSINESS_BONUS)

    if seat.row <= cfg.get("front_row_limit", POPULARITY_FRONT_ROW_LIMIT):
        components["front_row"] = cfg.get("front_row_bonus", POPULARITY_FRONT_ROW_BONUS)
    elif seat.row <= cfg.get("forward_row_limit", POPULARITY_FORWARD_ROW_LIMIT):
        components["forward_row"] = cfg.get("forward_row_bonus", POPULARITY_FORWARD_ROW_BONUS)

    if seat.is_emergency_exit:
        components["emergency_exit"] = cfg.get("emergency_bonus", POPULARITY_EMERGENCY_BONUS)

    if seat.position == "middle":
        components["middle"] = -cfg.get("middle_penalty", POPULARITY_MIDDLE_PENALTY)

    if seat.row > cfg.get("back_row_threshold", POPULARITY_BACK_ROW_THRESHOLD):
        components["back_row"] = -cfg.get("back_row_penalty", POPULARITY_BACK_ROW_PENALTY)

    return components


def draw_jitter(rng=None) -> int:
    """Uniform integer in [-offset, span - offset), e.g. [-10, 9]."""
    rng = rng or random
    return math.floor(rng.random() * POPULARITY_JITTER_SPAN) - POPULARITY_JITTER_OFFSET


def clamp_score(score: int) -> int:
    return max(POPULARITY_MIN_SCORE, min(POPULARITY_MAX_SCORE, score))


def score_seat(seat: Seat, rng=None, weights: Optional[dict] = None) -> int:
    """Popularity score in [0, 100] for one seat.

    `rng` is any object with a `random()` method returning a float in [0, 1);
    defaults to the module-level system random source.
    """
    raw = sum(score_components(seat, weights).values()) + draw_jitter(rng)
    return clamp_score(raw)


def apply_popularity_scores(
    store: SeatStore,
    rng=None,
    weights: Optional[dict] = None,
) -> Dict[str, int]:
    """Score every seat in the store in place. Returns seat id -> score."""
    scores: Dict[str, int] = {}
    for seat in store.seats():
        seat.popularity_score = score_seat(seat, rng, weights)
        scores[seat.seat_id] = seat.popularity_score
    logger.debug(f"Scored {len(scores)} seats")
    return scores


def _bucket(score: int):
    for threshold, color, label in HEAT_MAP_BUCKETS:
        if score >= threshold:
            return color, label
    # Below every threshold (only reachable with unclamped negative input)
    _, color, label = HEAT_MAP_BUCKETS[-1]
    return color, label


def heat_map_color(score: int) -> str:
    """Gold >= 80, orange >= 60, hot pink >= 40, medium purple >= 20, else indigo."""
    return _bucket(score)[0]


def heat_map_bucket(score: int) -> str:
    """Legend label of the bucket the score falls in."""
    return _bucket(score)[1]


HEAT_MAP_LEGEND = [
    {"color": color, "label": label, "min_score": threshold}
    for threshold, color, label in HEAT_MAP_BUCKETS
]
