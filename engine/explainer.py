"""Generates human-readable explanations for seat popularity scores."""

from typing import List, Optional

from models.seat import Seat
from engine.popularity import score_components, clamp_score, heat_map_bucket
from config.defaults import POPULARITY_MIN_SCORE, POPULARITY_MAX_SCORE


FACTOR_LABELS = {
    "base": "Base score",
    "window": "Window seat",
    "aisle": "Aisle seat",
    "business": "Business class",
    "front_row": "Front rows",
    "forward_row": "Forward rows",
    "emergency_exit": "Emergency exit legroom",
    "middle": "Middle seat",
    "back_row": "Back of cabin",
}


def explain_popularity(
    seat: Seat,
    jitter: Optional[int] = None,
    weights: Optional[dict] = None,
) -> List[str]:
    """Produce step-by-step explanation of a seat's popularity score.

    When `jitter` is None the random demand component is inferred from the
    seat's stored score and the heuristic total.
    """
    components = score_components(seat, weights)
    heuristic = sum(components.values())

    steps = []
    for i, (factor, value) in enumerate(components.items(), start=1):
        label = FACTOR_LABELS.get(factor, factor)
        steps.append(f"Step {i} - {label}: {value:+d}")

    steps.append(f"Heuristic total: {heuristic}")

    if jitter is None:
        final = seat.popularity_score
        if _is_out_of_range(heuristic):
            steps.append(f"Demand variation: not recoverable (heuristic {heuristic} is outside 0-100)")
        elif final in (POPULARITY_MIN_SCORE, POPULARITY_MAX_SCORE) and final != heuristic:
            # A stored bound only gives one side of the variation
            bound = "at least" if final == POPULARITY_MAX_SCORE else "at most"
            steps.append(f"Demand variation: {bound} {final - heuristic:+d}")
            steps.append(f"Note: Score may have been clamped to 0-100 => {final}")
        else:
            steps.append(f"Demand variation: {final - heuristic:+d}")
    else:
        final = clamp_score(heuristic + jitter)
        steps.append(f"Demand variation: {jitter:+d}")
        if final != heuristic + jitter:
            steps.append(f"Note: Score was clamped to 0-100 => {final}")

    steps.append(f"Final score {final} => {heat_map_bucket(final)}")
    return steps


def _is_out_of_range(heuristic: int) -> bool:
    return heuristic != clamp_score(heuristic)
