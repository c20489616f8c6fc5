from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping
from .loader import load_scale

LEVEL_LOW="low"
LEVEL_MODERATE="moderate"
LEVEL_HIGH="high"

SUBSCALES = ("stress", "anxiety", "depression")

def _explicit_position(value: Any, size: int) -> int | None:
    # bools are ints in Python; they are not question numbers
    if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= size:
        return value
    return None

def position_scores(answers: Iterable[Mapping[str, Any]], size: int = 21) -> Dict[int, int]:
    """Map 1-based question position -> score.

    An item's ``position`` (an int in 1..size) wins over its place in the
    sequence; any other value, and any other field such as ``id``, is ignored.
    Scores are taken at face value (no clamping to 0-3); a missing score
    counts as 0.
    """
    out: Dict[int, int] = {}
    for pos, item in enumerate(answers, start=1):
        key = _explicit_position(item.get("position"), size) or pos
        score = item.get("score")
        out[key] = int(score) if score is not None else 0
    return out

def subscale_totals(scores: Mapping[int, int], groups: Mapping[str, List[int]]) -> Dict[str, int]:
    return {name: sum(scores.get(n, 0) for n in positions) for name, positions in groups.items()}

def level_for(total: int, thresholds: Mapping[str, int] | None = None) -> str:
    thr = thresholds or load_scale()["thresholds"]
    if total >= int(thr["high"]):
        return LEVEL_HIGH
    if total >= int(thr["moderate"]):
        return LEVEL_MODERATE
    return LEVEL_LOW

def build_local_assessment(answers: Iterable[Mapping[str, Any]], scale_id: str = "dass21") -> Dict[str, Any]:
    scale = load_scale(scale_id)
    groups = scale["groups"]
    size = max(p for ps in groups.values() for p in ps)
    totals = subscale_totals(position_scores(answers, size), groups)
    risks = {name: level_for(totals[name], scale["thresholds"]) for name in SUBSCALES}
    return {
        "summary": scale["summary"],
        "risks": risks,
        "recommendations": scale["recommendations"],
    }
