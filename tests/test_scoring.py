import pytest
from app.rubric.engine import build_local_assessment, level_for, position_scores
from app.rubric.loader import load_scale

GROUPS = {
    "depression": [3, 5, 10, 13, 16, 17, 21],
    "anxiety": [2, 4, 7, 9, 15, 19, 20],
    "stress": [1, 6, 8, 11, 12, 14, 18],
}

def answers_for(group, scores):
    """21 zero answers with the given scores placed on one subscale's positions."""
    items = [{"score": 0} for _ in range(21)]
    for pos, s in zip(GROUPS[group], scores):
        items[pos - 1]["score"] = s
    return items

def test_scale_file_matches_fixed_groups():
    scale = load_scale()
    assert scale["groups"] == GROUPS
    assert scale["thresholds"] == {"high": 14, "moderate": 7}

def test_groups_partition_21_positions():
    positions = sorted(p for ps in GROUPS.values() for p in ps)
    assert positions == list(range(1, 22))

def test_all_zero_is_low():
    out = build_local_assessment([{"score": 0}] * 21)
    assert out["risks"] == {"stress": "low", "anxiety": "low", "depression": "low"}

def test_all_three_is_high():
    out = build_local_assessment([{"score": 3}] * 21)
    assert out["risks"] == {"stress": "high", "anxiety": "high", "depression": "high"}

@pytest.mark.parametrize("total,expected", [(0, "low"), (6, "low"), (7, "moderate"), (13, "moderate"), (14, "high"), (21, "high")])
def test_level_thresholds(total, expected):
    assert level_for(total) == expected

@pytest.mark.parametrize("group", ["stress", "anxiety", "depression"])
@pytest.mark.parametrize("scores,expected", [
    ([3, 3], "low"),              # 6
    ([3, 3, 1], "moderate"),      # 7
    ([3, 3, 3, 3, 1], "moderate"),  # 13
    ([3, 3, 3, 3, 2], "high"),    # 14
])
def test_group_boundaries(group, scores, expected):
    risks = build_local_assessment(answers_for(group, scores))["risks"]
    assert risks[group] == expected
    for other in GROUPS:
        if other != group:
            assert risks[other] == "low"

def test_short_input_equals_zero_padding():
    short = [{"score": 3}] * 10
    padded = short + [{"score": 0}] * 11
    assert build_local_assessment(short) == build_local_assessment(padded)

def test_missing_score_counts_as_zero():
    assert position_scores([{}, {"score": None}, {"score": 2}]) == {1: 0, 2: 0, 3: 2}

def test_scores_are_not_clamped():
    # position 1 is stress; 14 on one item is enough for high
    out = build_local_assessment([{"score": 14}])
    assert out["risks"]["stress"] == "high"

def test_explicit_position_overrides_order():
    # depression questions only, listed from position 1 onwards
    items = [{"position": n, "score": 3} for n in (3, 5, 10, 13, 16)]
    risks = build_local_assessment(items)["risks"]
    assert risks == {"stress": "low", "anxiety": "low", "depression": "high"}

def test_fixed_text_and_idempotent():
    items = answers_for("anxiety", [2, 2, 2, 2])
    first = build_local_assessment(items)
    second = build_local_assessment(items)
    assert first == second
    scale = load_scale()
    assert first["summary"] == scale["summary"]
    assert first["recommendations"] == scale["recommendations"]
    assert first["risks"]["anxiety"] == "moderate"

def test_id_field_is_ignored():
    # ids of any kind never move an answer; list order decides
    zero_based = [{"id": i, "score": 3} for i in range(21)]
    assert build_local_assessment(zero_based) == build_local_assessment([{"score": 3}] * 21)
    assert position_scores([{"id": "q1", "score": 2}, {"id": 7, "score": 1}]) == {1: 2, 2: 1}

@pytest.mark.parametrize("bad", [0, 22, -1, "3", 2.0, True, None])
def test_unusable_position_falls_back_to_order(bad):
    assert position_scores([{"score": 0}, {"position": bad, "score": 3}]) == {1: 0, 2: 3}
