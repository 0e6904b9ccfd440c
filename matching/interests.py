from core.utils import clamp, round_half_up
from data.mappings import INTEREST_CLUSTERS, INTEREST_POSITION_BOOST, MAX_INTEREST
from models.career_profile import Career, ComponentScore

MATCH_COUNT_STEP = 0.1
MATCH_COUNT_CAP = 1.4
RELATED_WEIGHT = 0.5

FULL_MATCH_COUNT = 2.5
FULL_WEIGHT = 90
WEIGHT_EMPHASIS_BASE = 0.65
WEIGHT_EMPHASIS_RANGE = 0.15
CURVE_EXPONENT = 0.85


def _position_boost(position: int) -> float:
    if position < len(INTEREST_POSITION_BOOST):
        return INTEREST_POSITION_BOOST[position]
    return 1.0


def _cluster_of(interest_id: int):
    for cluster in INTEREST_CLUSTERS:
        if interest_id in cluster:
            return cluster
    return None


def interest_factor(match_count: float, total_weight: float) -> float:
    """
    Blend of how many interests matched and how strongly the user holds them.
    Weight emphasis rises from 65% to 80% as the match count grows.
    """
    count_factor = min(1.0, match_count / FULL_MATCH_COUNT)
    weight_factor = min(1.0, total_weight / FULL_WEIGHT)
    weight_emphasis = WEIGHT_EMPHASIS_BASE + count_factor * WEIGHT_EMPHASIS_RANGE
    combined = weight_factor * weight_emphasis + count_factor * (1 - weight_emphasis)
    return combined ** CURVE_EXPONENT


def score_interests(career: Career, interest_weights: dict) -> ComponentScore:
    """
    Interest alignment.

    Rule:
    - Direct hits count fully; a career's first-listed interests weigh more
    - Without any direct hit, interests in the same cluster count at half weight
    - No hit at all scores 0
    """
    match_count = 0.0
    total_weight = 0.0
    matches = []

    for interest_id in career.related_interests:
        if interest_id not in interest_weights:
            continue
        match_count += 1
        weight = interest_weights[interest_id]
        total_weight += weight

        boost = _position_boost(career.related_interests.index(interest_id))
        count_factor = min(1.0 + match_count * MATCH_COUNT_STEP, MATCH_COUNT_CAP)
        matches.append({
            "id": interest_id,
            "weight": weight,
            "relevanceBoost": boost,
            "contribution": round(weight * boost * count_factor / 100 * MAX_INTEREST, 2),
            "exact": True,
        })

    if match_count == 0:
        for career_interest in career.related_interests:
            cluster = _cluster_of(career_interest)
            if cluster is None:
                continue
            for related_id, pct in interest_weights.items():
                if related_id not in cluster:
                    continue
                weight = pct * RELATED_WEIGHT
                match_count += RELATED_WEIGHT
                total_weight += weight
                matches.append({
                    "id": related_id,
                    "weight": weight,
                    "relevanceBoost": RELATED_WEIGHT,
                    "exact": False,
                })

    if match_count == 0:
        return ComponentScore(0)

    score = round_half_up(MAX_INTEREST * interest_factor(match_count, total_weight))
    return ComponentScore(clamp(score, 0, MAX_INTEREST), tuple(matches))
