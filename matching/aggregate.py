from core.utils import round_half_up
from data.mappings import MAX_INTEREST

# A dimension counts towards well-roundedness above these scores
COMPONENT_THRESHOLDS = {
    "interest": 8,
    "work_style": 7,
    "cognitive": 7,
    "social": 5,
    "motivation": 8,
}

# Components summed into the raw total
COMPONENTS = ("interest", "work_style", "cognitive", "social", "motivation", "mini_game")

INTEREST_BOOST_FLOOR = 15
INTEREST_BOOST_EXPONENT = 1.2
INTEREST_BOOST_MAX = 15

WELL_ROUNDED_MIN_DIMENSIONS = 3
WELL_ROUNDED_POINTS = 2

# Graduated rescaling tiers
LOW_TIER = 8
MID_TIER = 20
MATCH_FLOOR = 22


def enhance_total(scores: dict[str, float]) -> tuple[float, float]:
    """
    Aggregate component scores into (raw, enhanced) totals.

    1. Raw total: plain sum of all components.
    2. Interest boost: strong interest alignment (>15) adds up to 15 points.
    3. Well-roundedness: +2 per dimension over its threshold, only when
       at least 3 dimensions qualify.
    """
    raw = sum(scores.get(c, 0.0) for c in COMPONENTS)
    enhanced = raw

    interest = scores.get("interest", 0.0)
    if interest > INTEREST_BOOST_FLOOR:
        enhanced += (interest / MAX_INTEREST) ** INTEREST_BOOST_EXPONENT * INTEREST_BOOST_MAX

    qualifying = sum(1 for c, t in COMPONENT_THRESHOLDS.items() if scores.get(c, 0.0) > t)
    if qualifying >= WELL_ROUNDED_MIN_DIMENSIONS:
        enhanced += qualifying * WELL_ROUNDED_POINTS

    return raw, enhanced


def rescale(total: float) -> int:
    """
    Spread low scores out instead of letting them cluster near zero.

    <8  -> 5 + 0.6s
    <20 -> 9 + 0.7s
    else max(22, s)
    """
    pct = min(round_half_up(total), 100)
    if pct < LOW_TIER:
        scaled = 5 + pct * 0.6
    elif pct < MID_TIER:
        scaled = 9 + pct * 0.7
    else:
        scaled = max(MATCH_FLOOR, pct)
    return round_half_up(scaled)

