from typing import Optional

from core.quiz_results import MiniGameMetrics
from core.utils import any_contains, clamp, round_half_up
from data.mappings import (
    COGNITIVE_CATEGORIES,
    COGNITIVE_DESCRIPTION_POINTS,
    COGNITIVE_SKILL_POINTS,
    COGNITIVE_STRENGTHS,
    KNOWLEDGE_SKILL_TERMS,
    KNOWLEDGE_SPECIAL_POINTS,
    MAX_COGNITIVE,
    MOTOR_PRECISION_POINTS,
    MOTOR_PRECISION_SKILL_TERMS,
    MOTOR_PRECISION_THRESHOLD,
)
from data.mini_game_rules import COGNITIVE_BOOSTS
from matching.mini_games import condition_holds
from models.career_profile import Career, CareerClass, ComponentScore

SKILL_RANK_STEP = 0.15
DESCRIPTION_RANK_STEP = 0.2
MIN_SKILL_MATCHES = 2


def _best_strength(category: str, strengths: tuple[str, ...]):
    """Strength maximising confidence * rank priority, or None."""
    best, best_value, best_priority = None, 0.0, 0.0
    for rank, name in enumerate(strengths):
        info = COGNITIVE_STRENGTHS.get(name)
        if info is None or category not in info.categories:
            continue
        priority = 1 - rank * SKILL_RANK_STEP
        if info.confidence * priority > best_value:
            best, best_value, best_priority = name, info.confidence * priority, priority
    return best, best_priority


def _metric_boost(category: str, metrics: Optional[MiniGameMetrics]) -> float:
    return sum(boost for target, cond, boost in COGNITIVE_BOOSTS
               if target == category and condition_holds(cond, metrics))


def score_cognitive(
    career: Career,
    career_class: CareerClass,
    strengths: tuple[str, ...],
    metrics: Optional[MiniGameMetrics] = None,
) -> ComponentScore:
    """
    Mental strengths vs what the role demands.

    Rule:
    - Skills are scanned first; each category is claimed at most once
    - Description is only scanned when fewer than 2 skill matches were found
    - Two special cases: broad knowledge -> systems thinking, fine motor control -> detail
    - Round, clamp to [0, 15]
    """
    score = 0.0
    matches = []
    claimed = set()

    for skill in career.skills:
        skill_lower = skill.lower()
        for category, info in COGNITIVE_CATEGORIES.items():
            if category in claimed:
                continue
            if not any(k in skill_lower for k in info.keywords):
                continue
            strength, priority = _best_strength(category, strengths)
            if strength is None:
                continue

            strength_info = COGNITIVE_STRENGTHS[strength]
            contribution = (
                COGNITIVE_SKILL_POINTS * strength_info.confidence * priority
                * (1 + _metric_boost(category, metrics))
            )
            if career_class.is_trade:
                contribution *= 1 + info.trade_relevance * strength_info.trade_boost

            score += contribution
            claimed.add(category)
            matches.append({
                "type": f"{strength}-to-{category}",
                "skill": skill,
                "contribution": round(contribution, 2),
            })

    if len(matches) < MIN_SKILL_MATCHES:
        description = career.description.lower()
        for category, info in COGNITIVE_CATEGORIES.items():
            if category in claimed or not any(k in description for k in info.keywords):
                continue
            rank = next(
                (i for i, s in enumerate(strengths)
                 if s in COGNITIVE_STRENGTHS and category in COGNITIVE_STRENGTHS[s].categories),
                None,
            )
            if rank is None:
                continue
            contribution = COGNITIVE_DESCRIPTION_POINTS * (1 - rank * DESCRIPTION_RANK_STEP)
            score += contribution
            claimed.add(category)
            matches.append({
                "type": f"{strengths[rank]}-to-{category} (description)",
                "skill": "career description",
                "contribution": round(contribution, 2),
            })

    if (
        "systems-thinking" not in claimed
        and "knowledge" in strengths
        and any_contains(career.skills, KNOWLEDGE_SKILL_TERMS)
    ):
        score += KNOWLEDGE_SPECIAL_POINTS
        claimed.add("systems-thinking")
        matches.append({"type": "knowledge-systems-special", "contribution": KNOWLEDGE_SPECIAL_POINTS})

    motor = metrics.motor_control if metrics else None
    if (
        motor is not None
        and motor > MOTOR_PRECISION_THRESHOLD
        and "attention-to-detail" not in claimed
        and any_contains(career.skills, MOTOR_PRECISION_SKILL_TERMS)
    ):
        score += MOTOR_PRECISION_POINTS
        claimed.add("attention-to-detail")
        matches.append({"type": "motor-precision-special", "contribution": MOTOR_PRECISION_POINTS})

    return ComponentScore(clamp(round_half_up(score), 0, MAX_COGNITIVE), tuple(matches))
