import math
from typing import Optional

from core.quiz_results import MiniGameMetrics
from core.utils import clamp, contains_any, round_half_up
from data.mappings import (
    LEADERSHIP_TITLE_POINTS,
    LEADERSHIP_TITLE_TERMS,
    MAX_SOCIAL,
    SOCIAL_DIMENSIONS,
    SOCIAL_MATCH_LEVELS,
    SOCIAL_TRADE_INFERENCE_MIN,
    SOCIAL_TRADE_INFERENCE_SCALE,
    TRADE_SOCIAL_BONUS,
)
from data.mini_game_rules import SOCIAL_INSIGHTS, SocialInsight
from matching.mini_games import all_hold
from models.career_profile import Career, CareerClass, ComponentScore

RANK_STEP = 0.15


def _match_level(keywords, texts: dict, skills) -> tuple[float, str]:
    for source, level in SOCIAL_MATCH_LEVELS:
        if source == "skills":
            if any(k in s.lower() for s in skills for k in keywords):
                return level, source
        elif texts[source] and contains_any(texts[source], keywords):
            return level, source
    return 0.0, ""


def _insight_applies(insight: SocialInsight, description: str, title: str, career_styles) -> bool:
    return (
        contains_any(description, insight.description_terms)
        or contains_any(title, insight.title_terms)
        or any(ws in career_styles for ws in insight.work_styles)
    )


def _insight_points(insight: SocialInsight, metrics: MiniGameMetrics) -> int:
    if insight.scale_metric is None:
        return insight.base
    return insight.base + math.floor(metrics.get(insight.scale_metric) / insight.divisor)


def score_social(
    career: Career,
    career_class: CareerClass,
    traits: tuple[str, ...],
    metrics: Optional[MiniGameMetrics] = None,
) -> ComponentScore:
    """
    Social environment fit.

    Rule:
    - One trait per dimension, matched in environment > description > title > skills
    - Trade careers infer a match for trade-typical traits
    - Mini-game insights, leadership titles and trade specials only add unmatched traits
    - Round, clamp to [0, 10]
    """
    texts = {
        "environment": career.work_environment.lower(),
        "description": career.description.lower(),
        "title": career.title.lower(),
    }
    career_styles = [ws.lower() for ws in career.work_style]
    score = 0.0
    matches = []
    matched = set()

    def add(trait, contribution, kind):
        nonlocal score
        score += contribution
        matched.add(trait)
        matches.append({"trait": trait, "matchType": kind, "contribution": round(contribution, 2)})

    for dimension in SOCIAL_DIMENSIONS:
        trait = next((t for t in traits if t in dimension.traits), None)
        if trait is None:
            continue

        level, source = _match_level(dimension.environments[trait], texts, career.skills)
        if not level and career_class.is_trade:
            relevance = dimension.trade_relevance[trait]
            if relevance > SOCIAL_TRADE_INFERENCE_MIN:
                level, source = SOCIAL_TRADE_INFERENCE_SCALE * relevance, "trade_inference"
        if level:
            add(trait, dimension.max_score * (1 - traits.index(trait) * RANK_STEP) * level, source)

    if metrics is not None:
        for insight in SOCIAL_INSIGHTS:
            if insight.trait not in traits or insight.trait in matched:
                continue
            if not all_hold(insight.conditions, metrics):
                continue
            if _insight_applies(insight, texts["description"], texts["title"], career_styles):
                add(insight.trait, _insight_points(insight, metrics), "mini_game_insight")

    if (
        "leader" in traits
        and "leader" not in matched
        and contains_any(texts["title"], LEADERSHIP_TITLE_TERMS)
    ):
        add("leader", LEADERSHIP_TITLE_POINTS, "title_explicit")

    if career_class.is_trade:
        for trait, points in TRADE_SOCIAL_BONUS:
            if trait in traits and trait not in matched:
                add(trait, points, "trade_specific")

    return ComponentScore(clamp(round_half_up(score), 0, MAX_SOCIAL), tuple(matches))
