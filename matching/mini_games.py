from typing import Optional

from core.quiz_results import MiniGameMetrics
from core.utils import any_contains, clamp, contains_any
from data.mappings import MAX_MINI_GAME
from data.mini_game_rules import MINI_GAME_BONUS_RULES, MetricCondition, MiniGameRule
from models.career_profile import Career, ComponentScore


def condition_holds(cond: MetricCondition, metrics: Optional[MiniGameMetrics]) -> bool:
    if metrics is None:
        return False
    value = metrics.get(cond.metric)
    if value is None:
        return False
    if cond.equals is not None:
        return value == cond.equals
    if isinstance(value, str):
        return False
    if cond.above is not None and not value > cond.above:
        return False
    if cond.below is not None and not value < cond.below:
        return False
    return True


def all_hold(conditions, metrics: Optional[MiniGameMetrics]) -> bool:
    return all(condition_holds(c, metrics) for c in conditions)


def career_matches_rule(rule: MiniGameRule, career: Career) -> bool:
    if rule.environment_keywords and contains_any(
        career.work_environment.lower(), rule.environment_keywords
    ):
        return True

    if rule.target == "skills":
        return any_contains(career.skills, rule.keywords)
    if rule.target == "title":
        return contains_any(career.title.lower(), rule.keywords)
    if rule.target == "work_style":
        return any(ws.lower() in rule.keywords for ws in career.work_style)
    raise ValueError(f"Unknown mini-game rule target: {rule.target}")


def rule_bonus(rule: MiniGameRule, metrics: MiniGameMetrics) -> float:
    return rule.points + sum(
        metrics.get(metric) / 100 * weight for metric, weight in rule.scaled_by
    )


def score_mini_games(career: Career, metrics: Optional[MiniGameMetrics]) -> ComponentScore:
    """
    Objective ability fit.

    Rule:
    - Each rule whose metric conditions hold and whose career target matches adds its bonus
    - Sum, then clamp to [0, 10]
    - No metrics, no bonus
    """
    if metrics is None:
        return ComponentScore(0.0)

    score = 0.0
    matches = []
    for rule in MINI_GAME_BONUS_RULES:
        if not all_hold(rule.conditions, metrics):
            continue
        if not career_matches_rule(rule, career):
            continue
        bonus = rule_bonus(rule, metrics)
        score += bonus
        matches.append({"rule": rule.name, "contribution": round(bonus, 2)})

    return ComponentScore(clamp(score, 0, MAX_MINI_GAME), tuple(matches))
