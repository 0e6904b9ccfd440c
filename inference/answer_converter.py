import logging
from collections import Counter
from typing import Any

from core.quiz_results import InterestSelection, MiniGameMetrics, QuizResults
from core.utils import clamp, round_half_up
from data.mappings import (
    COGNITIVE_ANSWERS,
    METRIC_DERIVED_STRENGTHS,
    MOTIVATION_ANSWERS,
    SOCIAL_ANSWERS,
    SOCIAL_QUESTIONS,
    WORK_STYLE_ANSWERS,
)

logger = logging.getLogger(__name__)


def _answers(sector: Any) -> list:
    if isinstance(sector, dict):
        return list(sector.values())
    if isinstance(sector, list):
        return sector
    return []


def _seeded(vocabulary) -> Counter:
    return Counter(dict.fromkeys(vocabulary, 0))


def _sparse(counts) -> dict:
    """Drop zero entries. Remaining keys keep vocabulary order."""
    return {k: v for k, v in counts.items() if v > 0}


def _tally_work_style(sector: Any) -> Counter:
    counts = _seeded(WORK_STYLE_ANSWERS)
    for answer in _answers(sector):
        if not isinstance(answer, str):
            continue
        if answer == "team" or answer.startswith("team_"):
            counts["team"] += 1
        elif answer in WORK_STYLE_ANSWERS:
            counts[answer] += 1
    return counts


def _tally(sector: Any, vocabulary) -> Counter:
    counts = _seeded(vocabulary)
    counts.update(a for a in _answers(sector) if isinstance(a, str) and a in vocabulary)
    return counts


def _tally_social(sector: Any) -> Counter:
    """
    Sector 3 comes either as trait strings or as yes/no answers keyed by
    question id. A question can feed more than one dimension.
    """
    counts = _tally(sector, SOCIAL_ANSWERS)
    if not isinstance(sector, dict):
        return counts

    for questions, (yes_trait, no_trait) in SOCIAL_QUESTIONS:
        for qid in questions:
            answer = sector.get(qid)
            if answer is True:
                counts[yes_trait] += 1
            elif answer is False:
                counts[no_trait] += 1
    return counts


def _interests(sector: Any) -> list[InterestSelection]:
    if not isinstance(sector, list):
        return []

    out = []
    for item in sector:
        if not isinstance(item, dict):
            continue
        name = item.get("interest")
        pct = item.get("percentage")
        if not isinstance(name, str) or isinstance(pct, bool) or not isinstance(pct, (int, float)):
            continue
        out.append(InterestSelection(name, clamp(float(pct), 0.0, 100.0)))
    return out


def process_quiz_responses(responses: Any) -> QuizResults:
    """
    Convert raw sector answers into trait tallies.

    Never raises: anything malformed degrades to empty tallies.
    Mini-game metrics add derived cognitive strengths via max(), never by adding.
    """
    if not isinstance(responses, dict):
        logger.warning("Invalid quiz response payload: %s", type(responses).__name__)
        return QuizResults()

    cognitive = _tally(responses.get("sector2"), COGNITIVE_ANSWERS)

    metrics = MiniGameMetrics.from_dict(responses.get("miniGameMetrics"))
    if metrics is not None:
        for metric, strength, factor in METRIC_DERIVED_STRENGTHS:
            value = metrics.get(metric)
            if not value:
                continue
            derived = round_half_up(value * factor)
            if derived > 0:
                cognitive[strength] = max(cognitive.get(strength, 0), derived)

    return QuizResults(
        work_style=_sparse(_tally_work_style(responses.get("sector1"))),
        cognitive_strength=_sparse(cognitive),
        social_approach=_sparse(_tally_social(responses.get("sector3"))),
        motivation=_sparse(_tally(responses.get("sector4"), MOTIVATION_ANSWERS)),
        interests=_interests(responses.get("sector5")),
        mini_game_metrics=metrics,
    )
