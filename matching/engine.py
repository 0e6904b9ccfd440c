import logging
from typing import Optional

from core.quiz_results import QuizResults
from ingestion.career_catalog import Catalog, default_catalog
from matching.aggregate import enhance_total, rescale
from matching.classify import classify_career
from matching.cognitive import score_cognitive
from matching.interests import score_interests
from matching.mini_games import score_mini_games
from matching.motivation import score_motivation
from matching.selection import select_diverse
from matching.signals import UserSignals, build_signals
from matching.social import score_social
from matching.work_styles import score_work_styles
from models.career_profile import Career, CareerScore, ScoredCareer

"""
Matching orchestration layer.

This module coordinates component-wise scorers.
It does not contain scoring logic itself.
"""

logger = logging.getLogger(__name__)


def score_career(career: Career, signals: UserSignals) -> CareerScore:
    """
    Entry point for scoring one career.
    Returns every component score plus the final match.
    """
    career_class = classify_career(career)

    interest = score_interests(career, signals.interest_weights)
    work_style = score_work_styles(career, career_class, signals.work_styles)
    cognitive = score_cognitive(career, career_class, signals.cognitive_strengths, signals.metrics)
    social = score_social(career, career_class, signals.social_traits, signals.metrics)
    motivation = score_motivation(career, career_class, signals.motivations)
    mini_game = score_mini_games(career, signals.metrics)

    raw, enhanced = enhance_total({
        "interest": interest.score,
        "work_style": work_style.score,
        "cognitive": cognitive.score,
        "social": social.score,
        "motivation": motivation.score,
        "mini_game": mini_game.score,
    })
    match = rescale(enhanced)

    logger.debug(
        "%s: interest=%s work_style=%.2f cognitive=%s social=%s motivation=%.2f "
        "mini_game=%.2f raw=%.2f enhanced=%.2f match=%d",
        career.title, interest.score, work_style.score, cognitive.score, social.score,
        motivation.score, mini_game.score, raw, enhanced, match,
    )

    return CareerScore(
        career=career,
        career_class=career_class,
        interest=interest,
        work_style=work_style,
        cognitive=cognitive,
        social=social,
        motivation=motivation,
        mini_game=mini_game,
        raw_total=raw,
        enhanced_total=enhanced,
        match=match,
    )


def rank_all_careers(results: QuizResults, catalog: Optional[Catalog] = None) -> list[CareerScore]:
    """
    Score every catalog career, best first.
    Equal matches keep catalog order.
    """
    catalog = catalog or default_catalog()
    signals = build_signals(results, catalog.interests)
    scores = [score_career(career, signals) for career in catalog.careers]
    return sorted(scores, key=lambda s: s.match, reverse=True)


def generate_career_matches(results: QuizResults, catalog: Optional[Catalog] = None) -> list[ScoredCareer]:
    """
    Top matches for a user: at most 5, no duplicates, spread across categories.
    An empty catalog yields an empty list.
    """
    ranking = rank_all_careers(results, catalog)
    selected = select_diverse(ranking, results.work_style)
    logger.info("Selected %d of %d careers", len(selected), len(ranking))
    return [s.to_scored_career() for s in selected]
