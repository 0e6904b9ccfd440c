from dataclasses import dataclass
from typing import Iterable, Optional

from core.quiz_results import MiniGameMetrics, QuizResults

"""
User-side signals, derived once per request and shared by every scorer.
"""


@dataclass(frozen=True)
class UserSignals:
    work_styles: tuple[str, ...]
    cognitive_strengths: tuple[str, ...]
    social_traits: tuple[str, ...]
    motivations: tuple[str, ...]
    interest_weights: dict  # interest id -> percentage
    metrics: Optional[MiniGameMetrics]


def ranked(tally: dict, limit: Optional[int] = None) -> tuple[str, ...]:
    """Positive keys by descending count. Ties keep tally order (vocabulary order from the normalizer)."""
    keys = [k for k, v in sorted(tally.items(), key=lambda kv: kv[1], reverse=True) if v > 0]
    return tuple(keys[:limit] if limit is not None else keys)


def resolve_interest_weights(selections, options: Iterable) -> dict:
    """
    Map interest names to vocabulary ids.
    Exact name first, then case-insensitive. Unknown names are dropped.
    A repeated interest keeps its last percentage.
    """
    options = list(options)
    by_name = {o.name: o.id for o in options}
    by_folded = {o.name.casefold(): o.id for o in options}

    weights = {}
    for sel in selections:
        interest_id = by_name.get(sel.interest)
        if interest_id is None:
            interest_id = by_folded.get(sel.interest.casefold())
        if interest_id is not None:
            weights[interest_id] = sel.percentage
    return weights


def build_signals(results: QuizResults, interest_options: Iterable) -> UserSignals:
    return UserSignals(
        work_styles=ranked(results.work_style),
        cognitive_strengths=ranked(results.cognitive_strength),
        social_traits=ranked(results.social_approach, 3),
        motivations=ranked(results.motivation, 3),
        interest_weights=resolve_interest_weights(results.interests, interest_options),
        metrics=results.mini_game_metrics,
    )
