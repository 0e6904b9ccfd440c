from core.utils import clamp
from data.mappings import (
    CONFLICT_SEVERITY,
    DEFAULT_WORK_STYLE_IMPORTANCE,
    DEFAULT_WORK_STYLE_TRADE_RELEVANCE,
    ENTREPRENEUR_STYLE_BOOST,
    MAX_WORK_STYLE,
    WORK_STYLE_OPPOSITES,
    WORK_STYLE_PROFILES,
    WORK_STYLE_QUALITY,
    WorkStyleProfile,
)
from models.career_profile import Career, CareerClass, ComponentScore

RANK_STEP = 0.2
ENTREPRENEUR_RELEVANCE_MIN = 0.5


def _profile(style: str) -> WorkStyleProfile:
    return WORK_STYLE_PROFILES.get(style) or WorkStyleProfile(
        importance=DEFAULT_WORK_STYLE_IMPORTANCE,
        keywords=(style,),
        trade_relevance=DEFAULT_WORK_STYLE_TRADE_RELEVANCE,
    )


def match_quality(style: str, profile: WorkStyleProfile, career_styles: list[str], description: str) -> tuple[float, str]:
    """Tiered: exact style > exact keyword > keyword inside a style > description word."""
    exact, keyword, partial, described = WORK_STYLE_QUALITY

    if style in career_styles:
        return exact, "direct"
    if any(ws in profile.keywords for ws in career_styles):
        return keyword, "keyword_exact"
    if any(k in ws for k in profile.keywords for ws in career_styles):
        return partial, "keyword_partial"
    if any(word in profile.keywords for word in description.lower().split(" ")):
        return described, "description"
    return 0.0, ""


def score_work_styles(career: Career, career_class: CareerClass, user_styles: tuple[str, ...]) -> ComponentScore:
    """
    Environment fit.

    Rule:
    - Each ranked user style earns 15 * importance * rank factor * match quality
    - Trade and entrepreneurial careers boost styles with relevance above 0.5
    - Top-2 styles whose opposite the career requires are penalized (15% / 8%)
    - Clamp to [0, 15]
    """
    career_styles = [ws.lower() for ws in career.work_style]
    score = 0.0
    matches = []

    for rank, style in enumerate(user_styles):
        profile = _profile(style)
        quality, kind = match_quality(style, profile, career_styles, career.description)
        if quality <= 0:
            continue

        if career_class.is_trade and profile.trade_relevance > 0.5:
            quality *= 1 + (profile.trade_relevance - 0.5) * 0.4
            kind += "_trade_boosted"
        if career_class.is_entrepreneurial and profile.entrepreneur_relevance > ENTREPRENEUR_RELEVANCE_MIN:
            quality *= ENTREPRENEUR_STYLE_BOOST
            kind += "_entrepreneur_boosted"

        contribution = MAX_WORK_STYLE * profile.importance * (1 - rank * RANK_STEP) * quality
        score += contribution
        matches.append({"style": style, "contribution": round(contribution, 2), "matchType": kind})

    penalty = 0.0
    for rank, style in enumerate(user_styles[:len(CONFLICT_SEVERITY)]):
        opposite = WORK_STYLE_OPPOSITES.get(style)
        if opposite and opposite in career_styles:
            amount = score * CONFLICT_SEVERITY[rank]
            penalty += amount
            matches.append({"style": f"{style}-{opposite}", "contribution": -round(amount, 2), "matchType": "conflict"})

    return ComponentScore(clamp(score - penalty, 0, MAX_WORK_STYLE), tuple(matches))
