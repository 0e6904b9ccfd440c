import re
from typing import Optional

from core.utils import clamp, round_half_up
from data.mappings import (
    ATTRIBUTE_MATCH_POINTS,
    ENTREPRENEUR_MOTIVATION_MAX,
    ENTREPRENEUR_MOTIVATION_POINTS,
    ENTREPRENEUR_MOTIVATIONS,
    FIELD_MATCH_POINTS,
    GROWTH_DIVISOR,
    GROWTH_FALLBACK_DIVISOR,
    GROWTH_FALLBACK_MAX,
    GROWTH_FALLBACK_MOTIVATIONS,
    GROWTH_MAX,
    GROWTH_MOTIVATION,
    INTRINSIC_BONUS_MAX,
    MAX_MOTIVATION,
    MOTIVATIONS,
    SALARY_BONUS_FLOOR,
    SALARY_BONUS_MAX,
    SALARY_BONUS_STEP,
    SALARY_MOTIVATIONS,
    TRADE_MOTIVATION_MAX,
    TRADE_MOTIVATION_POINTS,
    TRADE_MOTIVATIONS,
)
from models.career_profile import Career, CareerClass, ComponentScore

RANK_STEP = 0.15

_SALARY_RE = re.compile(r"\$?\s*(\d[\d,]*)")
_GROWTH_RE = re.compile(r"\+(\d+)%")


def parse_salary(salary: str) -> Optional[int]:
    """First figure in the salary text. '$60,040' -> 60040, 'Variable' -> None."""
    m = _SALARY_RE.search(salary or "")
    if not m:
        return None
    return int(m.group(1).replace(",", ""))


def parse_growth(growth: str) -> Optional[int]:
    """'+22% (2020-2030)' -> 22. Only a positive figure counts, 'Faster (+)' -> None."""
    m = _GROWTH_RE.search(growth or "")
    if not m:
        return None
    return int(m.group(1)) or None


def score_motivation(career: Career, career_class: CareerClass, motivations: tuple[str, ...]) -> ComponentScore:
    """
    Reward alignment with what drives the user.

    Rules:
    - Intrinsic-leaning users earn up to 4 points
    - High salaries reward rewards/recognition motivations
    - Career fields and attributes named in the career text earn points by rank
    - Positive job growth rewards growth (or challenges/accomplishment)
    - Trade and entrepreneurial careers reward the motivations they satisfy
    - Sum, then clamp to [0, 20]
    """
    score = 0.0
    matches = []

    def add(motivation, attribute, contribution):
        nonlocal score
        score += contribution
        matches.append({
            "motivation": motivation,
            "careerAttribute": attribute,
            "contribution": round(contribution, 2),
        })

    known = [MOTIVATIONS[m] for m in motivations if m in MOTIVATIONS]
    intrinsic = sum(1 for m in known if m.kind == "intrinsic")
    bonus = round_half_up(intrinsic / max(1, len(known)) * INTRINSIC_BONUS_MAX)
    if bonus > 0:
        add("intrinsic_bias", "sustainability", bonus)

    salary = parse_salary(career.salary)
    if salary is not None and salary > SALARY_BONUS_FLOOR:
        motivation = next((m for m in SALARY_MOTIVATIONS if m in motivations), None)
        if motivation:
            add(motivation, "high-salary",
                min(SALARY_BONUS_MAX, (salary - SALARY_BONUS_FLOOR) / SALARY_BONUS_STEP))

    title_description = f"{career.title.lower()} {career.description.lower()}"
    full_text = f"{title_description} {' '.join(career.skills).lower()}"

    for rank, motivation in enumerate(motivations):
        info = MOTIVATIONS.get(motivation)
        if info is None:
            continue
        fields = [f for f in info.fields if f in title_description]
        if fields:
            add(motivation, "field:" + ",".join(fields),
                FIELD_MATCH_POINTS * info.sustainability * (1 - rank * RANK_STEP))

    for rank, motivation in enumerate(motivations):
        info = MOTIVATIONS.get(motivation)
        if info is None:
            continue
        attributes = [a for a in info.attributes if a in full_text]
        if attributes:
            add(motivation, ",".join(attributes),
                ATTRIBUTE_MATCH_POINTS * info.importance * info.sustainability
                * (1 - rank * RANK_STEP) * min(1.0, len(attributes) / 2))

    growth = parse_growth(career.growth)
    if growth is not None:
        if GROWTH_MOTIVATION in motivations:
            add(GROWTH_MOTIVATION, "growth-potential", min(GROWTH_MAX, growth / GROWTH_DIVISOR))
        else:
            motivation = next((m for m in GROWTH_FALLBACK_MOTIVATIONS if m in motivations), None)
            if motivation:
                add(motivation, "growth-potential",
                    min(GROWTH_FALLBACK_MAX, growth / GROWTH_FALLBACK_DIVISOR))

    if career_class.is_trade:
        aligned = [m for m in motivations if m in TRADE_MOTIVATIONS]
        if aligned:
            add(",".join(aligned), "trade-alignment",
                min(TRADE_MOTIVATION_MAX, len(aligned) * TRADE_MOTIVATION_POINTS))

    if career_class.is_entrepreneurial:
        aligned = [m for m in motivations if m in ENTREPRENEUR_MOTIVATIONS]
        if aligned:
            add(",".join(aligned), "entrepreneur-alignment",
                min(ENTREPRENEUR_MOTIVATION_MAX, len(aligned) * ENTREPRENEUR_MOTIVATION_POINTS))

    return ComponentScore(clamp(score, 0, MAX_MOTIVATION), tuple(matches))
