import re

from core.utils import any_contains, contains_any
from data.mappings import (
    BUSINESS_OWNER_TITLES,
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    ENTREPRENEUR_DESCRIPTION_TERMS,
    ENTREPRENEUR_SKILL_TERMS,
    ENTREPRENEUR_TEXT_TERMS,
    TRADE_SKILL_TERMS,
    TRADE_TITLE_PATTERN,
)
from models.career_profile import Career, CareerClass

_TRADE_TITLE_RE = re.compile(TRADE_TITLE_PATTERN, re.IGNORECASE)
_IT_WORD_RE = re.compile(r"\bIT\b")


def is_trade(career: Career) -> bool:
    """
    Rule:
    - A skill names a trade activity, or
    - the description mentions a trade, or
    - the title is a trade job title
    """
    return (
        any_contains(career.skills, TRADE_SKILL_TERMS)
        or "trade" in career.description.lower()
        or _TRADE_TITLE_RE.search(career.title) is not None
    )


def is_entrepreneurial(career: Career) -> bool:
    title = career.title.lower()
    description = career.description.lower()
    return (
        contains_any(title, ENTREPRENEUR_TEXT_TERMS)
        or contains_any(description, ENTREPRENEUR_TEXT_TERMS)
        or contains_any(description, ENTREPRENEUR_DESCRIPTION_TERMS)
        or any_contains(career.skills, ENTREPRENEUR_SKILL_TERMS)
    )


def is_business_owner(career: Career) -> bool:
    """Narrower than is_entrepreneurial(): the job *is* running a business."""
    return any(t in career.title for t in BUSINESS_OWNER_TITLES)


def career_category(title: str) -> str:
    """Derive a display category from title keywords. First rule wins."""
    if _IT_WORD_RE.search(title):
        return "Technology"
    for category, keywords in CATEGORY_RULES:
        if any(k in title for k in keywords):
            return category
    return DEFAULT_CATEGORY


def classify_career(career: Career) -> CareerClass:
    return CareerClass(
        is_trade=is_trade(career),
        is_entrepreneurial=is_entrepreneurial(career),
        is_business_owner=is_business_owner(career),
        category=career.category or career_category(career.title),
    )
