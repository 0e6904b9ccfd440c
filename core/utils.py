import math


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    """
    Round .5 towards +inf, the way the quiz front end rounds scores.
    Python's round() uses banker's rounding and would shift ties.
    """
    return int(math.floor(x + 0.5))


def contains_any(text: str, terms) -> bool:
    """True if any of `terms` is a substring of `text` (already lowercased)."""
    return any(term in text for term in terms)


def any_contains(values, terms) -> bool:
    """True if any lowercased value contains any of `terms`."""
    return any(contains_any(v.lower(), terms) for v in values)
