from models.career_profile import CareerScore

MAX_RESULTS = 5
TRADE_AFFINITY_STYLES = ("hands-on", "practical")
TRADE_AFFINITY_MIN = 60
TRADE_MATCH_MIN = 45
EXCEPTIONAL_MATCH = 70


def has_trade_affinity(work_style: dict) -> bool:
    return any(work_style.get(s, 0) > TRADE_AFFINITY_MIN for s in TRADE_AFFINITY_STYLES)


def select_diverse(ranking: list[CareerScore], work_style: dict) -> list[CareerScore]:
    """
    Pick up to 5 careers from a ranking sorted best first.

    Order of picks:
    1. The best career overall.
    2. The best trade career, for users with trade affinity, if it scores >45.
    3. Any career scoring >70.
    4. The best career of each category not yet represented.
    5. The next best careers, whatever their category.

    A category is spent as soon as one of its careers is picked.
    Output is re-sorted by match, ties keeping ranking order.
    """
    if not ranking:
        return []

    best_by_category = {}
    for s in ranking:
        category = s.career_class.category
        if category not in best_by_category:
            best_by_category[category] = s

    picked = []
    picked_ids = set()

    def pick(s: CareerScore):
        picked.append(s)
        picked_ids.add(s.career.id)
        best_by_category.pop(s.career_class.category, None)

    pick(ranking[0])

    trades = [s for s in ranking if s.career_class.is_trade]
    if (
        has_trade_affinity(work_style)
        and trades
        and trades[0].match > TRADE_MATCH_MIN
        and trades[0].career.id not in picked_ids
    ):
        pick(trades[0])

    for s in ranking:
        if len(picked) >= MAX_RESULTS:
            break
        if s.match > EXCEPTIONAL_MATCH and s.career.id not in picked_ids:
            pick(s)

    remaining = sorted(best_by_category.values(), key=lambda s: s.match, reverse=True)
    for s in remaining:
        if len(picked) >= MAX_RESULTS:
            break
        if s.career.id not in picked_ids:
            picked.append(s)
            picked_ids.add(s.career.id)

    for s in ranking:
        if len(picked) >= MAX_RESULTS:
            break
        if s.career.id not in picked_ids:
            picked.append(s)
            picked_ids.add(s.career.id)

    order = {s.career.id: i for i, s in enumerate(ranking)}
    return sorted(picked, key=lambda s: (-s.match, order[s.career.id]))
