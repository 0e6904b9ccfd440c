from matching.selection import has_trade_affinity, select_diverse
from models.career_profile import CareerClass, CareerScore, ComponentScore


def _scored(make_career, id, match, category="Technology", trade=False):
    zero = ComponentScore(0)
    return CareerScore(
        career=make_career(id=id, title=id),
        career_class=CareerClass(is_trade=trade, is_entrepreneurial=False,
                                 is_business_owner=False, category=category),
        interest=zero, work_style=zero, cognitive=zero, social=zero,
        motivation=zero, mini_game=zero,
        raw_total=match, enhanced_total=match, match=match,
    )


def _ids(selected):
    return [s.career.id for s in selected]


def _ranking(make_career, trade_match=46):
    return [
        _scored(make_career, "a", 90),
        _scored(make_career, "b", 80),
        _scored(make_career, "c", 75),
        _scored(make_career, "d", 60, "Healthcare"),
        _scored(make_career, "e", 50, "Creative"),
        _scored(make_career, "f", trade_match, "Trades", trade=True),
        _scored(make_career, "g", 30, "Science"),
    ]


def test_empty_ranking():
    assert select_diverse([], {}) == []


def test_trade_affinity():
    assert has_trade_affinity({"hands-on": 61})
    assert has_trade_affinity({"practical": 80})
    assert not has_trade_affinity({"hands-on": 60, "analytical": 90})


def test_without_trade_affinity(make_career):
    assert _ids(select_diverse(_ranking(make_career), {})) == ["a", "b", "c", "d", "e"]


def test_trade_slot_for_hands_on_users(make_career):
    selected = select_diverse(_ranking(make_career), {"hands-on": 70})
    assert _ids(selected) == ["a", "b", "c", "d", "f"]


def test_weak_trade_not_forced(make_career):
    selected = select_diverse(_ranking(make_career, trade_match=45), {"hands-on": 70})
    assert "f" not in _ids(selected)


def test_categories_before_fill(make_career):
    ranking = [
        _scored(make_career, "a", 60),
        _scored(make_career, "b", 59),
        _scored(make_career, "c", 58),
        _scored(make_career, "d", 30, "Healthcare"),
        _scored(make_career, "e", 20, "Creative"),
        _scored(make_career, "f", 10, "Other"),
    ]
    assert _ids(select_diverse(ranking, {})) == ["a", "b", "d", "e", "f"]


def test_ties_keep_ranking_order(make_career):
    ranking = [
        _scored(make_career, "x", 40),
        _scored(make_career, "y", 40, "Healthcare"),
        _scored(make_career, "z", 40, "Creative"),
    ]
    assert _ids(select_diverse(ranking, {})) == ["x", "y", "z"]


def test_at_most_five_unique(make_career):
    ranking = [_scored(make_career, f"c{i}", 95 - i) for i in range(12)]
    selected = select_diverse(ranking, {"hands-on": 90})
    assert len(selected) == 5
    assert len(set(_ids(selected))) == 5
