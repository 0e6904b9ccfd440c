import pytest

from matching.aggregate import enhance_total, rescale


@pytest.mark.parametrize("total, expected", [
    (0, 5),
    (7, 9),
    (8, 15),
    (19, 22),
    (20, 22),
    (21.5, 22),
    (50, 50),
    (150, 100),
])
def test_rescale_tiers(total, expected):
    assert rescale(total) == expected


def test_interest_boost_only_above_fifteen():
    assert enhance_total({"interest": 15}) == (15, 15)
    raw, enhanced = enhance_total({"interest": 40})
    assert raw == 40
    assert enhanced == pytest.approx(55)


def test_well_roundedness_needs_three_dimensions():
    two = {"interest": 10, "work_style": 8}
    three = {"interest": 10, "work_style": 8, "cognitive": 8}
    assert enhance_total(two) == (18, 18)
    assert enhance_total(three) == (26, 32)


def test_mini_game_is_summed_but_not_a_roundedness_dimension():
    raw, enhanced = enhance_total({"mini_game": 10, "social": 6})
    assert (raw, enhanced) == (16, 16)



def test_match_range():
    _raw, empty = enhance_total({})
    _raw, maxed = enhance_total({
        "interest": 40, "work_style": 15, "cognitive": 15,
        "social": 10, "motivation": 20, "mini_game": 10,
    })
    assert rescale(empty) == 5
    assert rescale(maxed) == 100
