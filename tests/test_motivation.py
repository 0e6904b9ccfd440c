import pytest

from matching.classify import classify_career
from matching.motivation import parse_growth, parse_salary, score_motivation


def _score(career, motivations):
    return score_motivation(career, classify_career(career), tuple(motivations)).score


@pytest.mark.parametrize("text, expected", [
    ("$60,040", 60040),
    ("$85,000 - $120,000", 85000),
    ("Variable (highly dependent on business success)", None),
    ("", None),
])
def test_parse_salary(text, expected):
    assert parse_salary(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("+22% (2020-2030)", 22),
    ("-3%", None),
    ("Stable", None),
    ("Faster than average (+)", None),
    ("+0%", None),
])
def test_parse_growth(text, expected):
    assert parse_growth(text) == expected


def test_intrinsic_bias(make_career):
    assert _score(make_career(), ["learning"]) == 4
    assert _score(make_career(), ["rewards"]) == 0


def test_high_salary_rewards(make_career):
    assert _score(make_career(salary="$140,000"), ["rewards"]) == pytest.approx(3)
    assert _score(make_career(salary="$500,000"), ["rewards"]) == pytest.approx(6)


def test_growth(make_career):
    assert _score(make_career(growth="+24%"), ["growth"]) == pytest.approx(3)
    assert _score(make_career(growth="+40%"), ["challenges"]) == pytest.approx(4 + 3)


def test_field_and_attribute_matches(make_career):
    nurse = make_career(
        title="Registered Nurse",
        description="Provide patient care in healthcare settings.",
    )
    result = score_motivation(nurse, classify_career(nurse), ("helping_others",))
    kinds = [m["careerAttribute"] for m in result.matches]
    assert "field:healthcare" in kinds
    assert any("care" in k and not k.startswith("field") for k in kinds)
    assert result.score > 4


def test_trade_alignment(make_career):
    electrician = make_career(title="Electrician")
    plain = make_career()
    assert _score(electrician, ["mastery", "autonomy"]) - _score(plain, ["mastery", "autonomy"]) == pytest.approx(4)


def test_growth_without_a_figure_adds_no_match(make_career):
    career = make_career(growth="Much faster than average (+)")
    result = score_motivation(career, classify_career(career), ("growth",))
    assert all(m["careerAttribute"] != "growth-potential" for m in result.matches)
