import pytest

from matching.classify import classify_career
from matching.work_styles import score_work_styles


def _score(career, styles):
    return score_work_styles(career, classify_career(career), tuple(styles)).score


def test_matching_style_beats_opposite(make_career):
    structured = make_career(work_style=("Structured",))
    flexible = make_career(work_style=("Flexible",))
    assert _score(structured, ["structured"]) == pytest.approx(6.0)
    assert _score(flexible, ["structured"]) == 0


def test_conflict_penalises_top_style(make_career):
    both = make_career(work_style=("Structured", "Flexible"))
    result = score_work_styles(both, classify_career(both), ("structured",))
    assert result.score == pytest.approx(6.0 * 0.85)
    assert result.matches[-1]["matchType"] == "conflict"


def test_match_tiers(make_career):
    keyword = make_career(work_style=("Research",))
    described = make_career(description="Work in a crew every day.")
    assert _score(keyword, ["analytical"]) == pytest.approx(15 * 0.35 * 0.9)
    assert _score(described, ["team"]) == pytest.approx(15 * 0.3 * 0.5)


def test_lower_ranked_styles_count_less(make_career):
    career = make_career(work_style=("Independent",))
    assert _score(career, ["independent"]) > _score(career, ["analytical", "independent"])


def test_unknown_style_uses_default_profile(make_career):
    career = make_career(work_style=("Creative",))
    assert _score(career, ["creative"]) == pytest.approx(4.5)


def test_trade_career_boosts_trade_styles(make_career):
    career = make_career(title="Electrician", work_style=("Hands-on",))
    assert _score(career, ["hands-on"]) == pytest.approx(15 * 0.5 * 1.2)


def test_score_is_capped(make_career):
    career = make_career(
        title="Electrician",
        work_style=("Hands-on", "Structured", "Team", "Independent", "Analytical"),
    )
    styles = ["hands-on", "structured", "analytical", "team", "independent"]
    assert 0 <= _score(career, styles) <= 15


def test_entrepreneurial_career_boosts_only_relevant_styles(make_career):
    venture = dict(description="Start your own business.")
    independent = make_career(work_style=("Independent",), **venture)
    team = make_career(work_style=("Team",), **venture)

    result = score_work_styles(independent, classify_career(independent), ("independent",))
    assert result.score == pytest.approx(15 * 0.45 * 1.15)
    assert result.matches[0]["matchType"] == "direct_entrepreneur_boosted"
    assert _score(team, ["team"]) == pytest.approx(15 * 0.3)
