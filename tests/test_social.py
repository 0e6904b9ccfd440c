from core.quiz_results import MiniGameMetrics
from matching.classify import classify_career
from matching.social import score_social


def _score(career, traits, metrics=None):
    return score_social(career, classify_career(career), tuple(traits), metrics)


def test_environment_match(make_career):
    career = make_career(work_environment="Remote")
    result = _score(career, ["introvert"])
    assert result.score == 4
    assert result.matches[0]["matchType"] == "environment"


def test_lower_ranked_trait_counts_less(make_career):
    career = make_career(work_environment="Remote")
    assert _score(career, ["leader", "introvert"]).score == 3


def test_trade_careers_infer_trade_traits(make_career):
    electrician = make_career(title="Electrician")
    result = _score(electrician, ["supporter"])
    assert result.score == 2
    assert result.matches[0]["matchType"] == "trade_inference"
    assert _score(make_career(), ["supporter"]).score == 0


def test_trade_bonus_for_unmatched_trait(make_career):
    electrician = make_career(title="Electrician")
    result = _score(electrician, ["leader", "supporter"])
    assert result.score == 2
    assert [m["matchType"] for m in result.matches] == ["trade_specific"]


def test_leadership_title(make_career):
    career = make_career(title="Shift Foreman")
    result = _score(career, ["leader"])
    assert result.score == 3
    assert result.matches[0]["matchType"] == "title_explicit"


def test_stress_insight(make_career):
    career = make_career(description="Respond to emergency calls.")
    metrics = MiniGameMetrics(stress_response="high")
    assert _score(career, ["resilient"], metrics).score == 3
    assert _score(career, ["resilient"]).score == 0


def test_scaled_insight(make_career):
    career = make_career(work_style=("Team",))
    metrics = MiniGameMetrics(multitasking_ability=80)
    assert _score(career, ["extrovert"], metrics).score == 4


def test_capped_at_ten(make_career):
    career = make_career(
        title="Emergency Operations Director",
        description="Lead a team under pressure, manage strategy and plan for crisis.",
        work_environment="Remote team, stable, regulated",
        work_style=("Team",),
    )
    metrics = MiniGameMetrics(stress_response="high", pattern_recognition=95, multitasking_ability=95)
    traits = ["introvert", "leader", "cautious", "resilient", "strategic"]
    assert 0 <= _score(career, traits, metrics).score <= 10
