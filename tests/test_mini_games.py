import pytest

from core.quiz_results import MiniGameMetrics
from data.mini_game_rules import MetricCondition, MiniGameRule, is_, over
from matching.mini_games import career_matches_rule, condition_holds, score_mini_games


def test_conditions():
    metrics = MiniGameMetrics(attention_control=70, brain_dominance="left")
    assert not condition_holds(over("attention_control", 70), metrics)
    assert condition_holds(over("attention_control", 69), metrics)
    assert condition_holds(is_("brain_dominance", "left"), metrics)
    assert not condition_holds(over("brain_dominance", 1), metrics)
    assert not condition_holds(over("motor_control", 0), metrics)
    assert not condition_holds(MetricCondition("attention_control", above=0, below=50), metrics)
    assert not condition_holds(over("attention_control", 0), None)


def test_no_metrics_no_bonus(make_career):
    assert score_mini_games(make_career(skills=("Coding",)), None).score == 0


def test_fixed_bonus(make_career):
    career = make_career(skills=("Coding",))
    result = score_mini_games(career, MiniGameMetrics(brain_dominance="left"))
    assert result.score == 3
    assert result.matches == ({"rule": "left_brain", "contribution": 3},)


def test_scaled_bonus(make_career):
    career = make_career(skills=("Graphic Design",))
    result = score_mini_games(career, MiniGameMetrics(visual_processing=80))
    assert result.score == pytest.approx(2.4)


def test_environment_keywords_also_match(make_career):
    career = make_career(work_environment="Fast-paced kitchens")
    result = score_mini_games(career, MiniGameMetrics(multi_tasking_score=90))
    assert result.score == pytest.approx(2.7)


def test_work_style_target(make_career):
    career = make_career(work_style=("Structured",))
    metrics = MiniGameMetrics(attention_control=80, response_consistency=80)
    assert score_mini_games(career, metrics).score == 2


def test_unknown_target_rejected(make_career):
    rule = MiniGameRule(name="bad", conditions=(), target="salary", keywords=("x",))
    with pytest.raises(ValueError):
        career_matches_rule(rule, make_career())


def test_capped_at_ten(make_career):
    career = make_career(
        skills=("Strategic Planning", "Design", "Manual Craft", "Attention to Detail", "Construction"),
    )
    metrics = MiniGameMetrics(
        decision_making=100, pattern_recognition=100, visual_processing=100,
        spatial_awareness=100, attention_control=100, motor_control=100,
    )
    result = score_mini_games(career, metrics)
    assert result.score == 10
    assert sum(m["contribution"] for m in result.matches) > 10
