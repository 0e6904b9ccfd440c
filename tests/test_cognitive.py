import pytest

from core.quiz_results import MiniGameMetrics
from matching.classify import classify_career
from matching.cognitive import score_cognitive


def _score(career, strengths, metrics=None):
    return score_cognitive(career, classify_career(career), tuple(strengths), metrics)


def test_skill_match(make_career):
    career = make_career(skills=("Problem Solving",))
    result = _score(career, ["skills"])
    assert result.score == 5
    assert result.matches[0]["type"] == "skills-to-problem-solving"


def test_no_strengths_no_score(make_career):
    career = make_career(skills=("Problem Solving", "Design"))
    assert _score(career, []).score == 0


def test_description_used_when_skills_match_little(make_career):
    career = make_career(description="Diagnose and troubleshoot faults.")
    result = _score(career, ["knowledge"])
    assert result.score == 3
    assert result.matches[0]["skill"] == "career description"


def test_description_ignored_after_two_skill_matches(make_career):
    career = make_career(
        skills=("Problem Solving", "Attention to Detail"),
        description="Create original designs.",
    )
    result = _score(career, ["learned"])
    assert all(m["skill"] != "career description" for m in result.matches)


def test_metric_boost(make_career):
    career = make_career(skills=("Problem Solving",))
    result = _score(career, ["skills"], MiniGameMetrics(decision_making=80))
    assert result.matches[0]["contribution"] == pytest.approx(5 * 0.9 * 1.15, abs=0.01)


def test_trade_multiplier(make_career):
    career = make_career(title="Electrician", skills=("Problem Solving",))
    result = _score(career, ["skills"])
    assert result.matches[0]["contribution"] == pytest.approx(4.5 * 1.2)


def test_knowledge_special(make_career):
    career = make_career(skills=("Research",))
    assert _score(career, ["knowledge"]).score == 5


def test_motor_precision_special(make_career):
    career = make_career(skills=("Equipment Operation",))
    assert _score(career, [], MiniGameMetrics(motor_control=85)).score == 4
    assert _score(career, [], MiniGameMetrics(motor_control=80)).score == 0


def test_capped_at_fifteen(make_career):
    career = make_career(
        title="Electrician",
        skills=("Problem Solving", "Design", "Attention to Detail", "Spatial Layout", "Systems"),
    )
    metrics = MiniGameMetrics(decision_making=90, attention_control=90, spatial_awareness=90,
                              brain_dominance="balanced", motor_control=95)
    assert _score(career, ["skills", "knowledge", "learned"], metrics).score == 15
