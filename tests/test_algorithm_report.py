from analysis.algorithm_report import (
    SCENARIOS,
    Scenario,
    ScenarioResult,
    build_report,
    calculate_accuracy,
    evaluate,
    run_scenarios,
)
from core.quiz_results import QuizResults
from models.career_profile import ScoredCareer


def _match(title, match, category="Technology"):
    return ScoredCareer(id=title.lower(), title=title, description="", match=match, skills=(),
                        image_path="", salary="", growth="", category=category)


def _scenario(**overrides):
    fields = dict(id="technical-dev", name="Dev", description="", results=QuizResults())
    fields.update(overrides)
    return Scenario(**fields)


def test_evaluate_passes_when_expectations_met():
    scenario = _scenario(expected_top="Developer", min_match=60, expected_careers=("Data",))
    result = evaluate(scenario, [_match("Software Developer", 80), _match("Data Scientist", 70)])
    assert result.passed
    assert result.issues == []


def test_evaluate_reports_each_issue():
    scenario = _scenario(expected_top="Nurse", min_match=90, expected_careers=("Therapist",))
    result = evaluate(scenario, [_match("Software Developer", 80)])
    assert not result.passed
    assert len(result.issues) == 3


def test_evaluate_without_matches():
    assert not evaluate(_scenario(), []).passed


def test_accuracy_by_category():
    results = [
        ScenarioResult(_scenario(id="trade-a"), [], True),
        ScenarioResult(_scenario(id="trade-b"), [], False),
        ScenarioResult(_scenario(id="creative-a"), [], True),
        ScenarioResult(_scenario(id="creative-b"), [], True),
    ]
    overall, by_category = calculate_accuracy(results)
    assert overall == 75.0
    assert by_category == {"trade": 50.0, "creative": 100.0}
    assert calculate_accuracy([]) == (0.0, {})


def test_run_scenarios_and_report(catalog):
    results = run_scenarios(catalog=catalog)
    assert [r.scenario.id for r in results] == [s.id for s in SCENARIOS]
    assert all(len(r.matches) == 5 for r in results)

    report = build_report(results)
    assert "CAREER MATCHING ALGORITHM ANALYSIS REPORT" in report
    assert "1. ALGORITHM ACCURACY" in report
    assert "DETAILED TEST RESULTS" in report
    for scenario in SCENARIOS:
        assert scenario.id in report
