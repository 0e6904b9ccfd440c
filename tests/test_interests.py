import pytest

from core.quiz_results import InterestSelection
from ingestion.career_catalog import InterestOption
from matching.interests import interest_factor, score_interests
from matching.signals import resolve_interest_weights


def test_no_overlap_scores_zero(make_career):
    career = make_career(related_interests=(19, 20))
    assert score_interests(career, {1: 90}).score == 0


def test_direct_match(make_career):
    career = make_career(related_interests=(1, 2))
    result = score_interests(career, {1: 90, 2: 80})
    assert result.score == 38
    assert all(m["exact"] for m in result.matches)
    assert result.matches[0]["relevanceBoost"] == 1.5


def test_cluster_fallback_counts_half(make_career):
    # 5 and 12 share a cluster with 1
    career = make_career(related_interests=(1,))
    result = score_interests(career, {5: 80})
    assert 0 < result.score < score_interests(career, {1: 80}).score
    assert result.matches[0]["exact"] is False
    assert result.matches[0]["weight"] == 40


def test_cluster_fallback_unused_when_direct_hit(make_career):
    career = make_career(related_interests=(1,))
    result = score_interests(career, {1: 50, 5: 90})
    assert [m["id"] for m in result.matches] == [1]


@pytest.mark.parametrize("low, high", [(10, 40), (40, 80), (80, 100)])
def test_raising_a_related_interest_never_lowers_the_score(make_career, low, high):
    career = make_career(related_interests=(3, 4))
    assert score_interests(career, {3: high}).score >= score_interests(career, {3: low}).score


def test_interest_factor_is_bounded():
    assert interest_factor(0.5, 0) > 0
    assert interest_factor(10, 1000) == pytest.approx(1.0)


def test_resolve_interest_weights():
    options = [InterestOption(1, "Software Development"), InterestOption(2, "Engineering")]
    selections = [
        InterestSelection("software development", 70),
        InterestSelection("Engineering", 40),
        InterestSelection("Astrology", 90),
        InterestSelection("Engineering", 60),
    ]
    assert resolve_interest_weights(selections, options) == {1: 70, 2: 60}
