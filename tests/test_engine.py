import pytest

from core.quiz_results import InterestSelection, QuizResults
from fixtures.archetype_profiles import ARCHETYPES
from ingestion.career_catalog import Catalog
from matching.aggregate import rescale
from matching.engine import generate_career_matches, rank_all_careers

CAPS = {
    "interest": 40,
    "work_style": 15,
    "cognitive": 15,
    "social": 10,
    "motivation": 20,
    "mini_game": 10,
}


@pytest.mark.parametrize("archetype", sorted(ARCHETYPES))
def test_scores_stay_in_bounds(catalog, archetype):
    for s in rank_all_careers(ARCHETYPES[archetype], catalog):
        for component, cap in CAPS.items():
            assert 0 <= getattr(s, component).score <= cap, (s.career.title, component)
        assert isinstance(s.match, int)
        assert 5 <= s.match <= 100


def test_empty_results_still_score_every_career(catalog):
    ranking = rank_all_careers(QuizResults(), catalog)
    assert len(ranking) == len(catalog.careers)
    assert all(s.match == 5 for s in ranking)
    assert [s.career.id for s in ranking] == [c.id for c in catalog.careers]



def test_match_is_the_rescaled_enhanced_total(catalog):
    for s in rank_all_careers(ARCHETYPES["entrepreneur"], catalog):
        components = (s.interest, s.work_style, s.cognitive, s.social, s.motivation, s.mini_game)
        assert s.raw_total == pytest.approx(sum(c.score for c in components))
        assert s.enhanced_total >= s.raw_total
        assert s.match == rescale(s.enhanced_total)


def test_ranking_is_sorted(catalog):
    ranking = rank_all_careers(ARCHETYPES["electrician"], catalog)
    matches = [s.match for s in ranking]
    assert matches == sorted(matches, reverse=True)


@pytest.mark.parametrize("archetype", sorted(ARCHETYPES))
def test_matches_are_deterministic(catalog, archetype):
    first = generate_career_matches(ARCHETYPES[archetype], catalog)
    second = generate_career_matches(ARCHETYPES[archetype], catalog)
    assert first == second


@pytest.mark.parametrize("archetype", sorted(ARCHETYPES))
def test_at_most_five_unique_matches(catalog, archetype):
    matches = generate_career_matches(ARCHETYPES[archetype], catalog)
    assert len(matches) == 5
    assert len({m.id for m in matches}) == 5
    assert [m.match for m in matches] == sorted((m.match for m in matches), reverse=True)


def test_empty_catalog():
    empty = Catalog(careers=(), interests=())
    assert generate_career_matches(ARCHETYPES["entrepreneur"], empty) == []


def test_software_developer_end_to_end(developer_catalog):
    results = QuizResults(
        work_style={"analytical": 3, "independent": 2},
        cognitive_strength={"skills": 3, "knowledge": 2},
        social_approach={"introvert": 2, "supporter": 1},
        motivation={"solving": 3, "challenges": 2, "learning": 1},
        interests=[InterestSelection("programming", 90), InterestSelection("technology", 80)],
    )
    matches = generate_career_matches(results, developer_catalog)
    assert len(matches) == 1
    assert matches[0].title == "Software Developer"
    assert matches[0].category == "Technology"
    assert matches[0].match >= 70


def test_breakdown_serialises(catalog):
    top = rank_all_careers(ARCHETYPES["software_developer"], catalog)[0]
    data = top.to_dict()
    assert set(data["breakdown"]) == {"interest", "workStyle", "cognitive", "social", "motivation", "miniGame"}
    assert data["match"] == top.match


def test_scored_career_wire_format(catalog):
    match = generate_career_matches(ARCHETYPES["registered_nurse"], catalog)[0].to_dict()
    assert set(match) == {"id", "title", "description", "match", "skills", "imagePath",
                          "salary", "growth", "category"}
    assert isinstance(match["skills"], list)
