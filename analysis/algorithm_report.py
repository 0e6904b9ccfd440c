import logging
from dataclasses import dataclass, field
from typing import Optional

from core.quiz_results import QuizResults
from fixtures.archetype_profiles import ARCHETYPES
from ingestion.career_catalog import Catalog
from matching.engine import generate_career_matches
from models.career_profile import ScoredCareer

"""
Scenario runner for the matching engine.

Each scenario pairs an archetype quiz result with the careers it should
surface. Results are summarised as accuracy per scenario category, where
the category is the scenario id prefix ("trade-electrician" -> "trade").
"""

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    description: str
    results: QuizResults
    expected_top: Optional[str] = None
    min_match: Optional[int] = None
    expected_careers: tuple[str, ...] = ()

    @property
    def category(self) -> str:
        return self.id.split("-")[0]


@dataclass
class ScenarioResult:
    scenario: Scenario
    matches: list[ScoredCareer]
    passed: bool
    issues: list[str] = field(default_factory=list)


SCENARIOS = (
    Scenario(
        id="technical-software",
        name="Software Developer",
        description="Analytical, independent coder with strong pattern recognition",
        results=ARCHETYPES["software_developer"],
        expected_top="Developer",
        min_match=60,
        expected_careers=("Software Developer",),
    ),
    Scenario(
        id="trade-electrician",
        name="Electrician",
        description="Hands-on, structured worker with precise motor control",
        results=ARCHETYPES["electrician"],
        min_match=50,
        expected_careers=("Electrician",),
    ),
    Scenario(
        id="creative-designer",
        name="Graphic Designer",
        description="Flexible visual thinker motivated by creating",
        results=ARCHETYPES["graphic_designer"],
        min_match=50,
        expected_careers=("Designer",),
    ),
    Scenario(
        id="healthcare-nurse",
        name="Registered Nurse",
        description="Team player who wants to help people under pressure",
        results=ARCHETYPES["registered_nurse"],
        min_match=50,
        expected_careers=("Nurse",),
    ),
    Scenario(
        id="entrepreneurial-owner",
        name="Business Owner",
        description="Autonomous risk-taker with fast, confident decisions",
        results=ARCHETYPES["entrepreneur"],
        min_match=40,
        expected_careers=("Entrepreneur",),
    ),
)


def evaluate(scenario: Scenario, matches: list[ScoredCareer]) -> ScenarioResult:
    """
    Rules:
    - expected_top must be a substring of the first match's title
    - the first match must reach min_match
    - every expected career must appear somewhere in the matches
    """
    issues = []

    if not matches:
        return ScenarioResult(scenario, matches, False, ["no matches returned"])

    top = matches[0]
    if scenario.expected_top and scenario.expected_top not in top.title:
        issues.append(f"expected top career '{scenario.expected_top}', got '{top.title}'")

    if scenario.min_match is not None and top.match < scenario.min_match:
        issues.append(f"top match {top.match}% below minimum {scenario.min_match}%")

    titles = [m.title for m in matches]
    missing = [c for c in scenario.expected_careers if not any(c in t for t in titles)]
    if missing:
        issues.append(f"missing expected careers: {', '.join(missing)}")

    return ScenarioResult(scenario, matches, not issues, issues)


def run_scenarios(scenarios=SCENARIOS, catalog: Optional[Catalog] = None) -> list[ScenarioResult]:
    out = []
    for scenario in scenarios:
        result = evaluate(scenario, generate_career_matches(scenario.results, catalog))
        logger.info("%s: %s", scenario.id, "pass" if result.passed else "fail")
        out.append(result)
    return out


def calculate_accuracy(results: list[ScenarioResult]) -> tuple[float, dict[str, float]]:
    """Overall and per-category pass rates, as percentages."""
    if not results:
        return 0.0, {}

    by_category = {}
    for r in results:
        passed, total = by_category.get(r.scenario.category, (0, 0))
        by_category[r.scenario.category] = (passed + int(r.passed), total + 1)

    overall = 100.0 * sum(r.passed for r in results) / len(results)
    return overall, {c: 100.0 * p / t for c, (p, t) in by_category.items()}


def build_report(results: list[ScenarioResult]) -> str:
    overall, by_category = calculate_accuracy(results)
    passed = sum(r.passed for r in results)

    lines = [
        "=" * 60,
        "CAREER MATCHING ALGORITHM ANALYSIS REPORT",
        "=" * 60,
        "",
        "1. ALGORITHM ACCURACY",
        f"   Overall: {overall:.1f}% ({passed}/{len(results)} scenarios passed)",
    ]
    for category, accuracy in sorted(by_category.items()):
        lines.append(f"   {category}: {accuracy:.1f}%")

    lines += ["", "DETAILED TEST RESULTS", "-" * 60]
    for r in results:
        status = "PASS" if r.passed else "FAIL"
        lines.append(f"[{status}] {r.scenario.name} ({r.scenario.id})")
        for i, m in enumerate(r.matches, 1):
            lines.append(f"    {i}. {m.title} ({m.category}) {m.match}%")
        for issue in r.issues:
            lines.append(f"    ! {issue}")

    return "\n".join(lines)
