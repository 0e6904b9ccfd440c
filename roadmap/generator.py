import logging
from dataclasses import dataclass
from typing import Optional

from core.quiz_results import MiniGameMetrics, QuizResults
from data.mini_game_rules import (
    MAX_ENHANCEMENTS_PER_PHASE,
    ROADMAP_ENHANCEMENTS,
    VENTURE_STEPS,
    RoadmapEnhancement,
)
from ingestion.career_catalog import Catalog, default_catalog
from matching.classify import is_business_owner
from matching.mini_games import all_hold
from models.career_profile import Career
from models.roadmap import CareerRoadmap, RoadmapPhase, RoadmapStep
from roadmap.templates import (
    ACCELERATED_STEP,
    ADVANCED_SKILL,
    AGE_GROUPS,
    CHOOSE_SPECIALIZATION,
    CREDENTIAL_STEPS,
    DEEPEN_EXPERTISE,
    DEFAULT_CREDENTIAL_STEP,
    DEFAULT_EDUCATION_STEP,
    DEFAULT_PRACTICE_STEP,
    DIFFICULTY_SCALE,
    EDUCATION_STEPS,
    EXPERIENCE_LEVELS,
    FOUNDATION,
    LAUNCH,
    LAUNCH_STEPS,
    LEAN_STARTUP_STEP,
    MASTER_SKILL,
    MENTORSHIP_STEP,
    PHASE_DESCRIPTIONS,
    PHASE_TITLES,
    PRACTICE_STEPS,
    RETRAINING_STEP,
    SKIP_BASICS,
    SPECIALIZED,
    TEEN_EXTRA_YEARS,
    TIMELINE_COMPRESSION,
    TIMELINE_SCALE,
    VENTURE_FOUNDATION,
    VENTURE_LAUNCH,
    VENTURE_SPECIALIZED,
    fallback_roadmap,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Adjustments:
    start_faster: bool = False
    skip_basics: bool = False
    add_mentorship: bool = False
    add_retraining: bool = False
    easier: bool = False


def adjustments_for(age_group: str, prior_experience: str) -> Adjustments:
    if age_group not in AGE_GROUPS:
        raise ValueError(f"Unknown age group: {age_group!r}")
    if prior_experience not in EXPERIENCE_LEVELS:
        raise ValueError(f"Unknown experience level: {prior_experience!r}")

    experienced = prior_experience in ("advanced", "expert")
    return Adjustments(
        start_faster=age_group in ("youngAdult", "lateCareer") or prior_experience != "none",
        skip_basics=prior_experience in ("intermediate", "advanced", "expert"),
        add_mentorship=age_group == "teen",
        add_retraining=age_group in ("adult", "midCareer", "lateCareer"),
        easier=experienced,
    )


# ======================================================
# ESTIMATES
# ======================================================

def base_timeline(career: Career) -> int:
    """Index into TIMELINE_SCALE."""
    education = career.education_path
    if "Master" in education or "Doctoral" in education:
        return 4
    if "Bachelor" in education:
        return 3
    if "bootcamp" in education or "certification" in education:
        return 0
    return 2


def adjust_timeline(index: int, age_group: str) -> str:
    if age_group == "teen":
        low, high = TIMELINE_SCALE[index].split(" ")[0].split("-")
        return f"{low}-{float(high) + TEEN_EXTRA_YEARS:g} Years"
    return TIMELINE_SCALE[max(0, index - TIMELINE_COMPRESSION.get(age_group, 0))]


def estimate_investment(career: Career) -> str:
    education = career.education_path
    if "Doctoral" in education:
        return "$$$$$"
    if "Master" in education:
        return "$$$$"
    if "Bachelor" in education:
        return "$$$"
    if "Associate" in education:
        return "$$"
    if "self-learning" in education or "bootcamp" in education:
        return "$"
    return "$$$"


def base_difficulty(career: Career) -> int:
    """Index into DIFFICULTY_SCALE."""
    education = career.education_path
    if "Doctoral" in education or "Surgeon" in career.title:
        return 4
    if "Master" in education or "Mathematics" in career.skills:
        return 3
    if "Bachelor" in education:
        return 2
    if "bootcamp" in education or "self-learning" in education:
        return 0
    return 1


# ======================================================
# STEPS
# ======================================================

def _step(template, **fmt) -> RoadmapStep:
    title, description = template
    return RoadmapStep(title.format(**fmt), description.format(**fmt))


def _by_title(rules, title: str, default):
    for keywords, template in rules:
        if any(k in title for k in keywords):
            return template
    return default


def _education_step(career: Career) -> RoadmapStep:
    for keywords, title, description in EDUCATION_STEPS:
        if any(k in career.education_path for k in keywords):
            return RoadmapStep(title, description or career.education_path)
    return RoadmapStep(*DEFAULT_EDUCATION_STEP)


def _base_steps(career: Career, venture: bool) -> dict[str, list[RoadmapStep]]:
    title = career.title
    skills = career.skills
    steps = {FOUNDATION: [], SPECIALIZED: [], LAUNCH: []}

    if skills:
        steps[FOUNDATION].append(_step(MASTER_SKILL, skill=skills[0], title=title))
    steps[FOUNDATION].append(_education_step(career))

    if venture:
        steps[FOUNDATION] += [RoadmapStep(*s) for s in VENTURE_FOUNDATION]
        steps[SPECIALIZED] += [RoadmapStep(*s) for s in VENTURE_SPECIALIZED]
        steps[LAUNCH] += [RoadmapStep(*s) for s in VENTURE_LAUNCH]
    else:
        steps[FOUNDATION].append(RoadmapStep(*_by_title(PRACTICE_STEPS, title, DEFAULT_PRACTICE_STEP)))

    steps[SPECIALIZED].append(_step(CHOOSE_SPECIALIZATION, title=title))
    if len(skills) >= 3:
        steps[SPECIALIZED].append(_step(ADVANCED_SKILL, skill=skills[1]))
    else:
        steps[SPECIALIZED].append(RoadmapStep(*DEEPEN_EXPERTISE))
    steps[SPECIALIZED].append(RoadmapStep(*_by_title(CREDENTIAL_STEPS, title, DEFAULT_CREDENTIAL_STEP)))

    steps[LAUNCH] += [RoadmapStep(*s) for s in LAUNCH_STEPS]
    return steps


def _skip_basics(steps: dict[str, list[RoadmapStep]]) -> None:
    for phase, fragments, replacement in SKIP_BASICS:
        for i, step in enumerate(steps[phase]):
            if any(f in step.title for f in fragments):
                steps[phase][i] = RoadmapStep(*replacement)
                break


def _enhancement_applies(rule: RoadmapEnhancement, career: Career, metrics: MiniGameMetrics) -> bool:
    if not all_hold(rule.conditions, metrics):
        return False
    if not rule.skill_keywords and not rule.environment_keywords:
        return True
    if any(k in career.work_environment.lower() for k in rule.environment_keywords):
        return True
    return any(k in s.lower() for s in career.skills for k in rule.skill_keywords)


def mini_game_enhancements(career: Career, metrics: Optional[MiniGameMetrics]) -> list[RoadmapEnhancement]:
    """Applicable enhancements, at most 2 per phase, lowest priority number first."""
    if metrics is None:
        return []

    applicable = sorted(
        (r for r in ROADMAP_ENHANCEMENTS if _enhancement_applies(r, career, metrics)),
        key=lambda r: r.priority,
    )
    per_phase = {}
    chosen = []
    for rule in applicable:
        if per_phase.get(rule.phase, 0) < MAX_ENHANCEMENTS_PER_PHASE:
            per_phase[rule.phase] = per_phase.get(rule.phase, 0) + 1
            chosen.append(rule)
    return chosen


# ======================================================
# ENTRY POINT
# ======================================================

def generate_roadmap(
    career_title: str,
    results: Optional[QuizResults] = None,
    age_group: str = "teen",
    prior_experience: str = "none",
    catalog: Optional[Catalog] = None,
) -> CareerRoadmap:
    """
    Build a three-phase plan for one career.

    Unknown titles get the generic plan. Age group and prior experience
    shift the timeline, difficulty and steps; mini-game metrics add up to
    two extra steps per phase.
    """
    catalog = catalog or default_catalog()
    career = catalog.find_career(career_title)
    if career is None:
        logger.info("No catalog entry for %r, using generic roadmap", career_title)
        return fallback_roadmap(career_title)

    adj = adjustments_for(age_group, prior_experience)
    venture = is_business_owner(career)
    metrics = results.mini_game_metrics if results else None

    difficulty = base_difficulty(career)
    if adj.easier:
        difficulty = max(0, difficulty - 1)

    steps = _base_steps(career, venture)
    if adj.skip_basics:
        _skip_basics(steps)
    if adj.add_mentorship:
        steps[SPECIALIZED].append(RoadmapStep(*MENTORSHIP_STEP))
    if adj.add_retraining:
        steps[LAUNCH].append(RoadmapStep(*RETRAINING_STEP))
    if adj.start_faster:
        steps[SPECIALIZED].append(RoadmapStep(*(LEAN_STARTUP_STEP if venture else ACCELERATED_STEP)))

    if venture and metrics is not None:
        for rule in VENTURE_STEPS:
            if all_hold(rule.conditions, metrics):
                steps[rule.phase].append(RoadmapStep(rule.title, rule.description))

    for rule in mini_game_enhancements(career, metrics):
        steps[rule.phase].append(RoadmapStep(rule.title, rule.description))

    phases = tuple(
        RoadmapPhase(
            PHASE_TITLES[phase],
            PHASE_DESCRIPTIONS[phase].format(title=career.title),
            tuple(steps[phase]),
        )
        for phase in (FOUNDATION, SPECIALIZED, LAUNCH)
    )

    return CareerRoadmap(
        career_path=career.title,
        timeline=adjust_timeline(base_timeline(career), age_group),
        investment=estimate_investment(career),
        difficulty=DIFFICULTY_SCALE[difficulty],
        phases=phases,
        age_group=age_group,
        prior_experience=prior_experience,
    )
