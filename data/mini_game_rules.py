"""
Mini-game metric rules (DECLARATIVE)

Rules:
- Every rule is data: metric conditions + where to look in the career
- One runner per rule family evaluates them (matching/mini_games.py)
- Metric names are MiniGameMetrics field names

Families:
- MINI_GAME_BONUS_RULES: additive career bonus, capped at 10
- COGNITIVE_BOOSTS: multiplier on a cognitive category contribution
- SOCIAL_INSIGHTS: extra social points for dominant traits
- ROADMAP_ENHANCEMENTS: extra roadmap steps
- VENTURE_STEPS: extra roadmap steps for business owners
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MetricCondition:
    """
    A metric test. Numeric bounds are strict; a missing metric never holds.
    `equals` compares categorical metrics (brain_dominance, stress_response).
    """

    metric: str
    above: Optional[float] = None
    below: Optional[float] = None
    equals: Optional[str] = None


def present(metric: str) -> MetricCondition:
    return MetricCondition(metric, above=0)


def over(metric: str, threshold: float) -> MetricCondition:
    return MetricCondition(metric, above=threshold)


def is_(metric: str, value: str) -> MetricCondition:
    return MetricCondition(metric, equals=value)


# ======================================================
# MINI-GAME BONUS
# Max contribution: 10
# ======================================================

@dataclass(frozen=True)
class MiniGameRule:
    """
    target:
    - "skills": any career skill contains a keyword
    - "title": the title contains a keyword
    - "work_style": a career work style equals a keyword
    environment_keywords also satisfy the rule when found in the work environment.

    Bonus = points + sum(metric / 100 * weight for metric, weight in scaled_by)
    """

    name: str
    conditions: tuple[MetricCondition, ...]
    target: str
    keywords: tuple[str, ...]
    points: float = 0.0
    scaled_by: tuple[tuple[str, float], ...] = ()
    environment_keywords: tuple[str, ...] = ()


MINI_GAME_BONUS_RULES = (
    MiniGameRule(
        name="decision_pattern",
        conditions=(present("decision_making"), present("pattern_recognition")),
        target="skills",
        keywords=("analytical", "strategy", "planning", "decision", "management"),
        scaled_by=(("decision_making", 3), ("pattern_recognition", 2)),
    ),
    MiniGameRule(
        name="left_brain",
        conditions=(is_("brain_dominance", "left"),),
        target="skills",
        keywords=("coding", "programming", "analysis", "engineering", "mathematics"),
        points=3,
    ),
    MiniGameRule(
        name="right_brain",
        conditions=(is_("brain_dominance", "right"),),
        target="skills",
        keywords=("creative", "design", "artistic", "visual", "communication"),
        points=3,
    ),
    MiniGameRule(
        name="balanced_brain",
        conditions=(is_("brain_dominance", "balanced"),),
        target="title",
        keywords=("manager", "consultant", "coordinator"),
        points=2.5,
    ),
    MiniGameRule(
        name="planner",
        conditions=(over("attention_control", 70), over("response_consistency", 70)),
        target="work_style",
        keywords=("structured", "methodical", "precise"),
        points=2,
    ),
    MiniGameRule(
        name="reactive",
        conditions=(
            over("attention_control", 70),
            MetricCondition("response_consistency", above=0, below=50),
        ),
        target="work_style",
        keywords=("flexible", "adaptable", "dynamic"),
        points=2,
    ),
    MiniGameRule(
        name="visual",
        conditions=(over("visual_processing", 70),),
        target="skills",
        keywords=("design", "visual", "graphic", "art", "media", "imaging"),
        scaled_by=(("visual_processing", 3),),
    ),
    MiniGameRule(
        name="spatial",
        conditions=(over("spatial_awareness", 70),),
        target="skills",
        keywords=("architecture", "engineering", "spatial", "navigation", "construction"),
        scaled_by=(("spatial_awareness", 3),),
    ),
    MiniGameRule(
        name="attention",
        conditions=(over("attention_control", 70),),
        target="skills",
        keywords=("detail", "precision", "accuracy", "quality", "inspection", "careful"),
        scaled_by=(("attention_control", 3),),
    ),
    MiniGameRule(
        name="verbal",
        conditions=(over("verbal_processing", 70),),
        target="skills",
        keywords=("communication", "writing", "verbal", "language", "speaking", "presentation"),
        scaled_by=(("verbal_processing", 3),),
    ),
    MiniGameRule(
        name="memory",
        conditions=(over("memory_capacity", 70),),
        target="skills",
        keywords=("knowledge", "memory", "learning", "retention", "recall", "research"),
        scaled_by=(("memory_capacity", 3),),
    ),
    MiniGameRule(
        name="motor",
        conditions=(over("motor_control", 70),),
        target="skills",
        keywords=("manual", "physical", "hands-on", "dexterity", "craft", "surgical"),
        scaled_by=(("motor_control", 3),),
    ),
    MiniGameRule(
        name="multitasking",
        conditions=(over("multi_tasking_score", 70),),
        target="skills",
        keywords=("multitask", "dynamic", "fast", "simultaneous", "coordinate"),
        scaled_by=(("multi_tasking_score", 3),),
        environment_keywords=("fast-paced",),
    ),
    MiniGameRule(
        name="processing_speed",
        conditions=(over("processing_speed", 70),),
        target="skills",
        keywords=("adapt", "learn", "technology", "evolving", "innovative"),
        scaled_by=(("processing_speed", 3),),
    ),
    MiniGameRule(
        name="pressure",
        conditions=(over("attention_control", 75),),
        target="skills",
        keywords=("pressure", "stress", "deadline", "emergency", "critical"),
        scaled_by=(("attention_control", 3),),
        environment_keywords=("high-pressure",),
    ),
)


# ======================================================
# COGNITIVE BOOSTS
# (category, condition, added multiplier)
# ======================================================

COGNITIVE_BOOSTS = (
    ("problem-solving", over("decision_making", 70), 0.15),
    ("attention-to-detail", over("attention_control", 70), 0.2),
    ("spatial-reasoning", over("spatial_awareness", 75), 0.25),
    ("creativity", is_("brain_dominance", "balanced"), 0.15),
)


# ======================================================
# SOCIAL INSIGHTS
# Points = base + floor(metric / divisor) when scale_metric is set
# ======================================================

@dataclass(frozen=True)
class SocialInsight:
    trait: str
    conditions: tuple[MetricCondition, ...]
    base: int
    description_terms: tuple[str, ...] = ()
    title_terms: tuple[str, ...] = ()
    work_styles: tuple[str, ...] = ()
    scale_metric: Optional[str] = None
    divisor: int = 1


_HIGH_PRESSURE = (
    "pressure", "deadline", "emergency", "critical", "urgent", "life-saving",
    "crisis", "stress", "demanding", "high-stakes", "time-sensitive",
)

SOCIAL_INSIGHTS = (
    SocialInsight(
        trait="extrovert",
        conditions=(over("multitasking_ability", 70),),
        base=1,
        description_terms=("multi", "fast-paced", "dynamic", "juggl", "simultaneously"),
        work_styles=("team",),
        scale_metric="multitasking_ability",
        divisor=25,
    ),
    SocialInsight(
        trait="team-player",
        conditions=(over("multitasking_ability", 65),),
        base=1,
        description_terms=("team", "collaborate", "coordinate"),
        work_styles=("team",),
        scale_metric="multitasking_ability",
        divisor=30,
    ),
    SocialInsight(
        trait="leader",
        conditions=(over("decision_speed", 75),),
        base=2,
        description_terms=("decision", "leadership", "manage", "direct", "guide"),
        title_terms=("manager", "director", "lead"),
        scale_metric="decision_speed",
        divisor=25,
    ),
    SocialInsight(
        trait="independent",
        conditions=(over("decision_speed", 70),),
        base=1,
        description_terms=("independent", "self-directed", "autonomous", "initiative"),
        work_styles=("independent",),
        scale_metric="decision_speed",
        divisor=30,
    ),
    SocialInsight(
        trait="risk-taker",
        conditions=(over("pattern_recognition", 70),),
        base=1,
        description_terms=("innovat", "trend", "strat", "disrupt", "adapt", "entrepreneur"),
        title_terms=("founder", "strategist"),
        scale_metric="pattern_recognition",
        divisor=25,
    ),
    SocialInsight(
        trait="strategic",
        conditions=(over("pattern_recognition", 75),),
        base=2,
        description_terms=("strategy", "plan", "analyze", "forecast"),
        title_terms=("analyst", "strategist", "planner"),
        scale_metric="pattern_recognition",
        divisor=25,
    ),
    SocialInsight(
        trait="calm",
        conditions=(is_("stress_response", "low"),),
        base=2,
        description_terms=_HIGH_PRESSURE,
        title_terms=_HIGH_PRESSURE,
    ),
    SocialInsight(
        trait="resilient",
        conditions=(is_("stress_response", "high"),),
        base=3,
        description_terms=_HIGH_PRESSURE,
        title_terms=_HIGH_PRESSURE,
    ),
)


# ======================================================
# ROADMAP ENHANCEMENTS
# Sorted by priority (lower first), at most 2 per phase
# ======================================================

@dataclass(frozen=True)
class RoadmapEnhancement:
    title: str
    description: str
    phase: str  # foundation | specialized | launch
    priority: int
    conditions: tuple[MetricCondition, ...]
    skill_keywords: tuple[str, ...] = ()
    environment_keywords: tuple[str, ...] = ()


ROADMAP_ENHANCEMENTS = (
    RoadmapEnhancement(
        "Analytical Skill Development",
        "Leverage your analytical strengths through structured learning and problem-solving activities",
        "specialized", 2,
        (is_("brain_dominance", "left"),),
        skill_keywords=("analysis", "programming", "coding", "mathematics"),
    ),
    RoadmapEnhancement(
        "Creative Approach Optimization",
        "Enhance your creative thinking through design-focused projects and innovation challenges",
        "specialized", 2,
        (is_("brain_dominance", "right"),),
        skill_keywords=("creative", "design", "communication", "artistic"),
    ),
    RoadmapEnhancement(
        "Versatile Thinking Application",
        "Apply your balanced thinking style to multidisciplinary projects requiring both analysis and creativity",
        "launch", 1,
        (is_("brain_dominance", "balanced"),),
    ),
    RoadmapEnhancement(
        "Strategic Planning Skills",
        "Develop formal project management and strategic planning methodologies",
        "specialized", 1,
        (over("processing_speed", 70), over("response_consistency", 70)),
    ),
    RoadmapEnhancement(
        "Adaptive Response Training",
        "Refine your ability to excel in dynamic environments through agile methodologies",
        "specialized", 1,
        (over("processing_speed", 70), MetricCondition("response_consistency", above=0, below=50)),
    ),
    RoadmapEnhancement(
        "Spatial Intelligence Applications",
        "Apply your strong visual-spatial skills to specialized aspects of your career path",
        "specialized", 2,
        (over("spatial_awareness", 70),),
        skill_keywords=("design", "architecture", "visual", "spatial"),
    ),
    RoadmapEnhancement(
        "Detail-Oriented Specialization",
        "Pursue roles or certifications that leverage your exceptional attention to detail",
        "specialized", 3,
        (over("attention_control", 70),),
    ),
    RoadmapEnhancement(
        "Resource Optimization Training",
        "Develop advanced resource management techniques for efficiency and productivity",
        "launch", 2,
        (over("pattern_recognition", 70),),
        skill_keywords=("management", "logistics", "planning", "resource"),
    ),
    RoadmapEnhancement(
        "Technical Precision Development",
        "Refine your technical coordination skills through specialized hands-on training",
        "foundation", 3,
        (over("motor_control", 70),),
        skill_keywords=("manual", "physical", "hands-on", "craft"),
    ),
    RoadmapEnhancement(
        "Complex Workflow Management",
        "Develop systems for handling multiple priorities in fast-paced environments",
        "launch", 2,
        (over("multi_tasking_score", 70),),
    ),
    RoadmapEnhancement(
        "Accelerated Learning Path",
        "Leverage your ability to rapidly acquire new skills through intensive learning modules",
        "foundation", 1,
        (over("processing_speed", 70),),
    ),
    RoadmapEnhancement(
        "High-Pressure Performance Optimization",
        "Seek opportunities that leverage your ability to excel under pressure",
        "launch", 3,
        (over("attention_control", 75),),
        skill_keywords=("emergency", "critical", "deadline"),
        environment_keywords=("high-pressure",),
    ),
)

MAX_ENHANCEMENTS_PER_PHASE = 2


# ======================================================
# VENTURE STEPS
# Business-owner roadmaps only, appended to the specialized phase
# ======================================================

VENTURE_STEPS = (
    RoadmapEnhancement(
        "Decision Framework Development",
        "Create structured processes for rapid, effective business decision-making",
        "specialized", 0,
        (over("decision_making", 65),),
    ),
    RoadmapEnhancement(
        "Strategic Risk Management",
        "Develop frameworks to evaluate and mitigate business risks while capitalizing on opportunities",
        "specialized", 0,
        (over("pattern_recognition", 65),),
    ),
    RoadmapEnhancement(
        "Resource Optimization Strategy",
        "Create systems to maximize efficiency of financial, human, and operational resources",
        "specialized", 0,
        (over("multi_tasking_score", 65),),
    ),
)
