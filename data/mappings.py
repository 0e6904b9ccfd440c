"""
Quiz trait → career signal mappings (LITERAL)

Rules:
- Keywords are matched lowercase, as substrings unless noted
- Weights are fixed coefficients, tuned against the archetype scenarios
- No scoring logic here

This file ONLY declares:
- what each trait looks for in a career
- how much a hit is worth
"""

from dataclasses import dataclass
from types import MappingProxyType


# ======================================================
# QUIZ VOCABULARY
# Answers outside these tuples are ignored by the normalizer.
# Order matters: tallies start in this order, so equal counts rank this way.
# ======================================================

WORK_STYLE_ANSWERS = (
    "structured", "flexible", "team", "independent", "hands-on", "analytical",
)

COGNITIVE_ANSWERS = ("learned", "skills", "experience", "knowledge")

SOCIAL_ANSWERS = (
    "extrovert", "introvert", "leader", "supporter", "risk-taker", "cautious",
)

MOTIVATION_ANSWERS = (
    "personal_goals", "helping_others", "recognition", "challenges", "learning",
    "solving", "helping", "rewards", "accomplishment", "growth",
)

# Sector 3 yes/no questions: question id -> (trait if yes, trait if no)
SOCIAL_QUESTIONS = (
    (("s3_q1", "s3_q4", "s3_q6", "s3_q10", "s3_q11", "s3_q13", "s3_q15"), ("extrovert", "introvert")),
    (("s3_q6", "s3_q8", "s3_q10"), ("leader", "supporter")),
    (("s3_q11", "s3_q13", "s3_q15"), ("risk-taker", "cautious")),
)

# Mini-game metric -> derived cognitive strength, scale factor
METRIC_DERIVED_STRENGTHS = (
    ("pattern_recognition", "analytical", 0.7),
    ("pattern_recognition", "logical", 0.6),
    ("decision_speed", "decisive", 0.8),
    ("spatial_awareness", "visual", 0.75),
    ("spatial_awareness", "creative", 0.5),
)


# ======================================================
# CAREER CLASSIFICATION
# ======================================================

TRADE_SKILL_TERMS = (
    "trade", "manual", "craft", "mechanical", "repair", "maintenance",
    "construction", "electrical", "plumbing", "carpentry", "welding",
    "installation", "fabrication", "technician",
)

TRADE_TITLE_PATTERN = r"technician|mechanic|electrician|plumber|carpenter|welder|operator|machinist|repairer|installer"

ENTREPRENEUR_TEXT_TERMS = ("entrepreneur", "business owner")
ENTREPRENEUR_DESCRIPTION_TERMS = ("start your own", "leadership")
ENTREPRENEUR_SKILL_TERMS = (
    "leadership", "entrepreneurial", "business", "management", "strategy",
    "innovation", "risk-taking",
)

BUSINESS_OWNER_TITLES = ("Entrepreneur", "Business Owner")

# Ordered; first hit wins. Title keywords are case-sensitive, "IT" is a whole word.
CATEGORY_RULES = (
    ("Technology", ("Developer", "Programmer", "Computing", "Security", "Software", "Machine Learning", "Cloud")),
    ("Engineering", ("Engineer",)),
    ("Creative", ("Designer", "Artist", "Writer", "Director", "Producer")),
    ("Healthcare", ("Therapist", "Nurse", "Doctor", "Health", "Medical", "Dental")),
    ("Education", ("Teacher", "Coach", "Professor", "Educator")),
    ("Management", ("Manager", "Executive", "Administrator", "Supervisor")),
    ("Trades", ("Technician", "Electrician", "Plumber", "Mechanic", "Carpenter", "Welder", "Operator")),
    ("Hospitality", ("Chef", "Cook", "Hospitality", "Service", "Culinary")),
    ("Science", ("Scientist", "Researcher", "Analyst", "Laboratory")),
    ("Finance", ("Finance", "Accountant", "Advisor", "Banking")),
    ("Marketing", ("Marketing", "Marketer", "Sales", "Advertising", "PR", "Brand")),
)

DEFAULT_CATEGORY = "Other"


# ======================================================
# INTERESTS
# Related-interest clusters used when a career shares no
# interest id with the user
# ======================================================

INTEREST_CLUSTERS = (
    frozenset({1, 5, 12}),
    frozenset({2, 14, 18}),
    frozenset({3, 11, 17}),
    frozenset({4, 8, 16}),
    frozenset({6, 9, 13}),
    frozenset({7, 10, 15}),
)

# Boost by position in the career's related_interests list
INTEREST_POSITION_BOOST = (1.5, 1.3, 1.1)


# ======================================================
# WORK STYLES
# Max contribution: 15
# ======================================================

@dataclass(frozen=True)
class WorkStyleProfile:
    importance: float
    keywords: tuple[str, ...]
    trade_relevance: float
    entrepreneur_relevance: float = 0.3


WORK_STYLE_PROFILES = MappingProxyType({
    "structured": WorkStyleProfile(
        importance=0.4,
        keywords=("structured", "systematic", "regulated", "precise", "methodical", "organized",
                  "protocol", "procedural", "standardized", "routine"),
        trade_relevance=0.8,
    ),
    "flexible": WorkStyleProfile(
        importance=0.5,
        keywords=("flexible", "adaptable", "dynamic", "variable", "creative", "fluid", "agile",
                  "innovative", "evolving", "changing", "entrepreneurial", "self-starter",
                  "business", "venture", "ownership"),
        trade_relevance=0.5,
        entrepreneur_relevance=0.9,
    ),
    "team": WorkStyleProfile(
        importance=0.3,
        keywords=("team", "collaborative", "group", "cooperation", "partnership", "joint",
                  "collective", "crew", "coordinated", "together"),
        trade_relevance=0.7,
    ),
    "independent": WorkStyleProfile(
        importance=0.45,
        keywords=("independent", "autonomous", "self-directed", "solo", "individual", "private",
                  "self-managed", "self-sufficient", "leader", "entrepreneur", "ownership",
                  "decision-maker", "business-owner", "founder", "startup"),
        trade_relevance=0.6,
        entrepreneur_relevance=1.0,
    ),
    "hands-on": WorkStyleProfile(
        importance=0.5,
        keywords=("hands-on", "practical", "field", "manual", "physical", "craft", "construction",
                  "maintenance", "repair", "installation", "technical", "fabrication", "assembly",
                  "machining", "mechanical", "electrical", "plumbing", "trade", "carpentry",
                  "welding", "building", "operating", "handling", "crafting", "manufacturing",
                  "industrial"),
        trade_relevance=1.0,
    ),
    "analytical": WorkStyleProfile(
        importance=0.35,
        keywords=("analytical", "research", "data", "logical", "investigative", "mathematical",
                  "systematic", "diagnostic", "evaluative", "calculation"),
        trade_relevance=0.5,
    ),
})

DEFAULT_WORK_STYLE_IMPORTANCE = 0.3
DEFAULT_WORK_STYLE_TRADE_RELEVANCE = 0.3

WORK_STYLE_OPPOSITES = MappingProxyType({
    "structured": "flexible",
    "flexible": "structured",
    "team": "independent",
    "independent": "team",
})

# Quality by match tier: exact style, exact keyword, keyword substring, description word
WORK_STYLE_QUALITY = (1.0, 0.9, 0.7, 0.5)

# Penalty share of the accumulated score, by the user's style rank
CONFLICT_SEVERITY = (0.15, 0.08)

ENTREPRENEUR_STYLE_BOOST = 1.15


# ======================================================
# COGNITIVE
# Max contribution: 15
# ======================================================

@dataclass(frozen=True)
class CognitiveCategory:
    keywords: tuple[str, ...]
    trade_relevance: float


@dataclass(frozen=True)
class CognitiveStrength:
    categories: tuple[str, ...]
    confidence: float
    trade_boost: float


COGNITIVE_CATEGORIES = MappingProxyType({
    "problem-solving": CognitiveCategory(
        keywords=("problem", "analytical", "debug", "troubleshoot", "solving", "logic",
                  "diagnostic", "resolve", "fix", "solution", "optimize", "determine"),
        trade_relevance=0.8,
    ),
    "creativity": CognitiveCategory(
        keywords=("creative", "design", "innovation", "artistic", "original", "novel", "imagine",
                  "invent", "develop", "create", "ideate", "conceptualize"),
        trade_relevance=0.6,
    ),
    "attention-to-detail": CognitiveCategory(
        keywords=("detail", "precision", "accuracy", "careful", "meticulous", "quality",
                  "thorough", "exact", "specific", "scrutiny", "methodical", "procedural"),
        trade_relevance=0.9,
    ),
    "spatial-reasoning": CognitiveCategory(
        keywords=("spatial", "visual", "3d", "layout", "positioning", "structural", "arrangement",
                  "dimensional", "visualization", "geometric", "proportion"),
        trade_relevance=0.9,
    ),
    "systems-thinking": CognitiveCategory(
        keywords=("system", "integration", "workflow", "process", "holistic", "interconnected",
                  "comprehensive", "overview", "architecture", "framework"),
        trade_relevance=0.7,
    ),
})

COGNITIVE_STRENGTHS = MappingProxyType({
    "knowledge": CognitiveStrength(
        ("problem-solving", "attention-to-detail", "systems-thinking"), confidence=0.85, trade_boost=0.15,
    ),
    "skills": CognitiveStrength(
        ("creativity", "problem-solving", "spatial-reasoning"), confidence=0.9, trade_boost=0.25,
    ),
    "experience": CognitiveStrength(
        ("problem-solving", "attention-to-detail", "systems-thinking"), confidence=0.8, trade_boost=0.2,
    ),
    "learned": CognitiveStrength(
        ("attention-to-detail", "creativity", "problem-solving"), confidence=0.75, trade_boost=0.1,
    ),
})

COGNITIVE_SKILL_POINTS = 5
COGNITIVE_DESCRIPTION_POINTS = 3

KNOWLEDGE_SKILL_TERMS = ("research", "knowledge", "learning", "study", "analytical")
KNOWLEDGE_SPECIAL_POINTS = 5

MOTOR_PRECISION_SKILL_TERMS = ("manual", "technical", "operate", "equipment", "machinery", "instrument")
MOTOR_PRECISION_THRESHOLD = 80
MOTOR_PRECISION_POINTS = 4


# ======================================================
# SOCIAL
# Max contribution: 10
# ======================================================

@dataclass(frozen=True)
class SocialDimension:
    traits: tuple[str, str]
    environments: MappingProxyType
    trade_relevance: MappingProxyType
    max_score: float


SOCIAL_DIMENSIONS = (
    SocialDimension(
        traits=("introvert", "extrovert"),
        environments=MappingProxyType({
            "introvert": ("independent", "remote", "focused", "quiet", "research", "analysis",
                          "detail", "technical", "precise", "behind-the-scenes", "concentration",
                          "solo", "specialized"),
            "extrovert": ("team", "client", "interactive", "customer", "social", "public",
                          "presentation", "networking", "collaborative", "communication",
                          "outgoing", "negotiation", "sales"),
        }),
        trade_relevance=MappingProxyType({"introvert": 0.6, "extrovert": 0.7}),
        max_score=4,
    ),
    SocialDimension(
        traits=("leader", "supporter"),
        environments=MappingProxyType({
            "leader": ("manage", "lead", "direct", "supervise", "coordinate", "oversee", "guide",
                       "strategy", "decision", "responsible", "executive", "administration",
                       "control"),
            "supporter": ("assist", "support", "help", "collaborate", "contribute", "team member",
                          "specialist", "technical", "operator", "staff", "implementer", "crew"),
        }),
        trade_relevance=MappingProxyType({"leader": 0.7, "supporter": 0.9}),
        max_score=3,
    ),
    SocialDimension(
        traits=("risk-taker", "cautious"),
        environments=MappingProxyType({
            "risk-taker": ("startup", "innovative", "changing", "dynamic", "entrepreneurial",
                           "cutting-edge", "progressive", "disruptive", "challenging",
                           "pioneering"),
            "cautious": ("stable", "established", "consistent", "traditional", "reliable",
                         "proven", "methodical", "safe", "structured", "secure", "regulated"),
        }),
        trade_relevance=MappingProxyType({"risk-taker": 0.5, "cautious": 0.8}),
        max_score=3,
    ),
)

# Match level by where the keyword was found, checked in this order
SOCIAL_MATCH_LEVELS = (
    ("environment", 1.0),
    ("description", 0.8),
    ("title", 0.7),
    ("skills", 0.6),
)

SOCIAL_TRADE_INFERENCE_MIN = 0.7
SOCIAL_TRADE_INFERENCE_SCALE = 0.65

LEADERSHIP_TITLE_TERMS = ("manager", "director", "lead", "chief", "supervisor", "foreman")
LEADERSHIP_TITLE_POINTS = 3

# Trait -> points, applied to trade careers when the trait has not matched yet
TRADE_SOCIAL_BONUS = (("supporter", 2), ("cautious", 2))



# ======================================================
# MOTIVATION
# Max contribution: 20
# ======================================================

@dataclass(frozen=True)
class MotivationProfile:
    importance: float
    sustainability: float
    kind: str  # intrinsic | extrinsic
    trade_relevance: float
    attributes: tuple[str, ...]
    fields: tuple[str, ...]


MOTIVATIONS = MappingProxyType({
    "personal_goals": MotivationProfile(
        0.8, 0.8, "intrinsic", 0.6,
        ("growth", "advancement", "career-path", "promotion", "progress", "development"),
        ("management", "business", "entrepreneur"),
    ),
    "helping_others": MotivationProfile(
        1.0, 0.9, "intrinsic", 0.6,
        ("help", "teach", "heal", "therapy", "nurse", "doctor", "social", "service", "care", "counsel"),
        ("healthcare", "education", "social work", "nonprofit", "community"),
    ),
    "challenges": MotivationProfile(
        0.9, 0.8, "intrinsic", 0.7,
        ("challenging", "competitive", "difficult", "complex", "advanced", "solving", "technical"),
        ("engineering", "science", "research", "technology", "finance"),
    ),
    "learning": MotivationProfile(
        0.85, 0.85, "intrinsic", 0.7,
        ("research", "discover", "academic", "education", "learning", "development", "knowledge"),
        ("science", "education", "research", "technology"),
    ),
    "solving": MotivationProfile(
        0.9, 0.8, "intrinsic", 0.9,
        ("problem", "solving", "technical", "engineering", "analytical", "design", "develop"),
        ("engineering", "technology", "science", "design"),
    ),
    "helping": MotivationProfile(
        1.0, 0.9, "intrinsic", 0.75,
        ("service", "support", "help", "assist", "care", "facilitate", "enable"),
        ("healthcare", "social work", "education", "customer service", "community"),
    ),
    "accomplishment": MotivationProfile(
        0.9, 0.8, "intrinsic", 0.9,
        ("results", "achievement", "success", "impact", "measurable", "complete"),
        ("business", "sales", "entrepreneurship", "management"),
    ),
    "autonomy": MotivationProfile(
        0.9, 0.95, "intrinsic", 0.95,
        ("independent", "autonomous", "self-directed", "freedom", "flexibility", "own pace",
         "leadership", "decision-maker", "entrepreneur", "business-owner", "founder", "startup",
         "self-employed", "management", "executive", "ceo", "ownership", "venture"),
        ("entrepreneur", "business ownership", "startup", "management", "consulting", "creative",
         "research", "trades"),
    ),
    "mastery": MotivationProfile(
        0.85, 0.9, "intrinsic", 1.0,
        ("skill", "craft", "expertise", "artisan", "specialist", "perfect", "master"),
        ("trades", "arts", "crafts", "sports", "culinary"),
    ),
    "purpose": MotivationProfile(
        0.95, 0.95, "intrinsic", 0.7,
        ("mission", "purpose", "meaning", "impact", "difference", "legacy", "important"),
        ("nonprofit", "healthcare", "education", "environment", "social justice", "infrastructure"),
    ),
    "creating": MotivationProfile(
        0.85, 0.85, "intrinsic", 0.95,
        ("create", "build", "design", "develop", "produce", "craft", "make", "invent"),
        ("arts", "design", "engineering", "architecture", "writing", "trades"),
    ),
    "recognition": MotivationProfile(
        0.75, 0.6, "extrinsic", 0.4,
        ("creative", "public", "awards", "prestige", "respected", "recognized", "status"),
        ("entertainment", "politics", "media", "marketing"),
    ),
    "rewards": MotivationProfile(
        0.7, 0.5, "extrinsic", 0.7,
        ("high-salary", "commission", "bonus", "compensation", "benefits", "incentives"),
        ("finance", "sales", "law", "executive", "technology", "specialized trades"),
    ),
    "growth": MotivationProfile(
        0.8, 0.7, "extrinsic", 0.6,
        ("advancement", "promotion", "career-path", "rising", "progressing"),
        ("business", "corporate", "government", "management", "trades"),
    ),
    "security": MotivationProfile(
        0.75, 0.65, "extrinsic", 0.8,
        ("stable", "secure", "reliable", "consistent", "established", "safe"),
        ("government", "healthcare", "education", "utilities", "established corporations",
         "essential trades"),
    ),
})

INTRINSIC_BONUS_MAX = 4

SALARY_BONUS_FLOOR = 80000
SALARY_BONUS_STEP = 20000
SALARY_BONUS_MAX = 6
SALARY_MOTIVATIONS = ("rewards", "recognition")

FIELD_MATCH_POINTS = 6
ATTRIBUTE_MATCH_POINTS = 6

GROWTH_MOTIVATION = "growth"
GROWTH_DIVISOR = 8
GROWTH_MAX = 5
GROWTH_FALLBACK_MOTIVATIONS = ("challenges", "accomplishment")
GROWTH_FALLBACK_DIVISOR = 10
GROWTH_FALLBACK_MAX = 3

TRADE_MOTIVATIONS = ("mastery", "autonomy", "creating", "accomplishment")
TRADE_MOTIVATION_POINTS = 2
TRADE_MOTIVATION_MAX = 6

ENTREPRENEUR_MOTIVATIONS = (
    "autonomy", "personal_goals", "accomplishment", "challenges", "creating", "recognition",
)
ENTREPRENEUR_MOTIVATION_POINTS = 1.5
ENTREPRENEUR_MOTIVATION_MAX = 5


# ======================================================
# SCORE CAPS
# ======================================================

MAX_INTEREST = 40
MAX_WORK_STYLE = 15
MAX_COGNITIVE = 15
MAX_SOCIAL = 10
MAX_MOTIVATION = 20
MAX_MINI_GAME = 10
