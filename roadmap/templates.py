"""
Roadmap text and scales (LITERAL)

Rules:
- Scales are ordered, easiest/shortest first
- Step text is fixed; only {title} and {skill} are substituted
- No generation logic here
"""

from models.roadmap import CareerRoadmap, RoadmapPhase, RoadmapStep


# ======================================================
# SCALES
# ======================================================

TIMELINE_SCALE = ("1-2 Years", "1.5-3 Years", "2-4 Years", "3-5 Years", "4-6 Years")
DIFFICULTY_SCALE = ("Accessible", "Approachable", "Moderate", "High", "Very High")

AGE_GROUPS = ("teen", "youngAdult", "adult", "midCareer", "lateCareer")
EXPERIENCE_LEVELS = ("none", "entry", "intermediate", "advanced", "expert")

# Age group -> timeline steps to compress
TIMELINE_COMPRESSION = {
    "adult": 1,
    "midCareer": 1,
    "lateCareer": 2,
}

TEEN_EXTRA_YEARS = 1


# ======================================================
# PHASES
# ======================================================

FOUNDATION = "foundation"
SPECIALIZED = "specialized"
LAUNCH = "launch"

PHASE_TITLES = {
    FOUNDATION: "Build Your Foundation",
    SPECIALIZED: "Specialized Learning",
    LAUNCH: "Launch Your Career",
}

PHASE_DESCRIPTIONS = {
    FOUNDATION: "Master the fundamentals of {title}.",
    SPECIALIZED: "Develop expertise in your chosen area.",
    LAUNCH: "Start your professional journey as a {title}.",
}


# ======================================================
# STEPS
# (title, description)
# ======================================================

MASTER_SKILL = ("Master {skill}", "This foundational skill is essential for success as a {title}")

EDUCATION_STEPS = (
    # education path keywords, step title, description (None -> the education path)
    (("Doctoral",), "Complete Advanced Education", None),
    (("Bachelor", "Master"), "Complete Formal Education", None),
    (("bootcamp",), "Complete Intensive Training", None),
)
DEFAULT_EDUCATION_STEP = ("Learn Essential Theory", "Through courses, tutorials, or self-study resources")

VENTURE_FOUNDATION = (
    ("Identify Market Opportunity", "Research and identify a viable market need or business opportunity"),
    ("Develop Business Model", "Create a clear business model outlining your value proposition, target customers, and revenue streams"),
)
VENTURE_SPECIALIZED = (
    ("Build Minimum Viable Product", "Develop the simplest version of your product or service to test in the market"),
    ("Secure Initial Funding", "Obtain seed funding through personal savings, friends/family, or early investors"),
    ("Create Business Plan", "Develop a comprehensive business plan with financial projections and growth strategy"),
)
VENTURE_LAUNCH = (
    ("Launch Your Business", "Officially launch your business and start serving customers"),
    ("Establish Growth Systems", "Create scalable processes for marketing, sales, and operations"),
    ("Build Your Team", "Hire key team members to support business growth and expansion"),
)

# Title keywords -> practice step, first hit wins
PRACTICE_STEPS = (
    (("Developer", "Designer", "Engineer"),
     ("Build Starter Projects", "Create simple projects to apply your knowledge and build your portfolio")),
    (("Writer", "Marketer", "Content"),
     ("Create Sample Work", "Develop a collection of writing samples or content pieces")),
)
DEFAULT_PRACTICE_STEP = ("Get Practical Experience", "Through volunteer work, internships, or entry-level positions")

CHOOSE_SPECIALIZATION = (
    "Choose Your Specialization",
    "Select a specific area within {title} that aligns with your interests",
)
ADVANCED_SKILL = ("Develop Advanced {skill} Skills", "Focus on building expertise in this key area")
DEEPEN_EXPERTISE = ("Deepen Technical Expertise", "Focus on mastering advanced concepts and techniques")

CREDENTIAL_STEPS = (
    (("Developer", "Engineer", "Security"),
     ("Earn Key Certifications", "Obtain industry-recognized certifications to validate your expertise")),
    (("Designer", "Writer"),
     ("Build an Impressive Portfolio", "Create a collection of high-quality work that showcases your abilities")),
)
DEFAULT_CREDENTIAL_STEP = (
    "Gain Specialized Training",
    "Complete advanced courses or workshops in your chosen specialization",
)

LAUNCH_STEPS = (
    ("Land Your First Professional Role", "Apply for entry-level positions or freelance opportunities in your field"),
    ("Build Your Professional Network", "Connect with others in your industry through meetups, social media, and conferences"),
    ("Commit to Continual Learning", "Stay updated with industry trends and expand your knowledge"),
)

# Skip-basics replacements: (phase, title fragments to look for, replacement)
SKIP_BASICS = (
    (FOUNDATION, ("Learn Essential", "Build Starter", "Master"),
     ("Refresh and Fill Knowledge Gaps", "Update your skills and fill any gaps specific to this career path")),
    (SPECIALIZED, ("Choose Your",),
     ("Apply Existing Expertise", "Identify how your previous skills transfer to this new field")),
)

MENTORSHIP_STEP = ("Find a Mentor", "Connect with an experienced professional who can guide your learning journey")
RETRAINING_STEP = ("Transition Strategy", "Develop a plan to transition from your current career to your new path")
LEAN_STARTUP_STEP = ("Lean Startup Approach", "Use rapid iteration and minimal resources to test business concepts quickly")
ACCELERATED_STEP = ("Accelerated Learning Path", "Focus on the most critical skills and knowledge to enter the field faster")


# ======================================================
# FALLBACK
# Returned for careers missing from the catalog
# ======================================================

def _phase(title, description, steps):
    return RoadmapPhase(title, description, tuple(RoadmapStep(t, d) for t, d in steps))


FALLBACK_TIMELINE = "2-4 Years"
FALLBACK_INVESTMENT = "$$$"
FALLBACK_DIFFICULTY = "Moderate"

FALLBACK_PHASES = (
    _phase("Build Your Foundation", "Master fundamentals and basic skills.", (
        ("Learn Core Skills", "Focus on the essential skills for this field"),
        ("Get Education", "Formal education or self-learning path"),
        ("Build Basic Projects", "Create small projects to practice your skills"),
    )),
    _phase("Specialized Learning", "Develop specialized skills and knowledge.", (
        ("Choose Your Focus Area", "Select an area to specialize in"),
        ("Advanced Training", "Take courses or get certifications"),
        ("Create a Portfolio", "Showcase your skills and projects"),
    )),
    _phase("Launch Your Career", "Enter the industry and grow professionally.", (
        ("Entry-Level Position", "Gain real-world experience in your field"),
        ("Networking", "Build connections in your industry"),
        ("Continuous Learning", "Stay updated with industry trends"),
    )),
)


def fallback_roadmap(career_path: str) -> CareerRoadmap:
    return CareerRoadmap(
        career_path=career_path,
        timeline=FALLBACK_TIMELINE,
        investment=FALLBACK_INVESTMENT,
        difficulty=FALLBACK_DIFFICULTY,
        phases=FALLBACK_PHASES,
    )
