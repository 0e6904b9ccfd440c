from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Career:
    """
    Container for one catalog entry.
    No logic. No scoring.
    """

    id: str
    title: str
    description: str
    skills: tuple[str, ...]
    related_interests: tuple[int, ...]
    salary: str
    growth: str
    work_environment: str
    work_style: tuple[str, ...]
    education_path: str
    image_path: str = ""
    category: Optional[str] = None


@dataclass(frozen=True)
class CareerClass:
    """
    Derived facts about a career, computed once per scoring pass so every
    scorer agrees on what counts as a trade or an entrepreneurial role.
    """

    is_trade: bool
    is_entrepreneurial: bool
    is_business_owner: bool
    category: str


@dataclass(frozen=True)
class ScoredCareer:
    id: str
    title: str
    description: str
    match: int
    skills: tuple[str, ...]
    image_path: str
    salary: str
    growth: str
    category: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "match": self.match,
            "skills": list(self.skills),
            "imagePath": self.image_path,
            "salary": self.salary,
            "growth": self.growth,
            "category": self.category,
        }


@dataclass(frozen=True)
class ComponentScore:
    """One sub-score plus the matches that produced it."""

    score: float
    matches: tuple[dict, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CareerScore:
    """
    Full breakdown for a single career.
    `match` is the final, rescaled value exposed to users.
    """

    career: Career
    career_class: CareerClass
    interest: ComponentScore
    work_style: ComponentScore
    cognitive: ComponentScore
    social: ComponentScore
    motivation: ComponentScore
    mini_game: ComponentScore
    raw_total: float
    enhanced_total: float
    match: int

    def to_scored_career(self) -> ScoredCareer:
        c = self.career
        return ScoredCareer(
            id=c.id,
            title=c.title,
            description=c.description,
            match=self.match,
            skills=c.skills,
            image_path=c.image_path,
            salary=c.salary,
            growth=c.growth,
            category=self.career_class.category,
        )

    def to_dict(self) -> dict:
        components = {
            "interest": self.interest,
            "workStyle": self.work_style,
            "cognitive": self.cognitive,
            "social": self.social,
            "motivation": self.motivation,
            "miniGame": self.mini_game,
        }
        return {
            "id": self.career.id,
            "title": self.career.title,
            "category": self.career_class.category,
            "match": self.match,
            "rawTotal": round(self.raw_total, 2),
            "enhancedTotal": round(self.enhanced_total, 2),
            "breakdown": {
                name: {"score": round(c.score, 2), "matches": list(c.matches)}
                for name, c in components.items()
            },
        }
