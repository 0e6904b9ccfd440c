from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RoadmapStep:
    title: str
    description: str
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class RoadmapPhase:
    title: str
    description: str
    steps: tuple[RoadmapStep, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "steps": [s.to_dict() for s in self.steps],
        }


@dataclass(frozen=True)
class CareerRoadmap:
    """
    Phased plan for one career.
    A template, not a tracked plan: every step starts uncompleted.
    """

    career_path: str
    timeline: str
    investment: str
    difficulty: str
    phases: tuple[RoadmapPhase, ...]
    age_group: Optional[str] = None
    prior_experience: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "careerPath": self.career_path,
            "timeline": self.timeline,
            "investment": self.investment,
            "difficulty": self.difficulty,
            "phases": [p.to_dict() for p in self.phases],
        }
        if self.age_group is not None:
            out["ageGroup"] = self.age_group
        if self.prior_experience is not None:
            out["priorExperience"] = self.prior_experience
        return out
