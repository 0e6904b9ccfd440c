from dataclasses import dataclass, field
from typing import Optional

from core.utils import clamp

"""
Normalized quiz result passed between the normalizer and every scorer.

No logic. No scoring.
"""


BRAIN_DOMINANCE = ("left", "right", "balanced")
STRESS_RESPONSE = ("low", "medium", "high")


# camelCase wire key -> dataclass field
_METRIC_KEYS = {
    "patternRecognition": "pattern_recognition",
    "decisionSpeed": "decision_speed",
    "decisionMaking": "decision_making",
    "spatialAwareness": "spatial_awareness",
    "motorControl": "motor_control",
    "attentionControl": "attention_control",
    "multitaskingAbility": "multitasking_ability",
    "multiTaskingScore": "multi_tasking_score",
    "processingSpeed": "processing_speed",
    "visualProcessing": "visual_processing",
    "verbalProcessing": "verbal_processing",
    "memoryCapacity": "memory_capacity",
    "responseConsistency": "response_consistency",
    "reactionTime": "reaction_time",
    "workingMemory": "working_memory",
    "cognitiveFlexibility": "cognitive_flexibility",
}

_CATEGORICAL_KEYS = {
    "brainDominance": ("brain_dominance", BRAIN_DOMINANCE),
    "stressResponse": ("stress_response", STRESS_RESPONSE),
}


@dataclass(frozen=True)
class MiniGameMetrics:
    """
    Objective ability scores measured by the mini-games.

    Numeric fields are 0-100 or None when the game was not played.
    """

    pattern_recognition: Optional[float] = None
    decision_speed: Optional[float] = None
    decision_making: Optional[float] = None
    spatial_awareness: Optional[float] = None
    motor_control: Optional[float] = None
    attention_control: Optional[float] = None
    multitasking_ability: Optional[float] = None
    multi_tasking_score: Optional[float] = None
    processing_speed: Optional[float] = None
    visual_processing: Optional[float] = None
    verbal_processing: Optional[float] = None
    memory_capacity: Optional[float] = None
    response_consistency: Optional[float] = None
    reaction_time: Optional[float] = None
    working_memory: Optional[float] = None
    cognitive_flexibility: Optional[float] = None

    brain_dominance: Optional[str] = None
    stress_response: Optional[str] = None
    cognitive_style: Optional[str] = None

    def get(self, name: str):
        return getattr(self, name, None)

    @classmethod
    def from_dict(cls, raw: dict) -> Optional["MiniGameMetrics"]:
        """
        Build from the camelCase payload the games post.
        Unknown keys are ignored, numbers are clamped to 0-100 and
        categorical values outside their vocabulary are dropped.
        """
        if not isinstance(raw, dict):
            return None

        values = {}
        for key, value in raw.items():
            if key in _METRIC_KEYS:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    continue
                values[_METRIC_KEYS[key]] = clamp(float(value), 0.0, 100.0)
            elif key in _CATEGORICAL_KEYS:
                name, allowed = _CATEGORICAL_KEYS[key]
                if isinstance(value, str) and value.lower() in allowed:
                    values[name] = value.lower()
            elif key == "cognitiveStyle" and isinstance(value, str):
                values["cognitive_style"] = value

        return cls(**values)

    def to_dict(self) -> dict:
        out = {}
        for wire, name in _METRIC_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                out[wire] = value
        for wire, (name, _) in _CATEGORICAL_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                out[wire] = value
        if self.cognitive_style is not None:
            out["cognitiveStyle"] = self.cognitive_style
        return out


@dataclass(frozen=True)
class InterestSelection:
    interest: str
    percentage: float


@dataclass
class QuizResults:
    """
    Trait tallies plus ranked interests for one user.

    Tallies are sparse: a trait never answered is simply absent.
    """

    work_style: dict[str, int] = field(default_factory=dict)
    cognitive_strength: dict[str, int] = field(default_factory=dict)
    social_approach: dict[str, int] = field(default_factory=dict)
    motivation: dict[str, int] = field(default_factory=dict)
    interests: list[InterestSelection] = field(default_factory=list)
    mini_game_metrics: Optional[MiniGameMetrics] = None

    def to_dict(self) -> dict:
        return {
            "workStyle": dict(self.work_style),
            "cognitiveStrength": dict(self.cognitive_strength),
            "socialApproach": dict(self.social_approach),
            "motivation": dict(self.motivation),
            "interests": [
                {"interest": i.interest, "percentage": i.percentage}
                for i in self.interests
            ],
            "miniGameMetrics": (
                self.mini_game_metrics.to_dict() if self.mini_game_metrics else None
            ),
        }

    @classmethod
    def from_dict(cls, raw: dict) -> "QuizResults":
        """Inverse of to_dict(). Used by the HTTP layer."""

        def tally(key):
            value = raw.get(key) or {}
            return {k: int(v) for k, v in value.items() if v and int(v) > 0}

        interests = [
            InterestSelection(str(i["interest"]), clamp(float(i["percentage"]), 0.0, 100.0))
            for i in raw.get("interests") or []
        ]
        metrics = raw.get("miniGameMetrics")

        return cls(
            work_style=tally("workStyle"),
            cognitive_strength=tally("cognitiveStrength"),
            social_approach=tally("socialApproach"),
            motivation=tally("motivation"),
            interests=interests,
            mini_game_metrics=MiniGameMetrics.from_dict(metrics) if metrics else None,
        )

