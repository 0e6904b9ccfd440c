from core.quiz_results import InterestSelection, MiniGameMetrics, QuizResults

"""
Hand-authored archetype quiz results for testing and algorithm analysis.
Interest names follow the bundled interest vocabulary.
"""


def _interests(*pairs) -> list[InterestSelection]:
    return [InterestSelection(name, pct) for name, pct in pairs]


ARCHETYPES = {
    "software_developer": QuizResults(
        work_style={"analytical": 85, "independent": 75, "structured": 70},
        cognitive_strength={"skills": 90, "experience": 70, "knowledge": 60},
        social_approach={"introvert": 3, "supporter": 2, "cautious": 1},
        motivation={"solving": 85, "learning": 75, "challenges": 70},
        interests=_interests(
            ("Software Development", 95),
            ("Information / Cyber Security", 80),
            ("Gaming / Interactive Media", 70),
        ),
        mini_game_metrics=MiniGameMetrics(
            pattern_recognition=85, processing_speed=80, brain_dominance="left",
        ),
    ),

    "electrician": QuizResults(
        work_style={"hands-on": 90, "structured": 70, "team": 50},
        cognitive_strength={"skills": 85, "experience": 75},
        social_approach={"supporter": 3, "cautious": 2, "introvert": 1},
        motivation={"mastery": 80, "accomplishment": 75, "security": 60},
        interests=_interests(
            ("Skilled Trades", 90),
            ("Building / Construction", 85),
            ("Engineering", 60),
        ),
        mini_game_metrics=MiniGameMetrics(
            motor_control=85, spatial_awareness=80, attention_control=75,
        ),
    ),

    "graphic_designer": QuizResults(
        work_style={"flexible": 80, "independent": 60, "analytical": 30},
        cognitive_strength={"skills": 80, "learned": 60},
        social_approach={"introvert": 2, "risk-taker": 2, "supporter": 1},
        motivation={"creating": 90, "recognition": 70, "personal_goals": 50},
        interests=_interests(
            ("Arts / Performance", 90),
            ("Content Creation", 80),
            ("Architectural Design / City Planning", 60),
        ),
        mini_game_metrics=MiniGameMetrics(
            visual_processing=85, spatial_awareness=78, brain_dominance="right",
        ),
    ),

    "registered_nurse": QuizResults(
        work_style={"team": 85, "structured": 75, "hands-on": 50},
        cognitive_strength={"knowledge": 80, "experience": 70},
        social_approach={"extrovert": 3, "supporter": 3, "cautious": 2},
        motivation={"helping_others": 90, "helping": 80, "purpose": 70},
        interests=_interests(
            ("Health / Wellness", 95),
            ("Emergency Services / First Responder", 70),
        ),
        mini_game_metrics=MiniGameMetrics(
            attention_control=80, multitasking_ability=75, stress_response="high",
        ),
    ),

    "entrepreneur": QuizResults(
        work_style={"independent": 90, "flexible": 80, "analytical": 40},
        cognitive_strength={"experience": 80, "skills": 70},
        social_approach={"leader": 3, "risk-taker": 3, "extrovert": 2},
        motivation={"autonomy": 90, "personal_goals": 80, "accomplishment": 70},
        interests=_interests(
            ("Real Estate / Brokerage", 85),
            ("Finance / Data", 80),
            ("Writing / Communication", 60),
        ),
        mini_game_metrics=MiniGameMetrics(
            decision_making=85, decision_speed=80, pattern_recognition=80,
            multi_tasking_score=75, brain_dominance="balanced",
        ),
    ),
}
