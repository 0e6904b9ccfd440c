"""
Print the full career ranking for one archetype.
Run from the project root: python scripts/rank_all_careers.py [archetype]
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fixtures.archetype_profiles import ARCHETYPES
from matching.engine import rank_all_careers


def print_ranking(name: str):
    ranking = rank_all_careers(ARCHETYPES[name])

    print(f"\n===== CAREER RANKINGS: {name} =====\n")

    for rank, s in enumerate(ranking, start=1):
        print(f"{rank:3d}. {s.career.title}  |  MATCH: {s.match}%  ({s.career_class.category})")
        print(
            f"     interest:   {s.interest.score:.2f}\n"
            f"     work_style: {s.work_style.score:.2f}\n"
            f"     cognitive:  {s.cognitive.score:.2f}\n"
            f"     social:     {s.social.score:.2f}\n"
            f"     motivation: {s.motivation.score:.2f}\n"
            f"     mini_game:  {s.mini_game.score:.2f}\n"
            f"     raw: {s.raw_total:.2f}  enhanced: {s.enhanced_total:.2f}\n"
        )


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "software_developer"
    if name not in ARCHETYPES:
        print(f"Unknown archetype '{name}'. Choose from: {', '.join(ARCHETYPES)}")
        sys.exit(1)
    print_ranking(name)
