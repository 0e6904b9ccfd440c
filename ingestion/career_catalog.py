import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from models.career_profile import Career

logger = logging.getLogger(__name__)

# Resolve paths safely
BASE_DIR = Path(__file__).resolve().parents[1]
CATALOG_DIR = BASE_DIR / "data" / "catalog"

CAREERS_FILE = CATALOG_DIR / "careers.json"
INTERESTS_FILE = CATALOG_DIR / "interests.json"

_REQUIRED_TEXT = ("id", "title", "description", "salary", "growth", "work_environment", "education_path")
_REQUIRED_LISTS = ("skills", "work_style")


class CatalogError(ValueError):
    """The career catalog or interest vocabulary is malformed."""


@dataclass(frozen=True)
class InterestOption:
    id: int
    name: str


@dataclass(frozen=True)
class Catalog:
    """Read-only career catalog plus the interest vocabulary it refers to."""

    careers: tuple[Career, ...]
    interests: tuple[InterestOption, ...]

    def find_career(self, title: str) -> Optional[Career]:
        for career in self.careers:
            if career.title == title:
                return career
        return None


def _read_json(path: Path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e


def parse_career(row: dict) -> Career:
    if not isinstance(row, dict):
        raise CatalogError(f"Career entry must be an object, got {type(row).__name__}")

    for key in _REQUIRED_TEXT:
        if not isinstance(row.get(key), str):
            raise CatalogError(f"Career {row.get('id', '?')!r}: missing text field '{key}'")
    for key in _REQUIRED_LISTS:
        value = row.get(key)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise CatalogError(f"Career {row['id']!r}: '{key}' must be a list of strings")

    interests = row.get("related_interests", [])
    if not isinstance(interests, list) or not all(
        isinstance(i, int) and not isinstance(i, bool) for i in interests
    ):
        raise CatalogError(f"Career {row['id']!r}: 'related_interests' must be a list of ints")

    return Career(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        skills=tuple(row["skills"]),
        related_interests=tuple(interests),
        salary=row["salary"],
        growth=row["growth"],
        work_environment=row["work_environment"],
        work_style=tuple(row["work_style"]),
        education_path=row["education_path"],
        image_path=row.get("image_path", ""),
        category=row.get("category"),
    )


def load_careers(path: Optional[Path] = None) -> tuple[Career, ...]:
    """
    Load the career catalog.
    Order is preserved: it is the tie-break order for equal scores.
    """
    path = Path(path or os.getenv("CAREER_CATALOG_PATH") or CAREERS_FILE)
    rows = _read_json(path)
    if not isinstance(rows, list):
        raise CatalogError(f"{path}: expected a list of careers")

    careers = []
    seen = set()
    for row in rows:
        career = parse_career(row)
        if career.id in seen:
            raise CatalogError(f"{path}: duplicate career id {career.id!r}")
        seen.add(career.id)
        careers.append(career)

    logger.info("Loaded %d careers from %s", len(careers), path)
    return tuple(careers)


def load_interest_options(path: Optional[Path] = None) -> tuple[InterestOption, ...]:
    path = Path(path or os.getenv("INTEREST_CATALOG_PATH") or INTERESTS_FILE)
    rows = _read_json(path)
    if not isinstance(rows, list):
        raise CatalogError(f"{path}: expected a list of interests")

    options = []
    for row in rows:
        if not isinstance(row, dict) or not isinstance(row.get("id"), int) or not isinstance(row.get("name"), str):
            raise CatalogError(f"{path}: interest entries need an int 'id' and a str 'name'")
        options.append(InterestOption(row["id"], row["name"]))

    logger.info("Loaded %d interest options from %s", len(options), path)
    return tuple(options)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Bundled catalog, loaded once per process."""
    return Catalog(careers=load_careers(), interests=load_interest_options())
