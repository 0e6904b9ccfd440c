import pytest

from ingestion.career_catalog import Catalog, InterestOption, default_catalog
from models.career_profile import Career


def _career(**overrides) -> Career:
    fields = dict(
        id="sample",
        title="Sample Role",
        description="Plain work.",
        skills=(),
        related_interests=(),
        salary="$50,000",
        growth="Stable",
        work_environment="Office",
        work_style=(),
        education_path="High school diploma",
    )
    fields.update(overrides)
    return Career(**fields)


@pytest.fixture
def make_career():
    return _career


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def developer_catalog():
    """Two-interest vocabulary with a single, strongly technical career."""
    developer = _career(
        id="software_developer",
        title="Software Developer",
        description="Design, build and maintain software systems.",
        skills=("Coding", "Problem Solving", "Analytical Thinking", "System Design", "Attention to Detail"),
        related_interests=(1, 2),
        salary="$110,000",
        growth="+22% (2020-2030)",
        work_environment="Office, Remote, supporting product teams",
        work_style=("Analytical", "Detail-oriented", "Independent"),
        education_path="Bachelor's in Computer Science",
    )
    return Catalog(
        careers=(developer,),
        interests=(InterestOption(1, "programming"), InterestOption(2, "technology")),
    )
