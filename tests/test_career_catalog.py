import json

import pytest

from ingestion.career_catalog import CatalogError, load_careers, load_interest_options


def _row(**overrides):
    row = {
        "id": "baker",
        "title": "Baker",
        "description": "Bake bread.",
        "skills": ["Baking"],
        "related_interests": [3],
        "salary": "$35,000",
        "growth": "+5%",
        "work_environment": "Bakery",
        "work_style": ["Hands-on"],
        "education_path": "Apprenticeship",
    }
    row.update(overrides)
    return row


def _write(tmp_path, rows, name="careers.json"):
    path = tmp_path / name
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


def test_bundled_catalog_loads(catalog):
    assert len(catalog.careers) == 43
    assert len(catalog.interests) == 22
    assert len({c.id for c in catalog.careers}) == len(catalog.careers)
    assert catalog.careers[0].title == "Electrician"


def test_find_career_is_exact(catalog):
    assert catalog.find_career("Software Developer").id == "software_developer"
    assert catalog.find_career("software developer") is None


def test_load_careers_from_file(tmp_path):
    careers = load_careers(_write(tmp_path, [_row()]))
    assert careers[0].skills == ("Baking",)
    assert careers[0].category is None
    assert careers[0].image_path == ""


def test_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("CAREER_CATALOG_PATH", str(_write(tmp_path, [_row(id="x", title="X")])))
    assert [c.title for c in load_careers()] == ["X"]


def test_duplicate_ids_rejected(tmp_path):
    with pytest.raises(CatalogError, match="duplicate"):
        load_careers(_write(tmp_path, [_row(), _row(title="Other Baker")]))


@pytest.mark.parametrize("row", [
    _row(title=None),
    _row(skills="Baking"),
    _row(related_interests=["3"]),
    _row(related_interests=[True]),
    "not an object",
])
def test_malformed_rows_rejected(tmp_path, row):
    with pytest.raises(CatalogError):
        load_careers(_write(tmp_path, [row]))


def test_unreadable_and_invalid_files(tmp_path):
    with pytest.raises(CatalogError):
        load_careers(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_careers(bad)

    with pytest.raises(CatalogError):
        load_careers(_write(tmp_path, {"careers": []}))


def test_catalog_error_is_value_error():
    assert issubclass(CatalogError, ValueError)


def test_interest_options(tmp_path):
    path = _write(tmp_path, [{"id": 1, "name": "Coding"}], name="interests.json")
    assert load_interest_options(path)[0].name == "Coding"

    with pytest.raises(CatalogError):
        load_interest_options(_write(tmp_path, [{"id": "1", "name": "Coding"}], name="bad.json"))
