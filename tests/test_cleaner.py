import pytest

from cleaner import canonical_priority, description_bullets, normalize_resume_draft, unique_push
from schema_resume import EDUCATION_FIELDS, PERSONAL_INFO_FIELDS, PROJECT_FIELDS


def _assert_canonical(draft):
    assert set(draft["personalInfo"]) == set(PERSONAL_INFO_FIELDS)
    assert all(isinstance(v, str) for v in draft["personalInfo"].values())
    for section in ("education", "experience", "projects"):
        assert isinstance(draft[section], list) and draft[section]
    for edu in draft["education"]:
        assert set(edu) == set(EDUCATION_FIELDS)
    for proj in draft["projects"]:
        assert set(proj) == set(PROJECT_FIELDS)
    for exp in draft["experience"]:
        assert exp["description"] and all(isinstance(b, str) for b in exp["description"])
    assert all(isinstance(s, str) and s for s in draft["skills"])
    assert len(draft["skills"]) == len(set(draft["skills"]))
    for field in ("achievements", "extracurriculars", "targetRole"):
        assert isinstance(draft[field], str)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        None,
        [],
        [1, 2],
        "resume",
        42,
        {"personalInfo": "Alex", "education": "MIT", "skills": "Python", "experience": {}, "projects": 7},
        {"education": [None, None], "experience": [None], "projects": []},
        {"personalInfo": {"name": 5, "email": None}, "skills": [None, "", "Go", 3, True, {"x": 1}]},
        {"experience": [{"description": [1, None, "", "  "]}], "targetRole": ["x"]},
    ],
)
def test_normalization_is_total(payload):
    _assert_canonical(normalize_resume_draft(payload))


def test_empty_object_gets_placeholders():
    draft = normalize_resume_draft({})
    assert len(draft["education"]) == 1
    assert len(draft["experience"]) == 1
    assert len(draft["projects"]) == 1
    assert draft["skills"] == []
    assert draft["experience"][0]["description"] == [""]
    assert draft["personalInfo"]["name"] == ""
    assert draft["targetRole"] == ""


def test_input_is_not_aliased(sample_resume):
    draft = normalize_resume_draft(sample_resume)
    draft["skills"].append("Rust")
    draft["experience"][0]["description"].append("New bullet")
    assert "Rust" not in sample_resume["skills"]
    assert "New bullet" not in sample_resume["experience"][0]["description"]


def test_skills_dedupe_case_sensitive_in_order():
    draft = normalize_resume_draft({"skills": ["Python", "python", "Python", " SQL ", None, ""]})
    assert draft["skills"] == ["Python", "python", "SQL"]


def test_description_accepts_single_string():
    draft = normalize_resume_draft({"experience": [{"company": "Acme", "description": "• Built APIs\n- Cut costs\n"}]})
    assert draft["experience"][0]["description"] == ["Built APIs", "Cut costs"]


def test_numbers_are_stringified():
    draft = normalize_resume_draft({"education": [{"cgpa": 3.9, "year": 2025}]})
    assert draft["education"][0]["cgpa"] == "3.9"
    assert draft["education"][0]["year"] == "2025"


def test_project_github_alias_and_string_entry():
    draft = normalize_resume_draft({"projects": ["Portfolio", {"title": "CLI", "github": "https://github.com/x/cli"}]})
    assert draft["projects"][0]["title"] == "Portfolio"
    assert draft["projects"][1]["githubLink"] == "https://github.com/x/cli"


def test_description_bullets_fallback():
    assert description_bullets(None) == [""]
    assert description_bullets(["", "  "]) == [""]


def test_unique_push():
    target = ["Go"]
    assert unique_push(target, " Rust ") is True
    assert unique_push(target, "Go") is False
    assert unique_push(target, "   ") is False
    assert unique_push(target, None) is False
    assert target == ["Go", "Rust"]


@pytest.mark.parametrize("raw,expected", [("high", "High"), ("LOW", "Low"), ("urgent", "Medium"), (None, "Medium")])
def test_canonical_priority(raw, expected):
    assert canonical_priority(raw) == expected
