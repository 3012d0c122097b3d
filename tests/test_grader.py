import json

import pytest

from errors import MalformedModelOutput, ModelUnavailable
from grader_llm import LLMGrader, coerce_score, transform_model_grade
from grader_rule import heuristic_grade, round_half_up
from schema_resume import GRADE_KEYS


def test_heuristic_scenario_b(scenario_b):
    report = heuristic_grade(scenario_b)
    assert report["completenessScore"] == 100
    assert report["atsScore"] == 70
    assert report["contentScore"] == 80
    assert report["designScore"] == 70
    assert report["overallScore"] == 80


def test_heuristic_empty_draft():
    report = heuristic_grade({})
    # placeholder education and experience entries count as present
    assert report["completenessScore"] == 50
    assert report["atsScore"] == 25
    assert report["contentScore"] == 40
    assert report["overallScore"] == round_half_up((50 + 25 + 40 + 70) / 4)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"skills": [f"s{i}" for i in range(50)]},
        {"experience": [{"description": [f"b{i}" for i in range(30)]}]},
        {"personalInfo": {"name": "X"}, "skills": ["a"] * 3},
    ],
)
def test_heuristic_scores_are_bounded(payload):
    report = heuristic_grade(payload)
    for key in GRADE_KEYS:
        assert isinstance(report[key], int)
        assert 0 <= report[key] <= 100


def test_heuristic_monotonic_in_skills_and_bullets(scenario_b):
    base = heuristic_grade(scenario_b)
    scenario_b["skills"].append("D")
    more_skills = heuristic_grade(scenario_b)
    assert more_skills["atsScore"] >= base["atsScore"]
    scenario_b["experience"][0]["description"].append("Led Z")
    more_bullets = heuristic_grade(scenario_b)
    assert more_bullets["contentScore"] >= more_skills["contentScore"]


def test_heuristic_suggestions_are_fresh_copies():
    first = heuristic_grade({})
    first["suggestions"][0]["detail"] = "changed"
    assert heuristic_grade({})["suggestions"][0]["detail"] != "changed"
    assert first["suggestions"]


def test_round_half_up():
    assert round_half_up(82.5) == 83
    assert round_half_up(81.5) == 82
    assert round_half_up(80.25) == 80


@pytest.mark.parametrize(
    "raw,expected",
    [(85, 85), (85.6, 86), ("72", 72), (150, 100), (-3, 0), (True, None), ("n/a", None), (None, None)],
)
def test_coerce_score(raw, expected):
    assert coerce_score(raw) == expected


def test_transform_reads_nested_category_scores():
    report = transform_model_grade(
        {
            "categoryScores": {"atsCompatibility": 60, "contentQuality": 80, "formattingDesign": 70, "completeness": 90},
            "suggestions": [{"text": "Tighten bullets", "area": "Content", "priority": "low"}, None, "Add links"],
        }
    )
    assert report["atsScore"] == 60
    assert report["completenessScore"] == 90
    assert report["overallScore"] == 75
    assert report["suggestions"][0] == {"priority": "Low", "type": "Content", "detail": "Tighten bullets", "example": None}
    assert report["suggestions"][1]["detail"] == "Add links"
    assert len(report["suggestions"]) == 2


def test_transform_defaults_missing_fields():
    report = transform_model_grade({"atsScore": 50, "suggestions": [{}]})
    assert report["contentScore"] == 0
    assert report["overallScore"] == round_half_up(50 / 4)
    assert report["suggestions"] == [
        {"priority": "Medium", "type": "General", "detail": "No suggestion provided.", "example": None}
    ]


def test_transform_prefers_model_overall():
    report = transform_model_grade({"overallScore": 91, "atsScore": 10})
    assert report["overallScore"] == 91


def test_transform_rejects_unrelated_object():
    with pytest.raises(MalformedModelOutput):
        transform_model_grade({"message": "I cannot grade this"})


def test_llm_grader_parses_fenced_reply(fake_llm, sample_resume):
    reply = "```json\n" + json.dumps({"overallScore": 88, "atsScore": 80, "contentScore": 90,
                                      "designScore": 85, "completenessScore": 95, "suggestions": []}) + "\n```"
    client = fake_llm(reply)
    report = LLMGrader(client).grade(sample_resume)
    assert report["overallScore"] == 88
    assert client.calls[0]["json_mode"] is True
    prompt = client.calls[0]["messages"][0]["content"]
    assert "overallScore" in prompt and "Alex Johnson" in prompt and "<article" in prompt


def test_llm_grader_uses_supplied_document(fake_llm, sample_resume):
    client = fake_llm('{"atsScore": 10}')
    LLMGrader(client).grade(sample_resume, "<p>custom document</p>")
    assert "<p>custom document</p>" in client.calls[0]["messages"][0]["content"]


@pytest.mark.parametrize("reply", ["not json at all", "[1, 2, 3]", "", RuntimeError("boom")])
def test_llm_grader_raises_model_unavailable(fake_llm, sample_resume, reply):
    with pytest.raises(ModelUnavailable):
        LLMGrader(fake_llm(reply)).grade(sample_resume)


def test_llm_grader_without_client(sample_resume):
    with pytest.raises(ModelUnavailable):
        LLMGrader(None).grade(sample_resume)


def test_model_zero_scores_are_kept():
    report = transform_model_grade({"atsScore": 0, "categoryScores": {"atsCompatibility": 55}, "overallScore": 0})
    assert report["atsScore"] == 0
    assert report["overallScore"] == 0
