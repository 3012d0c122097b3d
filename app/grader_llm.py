"""
LLM-based résumé grader.

• Sends the canonical draft plus its rendered HTML with a strict key contract.
• Repairs the reply with output_repair and salvages whatever scores are
  present, from top-level keys or a nested categoryScores object.
• Raises ModelUnavailable (or MalformedModelOutput) so the pipeline can fall
  back to the rule-based grader.
"""

from __future__ import annotations
import json
import logging
import textwrap
from typing import Any, Dict, List

import config
from cleaner import as_text, canonical_priority
from errors import MalformedModelOutput, ModelUnavailable
from generator_rule import json_to_html
from grader_rule import mean_score, round_half_up
from llm_client import LLMClient, complete
from output_repair import repair_json_object
from schema_resume import GRADE_KEYS
from strategies import Grader

logger = logging.getLogger(__name__)

NO_DETAIL = "No suggestion provided."

# top-level key → key inside a nested categoryScores object
_CATEGORY_KEYS = {
    "atsScore": "atsCompatibility",
    "contentScore": "contentQuality",
    "designScore": "formattingDesign",
    "completenessScore": "completeness",
}

_GRADING_PROMPT = textwrap.dedent(
    """\
    You are acting as both an Applicant Tracking System (ATS) analyst and senior career coach. Given the raw resume JSON and the enhanced HTML version, return a JSON object with the following exact keys: overallScore (0-100), atsScore (0-100), contentScore (0-100), designScore (0-100), completenessScore (0-100), suggestions (array of {{ priority: High|Medium|Low, type: string, detail: string, example: string|null }}). Provide actionable, concise suggestions.

    Raw JSON:
    {resume_json}

    Enhanced HTML:
    {document}
    """
)


def build_grading_prompt(draft: Dict[str, Any], document: str | None = None) -> str:
    return _GRADING_PROMPT.format(
        resume_json=json.dumps(draft, indent=2, ensure_ascii=False),
        document=document or json_to_html(draft),
    )


def coerce_score(value: Any) -> int | None:
    """Model scores as ints in 0-100; None when the value is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return None
        return max(0, min(100, round_half_up(value)))
    return None


def _suggestion(item: Any) -> Dict[str, Any] | None:
    if isinstance(item, str):
        item = {"detail": item}
    if not isinstance(item, dict):
        return None
    detail = as_text(item.get("detail")).strip() or as_text(item.get("text")).strip()
    return {
        "priority": canonical_priority(item.get("priority")),
        "type": as_text(item.get("type")).strip() or as_text(item.get("area")).strip() or "General",
        "detail": detail or NO_DETAIL,
        "example": as_text(item.get("example")).strip() or None,
    }


def _first_score(*candidates: Any) -> int:
    for value in candidates:
        score = coerce_score(value)
        if score is not None:
            return score
    return 0


def transform_model_grade(result: Any) -> Dict[str, Any]:
    """Coerce a parsed model reply into a GradeReport."""
    if not isinstance(result, dict):
        raise MalformedModelOutput("Grading reply is not a JSON object.")

    has_suggestions = isinstance(result.get("suggestions"), list)
    nested = result.get("categoryScores")
    nested = nested if isinstance(nested, dict) else {}
    if not has_suggestions and not nested and not any(k in result for k in GRADE_KEYS):
        raise MalformedModelOutput("Grading reply has none of the expected keys.")

    scores = {}
    for key, category in _CATEGORY_KEYS.items():
        scores[key] = _first_score(result.get(key), nested.get(category), nested.get(key))

    overall = coerce_score(result.get("overallScore"))
    if overall is None:
        overall = mean_score(*scores.values())
    suggestions: List[Dict[str, Any]] = []
    if has_suggestions:
        suggestions = [s for s in map(_suggestion, result["suggestions"]) if s]

    return {"overallScore": overall, **scores, "suggestions": suggestions}


class LLMGrader(Grader):
    name = "model"

    def __init__(self, client: LLMClient | None, *, timeout: float | None = None):
        self.client = client
        self.timeout = timeout

    def grade(self, draft, document=None):
        if self.client is None:
            raise ModelUnavailable("No language model configured.")

        raw = complete(
            self.client,
            build_grading_prompt(draft, document),
            json_mode=True,
            temperature=config.TEMPERATURE["grade"],
            timeout=self.timeout,
        )
        parsed = repair_json_object(raw)
        if parsed is None:
            raise ModelUnavailable("Grading reply could not be parsed as a JSON object.")

        report = transform_model_grade(parsed)
        logger.info(
            "resume_grade_model overall=%s suggestions=%s",
            report["overallScore"], len(report["suggestions"]),
        )
        return report
