"""
Résumé pipeline entry points.

Every operation normalises its input first, tries the model strategy once
when a client is configured and falls back to the rule-based strategy on
ModelUnavailable. Only InvalidInput ever reaches the caller.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Tuple

from action_plan import REVIEW_TASK, normalize_action_plan, plan_item
from applier_llm import LLMApplier
from applier_rule import RuleApplier
from cleaner import as_text, normalize_resume_draft
from errors import InvalidInput, ModelUnavailable
from generator_llm import generate_document
from generator_rule import json_to_html
from grader_llm import LLMGrader
from grader_rule import RuleGrader
from llm_client import LLMClient
from profile_mapper import map_profile_to_draft
from strategies import Applier, Grader

logger = logging.getLogger(__name__)


def _require_mapping(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise InvalidInput(f"{what} is required.")


def resume_from_profile(profile: Any, fallback: Dict[str, Any]) -> Dict[str, Any]:
    """Draft for a stored student profile, or the normalised `fallback` when there is none."""
    user = profile.get("user") if isinstance(profile, dict) else None
    draft = map_profile_to_draft(profile, user, default_role=as_text(fallback.get("targetRole")))
    if draft is None:
        logger.info("resume_profile_missing fallback=sample")
        return normalize_resume_draft(fallback)
    return draft


def render_resume(data: Any) -> str:
    return json_to_html(normalize_resume_draft(data))


def generate_resume(data: Any, client: LLMClient | None = None, *, timeout: float | None = None) -> str:
    _require_mapping(data, "Resume data")
    return generate_document(normalize_resume_draft(data), client, timeout=timeout)


def run_grader(primary: Grader, fallback: Grader, draft: Dict[str, Any], document: str | None = None) -> Tuple[Dict[str, Any], str]:
    try:
        return primary.grade(draft, document), primary.name
    except ModelUnavailable as exc:
        logger.warning("resume_grade_fallback strategy=%s code=%s reason=%s", primary.name, exc.code, exc)
    return fallback.grade(draft, document), fallback.name


def grade_resume(
    data: Any,
    document: str | None = None,
    client: LLMClient | None = None,
    *,
    timeout: float | None = None,
) -> Dict[str, Any]:
    _require_mapping(data, "resumeData")
    draft = normalize_resume_draft(data)

    if client is None:
        return RuleGrader().grade(draft, document)
    report, _ = run_grader(LLMGrader(client, timeout=timeout), RuleGrader(), draft, document)
    return report


def run_applier(
    primary: Applier, fallback: Applier, draft: Dict[str, Any], suggestions: List[Dict[str, Any]]
) -> Tuple[Dict[str, Any], List[Dict[str, Any]], str]:
    try:
        candidate, plan = primary.apply(draft, suggestions)
        return normalize_resume_draft(candidate), plan, primary.name
    except ModelUnavailable as exc:
        logger.warning("resume_apply_fallback strategy=%s code=%s reason=%s", primary.name, exc.code, exc)
    improved, plan = fallback.apply(draft, suggestions)
    return improved, plan, fallback.name


def apply_suggestions(
    data: Any,
    suggestions: Any = None,
    client: LLMClient | None = None,
    *,
    timeout: float | None = None,
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    draft = normalize_resume_draft(data if isinstance(data, dict) else {})
    suggestions = suggestions if isinstance(suggestions, list) else []

    logger.info(
        "resume_apply_request suggestions=%s has_target_role=%s skills=%s experience=%s",
        len(suggestions), bool(draft["targetRole"]), len(draft["skills"]), len(draft["experience"]),
    )

    if client is None or not suggestions:
        improved, plan = RuleApplier().apply(draft, suggestions)
        strategy = RuleApplier.name
    else:
        improved, plan, strategy = run_applier(LLMApplier(client, timeout=timeout), RuleApplier(), draft, suggestions)

    plan = normalize_action_plan(plan, suggestions) or [plan_item("Medium", REVIEW_TASK)]
    logger.info(
        "resume_apply_ready strategy=%s skills=%s actions=%s",
        strategy, len(improved["skills"]), len(plan),
    )
    return improved, plan
