"""
Rule-based suggestion applier.

Each suggestion is classified by keywords in its detail text, first match
wins: ATS keywords → skills, quantification → experience bullet, summary or
profile → target role, project with an example → project description, and
anything else → an "AI Suggestion" experience bullet.
"""

from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Tuple

from action_plan import REVIEW_TASK, plan_item, suggestion_text
from cleaner import as_text, normalize_resume_draft, unique_push
from strategies import Applier

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 6
MAX_KEYWORD_LEN = 40
MAX_KEYWORD_WORDS = 4

QUANTIFY_SAMPLE = (
    'Quantify the outcome of your work (e.g., "Increased API throughput by 35% '
    'by optimising caching layers").'
)
FALLBACK_TASK = "Review AI feedback and update the resume sections accordingly."

_BRACKETS = re.compile(r"[\[\]]")
_SPLIT = re.compile(r"[,;\n]|\s+and\s+", re.I)
_QUOTES = re.compile(r"[\"']")
_DIGIT = re.compile(r"\d")


def extract_keywords(suggestion: Dict[str, Any]) -> List[str]:
    """Pull short keyword-like phrases out of a suggestion's detail and example."""
    payload = " ".join(
        t for t in (as_text(suggestion.get("detail")), as_text(suggestion.get("example"))) if t
    )
    payload = _BRACKETS.sub(" ", payload)
    if not payload.strip():
        return []

    keywords: List[str] = []
    for segment in _SPLIT.split(payload):
        # "Include ATS keywords: Kubernetes" → "Kubernetes"
        segment = _QUOTES.sub("", segment).rsplit(":", 1)[-1].strip()
        if not segment or len(segment) > MAX_KEYWORD_LEN:
            continue
        if _DIGIT.search(segment) or len(segment.split()) <= MAX_KEYWORD_WORDS:
            if segment not in keywords:
                keywords.append(segment)
    return keywords[:MAX_KEYWORDS]


def _push_bullet(draft: Dict[str, Any], bullet: str) -> None:
    target = draft["experience"][0]
    bullets = [b for b in target["description"] if b.strip()]
    unique_push(bullets, bullet)
    target["description"] = bullets or [""]


def apply_suggestions_heuristically(
    data: Any, suggestions: Any = None
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    draft = normalize_resume_draft(data)
    plan: List[Dict[str, Any]] = []

    def register(priority: Any, task: str, example: Any = None) -> None:
        if task:
            plan.append(plan_item(priority, task, example))

    if not isinstance(suggestions, list) or not suggestions:
        register("Medium", REVIEW_TASK)
        return draft, plan

    for suggestion in suggestions:
        if not isinstance(suggestion, dict):
            continue

        detail = suggestion_text(suggestion)
        example = as_text(suggestion.get("example")).strip() or None
        priority = suggestion.get("priority")
        lower = detail.lower()

        if "keyword" in lower or "ats" in lower:
            keywords = extract_keywords(suggestion)
            if keywords:
                for keyword in keywords:
                    unique_push(draft["skills"], keyword)
                register(priority, f"Blend these ATS keywords into experience and skills: {', '.join(keywords)}", example)
            else:
                register(priority, detail, example)

        elif "quant" in lower:
            _push_bullet(draft, example or QUANTIFY_SAMPLE)
            register(priority, detail, example)

        elif "summary" in lower or "profile" in lower:
            if example:
                draft["targetRole"] = example
            elif not draft["targetRole"].strip():
                draft["targetRole"] = detail
            register(priority, detail, example)

        elif "project" in lower and example:
            project = draft["projects"][0]
            project["description"] = "\n".join(t for t in (project["description"], example) if t)
            register(priority, detail, example)

        elif detail:
            _push_bullet(draft, example or f"AI Suggestion: {detail}")
            register(priority, detail, example)

    if not plan:
        register("Medium", FALLBACK_TASK)

    logger.info(
        "resume_apply_heuristic suggestions=%s skills=%s actions=%s",
        len(suggestions), len(draft["skills"]), len(plan),
    )
    return draft, plan


class RuleApplier(Applier):
    name = "heuristic"

    def apply(self, draft, suggestions):
        return apply_suggestions_heuristically(draft, suggestions)
