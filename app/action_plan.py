from __future__ import annotations
from typing import Any, Dict, List

from cleaner import as_text, canonical_priority

REVIEW_TASK = "Review AI feedback manually and adjust each section of your resume."


def plan_item(priority: Any, task: str, example: Any = None) -> Dict[str, Any]:
    return {
        "priority": canonical_priority(priority),
        "task": task,
        "example": as_text(example).strip() or None,
    }


def suggestion_text(suggestion: Dict[str, Any]) -> str:
    return (as_text(suggestion.get("detail")) or as_text(suggestion.get("text"))).strip()


def normalize_action_plan(candidate: Any, fallback_suggestions: Any = None) -> List[Dict[str, Any]]:
    """
    Coerce plan-like model output into a list of action items.

    Strings become Medium-priority tasks, objects keep their priority and use
    `task` or `detail` as the text. If nothing usable survives, one item per
    suggestion with a non-empty detail is synthesised instead.
    """
    if isinstance(candidate, (str, dict)):
        candidate = [candidate]

    result: List[Dict[str, Any]] = []
    if isinstance(candidate, list):
        for item in candidate:
            if isinstance(item, str):
                if item.strip():
                    result.append(plan_item("Medium", item.strip()))
            elif isinstance(item, dict):
                task = (as_text(item.get("task")) or as_text(item.get("detail"))).strip()
                if task:
                    result.append(plan_item(item.get("priority"), task, item.get("example")))

    if not result and isinstance(fallback_suggestions, list):
        for suggestion in fallback_suggestions:
            if not isinstance(suggestion, dict):
                continue
            detail = suggestion_text(suggestion)
            if detail:
                result.append(plan_item(suggestion.get("priority"), detail, suggestion.get("example")))

    return result
