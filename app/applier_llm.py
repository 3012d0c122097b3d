"""
LLM-based suggestion applier.

The model rewrites the draft in place and returns the revised résumé with an
action plan. Only the envelope is validated here: any JSON object counts as a
candidate résumé and the pipeline re-normalises it.
"""

from __future__ import annotations
import json
import logging
import textwrap
from typing import Any, Dict, List, Tuple

import config
from action_plan import normalize_action_plan
from errors import MalformedModelOutput, ModelUnavailable
from llm_client import LLMClient, complete
from output_repair import repair_json_object
from strategies import Applier

logger = logging.getLogger(__name__)

RESUME_KEYS = ("updatedResume", "resume", "data")
PLAN_KEYS = ("actionPlan", "aiChecklist", "revisionSteps")

_APPLY_PROMPT = textwrap.dedent(
    """\
    You are an expert technical resume editor. You will be given the current resume JSON data and a list of improvement suggestions. Incorporate the suggestions directly into the resume content (rewrite bullets, add keywords, update targetRole, etc.) while keeping the original schema: personalInfo, education[], skills[], experience[], projects[], achievements, extracurriculars, targetRole. Respond with STRICT JSON using this shape:

    {{
      "updatedResume": {{ ... }},
      "actionPlan": [
        {{"priority": "High|Medium|Low", "task": "", "example": "optional"}}
      ]
    }}

    Only include fields that exist in the original resume structure. Preserve arrays and strings. Be concise but specific in your edits.

    Resume JSON:
    {resume_json}

    Suggestions:
    {suggestions_json}
    """
)


def build_apply_prompt(draft: Dict[str, Any], suggestions: List[Dict[str, Any]]) -> str:
    return _APPLY_PROMPT.format(
        resume_json=json.dumps(draft, indent=2, ensure_ascii=False),
        suggestions_json=json.dumps(suggestions, indent=2, ensure_ascii=False),
    )


def _first_present(parsed: Dict[str, Any], keys) -> Any:
    for key in keys:
        value = parsed.get(key)
        if value:
            return value
    return None


def _first_object(parsed: Dict[str, Any], keys) -> Dict[str, Any] | None:
    for key in keys:
        value = parsed.get(key)
        if isinstance(value, dict):
            return value
    return None


class LLMApplier(Applier):
    name = "model"

    def __init__(self, client: LLMClient | None, *, timeout: float | None = None):
        self.client = client
        self.timeout = timeout

    def apply(self, draft, suggestions) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        if self.client is None:
            raise ModelUnavailable("No language model configured.")

        raw = complete(
            self.client,
            build_apply_prompt(draft, suggestions),
            json_mode=True,
            temperature=config.TEMPERATURE["apply"],
            timeout=self.timeout,
        )
        parsed = repair_json_object(raw)
        if parsed is None:
            raise ModelUnavailable("Apply reply could not be parsed as a JSON object.")

        candidate = _first_object(parsed, RESUME_KEYS)
        if candidate is None:
            raise MalformedModelOutput("Apply reply has no updated resume object.")

        plan = normalize_action_plan(_first_present(parsed, PLAN_KEYS), suggestions)
        logger.info(
            "resume_apply_model resume_keys=%s actions=%s",
            sorted(candidate.keys()), len(plan),
        )
        return candidate, plan
