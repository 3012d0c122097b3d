"""
LLM-based résumé document generator.

• Asks the configured model for an ATS-friendly HTML fragment (plain text reply).
• Strips markdown fences and checks the reply actually contains markup.
• Falls back to the deterministic template renderer on any failure.
"""

from __future__ import annotations
import json
import logging
import textwrap
from typing import Any, Dict

from bs4 import BeautifulSoup

import config
from errors import ModelUnavailable
from generator_rule import json_to_html
from llm_client import LLMClient, complete

logger = logging.getLogger(__name__)

_GENERATION_PROMPT = textwrap.dedent(
    """\
    You are an expert technical resume writer. Using the following JSON resume data, craft a modern, ATS-friendly resume as clean HTML without <html> or <body> tags. Use a single-column layout with bold section headings and bullet lists. Focus on clarity, quantified achievements, and consistent tense.

    Resume JSON:
    {resume_json}
    """
)


def build_generation_prompt(draft: Dict[str, Any]) -> str:
    return _GENERATION_PROMPT.format(resume_json=json.dumps(draft, indent=2, ensure_ascii=False))


def _extract_html(raw_html_output: str) -> str:
    """
    Extracts the HTML fragment from the LLM's raw output.
    Handles markdown code fences like ```html ... ```.
    """
    stripped_output = raw_html_output.strip()
    if stripped_output.startswith("```html") and stripped_output.endswith("```"):
        return stripped_output[7:-3].strip()
    if stripped_output.startswith("```") and stripped_output.endswith("```"):  # Generic backticks
        return stripped_output[3:-3].strip()
    return stripped_output


def _has_markup(fragment: str) -> bool:
    soup = BeautifulSoup(fragment, "html.parser")
    return soup.find() is not None


def generate_html_llm(draft: Dict[str, Any], client: LLMClient | None, *, timeout: float | None = None) -> str:
    """Model-written fragment; raises ModelUnavailable when unusable."""
    if client is None:
        raise ModelUnavailable("No language model configured.")

    raw = complete(
        client,
        build_generation_prompt(draft),
        json_mode=False,
        temperature=config.TEMPERATURE["render"],
        timeout=timeout,
    )
    fragment = _extract_html(raw)
    if not fragment or not _has_markup(fragment):
        raise ModelUnavailable("Model reply contains no HTML markup.")
    return fragment


def generate_document(draft: Dict[str, Any], client: LLMClient | None = None, *, timeout: float | None = None) -> str:
    try:
        return generate_html_llm(draft, client, timeout=timeout)
    except ModelUnavailable as exc:
        if client is not None:
            logger.warning("resume_generate_fallback reason=%s", exc)
        return json_to_html(draft)
