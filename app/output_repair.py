"""
Lenient JSON extraction from free-text model replies.

Models wrap JSON in markdown fences inconsistently, so parsing is tried twice:
once after peeling a leading fence, once after removing every fence marker
and NUL byte. Prose around unfenced JSON ("Sure! {...}") is not recovered;
the reply is rejected instead of being half-parsed.
"""

from __future__ import annotations
import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_OPEN_FENCE = re.compile(r"^```[a-zA-Z]*\s*")
_CLOSE_FENCE = re.compile(r"```\s*$")
_ANY_FENCE = re.compile(r"```[a-zA-Z]*\s*")


def repair_json(raw: Any) -> Any | None:
    """Return the parsed JSON value inside `raw`, or None. Never raises."""
    if not raw or not isinstance(raw, str):
        return None

    text = raw.strip()
    if not text:
        return None

    if text.startswith("```"):
        text = _CLOSE_FENCE.sub("", _OPEN_FENCE.sub("", text)).strip()

    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        pass

    sanitised = _ANY_FENCE.sub("", text).replace("```", "").replace("\x00", "").strip()
    try:
        return json.loads(sanitised)
    except (ValueError, RecursionError) as exc:
        logger.warning("model_json_unparseable len=%s: %s", len(raw), exc)
        return None


def repair_json_object(raw: Any) -> dict | None:
    """Like repair_json, but only an object counts as a usable reply."""
    parsed = repair_json(raw)
    return parsed if isinstance(parsed, dict) else None
