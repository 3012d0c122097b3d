"""
Shared clean-ups and schema normalisation.

`normalize_resume_draft` coerces any JSON-shaped value into the canonical
résumé draft. It never raises: wrong types are replaced by defaults and every
list section keeps at least one placeholder entry.
"""
from __future__ import annotations
import copy
import re
from typing import Any, Dict, List

from schema_resume import (
    DEFAULT_PRIORITY,
    EDUCATION_FIELDS,
    EMPTY_EDUCATION,
    EMPTY_EXPERIENCE,
    EMPTY_PROJECT,
    EXPERIENCE_FIELDS,
    PERSONAL_INFO_FIELDS,
    PRIORITIES,
    PROJECT_FIELDS,
    TEXT_FIELDS,
)

_BULLET = re.compile(r"^[•\-\s]+")

# ───────────────────────────────────────── helpers ──
def as_text(value: Any) -> str:
    """Strings pass through, numbers are stringified, everything else is ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return [x for x in value if x is not None]
    return []


def canonical_priority(value: Any) -> str:
    text = as_text(value).strip().lower()
    for p in PRIORITIES:
        if p.lower() == text:
            return p
    return DEFAULT_PRIORITY


def unique_push(target: List[str], value: Any) -> bool:
    """Append a trimmed string unless it is empty or already present."""
    trimmed = value.strip() if isinstance(value, str) else ""
    if not trimmed or trimmed in target:
        return False
    target.append(trimmed)
    return True


def description_bullets(raw: Any) -> List[str]:
    """List → its non-empty strings; string → one bullet per line."""
    if isinstance(raw, list):
        bits = [x.strip() for x in raw if isinstance(x, str)]
    elif isinstance(raw, str):
        bits = [_BULLET.sub("", ln).strip() for ln in raw.splitlines()]
    else:
        bits = []
    bits = [x for x in bits if x]
    return bits or [""]


def is_blank_entry(entry: Dict[str, Any]) -> bool:
    for value in entry.values():
        if isinstance(value, list):
            if any(isinstance(x, str) and x.strip() for x in value):
                return False
        elif isinstance(value, str) and value.strip():
            return False
    return True

# ─────────────────────────────────────── sections ──
def _personal_info(raw: Any) -> Dict[str, str]:
    src = raw if isinstance(raw, dict) else {}
    return {k: as_text(src.get(k)) for k in PERSONAL_INFO_FIELDS}


def _education(raw: Any) -> Dict[str, str]:
    src = raw if isinstance(raw, dict) else {}
    return {k: as_text(src.get(k)) for k in EDUCATION_FIELDS}


def _experience(raw: Any) -> Dict[str, Any]:
    src = raw if isinstance(raw, dict) else {}
    entry: Dict[str, Any] = {k: as_text(src.get(k)) for k in EXPERIENCE_FIELDS}
    entry["description"] = description_bullets(src.get("description"))
    return entry


def _project(raw: Any) -> Dict[str, str]:
    if isinstance(raw, str):
        raw = {"title": raw}
    src = raw if isinstance(raw, dict) else {}
    entry = {k: as_text(src.get(k)) for k in PROJECT_FIELDS}
    if not entry["githubLink"]:
        entry["githubLink"] = as_text(src.get("github"))
    desc = src.get("description")
    if isinstance(desc, list):
        entry["description"] = "\n".join(x.strip() for x in desc if isinstance(x, str) and x.strip())
    return entry


def _section(raw: Any, build, placeholder: Dict[str, Any]) -> List[Dict[str, Any]]:
    items = as_list(raw)
    if not items:
        return [copy.deepcopy(placeholder)]
    return [build(x) for x in items]


def _skills(raw: Any) -> List[str]:
    out: List[str] = []
    for item in as_list(raw):
        unique_push(out, as_text(item))
    return out

# ───────────────────────────────────── normaliser ──
def normalize_resume_draft(data: Any) -> Dict[str, Any]:
    src = copy.deepcopy(data) if isinstance(data, dict) else {}

    draft = {
        "personalInfo": _personal_info(src.get("personalInfo")),
        "education": _section(src.get("education"), _education, EMPTY_EDUCATION),
        "skills": _skills(src.get("skills")),
        "experience": _section(src.get("experience"), _experience, EMPTY_EXPERIENCE),
        "projects": _section(src.get("projects"), _project, EMPTY_PROJECT),
    }
    for field in TEXT_FIELDS:
        draft[field] = as_text(src.get(field))
    return draft
