"""
Stored student profile → canonical résumé draft.

Profiles come from the portal's profile forms, so most fields are optional
and nested one level deep (personal, currentCourse, education, skills).
"""

from __future__ import annotations
from typing import Any, Dict, List

from cleaner import as_text, description_bullets, normalize_resume_draft, unique_push


def map_profile_to_draft(profile: Any, user: Any = None, *, default_role: str = "") -> Dict[str, Any] | None:
    if not isinstance(profile, dict):
        return None
    user = user if isinstance(user, dict) else {}

    personal = _obj(profile.get("personal"))
    course = _obj(profile.get("currentCourse"))
    skills = _obj(profile.get("skills"))

    name_parts = [as_text(personal.get(k)).strip() for k in ("firstName", "middleName", "lastName")]
    full_name = " ".join(p for p in name_parts if p)

    draft = {
        "personalInfo": {
            "name": full_name or as_text(user.get("username")).strip(),
            "email": as_text(user.get("email")),
            "phone": as_text(personal.get("contactNumber")),
            "linkedin": as_text(personal.get("linkedIn")),
            "github": as_text(personal.get("github")),
            "portfolio": as_text(personal.get("otherSocialMedia")),
        },
        "education": _education(profile, course),
        "skills": _skills(skills),
        "experience": [
            {
                "company": as_text(exp.get("company")),
                "role": as_text(exp.get("role")),
                "duration": as_text(exp.get("duration")),
                "description": _experience_bullets(exp.get("description"), exp.get("technologiesUsed")),
            }
            for exp in map(_obj, _to_list(profile.get("workExperience")))
        ],
        "projects": [
            {
                "title": as_text(proj.get("title")),
                "technologies": as_text(proj.get("technologies")),
                "description": as_text(proj.get("description")),
                "githubLink": as_text(proj.get("url")),
            }
            for proj in map(_obj, _to_list(profile.get("projects")))
        ],
        "achievements": "; ".join(
            t for t in (as_text(_obj(c).get("title")).strip() for c in _to_list(profile.get("certificates"))) if t
        ),
        "extracurriculars": _joined(profile.get("extracurricular")) or _joined(personal.get("hobbies")),
        "targetRole": _target_role(course) or default_role,
    }
    return normalize_resume_draft(draft)


# ───────────────────────────────────────── helpers ──
def _obj(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _to_list(value: Any) -> List[Any]:
    if not value:
        return []
    if isinstance(value, list):
        return [x for x in value if x is not None]
    return [value]


def _joined(value: Any) -> str:
    return "; ".join(t for t in (as_text(x).strip() for x in _to_list(value)) if t)


def _education(profile: Dict[str, Any], course: Dict[str, Any]) -> List[Dict[str, str]]:
    degree, branch, department = (as_text(course.get(k)) for k in ("degree", "branch", "department"))
    if not (degree or branch or department):
        return []
    return [{
        "college": department or degree,
        "degree": " - ".join(p for p in (degree, branch) if p),
        "cgpa": as_text(course.get("aggregatePercentage")),
        "year": as_text(course.get("graduationYear")),
        "coursework": _academic_highlights(_obj(profile.get("education"))),
    }]


def _academic_highlights(education: Dict[str, Any]) -> str:
    labels = (("tenthPercentage", "10th"), ("twelfthPercentage", "12th"), ("diplomaPercentage", "Diploma"))
    parts = [f"{label}: {as_text(education.get(key))}%" for key, label in labels if as_text(education.get(key))]
    return " | ".join(parts)


def _experience_bullets(description: Any, technologies: Any) -> List[str]:
    bullets = []
    tech_line = ", ".join(t for t in (as_text(x).strip() for x in _to_list(technologies)) if t)
    if tech_line:
        bullets.append(f"Tech stack: {tech_line}")
    bullets += [b for b in description_bullets(description) if b]
    return bullets or [""]


def _skills(skills: Dict[str, Any]) -> List[str]:
    combined: List[str] = []
    for item in _to_list(skills.get("technical")) + _to_list(skills.get("soft")):
        unique_push(combined, as_text(item))
    return combined or ["Teamwork"]


def _target_role(course: Dict[str, Any]) -> str:
    branch = as_text(course.get("branch")).strip()
    if not branch:
        return ""
    return f"{branch} {as_text(course.get('degree')).strip() or 'Professional'}".strip()
