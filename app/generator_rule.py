from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader

from cleaner import is_blank_entry, normalize_resume_draft

CONTACT_SEPARATOR = " | "
_CONTACT_FIELDS = ("email", "phone", "linkedin", "github", "portfolio")

# Free text is inserted verbatim; escaping belongs to whoever serves the page.
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _joined(*parts: str, sep: str = " • ") -> str:
    return sep.join(p.strip() for p in parts if p and p.strip())


def _view(draft: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a canonical draft into what the template prints, dropping empties."""
    personal = draft["personalInfo"]
    experience = []
    for exp in draft["experience"]:
        if is_blank_entry(exp):
            continue
        experience.append({
            "heading": _joined(exp["role"], exp["company"]),
            "duration": exp["duration"].strip(),
            "bullets": [b for b in exp["description"] if b.strip()],
        })
    education = [
        dict(e, line=_joined(e["degree"], e["year"]))
        for e in draft["education"] if not is_blank_entry(e)
    ]
    return {
        "name": personal["name"].strip() or "Full Name",
        "contact": _joined(*(personal[k] for k in _CONTACT_FIELDS), sep=CONTACT_SEPARATOR),
        "summary": draft["targetRole"].strip(),
        "skills": draft["skills"],
        "experience": experience,
        "projects": [p for p in draft["projects"] if not is_blank_entry(p)],
        "education": education,
        "achievements": draft["achievements"].strip(),
        "extracurriculars": draft["extracurriculars"].strip(),
    }


def json_to_html(data: Any) -> str:
    """Render résumé → styled HTML fragment. Same draft, same bytes."""
    draft = normalize_resume_draft(data)
    return env.get_template("resume.html").render(r=_view(draft))
