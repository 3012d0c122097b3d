"""
Rule-based résumé grader.

Scores come purely from the shape of the canonical draft, so the result is
deterministic and always within 0-100. No layout analysis is done; the
design score is a constant.
"""

from __future__ import annotations
import math
from typing import Any, Dict, List

from cleaner import normalize_resume_draft
from strategies import Grader

DESIGN_SCORE = 70

GENERIC_SUGGESTIONS: List[Dict[str, Any]] = [
    {
        "priority": "High",
        "type": "Content Quality",
        "detail": "Add quantified achievements to the experience section to highlight impact.",
        "example": "Increased API throughput by 35% by optimising caching layers.",
    },
    {
        "priority": "Medium",
        "type": "ATS Keywords",
        "detail": "Include 4-5 keywords from the job description in your skills and experience bullets.",
        "example": None,
    },
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def mean_score(*scores: int) -> int:
    return round_half_up(sum(scores) / len(scores))


def _bullet_count(draft: Dict[str, Any]) -> int:
    first = draft["experience"][0]
    return sum(1 for b in first["description"] if b.strip())


def heuristic_grade(data: Any) -> Dict[str, Any]:
    draft = normalize_resume_draft(data)

    present = [
        bool(draft["personalInfo"]["name"].strip()),
        len(draft["education"]) > 0,
        len(draft["experience"]) > 0,
        len(draft["skills"]) > 0,
    ]
    completeness = min(100, 25 * sum(present))
    ats = min(100, 15 * len(draft["skills"]) + 25)
    content = min(100, 20 * _bullet_count(draft) + 40)
    design = DESIGN_SCORE

    return {
        "overallScore": mean_score(completeness, ats, content, design),
        "atsScore": ats,
        "contentScore": content,
        "designScore": design,
        "completenessScore": completeness,
        "suggestions": [dict(s) for s in GENERIC_SUGGESTIONS],
    }


class RuleGrader(Grader):
    name = "heuristic"

    def grade(self, draft, document=None):
        return heuristic_grade(draft)
