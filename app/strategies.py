"""
Strategy interfaces shared by the model-backed and rule-based implementations.

Model strategies raise ModelUnavailable on any failure; rule strategies never
raise. The pipeline tries the former once and falls back to the latter.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

Draft = Dict[str, Any]
Suggestion = Dict[str, Any]
ActionPlan = List[Dict[str, Any]]
GradeReport = Dict[str, Any]


class Grader(ABC):
    name = "grader"

    @abstractmethod
    def grade(self, draft: Draft, document: str | None = None) -> GradeReport:
        """Score a canonical draft and suggest improvements."""


class Applier(ABC):
    name = "applier"

    @abstractmethod
    def apply(self, draft: Draft, suggestions: List[Suggestion]) -> Tuple[Draft, ActionPlan]:
        """Fold suggestions into a draft and describe the remaining work."""
