"""
Scoped, lower-cased note excerpts that the domain rule tables search.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from packages.shared.models import Scope

_MANAGEMENT_RE = re.compile(
    r"Hospital Management:?(.*?)(?:Discharge Plan|\Z)", re.IGNORECASE | re.DOTALL
)
_DISCHARGE_PLAN_RE = re.compile(
    r"Discharge Plan:?(.*?)(?:Follow-Up|Education|Medications|\Z)", re.IGNORECASE | re.DOTALL
)
_COURSE_RE = re.compile(
    r"Hospital Course:?(.*?)(?:Prior level|Self-care|\Z)", re.IGNORECASE | re.DOTALL
)


def _excerpt(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return m.group(1).lower() if m else ""


@dataclass(frozen=True)
class NoteEvidence:
    all_text: str = ""
    management: str = ""
    discharge_plan: str = ""
    course: str = ""

    @classmethod
    def from_note(cls, raw_note: str | None) -> "NoteEvidence":
        text = raw_note or ""
        return cls(
            all_text=text.lower(),
            management=_excerpt(_MANAGEMENT_RE, text),
            discharge_plan=_excerpt(_DISCHARGE_PLAN_RE, text),
            course=_excerpt(_COURSE_RE, text),
        )

    def text(self, scope: Scope) -> str:
        if scope == Scope.MANAGEMENT:
            return self.management
        if scope == Scope.DISCHARGE_PLAN:
            return self.discharge_plan
        if scope == Scope.COURSE:
            return self.course
        return self.all_text

    def mentions(self, scope: Scope, keywords: tuple[str, ...]) -> bool:
        haystack = self.text(scope)
        return any(kw in haystack for kw in keywords)
