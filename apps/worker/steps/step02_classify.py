"""
Step 2 — Line phase classification (rule-based).
Assign each note line to a care-timeline phase using priority-ordered patterns.
"""
from __future__ import annotations

import re

from packages.shared.models import ClassificationPath, PhaseDefinition, PhaseKey


def _rules(*patterns: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# Priority-ordered taxonomy: the first phase with a matching pattern wins.
PHASES: tuple[PhaseDefinition, ...] = (
    PhaseDefinition(
        key=PhaseKey.PATIENT_INFO,
        label="Patient_info",
        order=-1,
        rules=_rules(
            r"^Patient Name",
            r"^Age/?Gender",
            r"^Admission Date",
            r"^Discharge Date",
            r"^Discharge Disposition",
        ),
    ),
    PhaseDefinition(
        key=PhaseKey.HOME,
        label="Home",
        order=0,
        rules=_rules(
            r"^Comorbidities",
            r"^Prior level of function",
            r"^Self-?care/?Caregiving",
            r"^Primary Providers",
            r"^Consult to Social work",
        ),
    ),
    PhaseDefinition(
        key=PhaseKey.ER,
        label="ER",
        order=1,
        rules=_rules(
            r"^Overview",
            r"^Most Responsible Diagnosis",
            r"^Hospital Course",
            r"^Patient with multiple medical problems",
        ),
    ),
    PhaseDefinition(
        key=PhaseKey.UNIT,
        label="Unit",
        order=2,
        rules=_rules(
            r"^Hospital Management",
            r"^Medical management",
            r"^Pain management",
            r"^Substance Abuse",
            r"^Wound care",
            r"^Chronic risk for constipation",
            r"^Chronic Urinary incontinence",
            r"^Activities of Daily Living/?Functional mobility",
            r"^Durable Medical Equipment",
            r"^Feeding/Swallowing",
            r"^Risk for ",  # Risk for aspiration, Risk for thrombosis, ...
            r"^Decreased ",
            r"^Impaired ",
            r"Discipline:\s*(MD|RN|PT|OT|SLP|SW)",
        ),
    ),
    PhaseDefinition(
        key=PhaseKey.DISCHARGE,
        label="Discharge",
        order=3,
        rules=_rules(
            r"^Discharge Plan",
            r"^Substance Use",
            r"^Skin/Wound Care",
            r"^Mobility",
            r"^Swallowing",
            r"^Communication",
            r"^Medication assistance",
            r"^Education",
        ),
    ),
    PhaseDefinition(
        key=PhaseKey.BACK_HOME,
        label="Back_Home",
        order=4,
        rules=_rules(r"^Follow-?Up Arrangements", r"^Medications"),
    ),
)

_MANAGEMENT_ANYWHERE_RE = re.compile(r"Hospital Management", re.IGNORECASE)


def classify_line_with_path(
    line: str,
    phases: tuple[PhaseDefinition, ...] = PHASES,
) -> tuple[PhaseKey, ClassificationPath]:
    """Classify a single line. Returns (phase_key, path_taken)."""
    for phase in phases:
        if phase.matches(line):
            return phase.key, ClassificationPath.RULE

    if _MANAGEMENT_ANYWHERE_RE.search(line):
        return PhaseKey.UNIT, ClassificationPath.FALLBACK
    return PhaseKey.HOME, ClassificationPath.FALLBACK


def classify_line(line: str, phases: tuple[PhaseDefinition, ...] = PHASES) -> PhaseKey:
    """Return the phase key for a raw note line. Never fails; unknown lines land in HOME."""
    return classify_line_with_path(line, phases)[0]
