"""
Step 8 — Discharge logistics.
Patient identity, education topics, follow-ups, medications and caregiver
support for the logistics panel. Regex-only; absent sections give defaults.
"""
from __future__ import annotations

import math
import re

from packages.shared.models import (
    CaregiverStatus,
    CaregiverSummary,
    EducationSummary,
    FollowUp,
    MedicationItem,
    MedicationStatus,
    PatientIdentity,
    PatientLogistics,
)

_NAME_RE = re.compile(r"Patient Name:\s*(.*)", re.IGNORECASE)
_AGE_GENDER_RE = re.compile(r"Age/Gender:\s*(.*)", re.IGNORECASE)
_EDUCATION_RE = re.compile(r"Education:(.*?)(Follow-Up|\Z)", re.IGNORECASE | re.DOTALL)
_FOLLOW_UP_RE = re.compile(r"Follow-Up Arrangements(.*?)Medications:", re.IGNORECASE | re.DOTALL)
_MEDICATIONS_RE = re.compile(r"Medications:(.*)", re.IGNORECASE | re.DOTALL)
_CAREGIVER_RE = re.compile(r"Self-care/Caregiving:(.*?)(Hospital|\Z)", re.IGNORECASE | re.DOTALL)
_ITEM_SPLIT_RE = re.compile(r"[,.\n]")

# Share of education topics assumed covered before discharge.
EDUCATION_COMPLETION_RATE = 0.7


def _split_items(text: str) -> list[str]:
    return [item.strip() for item in _ITEM_SPLIT_RE.split(text) if item.strip()]


def _first_group(pattern: re.Pattern, text: str, default: str = "Unknown") -> str:
    m = pattern.search(text)
    return m.group(1).strip() if m else default


def extract_education(text: str) -> EducationSummary:
    m = _EDUCATION_RE.search(text)
    topics = _split_items(m.group(1)) if m else []
    return EducationSummary(
        topics=topics,
        completed=math.floor(len(topics) * EDUCATION_COMPLETION_RATE),
    )


def extract_follow_ups(text: str) -> list[FollowUp]:
    m = _FOLLOW_UP_RE.search(text)
    if not m:
        return []
    follow_ups = []
    for item in _split_items(m.group(1).lstrip(":")):
        lowered = item.lower()
        follow_ups.append(FollowUp(
            name=item,
            completed="arranged" in lowered or "clinic" in lowered,
        ))
    return follow_ups


def _medication_status(item: str) -> MedicationStatus:
    lowered = item.lower()
    if "reduced" in lowered:
        return MedicationStatus.ADJUSTED
    if "during stay" in lowered:
        return MedicationStatus.COMPLETED
    return MedicationStatus.ACTIVE


def extract_medications(text: str) -> list[MedicationItem]:
    m = _MEDICATIONS_RE.search(text)
    if not m:
        return []
    return [MedicationItem(name=item, status=_medication_status(item)) for item in _split_items(m.group(1))]


def extract_caregiver(text: str) -> CaregiverSummary:
    m = _CAREGIVER_RE.search(text)
    if not m:
        return CaregiverSummary()
    caregiver_text = m.group(1)
    if "24/7" in caregiver_text:
        status = CaregiverStatus.FULL
    elif "checks in frequently" in caregiver_text:
        status = CaregiverStatus.PARTIAL
    else:
        status = CaregiverStatus.UNKNOWN
    return CaregiverSummary(text=caregiver_text.strip(), status=status)


def extract_patient_logistics(raw_note: str | None) -> PatientLogistics:
    text = raw_note or ""
    return PatientLogistics(
        patient=PatientIdentity(
            name=_first_group(_NAME_RE, text),
            age_gender=_first_group(_AGE_GENDER_RE, text),
        ),
        education=extract_education(text),
        follow_ups=extract_follow_ups(text),
        medications=extract_medications(text),
        caregiver=extract_caregiver(text),
    )
