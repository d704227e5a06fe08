"""
Step 5 — Phase event weights.
Convert merged sections into timeline events whose value is the phase's
bullet density.
"""
from __future__ import annotations

import re

from packages.shared.models import MergedSection, PhaseDefinition, PhaseKey, TimelineEvent

from apps.worker.steps.step04_merge import UNWEIGHTED_PHASES

# Self-referential "Discharge Plan: Discharge Plan" bullet left by a bare header line.
_GENERIC_DISCHARGE_BULLET_RE = re.compile(
    r"(?:^|\n)•\s*Discharge\s*Plan:\s*Discharge\s*Plan\b", re.IGNORECASE
)
_BARE_DISCHARGE_HEADER_RE = re.compile(r"^Discharge\s*Plan$", re.IGNORECASE)

TS_STEP = 1000


def _has_generic_discharge_header(section: MergedSection) -> bool:
    if _GENERIC_DISCHARGE_BULLET_RE.search(section.content or ""):
        return True
    return bool(
        _BARE_DISCHARGE_HEADER_RE.match(section.label or "")
        and _BARE_DISCHARGE_HEADER_RE.match(section.content or "")
    )


def event_weight(section: MergedSection, include_meds: bool = False) -> int:
    """How much a merged phase contributes to timeline density."""
    if section.phase in UNWEIGHTED_PHASES:
        return 0
    base = section.count
    if section.phase == PhaseKey.BACK_HOME:
        if section.has_meds and not include_meds:
            base -= 1
    elif section.phase == PhaseKey.DISCHARGE:
        if _has_generic_discharge_header(section):
            base -= 1
    return max(0, base)


def compute_events(
    phases: tuple[PhaseDefinition, ...] | list[PhaseDefinition],
    sections: list[MergedSection],
    include_meds: bool = False,
) -> list[TimelineEvent]:
    """
    Build one event per merged section.
    ts is a coarse ordinal (phase order x 1000) that only orders phases; the
    chart replaces it with visual positions.
    """
    order = {p.key: p.order for p in phases}
    return [
        TimelineEvent(
            id=s.id,
            phase=s.phase,
            phase_label=s.label,
            text=f"{s.label}\n{s.content}",
            value=event_weight(s, include_meds),
            ts=order.get(s.phase, 0) * TS_STEP,
        )
        for s in sections
    ]
