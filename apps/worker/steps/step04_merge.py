"""
Step 4 — Merge section rows into one bullet block per phase.
"""
from __future__ import annotations

import re
from collections import defaultdict

from packages.shared.models import MergedSection, PhaseDefinition, PhaseKey, SectionRow

from apps.worker.steps.step02_classify import PHASES

_MEDICATIONS_LABEL_RE = re.compile(r"^\s*Medications?\b", re.IGNORECASE)
_BULLET_PREFIX_RE = re.compile(r"^•\s*")
_BULLET_LABEL_RE = re.compile(r"^([^:]+):\s*(.+)$")

# Phases whose rows are shown but never weighted.
UNWEIGHTED_PHASES = frozenset({PhaseKey.PATIENT_INFO})


def format_bullet(row: SectionRow) -> str:
    return f"• {row.label}: {row.content}"


def merge_sections(
    rows: list[SectionRow],
    phases: tuple[PhaseDefinition, ...] | list[PhaseDefinition] = PHASES,
) -> list[MergedSection]:
    """
    Group rows by phase, one MergedSection per phase that has rows, in phase order.
    count is the row count (0 for unweighted phases); has_meds flags a Back_Home
    Medications bullet so the event step can leave it out of the baseline.
    """
    by_phase: dict[PhaseKey, list[SectionRow]] = defaultdict(list)
    for row in rows:
        by_phase[row.phase].append(row)

    merged: list[MergedSection] = []
    for phase in sorted(phases, key=lambda p: p.order):
        items = by_phase.get(phase.key, [])
        if not items:
            continue
        count = 0 if phase.key in UNWEIGHTED_PHASES else len(items)
        has_meds = phase.key == PhaseKey.BACK_HOME and any(
            _MEDICATIONS_LABEL_RE.match((r.label or "").strip()) for r in items
        )
        merged.append(MergedSection(
            id=f"merged_{phase.key.value}",
            phase=phase.key,
            label=phase.label,
            content="\n".join(format_bullet(r) for r in items),
            count=count,
            has_meds=has_meds,
        ))
    return merged


def parse_content_bullets(content: str | None) -> list[tuple[str | None, str]]:
    """
    Read a merged bullet block back into (label, text) pairs.
    Bullets without a "Label: text" shape come back with label None.
    """
    if not content:
        return []
    bullets: list[tuple[str | None, str]] = []
    for line in content.split("\n"):
        if not line.strip():
            continue
        clean = _BULLET_PREFIX_RE.sub("", line).strip()
        m = _BULLET_LABEL_RE.match(clean)
        if m:
            bullets.append((m.group(1).strip(), m.group(2).strip()))
        elif clean:
            bullets.append((None, clean))
    return bullets
