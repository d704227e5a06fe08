"""
Step 3 — Section building.
Turn note lines into labeled (label, content) rows, one per line, applying the
discharge-plan context override and the special header/attachment cases.

The scan is a single left-to-right fold carrying
(inside_discharge_plan, rows); every decision depends only on that state and
the current/next line.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from packages.shared.models import ClassificationPath, PhaseKey, SectionRow

from apps.worker.steps.step01_lines import NoteLine, expand_management_blocks, split_note_lines
from apps.worker.steps.step02_classify import classify_line_with_path

logger = logging.getLogger(__name__)

_DISCHARGE_PLAN_OPEN_RE = re.compile(r"^Discharge Plan:?", re.IGNORECASE)
_DISCHARGE_PLAN_CLOSE_RE = re.compile(r"^(Follow-?Up Arrangements|Medications):?", re.IGNORECASE)
# Subsection labels that belong to the discharge plan while it is open.
_DISCHARGE_CONTEXT_LABEL_RE = re.compile(
    r"^(Risk for|Decreased|Impaired|Mobility|Swallowing|Communication|Skin/Wound Care"
    r"|Education|Substance Use|Medication assistance)",
    re.IGNORECASE,
)
# Headers written without a colon whose value sits on the next line.
_HEADERS_NO_COLON = (re.compile(r"^Most Responsible Diagnosis$", re.IGNORECASE),)
# Lines that continue the previous row instead of starting one.
_ATTACH_TO_PREVIOUS = (re.compile(r"^Consult to Social work", re.IGNORECASE),)
_LEADING_DASH_RE = re.compile(r"^[–—-]\s*")
_LABEL_CONTENT_RE = re.compile(r"^([^:]+):\s*(.*)$")


@dataclass(frozen=True)
class SectionFoldState:
    inside_discharge_plan: bool = False
    rows: tuple[SectionRow, ...] = ()


def track_discharge_plan(inside: bool, line: str) -> bool:
    """Open on a Discharge Plan header, close on Follow-Up Arrangements / Medications."""
    if _DISCHARGE_PLAN_OPEN_RE.match(line):
        inside = True
    if _DISCHARGE_PLAN_CLOSE_RE.match(line):
        inside = False
    return inside


def split_label_content(line: str) -> tuple[str, str]:
    """Split at the first colon; label-only lines use the whole line for both."""
    m = _LABEL_CONTENT_RE.match(line)
    if not m:
        return line, line
    return m.group(1).strip(), m.group(2).strip()


def _row_id(rows: tuple[SectionRow, ...]) -> str:
    return f"sec_{len(rows) + 1}"


def fold_line(
    state: SectionFoldState,
    note_line: NoteLine,
    next_line: Optional[NoteLine],
) -> tuple[SectionFoldState, bool]:
    """
    Apply one line to the fold state.
    Returns (new_state, consumed_next); consumed_next is True when the line
    took the following line as its content.
    """
    line = note_line.text
    inside = track_discharge_plan(state.inside_discharge_plan, line)
    rows = state.rows

    if any(p.match(line) for p in _HEADERS_NO_COLON):
        content = _LEADING_DASH_RE.sub("", next_line.text if next_line else "").strip()
        phase, path = classify_line_with_path(line)
        row = SectionRow(
            id=_row_id(rows), phase=phase, label=line.strip(), content=content,
            path=path, block=note_line.block,
        )
        return SectionFoldState(inside, rows + (row,)), next_line is not None

    if rows and any(p.match(line) for p in _ATTACH_TO_PREVIOUS):
        prev = rows[-1]
        merged = prev.model_copy(update={"content": f"{prev.content} {line.strip()}"})
        return SectionFoldState(inside, rows[:-1] + (merged,)), False

    label, content = split_label_content(line)
    if inside and _DISCHARGE_CONTEXT_LABEL_RE.match(label):
        phase, path = PhaseKey.DISCHARGE, ClassificationPath.DISCHARGE_CONTEXT
    else:
        phase, path = classify_line_with_path(line)
    row = SectionRow(
        id=_row_id(rows), phase=phase, label=label, content=content,
        path=path, block=note_line.block,
    )
    return SectionFoldState(inside, rows + (row,)), False


def build_sections(raw_note: str | None) -> list[SectionRow]:
    """Split a raw discharge note into classified SectionRows, in note order."""
    lines = expand_management_blocks(split_note_lines(raw_note))
    state = SectionFoldState()
    i = 0
    while i < len(lines):
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        state, consumed_next = fold_line(state, lines[i], next_line)
        i += 2 if consumed_next else 1

    logger.debug(f"Built {len(state.rows)} section rows from {len(lines)} lines")
    return list(state.rows)
