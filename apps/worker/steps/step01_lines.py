"""
Step 1 — Note line acquisition.
Split the raw discharge note into trimmed lines and mark the lines that belong
to a Hospital Management block.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_LINE_SPLIT_RE = re.compile(r"\n+")
_MANAGEMENT_HEADER_RE = re.compile(r"^Hospital Management:?", re.IGNORECASE)
# Headers that close a Hospital Management block.
_BLOCK_TERMINATOR_RE = re.compile(r"^(Discharge Plan|Follow-?Up|Medications)", re.IGNORECASE)

MANAGEMENT_BLOCK = "Hospital Management"


@dataclass(frozen=True)
class NoteLine:
    text: str
    block: Optional[str] = None


def split_note_lines(raw_note: str | None) -> list[str]:
    """Split on one-or-more newlines, strip, drop empty lines."""
    if not raw_note:
        return []
    return [s.strip() for s in _LINE_SPLIT_RE.split(str(raw_note)) if s.strip()]


def expand_management_blocks(lines: list[str]) -> list[NoteLine]:
    """
    A Hospital Management header absorbs the lines after it for as long as each
    one carries a colon and is not a Discharge Plan / Follow-Up / Medications
    header. Absorbed lines stay separate "Label: content" lines tagged with the
    block they belong to.
    """
    expanded: list[NoteLine] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        expanded.append(NoteLine(line))
        i += 1
        if not _MANAGEMENT_HEADER_RE.match(line):
            continue
        while i < len(lines):
            nxt = lines[i]
            if _BLOCK_TERMINATOR_RE.match(nxt) or ":" not in nxt:
                break
            expanded.append(NoteLine(nxt, block=MANAGEMENT_BLOCK))
            i += 1
    return expanded
