"""
Step 6 — Discharge readiness grid.
Score each clinical domain 0 (not ready) to 3 (ready) for every day of the stay,
from keyword evidence in the note and progress through the stay.
"""
from __future__ import annotations

import logging

from packages.shared.models import GridRow

from apps.worker.steps.scoring.evidence import NoteEvidence
from apps.worker.steps.scoring.readiness_rules import READINESS_RULES
from apps.worker.steps.scoring.stay_dates import MAX_STAY_DAYS, stay_dates_for_note
from apps.worker.steps.scoring.tiers import DayContext, DomainRules, clamp_score, round_half_up

logger = logging.getLogger(__name__)


def readiness_tiers(raw_note: str | None, rules: tuple[DomainRules, ...] = READINESS_RULES) -> dict[str, str]:
    """Which tier each domain scored from, keyed by domain name."""
    evidence = NoteEvidence.from_note(raw_note)
    return {r.domain.value: r.scorer_for(evidence)[0] for r in rules}


def extract_readiness_grid(
    raw_note: str | None,
    max_days: int = MAX_STAY_DAYS,
    rules: tuple[DomainRules, ...] = READINESS_RULES,
) -> list[GridRow]:
    """
    One row per day from admission to discharge, scores rounded to whole numbers.
    Returns [] when the note lacks an admission or discharge date.
    """
    dates = stay_dates_for_note(raw_note, max_days)
    if not dates:
        return []

    evidence = NoteEvidence.from_note(raw_note)
    scorers = {r.domain: r.scorer_for(evidence) for r in rules}
    logger.debug(
        "Readiness tiers: " + ", ".join(f"{d.value}={name}" for d, (name, _) in scorers.items())
    )

    grid: list[GridRow] = []
    for index, date in enumerate(dates):
        day = DayContext.readiness(index, len(dates))
        grid.append(GridRow.from_scores(date, {
            domain: clamp_score(round_half_up(scorer(day)))
            for domain, (_, scorer) in scorers.items()
        }))
    return grid
