"""
Step 7 — Clinical risk trend grid.
Score each clinical domain 0 (low risk) to 3 (high risk) for every day of the
stay. Risk is highest at admission and is driven down on the way to
discharge; discharge day takes each tier's fixed discharge value.
"""
from __future__ import annotations

import logging

from packages.shared.models import GridRow

from apps.worker.steps.scoring.evidence import NoteEvidence
from apps.worker.steps.scoring.risk_rules import RISK_RULES
from apps.worker.steps.scoring.stay_dates import MAX_STAY_DAYS, stay_dates_for_note
from apps.worker.steps.scoring.tiers import (
    NEAR_DISCHARGE_FRACTION,
    DayContext,
    DomainRules,
    clamp_score,
    round_half_up,
)

logger = logging.getLogger(__name__)


def risk_tiers(raw_note: str | None, rules: tuple[DomainRules, ...] = RISK_RULES) -> dict[str, str]:
    evidence = NoteEvidence.from_note(raw_note)
    return {r.domain.value: r.scorer_for(evidence)[0] for r in rules}


def extract_risk_trend_data(
    raw_note: str | None,
    max_days: int = MAX_STAY_DAYS,
    near_discharge_fraction: float = NEAR_DISCHARGE_FRACTION,
    rules: tuple[DomainRules, ...] = RISK_RULES,
) -> list[GridRow]:
    """
    One row per day from admission to discharge, scores rounded to one decimal.
    Returns [] when the note lacks an admission or discharge date.
    """
    dates = stay_dates_for_note(raw_note, max_days)
    if not dates:
        return []

    evidence = NoteEvidence.from_note(raw_note)
    scorers = {r.domain: r.scorer_for(evidence) for r in rules}
    logger.debug(
        "Risk tiers: " + ", ".join(f"{d.value}={name}" for d, (name, _) in scorers.items())
    )

    grid: list[GridRow] = []
    for index, date in enumerate(dates):
        day = DayContext.risk(index, len(dates), near_discharge_fraction)
        grid.append(GridRow.from_scores(date, {
            domain: clamp_score(round_half_up(scorer(day), 1))
            for domain, (_, scorer) in scorers.items()
        }))
    return grid
