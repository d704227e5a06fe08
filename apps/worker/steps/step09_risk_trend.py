"""
Step 9 — Composite risk trend.
Weighted daily risk score over the physical-care domains, its day-over-day
change, and the admission-to-discharge summary the report prints.
"""
from __future__ import annotations

from typing import Mapping, Optional

from packages.shared.models import (
    DEFAULT_RISK_WEIGHTS,
    Domain,
    GridRow,
    RiskChangeSummary,
    RiskDirection,
    RiskPoint,
)


def composite_risk(row: GridRow, weights: Mapping[Domain, float] = DEFAULT_RISK_WEIGHTS) -> float:
    return sum(weight * row.score(domain) for domain, weight in weights.items())


def calculate_risk_trend(
    grid: list[GridRow],
    weights: Mapping[Domain, float] = DEFAULT_RISK_WEIGHTS,
) -> list[RiskPoint]:
    points: list[RiskPoint] = []
    previous: Optional[float] = None
    for index, row in enumerate(grid):
        score = composite_risk(row, weights)
        points.append(RiskPoint(
            date=row.date,
            day_number=index + 1,
            risk_score=score,
            delta_risk=0.0 if previous is None else score - previous,
            components={domain: row.score(domain) for domain in weights},
        ))
        previous = score
    return points


def summarize_risk_change(
    grid: list[GridRow],
    weights: Mapping[Domain, float] = DEFAULT_RISK_WEIGHTS,
) -> Optional[RiskChangeSummary]:
    """Compare admission-day and discharge-day composite risk. None for an empty grid."""
    if not grid:
        return None
    first, last = grid[0], grid[-1]
    initial = composite_risk(first, weights)
    final = composite_risk(last, weights)
    change = final - initial
    if change < 0:
        direction = RiskDirection.DECREASED
    elif change > 0:
        direction = RiskDirection.INCREASED
    else:
        direction = RiskDirection.NO_CHANGE
    return RiskChangeSummary(
        initial_date=first.date,
        final_date=last.date,
        initial_score=initial,
        final_score=final,
        change=change,
        direction=direction,
    )
