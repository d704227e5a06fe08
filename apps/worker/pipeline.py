"""
Pipeline orchestrator: runs every note step once, in sequence.

This is the only place the note is parsed; the API, the CLI and the PDF
export all consume its DashboardResult.
"""
from __future__ import annotations

import logging
import re
import time
from typing import Optional

from packages.shared.models import DashboardResult, RunConfig, Warning

from apps.worker.steps.scoring.stay_dates import enumerate_stay_dates, find_stay_range
from apps.worker.steps.step02_classify import PHASES
from apps.worker.steps.step03_sections import build_sections
from apps.worker.steps.step04_merge import merge_sections
from apps.worker.steps.step05_events import compute_events
from apps.worker.steps.step06_readiness import extract_readiness_grid
from apps.worker.steps.step07_risk import extract_risk_trend_data
from apps.worker.steps.step08_logistics import extract_patient_logistics
from apps.worker.steps.step09_risk_trend import calculate_risk_trend, summarize_risk_change

logger = logging.getLogger(__name__)

_DISPOSITION_RE = re.compile(r"Discharge Disposition:\s*(.*)", re.IGNORECASE)


def _date_warnings(raw_note: str, grid_len: int, config: RunConfig) -> list[Warning]:
    stay = find_stay_range(raw_note)
    if stay is None:
        return [Warning(
            code="DATE_RANGE_MISSING",
            message="Admission Date or Discharge Date (M/D) not found; daily grids are empty",
        )]
    if grid_len == 0:
        return [Warning(
            code="DATE_RANGE_EMPTY",
            message=f"Stay {stay.admission.label()} to {stay.discharge.label()} produced no days",
        )]
    if len(enumerate_stay_dates(stay, config.max_stay_days + 1)) > config.max_stay_days:
        return [Warning(
            code="STAY_TRUNCATED",
            message=f"Stay truncated to {config.max_stay_days} days",
        )]
    return []


def run_note_pipeline(
    raw_note: Optional[str],
    config: Optional[RunConfig] = None,
    note_id: str = "note",
) -> DashboardResult:
    """
    Parse a discharge note into the full dashboard payload.
    Never raises for note content; problems are reported as warnings.
    """
    config = config or RunConfig()
    start_time = time.time()
    text = (raw_note or "").strip()

    if not text:
        logger.warning(f"[{note_id}] Empty discharge note; returning empty dashboard")
        return DashboardResult(
            phases=list(PHASES),
            logistics=extract_patient_logistics(""),
            warnings=[Warning(code="EMPTY_NOTE", message="Discharge note is empty")],
        )

    logger.info(f"[{note_id}] Step 1-3: Section building")
    rows = build_sections(text)

    logger.info(f"[{note_id}] Step 4: Section merge")
    sections = merge_sections(rows, PHASES)
    logger.debug(f"[{note_id}] {len(rows)} rows merged into {len(sections)} phase sections")

    logger.info(f"[{note_id}] Step 5: Event weights")
    events = compute_events(PHASES, sections, include_meds=False)
    events_with_meds = compute_events(PHASES, sections, include_meds=True)

    logger.info(f"[{note_id}] Step 6-7: Readiness and risk grids")
    readiness_grid = extract_readiness_grid(text, max_days=config.max_stay_days)
    risk_grid = extract_risk_trend_data(
        text,
        max_days=config.max_stay_days,
        near_discharge_fraction=config.near_discharge_fraction,
    )
    warnings = _date_warnings(text, len(risk_grid), config)
    for w in warnings:
        logger.warning(f"[{note_id}] {w.code}: {w.message}")

    logger.info(f"[{note_id}] Step 8: Logistics")
    logistics = extract_patient_logistics(text)

    logger.info(f"[{note_id}] Step 9: Risk trend")
    risk_trend = calculate_risk_trend(risk_grid, config.risk_weights)
    risk_change = summarize_risk_change(risk_grid, config.risk_weights)

    stay = find_stay_range(text)
    disposition = _DISPOSITION_RE.search(text)

    logger.info(f"[{note_id}] Pipeline complete in {time.time() - start_time:.3f}s")
    return DashboardResult(
        phases=list(PHASES),
        sections=sections,
        events=events,
        events_with_meds=events_with_meds,
        readiness_grid=readiness_grid,
        risk_grid=risk_grid,
        risk_trend=risk_trend,
        risk_change=risk_change,
        logistics=logistics,
        admission_date=stay.admission.label() if stay else None,
        discharge_date=stay.discharge.label() if stay else None,
        disposition=disposition.group(1).strip() if disposition else None,
        warnings=warnings,
    )
