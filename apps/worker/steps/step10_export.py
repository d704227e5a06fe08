"""
Step 10 — Export (dashboard JSON + summary PDF).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from packages.shared.models import DashboardResult, RunConfig
from packages.shared.storage import save_artifact, sha256_bytes

from apps.worker.steps.export_render.summary_pdf import generate_summary_pdf

logger = logging.getLogger(__name__)


def result_to_json(result: DashboardResult) -> dict:
    """Dashboard payload with the chart-facing names (eventsWithMeds, hasMeds, Date, Mobility, ...)."""
    return result.model_dump(mode="json", by_alias=True)


def render_pdf(result: DashboardResult, config: Optional[RunConfig] = None, title: Optional[str] = None) -> bytes:
    config = config or RunConfig()
    name = result.logistics.patient.name
    report_title = title or (f"Patient Summary Report: {name}" if name != "Unknown" else "Patient Summary Report")
    return generate_summary_pdf(result, title=report_title, include_grids=config.include_pdf_grids)


def render_exports(
    result: DashboardResult,
    run_id: str,
    config: Optional[RunConfig] = None,
) -> dict[str, dict]:
    """Write dashboard.json and summary.pdf for a run. Returns {filename: {path, sha256, bytes}}."""
    json_bytes = json.dumps(result_to_json(result), indent=2).encode("utf-8")
    pdf_bytes = render_pdf(result, config)

    artifacts: dict[str, dict] = {}
    for filename, data in (("dashboard.json", json_bytes), ("summary.pdf", pdf_bytes)):
        path: Path = save_artifact(run_id, filename, data)
        artifacts[filename] = {"path": str(path), "sha256": sha256_bytes(data), "bytes": len(data)}
        logger.info(f"[{run_id}] Wrote {filename} ({len(data)} bytes)")
    return artifacts
