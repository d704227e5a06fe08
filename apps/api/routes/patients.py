"""
API routes: stored patient discharge notes.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from packages.shared import storage
from packages.shared.models import DashboardResult

from apps.api.routes.notes import NoteRequest
from apps.worker.pipeline import run_note_pipeline
from apps.worker.steps.step10_export import render_pdf

router = APIRouter(tags=["patients"])


class NoteStoredResponse(BaseModel):
    patient_id: str
    sha256: str
    bytes: int


def _require_valid_id(patient_id: str) -> None:
    if not storage.is_safe_id(patient_id):
        raise HTTPException(status_code=400, detail="Invalid patient id")


def _load_or_404(patient_id: str) -> str:
    _require_valid_id(patient_id)
    text = storage.load_note(patient_id)
    if text is None:
        raise HTTPException(status_code=404, detail="Discharge note not found")
    return text


@router.put("/patients/{patient_id}/note", response_model=NoteStoredResponse, status_code=201)
def store_note(patient_id: str, req: NoteRequest):
    """Store (or replace) the discharge note for a patient."""
    _require_valid_id(patient_id)
    storage.save_note(patient_id, req.text)
    data = req.text.encode("utf-8")
    return NoteStoredResponse(patient_id=patient_id, sha256=storage.sha256_bytes(data), bytes=len(data))


@router.get("/patients/{patient_id}/dashboard", response_model=DashboardResult)
def get_dashboard(patient_id: str):
    """Dashboard payload for a stored note. An unreadable note yields an empty dashboard."""
    return run_note_pipeline(_load_or_404(patient_id), note_id=patient_id)


@router.get("/patients/{patient_id}/report")
def get_report(patient_id: str):
    result = run_note_pipeline(_load_or_404(patient_id), note_id=patient_id)
    pdf = render_pdf(result)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{patient_id}_summary.pdf"'},
    )
