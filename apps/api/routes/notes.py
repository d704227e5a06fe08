"""
API routes: ad-hoc discharge notes (analyze / report without storing).
"""
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel, Field

from packages.shared.models import DashboardResult

from apps.api.settings import MAX_NOTE_CHARS
from apps.worker.pipeline import run_note_pipeline
from apps.worker.steps.step10_export import render_pdf

router = APIRouter(tags=["notes"])


class NoteRequest(BaseModel):
    text: str = Field(max_length=MAX_NOTE_CHARS)
    title: str | None = Field(default=None, max_length=200)


@router.post("/notes/analyze", response_model=DashboardResult)
def analyze_note(req: NoteRequest):
    """Run the dashboard pipeline over a posted note."""
    return run_note_pipeline(req.text, note_id="adhoc")


@router.post("/notes/report")
def report_note(req: NoteRequest):
    """Render the summary PDF for a posted note."""
    result = run_note_pipeline(req.text, note_id="adhoc")
    pdf = render_pdf(result, title=req.title)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="summary.pdf"'},
    )
