"""
Patient summary report rendering for PDF export.
Text and tables only; charts stay in the dashboard.
"""
from __future__ import annotations

from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    PageTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from packages.shared.models import DashboardResult, Domain, GridRow, PhaseKey

from apps.worker.steps.step04_merge import parse_content_bullets

_HEADER_BLUE = colors.HexColor("#2563EB")

_GRID_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F0F4F8")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.HexColor("#2E548A")),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, -1), 8),
    ("ALIGN", (1, 0), (-1, -1), "CENTER"),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ("TOPPADDING", (0, 0), (-1, -1), 3),
    ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
])


def _fmt(value: float) -> str:
    return f"{value:g}"


def _grid_table(grid: list[GridRow]) -> Table:
    header = ["Date"] + [d.value for d in Domain]
    data = [header] + [[row.date] + [_fmt(row.score(d)) for d in Domain] for row in grid]
    table = Table(data, repeatRows=1)
    table.setStyle(_GRID_TABLE_STYLE)
    return table


def _patient_flowables(result: DashboardResult, styles: Any) -> list:
    normal = styles["Normal"]
    patient = result.logistics.patient
    fields = [
        ("Patient Name", patient.name),
        ("Age / Gender", patient.age_gender),
        ("Admission Date", result.admission_date or "N/A"),
        ("Discharge Date", result.discharge_date or "N/A"),
        ("Discharge Disposition", result.disposition or "N/A"),
    ]
    data = [[Paragraph(f"<b>{label}:</b>", normal), Paragraph(escape(value), normal)] for label, value in fields]
    table = Table(data, colWidths=[2.0 * inch, 4.5 * inch])
    table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
    return [table]


def _section_flowables(result: DashboardResult, styles: Any, h2: ParagraphStyle) -> list:
    normal = styles["Normal"]
    bullet_style = ParagraphStyle("BulletStyle", parent=normal, leftIndent=14, bulletIndent=4, spaceAfter=3)
    flowables = []
    for section in result.sections:
        if section.phase == PhaseKey.PATIENT_INFO:
            continue
        flowables.append(Paragraph(escape(section.label.replace("_", " ")), h2))
        for label, text in parse_content_bullets(section.content):
            if label:
                body = f'<font color="#3B82F6"><b>{escape(label)}:</b></font> {escape(text)}'
            else:
                body = escape(text)
            flowables.append(Paragraph(body, bullet_style, bulletText="•"))
        flowables.append(Spacer(1, 0.1 * inch))
    return flowables


def _logistics_flowables(result: DashboardResult, styles: Any, h2: ParagraphStyle) -> list:
    normal = styles["Normal"]
    logistics = result.logistics
    flowables = [Paragraph("Follow-Up Arrangements", h2)]
    if logistics.follow_ups:
        for f in logistics.follow_ups:
            mark = "arranged" if f.completed else "pending"
            flowables.append(Paragraph(f"• {escape(f.name)} ({mark})", normal))
    else:
        flowables.append(Paragraph("No follow-ups documented.", normal))

    flowables.append(Paragraph("Medications", h2))
    if logistics.medications:
        for m in logistics.medications:
            flowables.append(Paragraph(f"• {escape(m.name)} ({m.status.value})", normal))
    else:
        flowables.append(Paragraph("No medications documented.", normal))

    edu = logistics.education
    flowables.append(Paragraph("Education", h2))
    flowables.append(Paragraph(f"{edu.completed} of {len(edu.topics)} topics completed.", normal))
    flowables.append(Paragraph("Caregiver", h2))
    flowables.append(Paragraph(f"{escape(logistics.caregiver.text)} ({logistics.caregiver.status.value})", normal))
    return flowables


def _risk_summary_flowables(result: DashboardResult, styles: Any) -> list:
    normal = styles["Normal"]
    summary = result.risk_change
    if summary is None:
        return [Paragraph("Risk trend unavailable: admission/discharge dates not documented.", normal)]
    change_color = {"Decreased": "#22C55E", "Increased": "#EF4444"}.get(summary.direction.value, "#808080")
    sign = "+" if summary.change >= 0 else ""
    return [
        Paragraph(f"Initial Risk Score: {summary.initial_score:.2f} (Date: {summary.initial_date})", normal),
        Paragraph(f"Final Risk Score: {summary.final_score:.2f} (Date: {summary.final_date})", normal),
        Paragraph(
            f'<font color="{change_color}"><b>Risk Change: {summary.direction.value} '
            f"({sign}{summary.change:.2f})</b></font>",
            normal,
        ),
    ]


def generate_summary_pdf(result: DashboardResult, title: str = "Patient Summary Report", include_grids: bool = True) -> bytes:
    buffer = BytesIO()
    doc = BaseDocTemplate(buffer, pagesize=A4, leftMargin=0.6 * inch, rightMargin=0.6 * inch, topMargin=0.6 * inch, bottomMargin=0.75 * inch)
    styles = getSampleStyleSheet()

    title_style = ParagraphStyle("TitleStyle", parent=styles["Title"], fontSize=20, textColor=_HEADER_BLUE, spaceAfter=12)
    h1_style = ParagraphStyle("H1Style", parent=styles["Heading1"], fontSize=14, spaceBefore=12, spaceAfter=6, textColor=colors.HexColor("#2E548A"))
    h2_style = ParagraphStyle("H2Style", parent=styles["Heading2"], fontSize=11, spaceBefore=6, spaceAfter=3)

    flowables = [Paragraph(escape(title), title_style)]

    flowables.append(Paragraph("Patient Information", h1_style))
    flowables.extend(_patient_flowables(result, styles))

    flowables.append(Paragraph("Care Timeline", h1_style))
    flowables.extend(_section_flowables(result, styles, h2_style))

    flowables.append(Paragraph("Risk Trend", h1_style))
    flowables.extend(_risk_summary_flowables(result, styles))
    if include_grids and result.risk_grid:
        flowables.append(Spacer(1, 0.1 * inch))
        flowables.append(_grid_table(result.risk_grid))

    if include_grids and result.readiness_grid:
        flowables.append(Paragraph("Readiness Assessment", h1_style))
        flowables.append(_grid_table(result.readiness_grid))

    flowables.append(Paragraph("Patient Logistics", h1_style))
    flowables.extend(_logistics_flowables(result, styles, h2_style))

    def footer(canvas, doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 9)
        canvas.drawString(0.6 * inch, 0.5 * inch, title)
        canvas.drawRightString(A4[0] - 0.6 * inch, 0.5 * inch, f"Page {doc.page}")
        canvas.restoreState()

    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id="normal")
    template = PageTemplate(id="summary", frames=[frame], onPage=footer)
    doc.addPageTemplates([template])
    doc.build(flowables)
    return buffer.getvalue()
