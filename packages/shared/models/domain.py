from re import Pattern
from typing import Optional

from pydantic import BaseModel, Field

from .common import GridRow, ValueModel
from .enums import ClassificationPath, Domain, PhaseKey, RiskDirection
from .extensions import PatientLogistics

# Weighted composite used by the risk trend chart and the report summary.
DEFAULT_RISK_WEIGHTS: dict[Domain, float] = {
    Domain.MOBILITY: 0.30,
    Domain.WOUND_CARE: 0.25,
    Domain.MEDICAL_STABILITY: 0.30,
    Domain.SWALLOWING: 0.15,
}


class Warning(BaseModel):
    code: str
    message: str


class RunConfig(BaseModel):
    """Configuration for a pipeline run."""
    max_stay_days: int = Field(default=400, ge=1)
    near_discharge_fraction: float = 0.15
    risk_weights: dict[Domain, float] = Field(default_factory=lambda: dict(DEFAULT_RISK_WEIGHTS))
    include_pdf_grids: bool = True


class PhaseDefinition(ValueModel):
    key: PhaseKey
    label: str
    order: int
    rules: tuple[Pattern, ...] = ()

    def matches(self, line: str) -> bool:
        return any(rule.search(line) for rule in self.rules)


class SectionRow(ValueModel):
    id: str
    phase: PhaseKey
    label: str
    content: str
    path: ClassificationPath = ClassificationPath.RULE
    block: Optional[str] = None  # Header this line was absorbed under, if any


class MergedSection(ValueModel):
    id: str
    phase: PhaseKey
    label: str
    content: str
    count: int = Field(ge=0)
    has_meds: bool = False


class TimelineEvent(ValueModel):
    id: str
    phase: PhaseKey
    phase_label: str
    text: str
    value: int = Field(ge=0)
    ts: int


class RiskPoint(ValueModel):
    date: str
    day_number: int = Field(ge=1)
    risk_score: float
    delta_risk: float
    components: dict[Domain, float] = Field(default_factory=dict)


class RiskChangeSummary(ValueModel):
    initial_date: str
    final_date: str
    initial_score: float
    final_score: float
    change: float
    direction: RiskDirection


class DashboardResult(ValueModel):
    """Everything the dashboard and the report render, from one pass over the note."""
    phases: list[PhaseDefinition] = Field(default_factory=list)
    sections: list[MergedSection] = Field(default_factory=list)
    events: list[TimelineEvent] = Field(default_factory=list)
    events_with_meds: list[TimelineEvent] = Field(default_factory=list)
    readiness_grid: list[GridRow] = Field(default_factory=list)
    risk_grid: list[GridRow] = Field(default_factory=list)
    risk_trend: list[RiskPoint] = Field(default_factory=list)
    risk_change: Optional[RiskChangeSummary] = None
    logistics: PatientLogistics
    admission_date: Optional[str] = None
    discharge_date: Optional[str] = None
    disposition: Optional[str] = None
    warnings: list[Warning] = Field(default_factory=list)
