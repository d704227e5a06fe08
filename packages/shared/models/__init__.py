from .enums import (
    CaregiverStatus,
    ClassificationPath,
    Domain,
    MedicationStatus,
    PhaseKey,
    RiskDirection,
    Scope,
)
from .common import GridRow, StayDate, StayRange, ValueModel
from .extensions import (
    CaregiverSummary,
    EducationSummary,
    FollowUp,
    MedicationItem,
    PatientIdentity,
    PatientLogistics,
)
from .domain import (
    DEFAULT_RISK_WEIGHTS,
    DashboardResult,
    MergedSection,
    PhaseDefinition,
    RiskChangeSummary,
    RiskPoint,
    RunConfig,
    SectionRow,
    TimelineEvent,
    Warning,
)

__all__ = [
    "CaregiverStatus",
    "CaregiverSummary",
    "ClassificationPath",
    "DEFAULT_RISK_WEIGHTS",
    "DashboardResult",
    "Domain",
    "EducationSummary",
    "FollowUp",
    "GridRow",
    "MedicationItem",
    "MedicationStatus",
    "MergedSection",
    "PatientIdentity",
    "PatientLogistics",
    "PhaseDefinition",
    "PhaseKey",
    "RiskChangeSummary",
    "RiskDirection",
    "RiskPoint",
    "RunConfig",
    "Scope",
    "SectionRow",
    "StayDate",
    "StayRange",
    "TimelineEvent",
    "ValueModel",
    "Warning",
]
