from __future__ import annotations

from pydantic import Field

from .common import ValueModel
from .enums import CaregiverStatus, MedicationStatus


class PatientIdentity(ValueModel):
    name: str = "Unknown"
    age_gender: str = "Unknown"


class EducationSummary(ValueModel):
    topics: list[str] = Field(default_factory=list)
    completed: int = Field(default=0, ge=0)


class FollowUp(ValueModel):
    name: str
    completed: bool = False


class MedicationItem(ValueModel):
    name: str
    status: MedicationStatus = MedicationStatus.ACTIVE


class CaregiverSummary(ValueModel):
    text: str = "No details"
    status: CaregiverStatus = CaregiverStatus.UNKNOWN


class PatientLogistics(ValueModel):
    """Logistics panel data: who the patient is and what goes home with them."""
    patient: PatientIdentity = Field(default_factory=PatientIdentity)
    education: EducationSummary = Field(default_factory=EducationSummary)
    follow_ups: list[FollowUp] = Field(default_factory=list)
    medications: list[MedicationItem] = Field(default_factory=list)
    caregiver: CaregiverSummary = Field(default_factory=CaregiverSummary)
