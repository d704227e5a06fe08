from enum import Enum


class PhaseKey(str, Enum):
    PATIENT_INFO = "patient_info"
    HOME = "home"
    ER = "er"
    UNIT = "unit"
    DISCHARGE = "discharge"
    BACK_HOME = "back_home"


class ClassificationPath(str, Enum):
    RULE = "rule"  # A taxonomy pattern matched
    FALLBACK = "fallback"  # No pattern matched, default phase used
    DISCHARGE_CONTEXT = "discharge_context"  # Forced by the open Discharge Plan section


class Domain(str, Enum):
    """Clinical domains scored by the readiness and risk grids, in column order."""
    MOBILITY = "Mobility"
    WOUND_CARE = "WoundCare"
    MEDICAL_STABILITY = "MedicalStability"
    SWALLOWING = "Swallowing"
    EDUCATION = "Education"
    SOCIAL_SUPPORT = "SocialSupport"


class Scope(str, Enum):
    """Lower-cased note excerpt that a keyword clause searches."""
    ALL = "all"
    MANAGEMENT = "management"  # Hospital Management ... Discharge Plan
    DISCHARGE_PLAN = "discharge_plan"  # Discharge Plan ... Follow-Up/Education/Medications
    COURSE = "course"  # Hospital Course ... Prior level/Self-care


class RiskDirection(str, Enum):
    DECREASED = "Decreased"
    INCREASED = "Increased"
    NO_CHANGE = "No change"


class MedicationStatus(str, Enum):
    ACTIVE = "active"
    ADJUSTED = "adjusted"
    COMPLETED = "completed"


class CaregiverStatus(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    UNKNOWN = "unknown"
