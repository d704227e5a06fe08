"""
Keyword evidence shared by the readiness and risk tables.
All keywords are lower-case substrings matched against lower-cased excerpts.
"""
from __future__ import annotations

from packages.shared.models import Scope

from apps.worker.steps.scoring.tiers import lacks, mentions

# Mobility
MOBILITY_DEPENDENT = mentions(
    Scope.ALL, "unsafe for ambulation", "unable to transfer", "bedbound", "2 person assist",
)
MOBILITY_ASSISTED = mentions(
    Scope.ALL, "minimum assistance", "moderate assistance", "wheelchair", "rolling walker",
    "standby assist",
)
MOBILITY_TRAINING = mentions(
    Scope.MANAGEMENT, "functional mobility", "adl training", "transfer training",
)
MOBILITY_INDEPENDENT = mentions(
    Scope.ALL, "moderately independent", "independent", "walker", "cane", "ambulation",
)
MOBILITY_HOME_PLAN = mentions(Scope.DISCHARGE_PLAN, "mobility", "exercise program", "hep")

# Wound care
NO_WOUND = lacks(Scope.ALL, "wound", "ulcer", "dressing")
NEW_WOUND_COURSE = mentions(Scope.COURSE, "new wound")
WOUND_INFECTION = mentions(Scope.ALL, "infection", "pressure ulcer")
WOUND_CARE_STARTED = mentions(
    Scope.MANAGEMENT, "wound care initiated", "dressing", "no infection",
)
WOUND_CARE_PLANNED = mentions(Scope.DISCHARGE_PLAN, "wound clinic", "wound care")
WOUND_HEALING = mentions(Scope.ALL, "healing", "improved")

# Medical stability
ACUTE_COURSE = mentions(
    Scope.COURSE, "hypokalemic", "hypomagnesemic", "electrolyte abnormalities",
    "acute kidney injury",
)
ACUTE_EVENT = mentions(Scope.ALL, "respiratory failure", "icu", "rapid response")
ACUTE_MANAGED = mentions(Scope.MANAGEMENT, "medical management", "electrolyte")
STABILIZING = mentions(Scope.MANAGEMENT, "stable", "improved", "resolved", "controlled")
AT_BASELINE = mentions(Scope.ALL, "baseline", "stable")

# Swallowing
SWALLOW_HIGH_RISK = mentions(Scope.ALL, "aspiration", "dysphagia", "tube feeds", "npo")
SWALLOW_MANAGED = mentions(Scope.MANAGEMENT, "swallowing", "feeding", "swallow eval", "diet")
MODIFIED_DIET = mentions(Scope.ALL, "puree", "soft", "precautions")
SWALLOW_HOME_PLAN = mentions(Scope.DISCHARGE_PLAN, "swallowing", "diet")
UNRESTRICTED_DIET = mentions(Scope.ALL, "thin liquids", "regular diet", "no restrictions")

# Education
EDUCATION_PLANNED = (
    mentions(Scope.DISCHARGE_PLAN, "education"),
    mentions(Scope.ALL, "education:"),
)
EDUCATION_DELIVERED = mentions(Scope.ALL, "reviewed", "taught", "instructed")

# Social support
NO_SUPPORT = mentions(Scope.ALL, "no caregiver", "lives alone", "no family")
CAREGIVER = mentions(Scope.ALL, "caregiver")
CAREGIVER_VISITS = mentions(Scope.ALL, "checks in", "does not live")
FULL_SUPPORT = (
    mentions(Scope.ALL, "24/7", "full supervision", "social work arranged"),
    mentions(Scope.DISCHARGE_PLAN, "supervision"),
)
FAMILY_SUPPORT = mentions(Scope.ALL, "caregiver", "family")
