"""
Readiness tier tables (0 = not ready, 3 = ready).
Bands rise with progress from admission (0) to discharge (1).
"""
from __future__ import annotations

from packages.shared.models import Domain

from apps.worker.steps.scoring import keywords as kw
from apps.worker.steps.scoring.tiers import Constant, DomainRules, Linear, below, tier

_ACUTE = (kw.ACUTE_COURSE, kw.ACUTE_EVENT)

READINESS_RULES: tuple[DomainRules, ...] = (
    DomainRules(
        Domain.MOBILITY,
        tiers=(
            tier("dependent", kw.MOBILITY_DEPENDENT,
                 score=below((0.3, 0), (0.6, 1), otherwise=2)),
            tier("assisted_in_training", kw.MOBILITY_ASSISTED, kw.MOBILITY_TRAINING,
                 score=below((0.4, 1), (0.7, 2), otherwise=2.5)),
            tier("assisted", kw.MOBILITY_ASSISTED,
                 score=below((0.5, 1), otherwise=2)),
            tier("independent_with_home_plan", kw.MOBILITY_INDEPENDENT, kw.MOBILITY_HOME_PLAN,
                 score=below((0.6, 2), otherwise=2.8)),
            tier("independent", kw.MOBILITY_INDEPENDENT,
                 score=below((0.7, 2), otherwise=3)),
        ),
        fallback=Linear(2.5, floor=True),
    ),
    DomainRules(
        Domain.WOUND_CARE,
        tiers=(
            tier("no_wound", kw.NO_WOUND, score=Constant(3)),
            tier("new_or_infected", (kw.NEW_WOUND_COURSE, kw.WOUND_INFECTION),
                 score=below((0.3, 0), (0.6, 1), otherwise=1.5)),
            tier("care_started_with_clinic", kw.WOUND_CARE_STARTED, kw.WOUND_CARE_PLANNED,
                 score=below((0.5, 1), (0.8, 2), otherwise=2.5)),
            tier("care_started", kw.WOUND_CARE_STARTED,
                 score=below((0.6, 1.5), otherwise=2)),
            tier("healing", kw.WOUND_HEALING,
                 score=below((0.7, 2), otherwise=2.8)),
        ),
        fallback=Linear(2, offset=1, floor=True),
    ),
    DomainRules(
        Domain.MEDICAL_STABILITY,
        tiers=(
            tier("acute_managed", _ACUTE, kw.ACUTE_MANAGED,
                 score=below((0.3, 0), (0.6, 1), otherwise=2)),
            tier("acute", _ACUTE,
                 score=below((0.4, 0.5), otherwise=1.5)),
            tier("stabilizing", kw.STABILIZING,
                 score=below((0.5, 1.5), (0.8, 2.5), otherwise=3)),
            tier("baseline", kw.AT_BASELINE,
                 score=below((0.6, 2), otherwise=3)),
        ),
        fallback=Linear(2.5, floor=True),
    ),
    DomainRules(
        Domain.SWALLOWING,
        tiers=(
            tier("high_risk", kw.SWALLOW_HIGH_RISK,
                 score=below((0.3, 0), (0.6, 1), otherwise=1.5)),
            tier("modified_diet_with_plan", kw.SWALLOW_MANAGED, kw.MODIFIED_DIET, kw.SWALLOW_HOME_PLAN,
                 score=below((0.5, 1), (0.8, 2), otherwise=2.5)),
            tier("modified_diet", kw.SWALLOW_MANAGED, kw.MODIFIED_DIET,
                 score=below((0.6, 1.5), otherwise=2)),
            tier("unrestricted_diet", kw.SWALLOW_MANAGED, kw.UNRESTRICTED_DIET,
                 score=below((0.7, 2), otherwise=2.8)),
            tier("evaluated", kw.SWALLOW_MANAGED,
                 score=below((0.6, 1.5), otherwise=2)),
        ),
        fallback=Linear(2.5, floor=True),
    ),
    DomainRules(
        Domain.EDUCATION,
        tiers=(
            tier("delivered", kw.EDUCATION_PLANNED, kw.EDUCATION_DELIVERED,
                 score=below((0.5, 0), (0.7, 1.5), (0.9, 2.5), otherwise=3)),
            tier("planned", kw.EDUCATION_PLANNED,
                 score=below((0.6, 1), otherwise=2)),
        ),
        fallback=Linear(2, floor=True),
    ),
    DomainRules(
        Domain.SOCIAL_SUPPORT,
        tiers=(
            tier("no_support", kw.NO_SUPPORT, score=Constant(0)),
            tier("partial_support", kw.CAREGIVER, kw.CAREGIVER_VISITS,
                 score=below((0.5, 1), (0.8, 2), otherwise=2.5)),
            tier("full_support", kw.FULL_SUPPORT,
                 score=below((0.6, 2), (0.8, 2.5), otherwise=3)),
            tier("family_support", kw.FAMILY_SUPPORT,
                 score=below((0.5, 1.5), (0.8, 2), otherwise=2.5)),
        ),
        fallback=Linear(2, floor=True),
    ),
)
