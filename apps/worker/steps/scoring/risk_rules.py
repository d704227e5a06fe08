"""
Risk tier tables (0 = low risk, 3 = high risk).
Progress runs 1 at admission to 0 at discharge, so `above` bands hold the
early-stay values. Discharge day is forced to the curve's on_discharge value.
"""
from __future__ import annotations

from packages.shared.models import Domain

from apps.worker.steps.scoring import keywords as kw
from apps.worker.steps.scoring.tiers import Constant, DomainRules, Linear, RiskCurve, above, below, tier

_ACUTE = (kw.ACUTE_COURSE, kw.ACUTE_EVENT)
_SEVERE_COURSE = above((0.7, 3), (0.4, 2), otherwise=1.5)

RISK_RULES: tuple[DomainRules, ...] = (
    DomainRules(
        Domain.MOBILITY,
        tiers=(
            tier("dependent", kw.MOBILITY_DEPENDENT, score=RiskCurve(
                _SEVERE_COURSE, near_discharge=below((0.08, 0), otherwise=0.5))),
            tier("assisted_in_training", kw.MOBILITY_ASSISTED, kw.MOBILITY_TRAINING, score=RiskCurve(
                above((0.6, 2.5), (0.3, 2), otherwise=1.5),
                near_discharge=below((0.1, 0), otherwise=0.5))),
            tier("assisted", kw.MOBILITY_ASSISTED, score=RiskCurve(
                above((0.5, 2), otherwise=1.5), on_discharge=0.5)),
            tier("independent_with_home_plan", kw.MOBILITY_INDEPENDENT, kw.MOBILITY_HOME_PLAN,
                 score=RiskCurve(above((0.4, 1.5), (0.2, 1), otherwise=0.5))),
            tier("independent", kw.MOBILITY_INDEPENDENT,
                 score=RiskCurve(above((0.3, 1.5), (0.15, 0.8), otherwise=0.3))),
        ),
        fallback=RiskCurve(Linear(2.5)),
    ),
    DomainRules(
        Domain.WOUND_CARE,
        tiers=(
            tier("no_wound", kw.NO_WOUND, score=RiskCurve(Constant(0))),
            tier("new_or_infected", (kw.NEW_WOUND_COURSE, kw.WOUND_INFECTION), score=RiskCurve(
                _SEVERE_COURSE, near_discharge=below((0.1, 0), otherwise=0.8))),
            tier("care_started_with_clinic", kw.WOUND_CARE_STARTED, kw.WOUND_CARE_PLANNED, score=RiskCurve(
                above((0.5, 2), (0.2, 1.5), otherwise=1),
                near_discharge=below((0.12, 0), otherwise=1))),
            tier("care_started", kw.WOUND_CARE_STARTED, score=RiskCurve(
                above((0.4, 1.8), otherwise=1.2), on_discharge=0.5)),
            tier("healing", kw.WOUND_HEALING,
                 score=RiskCurve(above((0.3, 1.5), (0.1, 0.8), otherwise=0.2))),
        ),
        fallback=RiskCurve(Linear(2, offset=0.5)),
    ),
    DomainRules(
        Domain.MEDICAL_STABILITY,
        tiers=(
            tier("acute_managed", _ACUTE, kw.ACUTE_MANAGED, score=RiskCurve(
                _SEVERE_COURSE, near_discharge=below((0.1, 0), otherwise=0.8))),
            tier("acute", _ACUTE, score=RiskCurve(
                above((0.6, 2.5), otherwise=1.8), on_discharge=0.5)),
            tier("stabilizing", kw.STABILIZING,
                 score=RiskCurve(above((0.5, 1.8), (0.2, 1), otherwise=0.5))),
            tier("baseline", kw.AT_BASELINE,
                 score=RiskCurve(above((0.4, 1.5), (0.1, 0.8), otherwise=0.2))),
        ),
        fallback=RiskCurve(Linear(2.5)),
    ),
    DomainRules(
        Domain.SWALLOWING,
        tiers=(
            tier("high_risk", kw.SWALLOW_HIGH_RISK, score=RiskCurve(
                _SEVERE_COURSE, near_discharge=below((0.1, 0), otherwise=1))),
            tier("modified_diet_with_plan", kw.SWALLOW_MANAGED, kw.MODIFIED_DIET, kw.SWALLOW_HOME_PLAN,
                 score=RiskCurve(
                     above((0.5, 2), (0.2, 1.5), otherwise=1),
                     near_discharge=below((0.12, 0), otherwise=1))),
            tier("modified_diet", kw.SWALLOW_MANAGED, kw.MODIFIED_DIET, score=RiskCurve(
                above((0.4, 1.8), otherwise=1.2), on_discharge=0.5)),
            tier("unrestricted_diet", kw.SWALLOW_MANAGED, kw.UNRESTRICTED_DIET,
                 score=RiskCurve(above((0.3, 1.5), (0.1, 0.8), otherwise=0.2))),
            tier("evaluated", kw.SWALLOW_MANAGED, score=RiskCurve(
                above((0.4, 1.8), otherwise=1.2), on_discharge=0.5)),
        ),
        fallback=RiskCurve(Linear(2.5)),
    ),
    DomainRules(
        Domain.EDUCATION,
        tiers=(
            tier("delivered", kw.EDUCATION_PLANNED, kw.EDUCATION_DELIVERED,
                 score=RiskCurve(above((0.5, 2), (0.2, 1), otherwise=0.5))),
            tier("planned", kw.EDUCATION_PLANNED, score=RiskCurve(
                above((0.4, 1.5), otherwise=1), on_discharge=0.5)),
        ),
        fallback=RiskCurve(Linear(1.5), on_discharge=0.3),
    ),
    DomainRules(
        Domain.SOCIAL_SUPPORT,
        tiers=(
            # Discharge planning lowers, but does not clear, the no-support risk.
            tier("no_support", kw.NO_SUPPORT, score=RiskCurve(Constant(2.5), on_discharge=1)),
            tier("partial_support", kw.CAREGIVER, kw.CAREGIVER_VISITS,
                 score=RiskCurve(above((0.5, 2), (0.2, 1.5), otherwise=1))),
            tier("full_support", kw.FULL_SUPPORT,
                 score=RiskCurve(above((0.4, 1.5), (0.2, 1), otherwise=0.5))),
            tier("family_support", kw.FAMILY_SUPPORT,
                 score=RiskCurve(above((0.5, 1.8), (0.2, 1.2), otherwise=0.6))),
        ),
        fallback=RiskCurve(Linear(2)),
    ),
)
