"""
Declarative keyword-tier tables for the readiness and risk grids.

A domain is an ordered list of tiers. A tier applies when each of its
conditions holds (a condition is one or more keyword clauses, any of which may
match); the first tier that applies scores every day of the stay. When none
applies the domain's fallback curve is used. Fallbacks are heuristics of last
resort, not validated clinical logic.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

from packages.shared.models import Domain, Scope

from apps.worker.steps.scoring.evidence import NoteEvidence

NEAR_DISCHARGE_FRACTION = 0.15


@dataclass(frozen=True)
class DayContext:
    index: int
    total: int
    progress: float
    near_discharge_fraction: float = NEAR_DISCHARGE_FRACTION

    @classmethod
    def readiness(cls, index: int, total: int) -> "DayContext":
        """Progress runs 0 at admission to 1 at discharge."""
        return cls(index, total, index / max(1, total - 1))

    @classmethod
    def risk(cls, index: int, total: int, near_discharge_fraction: float = NEAR_DISCHARGE_FRACTION) -> "DayContext":
        """Progress runs 1 at admission to 0 at discharge."""
        return cls(index, total, (total - 1 - index) / max(1, total - 1), near_discharge_fraction)

    @property
    def is_discharge_day(self) -> bool:
        return self.index == self.total - 1

    @property
    def is_near_discharge(self) -> bool:
        return self.progress < self.near_discharge_fraction


Scorer = Callable[[DayContext], float]


@dataclass(frozen=True)
class Bands:
    """
    Piecewise-constant score over progress. Steps are tried in order; with
    rising=True a step fires when progress < bound, otherwise when progress > bound.
    """
    steps: tuple[tuple[float, float], ...]
    otherwise: float
    rising: bool = True

    def __call__(self, day: DayContext) -> float:
        for bound, score in self.steps:
            if (day.progress < bound) if self.rising else (day.progress > bound):
                return score
        return self.otherwise


def below(*steps: tuple[float, float], otherwise: float) -> Bands:
    return Bands(tuple(steps), otherwise, rising=True)


def above(*steps: tuple[float, float], otherwise: float) -> Bands:
    return Bands(tuple(steps), otherwise, rising=False)


@dataclass(frozen=True)
class Constant:
    value: float

    def __call__(self, day: DayContext) -> float:
        return self.value


@dataclass(frozen=True)
class Linear:
    """slope * progress (+ offset), optionally floored before the offset, capped to [0, 3]."""
    slope: float
    offset: float = 0.0
    floor: bool = False

    def __call__(self, day: DayContext) -> float:
        value = day.progress * self.slope
        if self.floor:
            value = math.floor(value)
        return max(0.0, min(3.0, value + self.offset))


@dataclass(frozen=True)
class RiskCurve:
    """Risk over the stay: a fixed discharge-day value, optional near-discharge bands, in-stay bands."""
    course: Scorer
    on_discharge: float = 0.0
    near_discharge: Optional[Scorer] = None

    def __call__(self, day: DayContext) -> float:
        if day.is_discharge_day:
            return self.on_discharge
        if self.near_discharge is not None and day.is_near_discharge:
            return self.near_discharge(day)
        return self.course(day)


@dataclass(frozen=True)
class Clause:
    scope: Scope
    keywords: tuple[str, ...]
    absent: bool = False

    def holds(self, evidence: NoteEvidence) -> bool:
        found = evidence.mentions(self.scope, self.keywords)
        return not found if self.absent else found


def mentions(scope: Scope, *keywords: str) -> Clause:
    return Clause(scope, tuple(keywords))


def lacks(scope: Scope, *keywords: str) -> Clause:
    return Clause(scope, tuple(keywords), absent=True)


Condition = Union[Clause, tuple[Clause, ...]]


@dataclass(frozen=True)
class Tier:
    name: str
    when: tuple[tuple[Clause, ...], ...]
    score: Scorer

    def applies(self, evidence: NoteEvidence) -> bool:
        return all(any(c.holds(evidence) for c in group) for group in self.when)


def tier(name: str, *conditions: Condition, score: Scorer) -> Tier:
    """Build a tier; a tuple condition means any one of its clauses is enough."""
    groups = tuple(c if isinstance(c, tuple) else (c,) for c in conditions)
    return Tier(name, groups, score)


FALLBACK_TIER = "fallback"


@dataclass(frozen=True)
class DomainRules:
    domain: Domain
    tiers: tuple[Tier, ...]
    fallback: Scorer

    def select(self, evidence: NoteEvidence) -> Optional[Tier]:
        for t in self.tiers:
            if t.applies(evidence):
                return t
        return None

    def scorer_for(self, evidence: NoteEvidence) -> tuple[str, Scorer]:
        """(tier_name, scorer) chosen for this note; fallback when no tier applies."""
        chosen = self.select(evidence)
        if chosen is None:
            return FALLBACK_TIER, self.fallback
        return chosen.name, chosen.score


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative scores (2.5 -> 3, 0.25 -> 0.3)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp_score(value: float) -> float:
    return max(0.0, min(3.0, value))
