from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import Domain

_MONTH_DAY_RE = re.compile(r"^\s*(\d+)/(\d+)\s*$")


class ValueModel(BaseModel):
    """Immutable value with camelCase wire names (hasMeds, phaseLabel, followUps, ...)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class StayDate(BaseModel):
    """Yearless month/day as written in the note header ("5/4")."""
    model_config = ConfigDict(frozen=True)

    month: int
    day: int

    @classmethod
    def parse(cls, value: str) -> Optional["StayDate"]:
        m = _MONTH_DAY_RE.match(value or "")
        if not m:
            return None
        try:
            return cls(month=int(m.group(1)), day=int(m.group(2)))
        except ValueError:
            # int() refuses digit runs past sys.get_int_max_str_digits()
            return None

    def label(self) -> str:
        return f"{self.month}/{self.day}"


class StayRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    admission: StayDate
    discharge: StayDate


_DOMAIN_FIELDS = {
    Domain.MOBILITY: "mobility",
    Domain.WOUND_CARE: "wound_care",
    Domain.MEDICAL_STABILITY: "medical_stability",
    Domain.SWALLOWING: "swallowing",
    Domain.EDUCATION: "education",
    Domain.SOCIAL_SUPPORT: "social_support",
}


class GridRow(BaseModel):
    """
    One day of a readiness or risk grid.
    Serializes with the dashboard column names (Date, Mobility, WoundCare, ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(alias="Date")
    mobility: float = Field(alias="Mobility", ge=0, le=3)
    wound_care: float = Field(alias="WoundCare", ge=0, le=3)
    medical_stability: float = Field(alias="MedicalStability", ge=0, le=3)
    swallowing: float = Field(alias="Swallowing", ge=0, le=3)
    education: float = Field(alias="Education", ge=0, le=3)
    social_support: float = Field(alias="SocialSupport", ge=0, le=3)

    @classmethod
    def from_scores(cls, date: str, scores: dict[Domain, float]) -> "GridRow":
        return cls(date=date, **{_DOMAIN_FIELDS[d]: v for d, v in scores.items()})

    def score(self, domain: Domain | str) -> float:
        return getattr(self, _DOMAIN_FIELDS[Domain(domain)])

    def scores(self) -> dict[Domain, float]:
        return {d: self.score(d) for d in Domain}

    def __getitem__(self, key: str) -> str | float:
        if key == "Date":
            return self.date
        return self.score(key)
