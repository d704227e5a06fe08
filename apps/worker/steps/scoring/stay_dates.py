"""
Admission/discharge date range and day enumeration for the daily grids.

Dates are yearless "M/D" strings. The month table is fixed (February has 29
days) and every walk is bounded, so malformed headers can only shorten the
range.
"""
from __future__ import annotations

import re

from packages.shared.models import StayDate, StayRange

_ADMISSION_RE = re.compile(r"Admission Date:\s*(\d+/\d+)", re.IGNORECASE)
_DISCHARGE_RE = re.compile(r"Discharge Date:\s*(\d+/\d+)", re.IGNORECASE)

DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MAX_STAY_DAYS = 400


def days_in_month(month: int) -> int:
    if 1 <= month <= 12:
        return DAYS_IN_MONTH[month - 1]
    return 31


def find_stay_range(raw_note: str | None) -> StayRange | None:
    """Admission and discharge dates from the note header, or None if either is missing."""
    if not raw_note:
        return None
    adm = _ADMISSION_RE.search(raw_note)
    dis = _DISCHARGE_RE.search(raw_note)
    if not adm or not dis:
        return None
    admission = StayDate.parse(adm.group(1))
    discharge = StayDate.parse(dis.group(1))
    if admission is None or discharge is None:
        return None
    return StayRange(admission=admission, discharge=discharge)


def enumerate_stay_dates(stay: StayRange, max_days: int = MAX_STAY_DAYS) -> list[str]:
    """
    Every day from admission to discharge inclusive, ascending.
    Stops at the discharge date, when the month runs past December, or after
    max_days entries, whichever comes first. A discharge before admission
    yields an empty list.
    """
    end = stay.discharge
    month, day = stay.admission.month, stay.admission.day
    dates: list[str] = []

    while month < end.month or (month == end.month and day <= end.day):
        if len(dates) >= max_days:
            break
        dates.append(f"{month}/{day}")
        day += 1
        if day > days_in_month(month):
            month += 1
            day = 1
        if month > 12 or (month > end.month and day > end.day):
            break

    return dates


def stay_dates_for_note(raw_note: str | None, max_days: int = MAX_STAY_DAYS) -> list[str]:
    stay = find_stay_range(raw_note)
    if stay is None:
        return []
    return enumerate_stay_dates(stay, max_days)
