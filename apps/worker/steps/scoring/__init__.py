from .evidence import NoteEvidence
from .stay_dates import enumerate_stay_dates, find_stay_range, stay_dates_for_note
from .tiers import DayContext, DomainRules, round_half_up

__all__ = [
    "DayContext",
    "DomainRules",
    "NoteEvidence",
    "enumerate_stay_dates",
    "find_stay_range",
    "round_half_up",
    "stay_dates_for_note",
]
