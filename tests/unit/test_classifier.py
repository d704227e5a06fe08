"""
Unit tests for line phase classification (Step 2).
"""
import pytest
from packages.shared.models import ClassificationPath, PhaseKey
from apps.worker.steps.step02_classify import (
    PHASES,
    classify_line,
    classify_line_with_path,
)


class TestClassifyLine:
    @pytest.mark.parametrize("line,expected", [
        ("Patient Name: Jane Roe", PhaseKey.PATIENT_INFO),
        ("Age/Gender: 81/F", PhaseKey.PATIENT_INFO),
        ("AgeGender: 81/F", PhaseKey.PATIENT_INFO),
        ("Discharge Disposition: Home", PhaseKey.PATIENT_INFO),
        ("Comorbidities: COPD", PhaseKey.HOME),
        ("Selfcare/Caregiving: lives with son", PhaseKey.HOME),
        ("Self-care/Caregiving: lives with son", PhaseKey.HOME),
        ("Primary Providers: Dr. Lee", PhaseKey.HOME),
        ("Overview: fall at home", PhaseKey.ER),
        ("Most Responsible Diagnosis", PhaseKey.ER),
        ("Patient with multiple medical problems", PhaseKey.ER),
        ("Pain management: tylenol", PhaseKey.UNIT),
        ("Risk for aspiration: HOB elevated", PhaseKey.UNIT),
        ("Impaired skin integrity: turning q2h", PhaseKey.UNIT),
        ("Durable Medical Equipment: walker", PhaseKey.UNIT),
        ("Goals reviewed. Discipline: OT", PhaseKey.UNIT),
        ("Discharge Plan: home with services", PhaseKey.DISCHARGE),
        ("Medication assistance: blister packs", PhaseKey.DISCHARGE),
        ("Communication: hearing aids", PhaseKey.DISCHARGE),
        ("Follow-Up Arrangements: GP in 1 week", PhaseKey.BACK_HOME),
        ("FollowUp Arrangements: GP in 1 week", PhaseKey.BACK_HOME),
        ("Medications: ramipril", PhaseKey.BACK_HOME),
    ])
    def test_rule_matches(self, line, expected):
        phase, path = classify_line_with_path(line)
        assert phase == expected
        assert path == ClassificationPath.RULE

    def test_case_insensitive(self):
        assert classify_line("HOSPITAL COURSE: uneventful") == PhaseKey.ER
        assert classify_line("medications: none") == PhaseKey.BACK_HOME

    def test_rules_are_anchored_to_line_start(self):
        # "Mobility" mid-line is not a discharge header
        phase, path = classify_line_with_path("Patient mobility improving")
        assert phase == PhaseKey.HOME
        assert path == ClassificationPath.FALLBACK

    def test_discipline_pattern_matches_anywhere(self):
        assert classify_line("Seen today, Discipline: SLP") == PhaseKey.UNIT


class TestPriority:
    def test_earlier_phase_wins(self):
        # ER and Unit both match; ER comes first in the taxonomy
        assert classify_line("Hospital Course Discipline: PT") == PhaseKey.ER

    def test_unit_beats_discharge(self):
        assert classify_line("Education Discipline: RN") == PhaseKey.UNIT

    def test_taxonomy_order_decides(self):
        reordered = tuple(reversed(PHASES))
        assert classify_line("Hospital Course Discipline: PT", reordered) == PhaseKey.UNIT


class TestFallback:
    def test_unknown_line_goes_home(self):
        phase, path = classify_line_with_path("Lorem ipsum dolor")
        assert phase == PhaseKey.HOME
        assert path == ClassificationPath.FALLBACK

    def test_hospital_management_mid_line_goes_to_unit(self):
        phase, path = classify_line_with_path("See Hospital Management notes above")
        assert phase == PhaseKey.UNIT
        assert path == ClassificationPath.FALLBACK

    def test_empty_line(self):
        assert classify_line("") == PhaseKey.HOME


class TestTaxonomy:
    def test_phase_orders(self):
        assert [p.order for p in PHASES] == [-1, 0, 1, 2, 3, 4]

    def test_phase_labels(self):
        assert [p.label for p in PHASES] == [
            "Patient_info", "Home", "ER", "Unit", "Discharge", "Back_Home",
        ]
