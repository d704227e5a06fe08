"""
Unit tests for discharge logistics extraction (Step 8).
"""
from packages.shared.models import CaregiverStatus, MedicationStatus
from apps.worker.steps.step08_logistics import (
    extract_caregiver,
    extract_education,
    extract_follow_ups,
    extract_medications,
    extract_patient_logistics,
)
from tests.fixtures.sample_note import SAMPLE_NOTE


class TestPatientLogistics:
    def test_sample_note(self):
        logistics = extract_patient_logistics(SAMPLE_NOTE)
        assert logistics.patient.name == "Margaret Ellis"
        assert logistics.patient.age_gender == "78/F"

        assert logistics.education.topics == [
            "Medication schedule reviewed with patient and daughter",
            "signs of infection taught",
        ]
        assert logistics.education.completed == 1

        assert [(f.name, f.completed) for f in logistics.follow_ups] == [
            ("Family physician in 1 week", False),
            ("wound clinic arranged", True),
        ]

        assert [(m.name, m.status) for m in logistics.medications] == [
            ("Metformin 500 mg twice daily", MedicationStatus.ACTIVE),
            ("Lisinopril dose reduced", MedicationStatus.ADJUSTED),
            ("Ceftriaxone during stay", MedicationStatus.COMPLETED),
        ]

        assert logistics.caregiver.status == CaregiverStatus.PARTIAL
        assert logistics.caregiver.text.startswith("Daughter checks in frequently")

    def test_empty_note_defaults(self):
        logistics = extract_patient_logistics("")
        assert logistics.patient.name == "Unknown"
        assert logistics.patient.age_gender == "Unknown"
        assert logistics.education.topics == []
        assert logistics.education.completed == 0
        assert logistics.follow_ups == []
        assert logistics.medications == []
        assert logistics.caregiver.text == "No details"
        assert logistics.caregiver.status == CaregiverStatus.UNKNOWN

    def test_serializes_with_camel_case_names(self):
        payload = extract_patient_logistics(SAMPLE_NOTE).model_dump(mode="json", by_alias=True)
        assert set(payload) == {"patient", "education", "followUps", "medications", "caregiver"}
        assert payload["patient"]["ageGender"] == "78/F"


class TestSections:
    def test_education_runs_to_end_without_follow_up(self):
        summary = extract_education("Education: falls. diet\nwound care")
        assert summary.topics == ["falls", "diet", "wound care"]
        assert summary.completed == 2

    def test_follow_ups_require_medications_header(self):
        assert extract_follow_ups("Follow-Up Arrangements: GP in 1 week") == []

    def test_follow_up_clinic_counts_as_completed(self):
        (item,) = extract_follow_ups("Follow-Up Arrangements: Cardiology clinic\nMedications: none")
        assert item.completed is True

    def test_medications_missing(self):
        assert extract_medications("Hospital Course: ok") == []

    def test_caregiver_full_support(self):
        caregiver = extract_caregiver("Self-care/Caregiving: Son provides 24/7 care\nHospital Course: ok")
        assert caregiver.status == CaregiverStatus.FULL
        assert caregiver.text == "Son provides 24/7 care"

    def test_caregiver_unknown_status(self):
        caregiver = extract_caregiver("Self-care/Caregiving: Independent")
        assert caregiver.status == CaregiverStatus.UNKNOWN
        assert caregiver.text == "Independent"
