"""
Unit tests for local note and artifact storage.
"""
import pytest

from packages.shared import storage


@pytest.fixture(autouse=True)
def tmp_storage(tmp_path, monkeypatch):
    monkeypatch.setattr(storage, "NOTES_DIR", tmp_path / "notes")
    monkeypatch.setattr(storage, "ARTIFACTS_DIR", tmp_path / "artifacts")
    return tmp_path


class TestNotes:
    def test_save_and_load(self):
        path = storage.save_note("patient_1", "Patient Name: A\n")
        assert path.name == "patient_1.txt"
        assert storage.load_note("patient_1") == "Patient Name: A"

    def test_missing_note(self):
        assert storage.load_note("nobody") is None

    def test_unreadable_note_is_empty(self, tmp_storage):
        notes = tmp_storage / "notes"
        notes.mkdir(parents=True)
        (notes / "bad.txt").write_bytes(b"\xff\xfe\xfa not utf-8")
        assert storage.load_note("bad") == ""

    @pytest.mark.parametrize("patient_id", ["../etc", "a/b", "", "x" * 65, "dot.id"])
    def test_rejects_unsafe_ids(self, patient_id):
        assert storage.is_safe_id(patient_id) is False
        assert storage.load_note(patient_id) is None
        with pytest.raises(ValueError):
            storage.get_note_path(patient_id)


class TestArtifacts:
    def test_save_artifact(self):
        path = storage.save_artifact("run-9", "dashboard.json", b"{}")
        assert path == storage.get_artifact_path("run-9", "dashboard.json")
        assert path.read_bytes() == b"{}"

    def test_sha256(self):
        assert storage.sha256_bytes(b"") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )
