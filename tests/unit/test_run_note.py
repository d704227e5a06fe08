from __future__ import annotations

import json
from pathlib import Path

import pytest

import scripts.run_note as rn
from tests.fixtures.sample_note import MINIMAL_NOTE


def test_run_note_writes_json_and_pdf(tmp_path: Path):
    note = tmp_path / "patient.txt"
    note.write_text(MINIMAL_NOTE, encoding="utf-8")
    json_out = tmp_path / "out.json"
    pdf_out = tmp_path / "out.pdf"

    code = rn.main([str(note), "--json-out", str(json_out), "--pdf-out", str(pdf_out)])
    assert code == 0
    payload = json.loads(json_out.read_text(encoding="utf-8"))
    assert payload["admissionDate"] == "5/4"
    assert len(payload["readinessGrid"]) == 2
    assert pdf_out.read_bytes().startswith(b"%PDF")


def test_run_note_prints_json_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture):
    note = tmp_path / "patient.txt"
    note.write_text(MINIMAL_NOTE, encoding="utf-8")
    assert rn.main([str(note)]) == 0
    assert '"readinessGrid"' in capsys.readouterr().out


def test_run_note_max_stay_days(tmp_path: Path):
    note = tmp_path / "patient.txt"
    note.write_text(MINIMAL_NOTE, encoding="utf-8")
    json_out = tmp_path / "out.json"
    assert rn.main([str(note), "--max-stay-days", "1", "--json-out", str(json_out)]) == 0
    payload = json.loads(json_out.read_text(encoding="utf-8"))
    assert len(payload["riskGrid"]) == 1
    assert [w["code"] for w in payload["warnings"]] == ["STAY_TRUNCATED"]


def test_run_note_missing_file(tmp_path: Path):
    assert rn.main([str(tmp_path / "nope.txt")]) == 1


def test_run_note_writes_run_artifacts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    from packages.shared import storage

    monkeypatch.setattr(storage, "NOTES_DIR", tmp_path / "notes")
    monkeypatch.setattr(storage, "ARTIFACTS_DIR", tmp_path / "artifacts")
    note = tmp_path / "patient.txt"
    note.write_text(MINIMAL_NOTE, encoding="utf-8")

    code = rn.main([str(note), "--json-out", str(tmp_path / "out.json"), "--artifacts-run-id", "run-7"])
    assert code == 0
    dashboard = json.loads((tmp_path / "artifacts" / "run-7" / "dashboard.json").read_text(encoding="utf-8"))
    assert dashboard["dischargeDate"] == "5/5"
    assert (tmp_path / "artifacts" / "run-7" / "summary.pdf").read_bytes().startswith(b"%PDF")


def test_run_note_rejects_unsafe_run_id(tmp_path: Path):
    note = tmp_path / "patient.txt"
    note.write_text(MINIMAL_NOTE, encoding="utf-8")
    assert rn.main([str(note), "--artifacts-run-id", "../escape"]) == 1
