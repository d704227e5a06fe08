"""
Local disk storage helpers for discharge notes and report artifacts.
"""
from __future__ import annotations

import hashlib
import logging
import os
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.environ.get("DATA_DIR", "data"))
NOTES_DIR = DATA_DIR / "notes"
ARTIFACTS_DIR = DATA_DIR / "artifacts"

_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def ensure_dirs() -> None:
    """Create data directories if they don't exist."""
    NOTES_DIR.mkdir(parents=True, exist_ok=True)
    ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)


def sha256_bytes(data: bytes) -> str:
    """Compute sha256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def is_safe_id(identifier: str) -> bool:
    return bool(_SAFE_ID_RE.match(identifier or ""))


def get_note_path(patient_id: str) -> Path:
    """Return the path of a stored discharge note."""
    if not is_safe_id(patient_id):
        raise ValueError(f"Invalid patient id: {patient_id!r}")
    return NOTES_DIR / f"{patient_id}.txt"


def save_note(patient_id: str, text: str) -> Path:
    ensure_dirs()
    path = get_note_path(patient_id)
    path.write_text(text, encoding="utf-8")
    return path


def load_note(patient_id: str) -> Optional[str]:
    """
    Read a stored discharge note.
    Returns None when no note exists for the id, and "" when the file cannot be
    read, so a failed read degrades to an empty dashboard instead of an error.
    """
    if not is_safe_id(patient_id):
        logger.warning(f"Rejected note id {patient_id!r}")
        return None
    path = get_note_path(patient_id)
    if not path.exists():
        logger.info(f"No discharge note stored for {patient_id}")
        return None
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read discharge note {path}: {exc}")
        return ""


def save_artifact(run_id: str, filename: str, data: bytes) -> Path:
    """Save a generated artifact (PDF/JSON) to the run's artifact dir."""
    ensure_dirs()
    run_dir = ARTIFACTS_DIR / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    path = run_dir / filename
    path.write_bytes(data)
    return path


def get_artifact_path(run_id: str, filename: str) -> Path:
    """Return the full path to a specific artifact."""
    return ARTIFACTS_DIR / run_id / filename
