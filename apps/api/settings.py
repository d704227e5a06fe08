"""
Environment-driven API settings.
"""
from __future__ import annotations

import os


def _parse_csv_env(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return [value.strip() for value in raw.split(",") if value.strip()]


def _parse_int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


CORS_ALLOW_ORIGINS = _parse_csv_env(
    "CORS_ALLOW_ORIGINS",
    [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
)
MAX_REQUEST_BYTES = _parse_int_env("MAX_REQUEST_BYTES", 2 * 1024 * 1024)
MAX_NOTE_CHARS = _parse_int_env("MAX_NOTE_CHARS", 200_000)
