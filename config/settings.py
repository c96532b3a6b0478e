from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vSqmNfGZrDplmYK-eG3y7CvVIqL5nGHADF0puFCXkcncPocQe0tsnvyeWae8v426J5dBypFICQ11wLn"
    "/pub?gid=0&single=true&output=csv"
)


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    # Remote sheet
    sheet_csv_url: str
    sheet_http_timeout_seconds: float | None

    # Source selection
    data_source: str
    dataset_source_label: str
    csv_file_path: str | None

    # Cache
    cache_db_path: str
    cache_duration_ms: int
    cache_key: str
    cache_time_key: str

    # Core/runtime
    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    cache_duration_ms = int(os.getenv("CACHE_DURATION_MS", "3600000"))
    if cache_duration_ms < 0:
        raise RuntimeError("CACHE_DURATION_MS must be zero or a positive number of milliseconds")
    return Settings(
        sheet_csv_url=os.getenv("SHEET_CSV_URL", DEFAULT_SHEET_CSV_URL),
        sheet_http_timeout_seconds=_optional_float(os.getenv("SHEET_HTTP_TIMEOUT_SECONDS")),
        data_source=os.getenv("DATA_SOURCE", "google_sheets_csv"),
        dataset_source_label=os.getenv("DATA_SOURCE_LABEL", "Google Sheets"),
        csv_file_path=os.getenv("CSV_FILE_PATH") or None,
        cache_db_path=os.getenv("CACHE_DB_PATH", "family_cache.db"),
        cache_duration_ms=cache_duration_ms,
        cache_key=os.getenv("CACHE_KEY", "familyTreeData"),
        cache_time_key=os.getenv("CACHE_TIME_KEY", "familyTreeData_timestamp"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
