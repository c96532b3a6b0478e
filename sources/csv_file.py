from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from config.settings import Settings, get_settings
from models import ErrorKind, Outcome
from sources.registry import register


logger = logging.getLogger(__name__)


class CsvFileSource:
    """Reads a sheet export saved to disk (offline runs, fixtures)."""

    source_name = "csv_file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> Outcome[str]:
        try:
            # utf-8-sig drops the BOM spreadsheet apps like to prepend
            text = self.path.read_text(encoding="utf-8-sig")
        except OSError as e:
            logger.error("Error reading %s: %s", self.path, e, extra={"step": "fetch", "status": "error", "source": self.source_name})
            return Outcome.failure(ErrorKind.TRANSPORT, f"Failed to read {self.path}: {e.strerror or e}")
        return Outcome.success(text)


def _factory(settings: Optional[Settings] = None) -> CsvFileSource:
    settings = settings or get_settings()
    if not settings.csv_file_path:
        raise RuntimeError("CSV_FILE_PATH must be set to use the csv_file source")
    return CsvFileSource(settings.csv_file_path)


register(CsvFileSource.source_name, _factory)
