"""
Turn a published sheet CSV export into a Dataset.

Lines are split on newline only; quoted fields spanning lines are not
supported. Header names are trimmed and matched against the FieldSpec table
by exact name.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from models import Dataset, DatasetMetadata, PersonRecord
from services.mapping import FIELD_SPECS, FieldSpec, map_fields
from utils.csv_line import parse_csv_line


logger = logging.getLogger(__name__)

DEFAULT_SOURCE_LABEL = "Google Sheets"


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_raw_row(headers: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    raw: Dict[str, str] = {}
    for idx, header in enumerate(headers):
        raw[header] = (values[idx] if idx < len(values) else "").strip()
    return raw


def parse_dataset(
    text: str,
    *,
    now: Optional[datetime] = None,
    source: Optional[str] = None,
    specs: Sequence[FieldSpec] = FIELD_SPECS,
) -> Dataset:
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        return Dataset(people=[], metadata=None)

    headers = [h.strip() for h in parse_csv_line(lines[0])]
    people: List[PersonRecord] = []
    dropped = 0

    for line in lines[1:]:
        raw = build_raw_row(headers, parse_csv_line(line))
        person = map_fields(raw, specs)
        if person.id:
            people.append(person)
        else:
            dropped += 1

    if dropped:
        logger.debug("Skipped %d rows without a Person ID", dropped, extra={"step": "parse"})

    metadata = DatasetMetadata(
        last_updated=iso_timestamp(now or datetime.now(timezone.utc)),
        source=source or DEFAULT_SOURCE_LABEL,
        record_count=len(people),
    )
    return Dataset(people=people, metadata=metadata)
