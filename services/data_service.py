"""
Cache-first access to the family dataset.

get_data() never raises: it returns fresh data, a stale cached copy when the
source is unreachable, or an empty dataset whose metadata.error says why.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Callable, Dict, Iterable, Optional

from config.settings import Settings, get_settings
from db import schema
from db.connection import get_connection
from db.repos.cache_repo import CacheRepo
from models import Dataset, ErrorKind, Outcome, PersonRecord
from ports.source import SourcePort
from services.cache_store import CacheStore, now_ms
from services.dataset_parser import DEFAULT_SOURCE_LABEL, parse_dataset
from sources.registry import get_source
import sources  # noqa: F401 ensure registration


logger = logging.getLogger(__name__)


def build_lookup(people: Iterable[PersonRecord]) -> Dict[str, PersonRecord]:
    """Index people by id. A repeated id keeps the last occurrence."""
    lookup: Dict[str, PersonRecord] = {}
    for person in people:
        lookup[person.id] = person
    return lookup


class DataService:
    def __init__(
        self,
        source: SourcePort,
        cache: CacheStore,
        source_label: str = DEFAULT_SOURCE_LABEL,
        parser: Callable[..., Dataset] = parse_dataset,
    ):
        self.source = source
        self.cache = cache
        self.source_label = source_label
        self.parser = parser

    build_lookup = staticmethod(build_lookup)

    def get_data(self, force_refresh: bool = False) -> Dataset:
        if not force_refresh:
            cached = self.cache.read(respect_ttl=True)
            if cached is not None:
                logger.info("Using cached data (%d people)", len(cached.people), extra={"step": "get_data", "status": "cache_hit", "records": len(cached.people)})
                return cached

        fetched = self.source.fetch()
        if fetched.ok:
            parsed = self._parse(fetched.value or "")
            if parsed.ok and parsed.value is not None:
                dataset = parsed.value
                self.cache.write(dataset)
                logger.info(
                    "Loaded %d people from %s", len(dataset.people), self.source_label,
                    extra={"step": "get_data", "status": "ok", "source": self.source.source_name, "records": len(dataset.people)},
                )
                return dataset
            failure: Outcome = parsed
        else:
            failure = fetched

        return self._fallback(failure)

    def clear_cache(self) -> None:
        self.cache.clear()

    def _parse(self, text: str) -> Outcome[Dataset]:
        try:
            return Outcome.success(self.parser(text, source=self.source_label))
        except Exception as e:
            logger.error("Error parsing sheet data: %s", e, extra={"step": "parse", "status": "error", "error": type(e).__name__})
            return Outcome.failure(ErrorKind.PARSE, f"Failed to parse data: {e}")

    def _fallback(self, failure: Outcome) -> Dataset:
        error = failure.error or "Unknown error"
        stale = self.cache.read(respect_ttl=False)
        if stale is not None:
            logger.warning(
                "Using stale cached data as fallback",
                extra={"step": "get_data", "status": "stale", "error": failure.error_kind.value if failure.error_kind else "-"},
            )
            return stale
        logger.error("No data available: %s", error, extra={"step": "get_data", "status": "error"})
        return Dataset.failed(error)


def build_data_service(
    settings: Optional[Settings] = None,
    *,
    source: Optional[SourcePort] = None,
    conn: Optional[sqlite3.Connection] = None,
    clock_ms: Callable[[], int] = now_ms,
) -> DataService:
    """Wire the service once at application start and pass it to consumers."""
    settings = settings or get_settings()
    if source is None:
        source = get_source(settings.data_source, settings)
    if conn is None:
        conn = get_connection(settings.cache_db_path)
    schema.bootstrap(conn)
    cache = CacheStore(
        CacheRepo(conn),
        ttl_ms=settings.cache_duration_ms,
        data_key=settings.cache_key,
        time_key=settings.cache_time_key,
        clock_ms=clock_ms,
    )
    return DataService(source, cache, source_label=settings.dataset_source_label)
