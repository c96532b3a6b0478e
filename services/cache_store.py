"""
Last-known-good dataset cache with a time-to-live.

One entry lives in two key-value slots: the dataset JSON and the write time
as a millisecond epoch string. Storage problems are logged and reported as
misses, never raised.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
import time
from typing import Callable, Optional

from models import Dataset, ErrorKind, Outcome
from ports.repos import CacheBackendPort


logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 60 * 60 * 1000
DEFAULT_DATA_KEY = "familyTreeData"
DEFAULT_TIME_KEY = "familyTreeData_timestamp"

_STORAGE_ERRORS = (sqlite3.Error, OSError)


def now_ms() -> int:
    return int(time.time() * 1000)


class CacheStore:
    def __init__(
        self,
        backend: CacheBackendPort,
        *,
        ttl_ms: int = DEFAULT_TTL_MS,
        data_key: str = DEFAULT_DATA_KEY,
        time_key: str = DEFAULT_TIME_KEY,
        clock_ms: Callable[[], int] = now_ms,
    ):
        self.backend = backend
        self.ttl_ms = ttl_ms
        self.data_key = data_key
        self.time_key = time_key
        self._clock_ms = clock_ms
        self._lock = threading.Lock()

    def read_entry(self, respect_ttl: bool = True) -> Outcome[Dataset]:
        with self._lock:
            try:
                slots = self.backend.get_many(self.time_key, self.data_key)
            except _STORAGE_ERRORS as e:
                logger.warning("Cache read error: %s", e, extra={"step": "cache_read", "status": "error", "error": type(e).__name__})
                return Outcome.failure(ErrorKind.STORAGE_READ, str(e))

        timestamp = slots.get(self.time_key)
        if not timestamp:
            return Outcome.failure(ErrorKind.NOT_FOUND, "No cached data")

        try:
            written_at = int(timestamp)
        except ValueError as e:
            logger.warning("Cache read error: bad timestamp %r", timestamp, extra={"step": "cache_read", "status": "error"})
            return Outcome.failure(ErrorKind.STORAGE_READ, str(e))

        if respect_ttl and self._clock_ms() - written_at > self.ttl_ms:
            logger.info("Cache expired", extra={"step": "cache_read", "status": "expired"})
            return Outcome.failure(ErrorKind.EXPIRED, "Cache expired")

        data = slots.get(self.data_key)
        if not data:
            return Outcome.failure(ErrorKind.NOT_FOUND, "No cached data")

        try:
            dataset = Dataset.from_payload(json.loads(data))
        except ValueError as e:
            # JSONDecodeError and pydantic's ValidationError are both ValueErrors
            logger.warning("Cache read error: %s", e, extra={"step": "cache_read", "status": "error", "error": type(e).__name__})
            return Outcome.failure(ErrorKind.STORAGE_READ, str(e))
        return Outcome.success(dataset)

    def read(self, respect_ttl: bool = True) -> Optional[Dataset]:
        return self.read_entry(respect_ttl).value

    def write(self, dataset: Dataset) -> Outcome[None]:
        payload = json.dumps(dataset.to_payload(), ensure_ascii=False)
        with self._lock:
            try:
                self.backend.set_many({
                    self.data_key: payload,
                    self.time_key: str(self._clock_ms()),
                })
            except _STORAGE_ERRORS as e:
                logger.warning(
                    "Cache write error (storage may be full): %s", e,
                    extra={"step": "cache_write", "status": "error", "error": type(e).__name__},
                )
                return Outcome.failure(ErrorKind.STORAGE_WRITE, str(e))
        return Outcome.success()

    def clear(self) -> None:
        with self._lock:
            try:
                self.backend.delete(self.data_key, self.time_key)
            except _STORAGE_ERRORS as e:
                logger.warning("Cache clear error: %s", e, extra={"step": "cache_clear", "status": "error"})
                return
        logger.info("Cache cleared", extra={"step": "cache_clear", "status": "ok"})
