"""
Published Google Sheet CSV export over HTTP.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from config.settings import Settings, get_settings
from models import ErrorKind, Outcome
from sources.registry import register


logger = logging.getLogger(__name__)


class GoogleSheetCsvSource:
    """Fetches the sheet's CSV text with a single GET request.

    No timeout is applied unless one is configured, so a hung request blocks
    until the transport gives up.
    """

    source_name = "google_sheets_csv"

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout

    def fetch(self) -> Outcome[str]:
        logger.info("Fetching fresh data from Google Sheets...", extra={"step": "fetch", "source": self.source_name})
        started = time.monotonic()
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Error loading from Google Sheets: %s", e, extra={"step": "fetch", "status": "error", "source": self.source_name, "error": type(e).__name__})
            return Outcome.failure(ErrorKind.TRANSPORT, str(e) or type(e).__name__)

        duration_ms = int((time.monotonic() - started) * 1000)
        if not 200 <= response.status_code < 300:
            message = f"Failed to fetch data: {response.status_code}"
            logger.error(message, extra={"step": "fetch", "status": "error", "source": self.source_name, "duration_ms": duration_ms})
            return Outcome.failure(ErrorKind.TRANSPORT, message)

        # Sheets serves CSV without a charset; requests would otherwise guess ISO-8859-1
        if "charset" not in response.headers.get("Content-Type", ""):
            response.encoding = "utf-8"
        logger.debug("Fetched %d bytes", len(response.content), extra={"step": "fetch", "status": "ok", "source": self.source_name, "duration_ms": duration_ms})
        return Outcome.success(response.text)


def _factory(settings: Optional[Settings] = None) -> GoogleSheetCsvSource:
    settings = settings or get_settings()
    return GoogleSheetCsvSource(settings.sheet_csv_url, timeout=settings.sheet_http_timeout_seconds)


register(GoogleSheetCsvSource.source_name, _factory)
