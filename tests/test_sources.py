from __future__ import annotations

import pytest
import requests

from models import ErrorKind


class _FakeResponse:
    def __init__(self, status_code: int, body: str = "", content_type: str = "text/csv"):
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.content = body.encode("utf-8")
        self.encoding = None
        self._body = body

    @property
    def text(self) -> str:
        return self._body


def test_sheet_source_returns_text_on_2xx(monkeypatch, sample_csv):
    import sources.sheet_csv as sheet_csv

    calls = []

    def _fake_get(url, timeout=None):
        calls.append((url, timeout))
        return _FakeResponse(200, sample_csv)

    monkeypatch.setattr(sheet_csv.requests, "get", _fake_get)
    src = sheet_csv.GoogleSheetCsvSource("https://example.test/sheet.csv")
    outcome = src.fetch()
    assert outcome.ok
    assert outcome.value == sample_csv
    # No timeout unless configured
    assert calls == [("https://example.test/sheet.csv", None)]


def test_sheet_source_non_2xx_is_transport_failure(monkeypatch):
    import sources.sheet_csv as sheet_csv

    monkeypatch.setattr(sheet_csv.requests, "get", lambda url, timeout=None: _FakeResponse(404, "Not Found"))
    outcome = sheet_csv.GoogleSheetCsvSource("https://example.test/missing.csv").fetch()
    assert not outcome.ok
    assert outcome.error_kind is ErrorKind.TRANSPORT
    assert outcome.error == "Failed to fetch data: 404"


def test_sheet_source_network_error_is_transport_failure(monkeypatch):
    import sources.sheet_csv as sheet_csv

    def _boom(url, timeout=None):
        raise requests.exceptions.ConnectionError("Name or service not known")

    monkeypatch.setattr(sheet_csv.requests, "get", _boom)
    outcome = sheet_csv.GoogleSheetCsvSource("https://example.test/sheet.csv", timeout=5).fetch()
    assert outcome.error_kind is ErrorKind.TRANSPORT
    assert "Name or service not known" in outcome.error


def test_sheet_source_factory_reads_settings(monkeypatch):
    monkeypatch.setenv("SHEET_CSV_URL", "https://example.test/custom.csv")
    monkeypatch.setenv("SHEET_HTTP_TIMEOUT_SECONDS", "12.5")
    from sources.registry import get_source
    import sources  # noqa: F401

    src = get_source("google_sheets_csv")
    assert src.url == "https://example.test/custom.csv"
    assert src.timeout == 12.5


def test_csv_file_source_reads_and_strips_bom(tmp_path):
    from sources.csv_file import CsvFileSource

    path = tmp_path / "export.csv"
    path.write_bytes("\ufeffPerson ID\nP1\n".encode("utf-8"))
    outcome = CsvFileSource(path).fetch()
    assert outcome.ok
    assert outcome.value.startswith("Person ID")


def test_csv_file_source_missing_file(tmp_path):
    from sources.csv_file import CsvFileSource

    outcome = CsvFileSource(tmp_path / "nope.csv").fetch()
    assert outcome.error_kind is ErrorKind.TRANSPORT
    assert "nope.csv" in outcome.error


def test_builtin_sources_registered():
    import sources  # noqa: F401
    from sources.registry import available_sources

    names = available_sources().keys()
    assert "google_sheets_csv" in names
    assert "csv_file" in names


def test_unknown_source_raises():
    from sources.registry import get_source
    with pytest.raises(KeyError):
        get_source("does_not_exist")


def test_csv_file_source_requires_path(monkeypatch):
    monkeypatch.delenv("CSV_FILE_PATH", raising=False)
    import sources  # noqa: F401
    from sources.registry import get_source
    with pytest.raises(RuntimeError):
        get_source("csv_file")
