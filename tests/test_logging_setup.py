from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s status=%(status)s source=%(source)s")
    record = logging.LogRecord("cache", logging.INFO, __file__, 1, "Cache cleared", None, None)
    record.step = "cache_clear"
    assert formatter.format(record) == "Cache cleared step=cache_clear status=- source=-"


def test_formatter_defaults_are_project_extras():
    assert set(SafeExtraFormatter.DEFAULTS) == {"step", "status", "duration_ms", "source", "records", "error"}
    formatter = SafeExtraFormatter(fmt="%(message)s records=%(records)s")
    record = logging.LogRecord("data", logging.INFO, __file__, 1, "Loaded", None, None)
    record.records = 4
    assert formatter.format(record) == "Loaded records=4"
