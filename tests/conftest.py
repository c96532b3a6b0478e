from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.mapping'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are memoized; tests that monkeypatch env need a rebuild
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


SAMPLE_CSV = (
    "Person ID,First Name,Last Name,Full Name,Birth Date,Death Date,Spouse IDs,Children IDs,Branch / Lineage Tag,Notes / Stories\n"
    "P1,John,Owen,,1850,1920,P2,P3; P4,Owen,\"Farmer, later \"\"Judge\"\"\"\n"
    "P2,Mary,Smith,Mary Smith Owen,1855,abc,P1,P3;P4,Smith,\n"
    ",Ghost,Row,,1900,,,,,\n"
    "P3,William,Owen,,1880,,,,Owen\n"
    "P4,Anne,Owen,,,,,,Owen,\"Moved west\"\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV
