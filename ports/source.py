from __future__ import annotations

from typing import Protocol

from models import Outcome


class SourcePort(Protocol):
    source_name: str

    def fetch(self) -> Outcome[str]:
        ...
