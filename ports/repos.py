from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol


class CacheBackendPort(Protocol):
    def get_many(self, *keys: str) -> Dict[str, Optional[str]]:
        ...

    def set_many(self, items: Mapping[str, str]) -> None:
        ...

    def delete(self, *keys: str) -> None:
        ...
