from .repos import CacheBackendPort
from .source import SourcePort

__all__ = [
    "CacheBackendPort",
    "SourcePort",
]
