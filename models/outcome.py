from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    PARSE = "parse"
    STORAGE_READ = "storage_read"
    STORAGE_WRITE = "storage_write"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one I/O boundary (fetch, parse, cache read, cache write)."""

    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str) -> "Outcome[T]":
        return cls(error_kind=kind, error=error)
