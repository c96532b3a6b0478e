from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .person_record import PersonRecord


class DatasetMetadata(BaseModel):
    """Provenance of a dataset. Only `error` is set on a total failure."""

    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    source: Optional[str] = None
    record_count: Optional[int] = Field(default=None, alias="recordCount")
    error: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Dataset(BaseModel):
    """People in sheet row order plus metadata; the unit that gets cached."""

    people: List[PersonRecord] = Field(default_factory=list)
    metadata: Optional[DatasetMetadata] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def failed(cls, error: str) -> "Dataset":
        return cls(people=[], metadata=DatasetMetadata(error=error))

    def to_payload(self) -> Dict[str, Any]:
        """JSON-compatible dict keyed the way the cache and pages expect."""
        payload: Dict[str, Any] = {
            "people": [p.model_dump(by_alias=True) for p in self.people],
        }
        if self.metadata is not None:
            payload["metadata"] = self.metadata.model_dump(by_alias=True, exclude_none=True)
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Dataset":
        return cls.model_validate(payload)
