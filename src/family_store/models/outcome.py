"""Outcome models returned by family repository operations."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from family_store.models.family import Family


class ReadStatus(Enum):
    """Outcome of a point read."""

    FOUND = "found"  # Document returned
    NOT_FOUND = "not_found"  # No document for (id, partition key)
    FAILURE = "failure"  # Any other service error


class ReadResult(BaseModel):
    """Tagged result of a point read; inspect ``status`` before ``family``."""

    status: ReadStatus
    family: Optional[Family] = None
    status_code: Optional[int] = None
    detail: Optional[str] = None
    request_charge: float = 0.0

    @classmethod
    def found(cls, family: Family, request_charge: float = 0.0) -> "ReadResult":
        return cls(status=ReadStatus.FOUND, family=family, status_code=200, request_charge=request_charge)

    @classmethod
    def not_found(cls, detail: Optional[str] = None) -> "ReadResult":
        return cls(status=ReadStatus.NOT_FOUND, status_code=404, detail=detail)

    @classmethod
    def failure(cls, status_code: Optional[int], detail: str) -> "ReadResult":
        return cls(status=ReadStatus.FAILURE, status_code=status_code, detail=detail)


class ItemResponse(BaseModel):
    """Document returned by a write together with the request units it consumed."""

    family: Family
    request_charge: float = Field(default=0.0, description="Request units consumed by the operation")


class EnsureResult(ItemResponse):
    """Result of a create-if-absent existence check."""

    created: bool = Field(description="False when the document already existed")
