"""Pydantic schemas for the fplist API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Schema for the health check response."""

    status: str = Field(..., description="Status indicator for the API")


class Source(BaseModel):
    """A ranked source, identified by its file-name-like identifier."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1, max_length=255)
    label: Optional[str] = Field(None, max_length=255)


class SourceCreate(BaseModel):
    """Schema for requests that record one use of a source."""

    identifier: str = Field(..., min_length=1, max_length=255)
    label: Optional[str] = Field(None, max_length=255)
    manual: bool = Field(False, description="Pin the source to the front of the ranking")

    def to_source(self) -> Source:
        return Source(identifier=self.identifier, label=self.label)


class OrderingUpdate(BaseModel):
    """Schema for moving a source between manual and automatic ordering."""

    manual: bool


class RankedSource(Source):
    """A source as returned to clients, with its position and usage count."""

    rank: int = Field(..., ge=0)
    count: int = Field(..., ge=1)
    manual: bool = False


class SaveResponse(BaseModel):
    saved: bool


__all__ = [
    "HealthResponse",
    "Source",
    "SourceCreate",
    "OrderingUpdate",
    "RankedSource",
    "SaveResponse",
]
