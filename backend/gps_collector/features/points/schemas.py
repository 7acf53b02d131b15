"""
Point-pair schemas.

Pydantic models for the points API responses and moderation requests.
Batch bodies are not modelled here: items are screened one by one by
PointValidator so a bad item cannot fail the whole request.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemErrorSchema(BaseModel):
    """A rejected batch item."""

    index: int
    kind: str
    error: str


class BatchResponse(BaseModel):
    """Response for batch ingestion."""

    ok: bool = True
    inserted: int
    errors: List[ItemErrorSchema] = Field(default_factory=list)


class GpsPointSchema(BaseModel):
    """Stored point-pair as returned by listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    received_at: datetime
    sent_at: Optional[str] = None
    reason: Optional[str] = None

    category: str
    user: Optional[str] = None
    captured_at: str

    p1_lat: float
    p1_lon: float
    p1_accuracy_m: Optional[float] = None
    p1_timestamp_ms: Optional[int] = None

    p2_lat: float
    p2_lon: float
    p2_accuracy_m: Optional[float] = None
    p2_timestamp_ms: Optional[int] = None

    dt_sec: Optional[float] = None
    distance_m: Optional[float] = None
    speed_kmh: Optional[float] = None
    direction_deg: Optional[float] = None

    hidden_at: Optional[datetime] = None
    hidden_reason: Optional[str] = None

    @field_validator("received_at", "hidden_at")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Server timestamps are UTC; SQLite returns them without an offset."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class LatestResponse(BaseModel):
    """Response for latest rows listing."""

    total: int
    limit: int
    count: int
    rows: List[GpsPointSchema]


class HideRequest(BaseModel):
    """Request to hide (or unhide) a stored row."""

    id: int
    hide: bool = True
    reason: Optional[str] = None

    @field_validator("reason")
    @classmethod
    def strip_reason(cls, v: Optional[str]) -> Optional[str]:
        """Trim reason; blank becomes None."""
        if v is None:
            return None
        return v.strip() or None


class HideResponse(BaseModel):
    """Response for hide/unhide."""

    ok: bool = True
    id: int
    hide: int
    changed: int
