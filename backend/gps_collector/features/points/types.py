"""
Domain types for point-pair ingestion.

This module contains only dataclasses and imports nothing but the
error kinds, to avoid circular dependencies.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .errors import ErrorKind


@dataclass(frozen=True)
class GeoPoint:
    """A validated GPS fix."""
    latitude: float
    longitude: float
    accuracy_m: Optional[float] = None
    timestamp_ms: Optional[int] = None


@dataclass(frozen=True)
class DerivedMetrics:
    """
    Motion metrics derived from a point-pair.

    elapsed_sec and speed_kmh are only set together with distance_m and
    bearing_deg; distance_m and bearing_deg may be set on their own.
    """
    elapsed_sec: Optional[float] = None
    distance_m: Optional[float] = None
    speed_kmh: Optional[float] = None
    bearing_deg: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (self.elapsed_sec, self.distance_m, self.speed_kmh, self.bearing_deg)
        )


@dataclass(frozen=True)
class RawBatchItem:
    """One batch item that passed validation."""
    category: str
    captured_at: str
    point1: GeoPoint
    point2: GeoPoint
    user: Optional[str] = None
    derived: Optional[DerivedMetrics] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class ItemError:
    """A rejected batch item, keyed by its position in the batch."""
    index: int
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict:
        return {"index": self.index, "kind": self.kind.value, "error": self.message}


# Result of screening a single item: either a validated item or its error
ParsedItem = Union[RawBatchItem, ItemError]
