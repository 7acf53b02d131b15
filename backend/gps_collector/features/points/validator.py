"""
Point Validator

Screens one raw batch item (decoded JSON) into a typed RawBatchItem,
or classifies why it was rejected. Never raises for bad item content,
so one broken item cannot abort the rest of the batch.
"""

import math
from typing import Any, Mapping, Optional

from .errors import ErrorKind
from .types import DerivedMetrics, GeoPoint, ItemError, ParsedItem, RawBatchItem

MISSING_FIELD_MESSAGE = "Missing category/capturedAt/point1/point2"
INVALID_COORDINATE_MESSAGE = "Invalid lat/lon"
INVALID_ITEM_MESSAGE = "Item is not an object"

# Stored as a signed 64-bit integer
MAX_TIMESTAMP_MS = 2 ** 63


def as_number(value: Any) -> Optional[float]:
    """
    Coerce a JSON value to a finite float.

    Accepts ints, floats and numeric strings. Booleans, NaN/inf and
    anything else yield None.
    """
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _non_negative(value: Optional[float]) -> Optional[float]:
    return value if value is not None and value >= 0 else None


def _as_text(value: Any) -> str:
    """String form of a scalar JSON value; containers and null become ''."""
    if value is None or isinstance(value, (dict, list, bool)):
        return ""
    return str(value)


class PointValidator:
    """
    Validator for batch items.

    Usage:
        validator = PointValidator()
        parsed = validator.parse(item, index=0)
        if isinstance(parsed, ItemError):
            ...
    """

    def parse(self, item: Any, index: int) -> ParsedItem:
        """
        Validate and coerce one raw item.

        Args:
            item: Decoded JSON value from the batch items[] list
            index: Position of the item in the batch

        Returns:
            RawBatchItem on success, ItemError otherwise
        """
        if not isinstance(item, Mapping):
            return ItemError(index, ErrorKind.INVALID_ITEM, INVALID_ITEM_MESSAGE)

        category = _as_text(item.get("category")).upper()
        captured_at = _as_text(item.get("capturedAt"))
        raw_p1 = item.get("point1")
        raw_p2 = item.get("point2")

        if (
            not category
            or not captured_at
            or not isinstance(raw_p1, Mapping)
            or not isinstance(raw_p2, Mapping)
        ):
            return ItemError(index, ErrorKind.MISSING_FIELD, MISSING_FIELD_MESSAGE)

        point1 = self._parse_point(raw_p1)
        point2 = self._parse_point(raw_p2)
        if point1 is None or point2 is None:
            return ItemError(index, ErrorKind.INVALID_COORDINATE, INVALID_COORDINATE_MESSAGE)

        return RawBatchItem(
            category=category,
            captured_at=captured_at,
            point1=point1,
            point2=point2,
            user=self._parse_user(item.get("user")),
            derived=self._parse_derived(item.get("derived")),
            raw=item,
        )

    @staticmethod
    def _parse_point(raw: Mapping[str, Any]) -> Optional[GeoPoint]:
        """Build a GeoPoint; None if lat/lon are missing, non-numeric or out of range."""
        lat = as_number(raw.get("lat"))
        lon = as_number(raw.get("lon"))
        if lat is None or lon is None:
            return None
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            return None

        # Optional fields: bad values are dropped, not reported
        accuracy = _non_negative(as_number(raw.get("accuracyM")))
        timestamp = as_number(raw.get("timestampMs"))
        if timestamp is not None and abs(timestamp) >= MAX_TIMESTAMP_MS:
            timestamp = None

        return GeoPoint(
            latitude=lat,
            longitude=lon,
            accuracy_m=accuracy,
            timestamp_ms=int(timestamp) if timestamp is not None else None,
        )

    @staticmethod
    def _parse_user(value: Any) -> Optional[str]:
        user = _as_text(value).strip()
        return user or None

    @staticmethod
    def _parse_derived(value: Any) -> Optional[DerivedMetrics]:
        """
        Client-computed metrics, if the item carries a usable set.

        Distance and bearing must both be valid; elapsed and speed are
        kept only as a pair on top of them. Negative values and bearings
        outside [0, 360) count as absent.
        """
        if not isinstance(value, Mapping):
            return None

        distance = _non_negative(as_number(value.get("distanceM")))
        bearing = as_number(value.get("directionDeg"))
        if bearing is not None and not 0.0 <= bearing < 360.0:
            bearing = None
        if distance is None or bearing is None:
            return None

        elapsed = _non_negative(as_number(value.get("dtSec")))
        speed = _non_negative(as_number(value.get("speedKmh")))
        if elapsed is None or speed is None:
            elapsed = speed = None

        return DerivedMetrics(
            elapsed_sec=elapsed,
            distance_m=distance,
            speed_kmh=speed,
            bearing_deg=bearing,
        )
