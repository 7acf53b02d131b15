"""
GPS point-pair ingestion module.

Usage:
    from gps_collector.features.points import BatchIngestor, GpsPointRepository
    from gps_collector.features.points import DerivedMetricsCalculator

Components:
- GpsPoint: SQLAlchemy model for stored point-pairs
- PointValidator: Screen one raw batch item into a RawBatchItem or ItemError
- DerivedMetricsCalculator: Elapsed time, distance, speed, bearing
- BatchIngestor: Validate, compute and store a whole batch atomically
- GpsPointRepository: Listing and moderation queries
"""

from .models import GpsPoint
from .types import GeoPoint, DerivedMetrics, RawBatchItem, ItemError, ParsedItem
from .errors import ErrorKind, PointsError, MalformedInputError, StorageFailureError
from .validator import PointValidator
from .calculator import DerivedMetricsCalculator
from .repository import GpsPointRepository
from .ingestor import BatchIngestor, BatchResult
from .schemas import BatchResponse, GpsPointSchema, LatestResponse, HideRequest, HideResponse

__all__ = [
    # Model
    "GpsPoint",
    # Types
    "GeoPoint",
    "DerivedMetrics",
    "RawBatchItem",
    "ItemError",
    "ParsedItem",
    # Errors
    "ErrorKind",
    "PointsError",
    "MalformedInputError",
    "StorageFailureError",
    # Services
    "PointValidator",
    "DerivedMetricsCalculator",
    "BatchIngestor",
    "BatchResult",
    "GpsPointRepository",
    # Schemas
    "BatchResponse",
    "GpsPointSchema",
    "LatestResponse",
    "HideRequest",
    "HideResponse",
]
