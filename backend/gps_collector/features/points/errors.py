"""
Error taxonomy for point ingestion.

Per-item problems are reported as data (ItemError with an ErrorKind) and
never abort a batch. Batch-level problems are raised as exceptions.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a rejected batch item."""
    MISSING_FIELD = "missing_field"
    INVALID_COORDINATE = "invalid_coordinate"
    INVALID_ITEM = "invalid_item"


class PointsError(Exception):
    """Base class for batch-level ingestion failures."""


class MalformedInputError(PointsError):
    """Payload is not a batch object or has no items[] list."""


class StorageFailureError(PointsError):
    """The batch transaction could not be committed; nothing was stored."""
