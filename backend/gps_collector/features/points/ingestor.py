"""
Batch Ingestor

Orchestrates one batch submission: screens every item, derives metrics
for the valid ones and stores them in a single transaction.

Per-item validation failures are collected and returned; they never roll
back the batch. A database failure rolls back the whole batch.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from sqlalchemy.orm import Session

from .calculator import DerivedMetricsCalculator
from .errors import MalformedInputError, StorageFailureError
from .models import GpsPoint
from .repository import GpsPointRepository
from .types import DerivedMetrics, ItemError, RawBatchItem
from .validator import PointValidator

logger = logging.getLogger(__name__)

DEFAULT_REASON = "unknown"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BatchResult:
    """Outcome of a committed batch."""
    inserted: int = 0
    errors: list[ItemError] = field(default_factory=list)


class BatchIngestor:
    """
    Service for batch ingestion.

    Usage:
        ingestor = BatchIngestor(db)
        result = ingestor.ingest(payload)
    """

    def __init__(
        self,
        db: Session,
        trust_client_metrics: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            db: Database session; the ingestor commits or rolls it back
            trust_client_metrics: Store the item's own `derived` values
                when present instead of recomputing them
            clock: Source of the batch received_at timestamp
        """
        self.db = db
        self.trust_client_metrics = trust_client_metrics
        self.clock = clock
        self.validator = PointValidator()
        self.repository = GpsPointRepository(db)

    def ingest(self, payload: Any) -> BatchResult:
        """
        Ingest one batch.

        Args:
            payload: Decoded JSON body {items: [...], sentAt?, reason?}

        Returns:
            BatchResult with inserted count and per-item errors

        Raises:
            MalformedInputError: payload is not an object or has no items list
            StorageFailureError: the transaction failed and was rolled back
        """
        if not isinstance(payload, Mapping):
            raise MalformedInputError("Invalid JSON")
        items = payload.get("items")
        if not isinstance(items, list):
            raise MalformedInputError("Missing items[]")

        received_at = self.clock()
        sent_at = self._text_or_default(payload.get("sentAt"), received_at.isoformat())
        reason = self._text_or_default(payload.get("reason"), DEFAULT_REASON)

        result = BatchResult()
        rows: list[GpsPoint] = []
        for index, item in enumerate(items):
            parsed = self.validator.parse(item, index)
            if isinstance(parsed, ItemError):
                logger.debug(f"Batch item {index} rejected: {parsed.kind.value}")
                result.errors.append(parsed)
                continue
            rows.append(self._build_row(parsed, received_at, sent_at, reason))

        try:
            for row in rows:
                self.repository.add(row)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.exception(f"Batch insert failed, rolled back {len(rows)} rows")
            raise StorageFailureError("Insert failed") from e

        result.inserted = len(rows)
        logger.info(
            f"Batch ingested: {result.inserted} inserted, "
            f"{len(result.errors)} rejected (reason={reason})"
        )
        return result

    def _metrics_for(self, item: RawBatchItem) -> DerivedMetrics:
        derived = item.derived
        if self.trust_client_metrics and derived is not None and not derived.is_empty:
            return derived
        return DerivedMetricsCalculator.compute(item.point1, item.point2)

    def _build_row(
        self,
        item: RawBatchItem,
        received_at: datetime,
        sent_at: str,
        reason: str,
    ) -> GpsPoint:
        metrics = self._metrics_for(item)
        p1, p2 = item.point1, item.point2
        return GpsPoint(
            received_at=received_at,
            sent_at=sent_at,
            reason=reason,
            category=item.category,
            user=item.user,
            captured_at=item.captured_at,
            p1_lat=p1.latitude,
            p1_lon=p1.longitude,
            p1_accuracy_m=p1.accuracy_m,
            p1_timestamp_ms=p1.timestamp_ms,
            p2_lat=p2.latitude,
            p2_lon=p2.longitude,
            p2_accuracy_m=p2.accuracy_m,
            p2_timestamp_ms=p2.timestamp_ms,
            dt_sec=metrics.elapsed_sec,
            distance_m=metrics.distance_m,
            speed_kmh=metrics.speed_kmh,
            direction_deg=metrics.bearing_deg,
            raw_json=json.dumps(dict(item.raw), ensure_ascii=False, separators=(",", ":")),
        )

    @staticmethod
    def _text_or_default(value: Any, default: str) -> str:
        if value is None or isinstance(value, (dict, list)):
            return default
        return str(value)
