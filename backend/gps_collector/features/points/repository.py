"""
GPS point repository.

Data access layer for stored point-pairs.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from gps_collector.shared.repository import BaseRepository
from .models import GpsPoint


class GpsPointRepository(BaseRepository[GpsPoint]):
    """Repository for GpsPoint operations."""

    def __init__(self, db: Session):
        super().__init__(db, GpsPoint)

    def get_latest(self, limit: int) -> list[GpsPoint]:
        """
        Get the most recently inserted rows, newest first.

        Args:
            limit: Maximum number of rows

        Returns:
            Rows ordered by id descending
        """
        result = self.db.execute(
            select(GpsPoint).order_by(GpsPoint.id.desc()).limit(limit)
        )
        return list(result.scalars().all())

    def hide(self, point_id: int, reason: Optional[str], hidden_at: datetime) -> int:
        """
        Mark a row as hidden.

        Returns:
            Number of rows changed (0 if the id does not exist)
        """
        result = self.db.execute(
            update(GpsPoint)
            .where(GpsPoint.id == point_id)
            .values(hidden_at=hidden_at, hidden_reason=reason)
        )
        return result.rowcount

    def unhide(self, point_id: int) -> int:
        """
        Clear the moderation state of a row.

        Returns:
            Number of rows changed (0 if the id does not exist)
        """
        result = self.db.execute(
            update(GpsPoint)
            .where(GpsPoint.id == point_id)
            .values(hidden_at=None, hidden_reason=None)
        )
        return result.rowcount
