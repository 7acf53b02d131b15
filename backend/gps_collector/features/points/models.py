"""
GPS point-pair model.

One row per accepted batch item: both raw fixes, the derived metrics,
batch metadata and moderation state.
"""

from sqlalchemy import Column, DateTime, Float, Integer, BigInteger, Text

from gps_collector.models.base import Base


class GpsPoint(Base):
    """
    Model for a stored point-pair.

    Rows are only created by the batch ingestor. The hidden_* columns
    are the only ones changed afterwards (moderation).
    """

    __tablename__ = "gps_points"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Batch metadata
    received_at = Column(DateTime(timezone=True), nullable=False)  # server time, one per batch
    sent_at = Column(Text, nullable=True)  # client batch sentAt
    reason = Column(Text, nullable=True)

    # Item
    category = Column(Text, nullable=False)
    user = Column(Text, nullable=True)
    captured_at = Column(Text, nullable=False)  # client ISO timestamp, not parsed

    # Point 1
    p1_lat = Column(Float, nullable=False)
    p1_lon = Column(Float, nullable=False)
    p1_accuracy_m = Column(Float, nullable=True)
    p1_timestamp_ms = Column(BigInteger, nullable=True)

    # Point 2
    p2_lat = Column(Float, nullable=False)
    p2_lon = Column(Float, nullable=False)
    p2_accuracy_m = Column(Float, nullable=True)
    p2_timestamp_ms = Column(BigInteger, nullable=True)

    # Derived metrics
    dt_sec = Column(Float, nullable=True)
    distance_m = Column(Float, nullable=True)
    speed_kmh = Column(Float, nullable=True)
    direction_deg = Column(Float, nullable=True)

    # Original item JSON
    raw_json = Column(Text, nullable=True)

    # Moderation
    hidden_at = Column(DateTime(timezone=True), nullable=True)
    hidden_reason = Column(Text, nullable=True)

    @property
    def is_hidden(self) -> bool:
        return self.hidden_at is not None

    def __repr__(self):
        return f"<GpsPoint {self.id} ({self.category})>"
