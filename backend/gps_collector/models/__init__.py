"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy.

Note: Feature models live in features/ modules; this package only
exposes the shared declarative Base.
"""

from gps_collector.models.base import Base


# Lazy import to avoid circular imports
def __getattr__(name):
    if name == "GpsPoint":
        from gps_collector.features.points.models import GpsPoint
        return GpsPoint

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Base",
    "GpsPoint",
]
