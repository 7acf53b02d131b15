"""
Shared utilities (NOT business logic).

Usage:
    from gps_collector.shared import haversine_m, bearing_degrees
    from gps_collector.shared.repository import BaseRepository
"""
from .geo import (
    haversine_m,
    initial_bearing,
    distance_meters,
    bearing_degrees,
    EARTH_RADIUS_M,
)
from .repository import BaseRepository

__all__ = [
    # geo
    "haversine_m",
    "initial_bearing",
    "distance_meters",
    "bearing_degrees",
    "EARTH_RADIUS_M",
    # repository
    "BaseRepository",
]
