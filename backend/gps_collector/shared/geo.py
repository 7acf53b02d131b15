"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Protocol

# Earth radius in meters
EARTH_RADIUS_M = 6_371_000.0


class HasCoordinates(Protocol):
    """Anything carrying latitude/longitude in decimal degrees."""

    latitude: float
    longitude: float


def haversine_m(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def initial_bearing(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate initial bearing (forward azimuth) from point 1 to point 2.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Bearing in degrees, clockwise from true north, in [0, 360)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lon = math.radians(lon2 - lon1)

    y = math.sin(delta_lon) * math.cos(lat2_rad)
    x = (
        math.cos(lat1_rad) * math.sin(lat2_rad) -
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(delta_lon)
    )
    theta = math.atan2(y, x)

    return (math.degrees(theta) + 360.0) % 360.0


def distance_meters(p1: HasCoordinates, p2: HasCoordinates) -> float:
    """Great-circle distance in meters between two points."""
    return haversine_m(p1.latitude, p1.longitude, p2.latitude, p2.longitude)


def bearing_degrees(p1: HasCoordinates, p2: HasCoordinates) -> float:
    """Initial compass bearing from p1 towards p2, in [0, 360)."""
    return initial_bearing(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
