"""
Derived Metrics Calculator

Turns a validated point-pair into elapsed time, distance, speed and bearing.

Policy:
- both timestamps, t2 > t1   -> all four metrics
- both timestamps, t2 <= t1  -> distance and bearing only
- a timestamp missing        -> nothing
"""

from gps_collector.shared.geo import bearing_degrees, distance_meters

from .types import DerivedMetrics, GeoPoint

# Floor for elapsed time, keeps speed finite for near-simultaneous fixes
MIN_ELAPSED_SEC = 0.001

# m/s -> km/h
MS_TO_KMH = 3.6


class DerivedMetricsCalculator:
    """
    Calculator for point-pair motion metrics.

    Usage:
        metrics = DerivedMetricsCalculator.compute(point1, point2)
    """

    @classmethod
    def compute(cls, p1: GeoPoint, p2: GeoPoint) -> DerivedMetrics:
        """
        Compute derived metrics for a point-pair.

        Args:
            p1: Earlier fix
            p2: Later fix

        Returns:
            DerivedMetrics with unavailable fields left as None
        """
        t1, t2 = p1.timestamp_ms, p2.timestamp_ms
        if t1 is None or t2 is None:
            return DerivedMetrics()

        distance_m = distance_meters(p1, p2)
        bearing_deg = bearing_degrees(p1, p2)

        if t2 <= t1:
            return DerivedMetrics(distance_m=distance_m, bearing_deg=bearing_deg)

        elapsed_sec = max(MIN_ELAPSED_SEC, (t2 - t1) / 1000.0)
        return DerivedMetrics(
            elapsed_sec=elapsed_sec,
            distance_m=distance_m,
            speed_kmh=distance_m / elapsed_sec * MS_TO_KMH,
            bearing_deg=bearing_deg,
        )
