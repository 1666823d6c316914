"""Geo Distance — great-circle distance between two lat/lon points (haversine).

Invariants:
    - Inputs in degrees, result in kilometres (EARTH_RADIUS_KM = 6371)
    - distance(A, A) == 0 and distance(A, B) == distance(B, A)
    - Never raises for finite inputs
"""

import math

from schoolfinder.core.domain_types import EARTH_RADIUS_KM, Kilometers


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float,
) -> Kilometers:
    """Haversine distance in km. Pure."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # rounding can push a just past 1.0 near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return Kilometers(EARTH_RADIUS_KM * c)
