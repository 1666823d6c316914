"""Proximity Ranking — annotate records with distance and order them nearest-first.

Invariants:
    - Output has exactly one result per input record (no filtering, no limit)
    - Sort is stable: equal distances keep input (storage) order
    - Pure: input sequence is not mutated
"""

from typing import Iterable

from schoolfinder.core.domain_types import (
    ProximityListing, ProximityResult, SchoolRecord,
)
from schoolfinder.core.geo_distance import haversine_km


def rank_by_proximity(
    records: Iterable[SchoolRecord], lat: float, lon: float,
) -> ProximityListing:
    """Compute distance from (lat, lon) for every record and sort ascending."""
    results = [
        ProximityResult(
            school=record,
            distance=haversine_km(lat, lon, record.latitude, record.longitude),
        )
        for record in records
    ]
    results.sort(key=lambda r: r.distance)
    return ProximityListing(results=tuple(results))
