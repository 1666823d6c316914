"""Proximity Query — lists every school ordered by distance from a query point.

Invariants:
    - Query point validated before the repository is touched
    - Full scan on every call: nothing cached between requests
    - No pagination or limit; count always equals len(results)
"""

import logging
from typing import Any

from schoolfinder.core.domain_types import ProximityListing
from schoolfinder.core.parse_input import parse_query_point
from schoolfinder.core.rank_proximity import rank_by_proximity
from schoolfinder.core.repository_protocols import SchoolRepository

logger = logging.getLogger(__name__)


class ProximityQueryService:
    """Reads schools and ranks them nearest-first."""

    def __init__(self, repository: SchoolRepository):
        self.repository = repository

    async def list_schools_by_proximity(
        self, lat: Any, lon: Any,
    ) -> ProximityListing:
        lat_value, lon_value = parse_query_point(lat, lon)
        records = await self.repository.fetch_all()
        listing = rank_by_proximity(records, lat_value, lon_value)
        logger.info(
            f"Listed schools near ({lat_value}, {lon_value})",
            extra={"count": listing.count},
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Sorted school ids: "
                + ", ".join(str(r.school.id) for r in listing.results),
            )
        return listing
