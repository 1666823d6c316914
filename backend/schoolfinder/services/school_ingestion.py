"""School Ingestion — validates and persists a new school.

Invariants:
    - Input is fully validated before the repository is touched (no partial writes)
    - Exactly one insert per successful call
"""

import logging
from typing import Any

from schoolfinder.core.domain_types import SchoolId
from schoolfinder.core.parse_input import parse_new_school
from schoolfinder.core.repository_protocols import SchoolRepository

logger = logging.getLogger(__name__)


class SchoolIngestionService:
    """Adds schools to the record store."""

    def __init__(self, repository: SchoolRepository):
        self.repository = repository

    async def add_school(
        self, name: Any, address: Any, latitude: Any, longitude: Any,
    ) -> SchoolId:
        """Validate the four fields, insert one row, return the new id."""
        school = parse_new_school(name, address, latitude, longitude)
        school_id = await self.repository.insert(school)
        logger.info(
            f"School {school_id} added: {school.name}",
            extra={"school_id": school_id},
        )
        return school_id
