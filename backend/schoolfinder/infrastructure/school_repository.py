"""SQL School Repository — SchoolRepository implementation over an AsyncSession.

Invariants:
    - insert() writes exactly one row and commits it, or writes nothing
    - fetch_all() returns every row in ascending id (storage) order
    - SQLAlchemyError never escapes: rolled back and re-raised as StorageError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolfinder.core.domain_types import NewSchool, SchoolId, SchoolRecord
from schoolfinder.core.errors import StorageError
from schoolfinder.models.school import School

logger = logging.getLogger(__name__)


class SqlSchoolRepository:
    """Schools table access for one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, school: NewSchool) -> SchoolId:
        row = School(
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
        )
        try:
            self.db.add(row)
            await self.db.flush()
            school_id = SchoolId(row.id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to insert school: {e}",
                extra={"operation": "insert"},
            )
            raise StorageError("Could not save school", "insert")
        return school_id

    async def fetch_all(self) -> list[SchoolRecord]:
        try:
            result = await self.db.execute(select(School).order_by(School.id))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to fetch schools: {e}",
                extra={"operation": "fetch_all"},
            )
            raise StorageError("Could not read schools", "fetch_all")
        return [row.to_record() for row in rows]
