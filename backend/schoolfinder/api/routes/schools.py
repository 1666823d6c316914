"""School Routes — insert a school and list schools by proximity.

Invariants:
    - Raw body/query values passed through to services untouched (validation lives in core)
    - ValidationError/StorageError propagate to the global handlers (400/500)
    - One repository per request, bound to the request-scoped session
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolfinder.infrastructure.database import get_db
from schoolfinder.infrastructure.school_repository import SqlSchoolRepository
from schoolfinder.core.repository_protocols import SchoolRepository
from schoolfinder.schemas.school import (
    SchoolCreate, SchoolCreatedResponse, SchoolListResponse,
)
from schoolfinder.services.proximity_query import ProximityQueryService
from schoolfinder.services.school_ingestion import SchoolIngestionService

router = APIRouter(tags=["schools"])


def get_school_repository(
    db: AsyncSession = Depends(get_db),
) -> SchoolRepository:
    return SqlSchoolRepository(db)


@router.post(
    "/addSchool", response_model=SchoolCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_school(
    body: SchoolCreate,
    repository: SchoolRepository = Depends(get_school_repository),
):
    """Add a new school."""
    school_id = await SchoolIngestionService(repository).add_school(
        body.name, body.address, body.latitude, body.longitude,
    )
    return SchoolCreatedResponse(school_id=school_id)


@router.get("/listSchools", response_model=SchoolListResponse)
async def list_schools(
    lat: str | None = Query(None),
    lon: str | None = Query(None),
    repository: SchoolRepository = Depends(get_school_repository),
):
    """List all schools sorted by distance from (lat, lon), nearest first."""
    listing = await ProximityQueryService(
        repository,
    ).list_schools_by_proximity(lat, lon)
    return SchoolListResponse.from_listing(listing)
