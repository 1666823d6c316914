"""School Schemas — request/response models for the school endpoints.

Invariants:
    - SchoolCreate accepts raw JSON values (Any): field checks happen in core/parse_input.py
      so "missing" and "not numeric" are reported the same way for body and query input
    - Responses always carry success=True; failures use the SchoolFinderError envelope
    - schoolId is camelCase on the wire
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from schoolfinder.core.domain_types import ProximityListing, ProximityResult


class SchoolCreate(BaseModel):
    """POST /addSchool body."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    address: Any = None
    latitude: Any = None
    longitude: Any = None


class SchoolCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "School added successfully"
    school_id: int = Field(alias="schoolId")


class SchoolWithDistance(BaseModel):
    """One entry of a proximity listing; distance in km."""
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float

    @classmethod
    def from_result(cls, result: ProximityResult) -> "SchoolWithDistance":
        school = result.school
        return cls(
            id=school.id,
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
            distance=result.distance,
        )


class SchoolListResponse(BaseModel):
    success: bool = True
    count: int
    schools: list[SchoolWithDistance]

    @classmethod
    def from_listing(cls, listing: ProximityListing) -> "SchoolListResponse":
        return cls(
            count=listing.count,
            schools=[SchoolWithDistance.from_result(r) for r in listing.results],
        )
