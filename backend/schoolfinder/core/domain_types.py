"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SchoolId wraps the store-assigned integer id
    - Kilometers is non-negative
    - Latitude within [-90, 90], longitude within [-180, 180] (enforced by parse_input)
    - Records are frozen: nothing in this system mutates a stored school

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses for records: core never sees ORM objects
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity & Value Types ──────────────────────────────────────

SchoolId = NewType("SchoolId", int)
Kilometers = NewType("Kilometers", float)   # >= 0.0


# ─── Bounds ──────────────────────────────────────────────────────

EARTH_RADIUS_KM: float = 6371.0
MAX_LATITUDE: float = 90.0
MAX_LONGITUDE: float = 180.0
MAX_TEXT_LENGTH: int = 255


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewSchool:
    """A validated school that has not been persisted yet."""
    name: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class SchoolRecord:
    """A persisted school row."""
    id: SchoolId
    name: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ProximityResult:
    """A school annotated with its distance from a query point."""
    school: SchoolRecord
    distance: Kilometers


@dataclass(frozen=True)
class ProximityListing:
    """Nearest-first results of one listing request."""
    results: tuple[ProximityResult, ...]

    @property
    def count(self) -> int:
        return len(self.results)
