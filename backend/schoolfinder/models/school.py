"""School ORM — persists one school with its coordinates.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - name, address, latitude, longitude are all non-nullable
    - Rows are never updated or deleted by the application

Design Decisions:
    - Plain float lat/lon columns: distance is computed in Python, no spatial extension
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from schoolfinder.core.domain_types import MAX_TEXT_LENGTH, SchoolId, SchoolRecord
from schoolfinder.db.base import Base


class School(Base):
    """School entity — a named address at a point on the globe."""
    __tablename__ = "schools"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(MAX_TEXT_LENGTH), nullable=False)
    address: Mapped[str] = mapped_column(String(MAX_TEXT_LENGTH), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    def to_record(self) -> SchoolRecord:
        return SchoolRecord(
            id=SchoolId(self.id),
            name=self.name,
            address=self.address,
            latitude=float(self.latitude),
            longitude=float(self.longitude),
        )
