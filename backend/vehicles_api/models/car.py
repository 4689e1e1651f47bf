"""Car ORM — persists a vehicle listed through the /cars endpoints.

Invariants:
    - id is an integer primary key assigned by the database on insert
    - make, model and condition are non-nullable
    - manufacturer_code is optional; when set it references manufacturers.code
    - location is stored flattened (location_lat, location_lon, ...)

Design Decisions:
    - No relationship() to Manufacturer: the response links to the manufacturer
      resource instead of embedding it, so no async lazy loads are needed
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from vehicles_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Car(Base):
    """Car entity."""
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    condition: Mapped[str] = mapped_column(
        String(10), nullable=False, default="USED",
    )
    body: Mapped[str | None] = mapped_column(String(50), nullable=True)
    number_of_doors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fuel_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    engine: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mileage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    model_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    production_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    external_color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    manufacturer_code: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("manufacturers.code"), nullable=True, index=True,
    )

    location_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_lon: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    location_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    location_state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location_zip: Mapped[str | None] = mapped_column(String(20), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )

    # Columns a client may set; id and timestamps are server-owned.
    EDITABLE_FIELDS = (
        "make", "model", "condition", "body", "number_of_doors",
        "fuel_type", "engine", "mileage", "model_year", "production_year",
        "external_color", "manufacturer_code",
        "location_lat", "location_lon", "location_address",
        "location_city", "location_state", "location_zip",
    )
