"""Car Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - CarCreate.make / model: 1-100 chars, stripped, non-empty
    - CarCreate never carries an id; ids are server-assigned
    - CarUpdate.id is required and compared with the path id by the route
    - Location lat in [-90, 90], lon in [-180, 180]
    - CarView / LocationView carry types only: stored rows are never re-checked
      against request constraints when a response is built

Design Decisions:
    - CarFields holds the shared attribute types; CarCreate tightens them with
      bounds and validators, CarView adds server-owned fields (id, timestamps)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vehicles_api.core.domain_types import Condition


class LocationView(BaseModel):
    """Where the car is parked, as stored."""
    lat: float
    lon: float
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class Location(LocationView):
    """Location supplied by a client."""
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip: str | None = Field(None, max_length=20)


class CarFields(BaseModel):
    """Attributes shared by every car schema, without request constraints."""
    model_config = ConfigDict(protected_namespaces=())

    make: str
    model: str
    condition: Condition = Condition.USED
    body: str | None = None
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None
    manufacturer_code: int | None = None
    location: LocationView | None = None


class CarCreate(CarFields):
    """Car creation — every client-settable attribute."""
    make: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    body: str | None = Field(None, max_length=50)
    number_of_doors: int | None = Field(None, ge=1, le=10)
    fuel_type: str | None = Field(None, max_length=50)
    engine: str | None = Field(None, max_length=100)
    mileage: int | None = Field(None, ge=0, le=10_000_000)
    model_year: int | None = Field(None, ge=1886, le=2100)
    production_year: int | None = Field(None, ge=1886, le=2100)
    external_color: str | None = Field(None, max_length=50)
    location: Location | None = None

    @field_validator("make", "model")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class CarUpdate(CarCreate):
    """Car update — full replacement including the car's own id."""
    id: int


class CarView(CarFields):
    """Car as returned inside a resource envelope."""
    id: int
    created_at: datetime
    modified_at: datetime


class ManufacturerView(BaseModel):
    """Manufacturer as returned inside a resource envelope."""
    code: int
    name: str

    model_config = ConfigDict(from_attributes=True)
