"""Dependency Providers — per-request wiring of collaborators for the routes.

Invariants:
    - Routes receive services and assemblers only through these providers
    - Services share the request's AsyncSession from get_db
    - No module-level service instances; tests swap providers via
      app.dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles_api.api.assemblers import (
    CarResourceAssembler, ManufacturerResourceAssembler,
)
from vehicles_api.core.service_protocols import CarService, ManufacturerService
from vehicles_api.infrastructure.database import get_db
from vehicles_api.services.car_service import SqlCarService
from vehicles_api.services.manufacturer_service import SqlManufacturerService


def get_car_service(db: AsyncSession = Depends(get_db)) -> CarService:
    return SqlCarService(db)


def get_manufacturer_service(
    db: AsyncSession = Depends(get_db),
) -> ManufacturerService:
    return SqlManufacturerService(db)


def get_car_assembler(request: Request) -> CarResourceAssembler:
    return CarResourceAssembler(request.url_for)


def get_manufacturer_assembler(request: Request) -> ManufacturerResourceAssembler:
    return ManufacturerResourceAssembler(request.url_for)
