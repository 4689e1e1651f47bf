"""Boundary Protocols — contracts between the HTTP layer and its collaborators.

Invariants:
    - Routes depend on these Protocols, never on a concrete service class
    - Not-found conditions are raised (CarNotFoundError / ManufacturerNotFoundError),
      never signalled by returning None
    - Implementations provided via FastAPI dependency injection (api/dependencies.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from vehicles_api.core.domain_types import CarId, ManufacturerCode
from vehicles_api.models.car import Car
from vehicles_api.models.manufacturer import Manufacturer


class CarService(Protocol):
    """Contract for car persistence and business rules."""
    async def list(self) -> list[Car]: ...
    async def find_by_id(self, car_id: CarId) -> Car: ...
    async def save(self, car: Car) -> Car: ...
    async def delete(self, car_id: CarId) -> None: ...


class ManufacturerService(Protocol):
    """Contract for read-only manufacturer lookups."""
    async def list(self) -> list[Manufacturer]: ...
    async def find_by_code(self, code: ManufacturerCode) -> Manufacturer: ...
