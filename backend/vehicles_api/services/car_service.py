"""Car Service — SQLAlchemy-backed implementation of the CarService protocol.

Invariants:
    - find_by_id / delete raise CarNotFoundError for unknown ids, including ids
      too large for the key column (never handed to the driver)
    - save() inserts when car.id is None, otherwise updates the stored row
      (CarNotFoundError if it does not exist); the caller's object is never
      merged blindly into the session
    - manufacturer_code, when set, must reference an existing Manufacturer
    - modified_at is bumped on every update; created_at never changes
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles_api.core.domain_types import CarId, is_storable_key
from vehicles_api.core.errors import CarNotFoundError, UnknownManufacturerError
from vehicles_api.models.car import Car
from vehicles_api.models.manufacturer import Manufacturer

logger = logging.getLogger(__name__)


class SqlCarService:
    """Car persistence over a request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> list[Car]:
        result = await self.db.execute(select(Car).order_by(Car.id))
        return list(result.scalars().all())

    async def find_by_id(self, car_id: CarId) -> Car:
        if not is_storable_key(car_id):
            raise CarNotFoundError(car_id)
        car = await self.db.get(Car, car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car

    async def save(self, car: Car) -> Car:
        """Persist a new car or update an existing one, returning the stored row."""
        await self._check_manufacturer(car.manufacturer_code)

        if car.id is None:
            self.db.add(car)
            await self.db.commit()
            await self.db.refresh(car)
            logger.info("Car created", extra={"car_id": car.id})
            return car

        stored = await self.find_by_id(CarId(car.id))
        for name in Car.EDITABLE_FIELDS:
            setattr(stored, name, getattr(car, name))
        stored.modified_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(stored)
        logger.info("Car updated", extra={"car_id": stored.id})
        return stored

    async def delete(self, car_id: CarId) -> None:
        car = await self.find_by_id(car_id)
        await self.db.delete(car)
        await self.db.commit()
        logger.info("Car deleted", extra={"car_id": car_id})

    async def _check_manufacturer(self, code: int | None) -> None:
        if code is None:
            return
        if not is_storable_key(code) or await self.db.get(Manufacturer, code) is None:
            raise UnknownManufacturerError(code)
