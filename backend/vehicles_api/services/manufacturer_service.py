"""Manufacturer Service — read-only lookups over the manufacturers table."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles_api.core.domain_types import ManufacturerCode, is_storable_key
from vehicles_api.core.errors import ManufacturerNotFoundError
from vehicles_api.models.manufacturer import Manufacturer


class SqlManufacturerService:
    """Manufacturer lookups over a request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> list[Manufacturer]:
        result = await self.db.execute(
            select(Manufacturer).order_by(Manufacturer.code),
        )
        return list(result.scalars().all())

    async def find_by_code(self, code: ManufacturerCode) -> Manufacturer:
        if not is_storable_key(code):
            raise ManufacturerNotFoundError(code)
        manufacturer = await self.db.get(Manufacturer, code)
        if manufacturer is None:
            raise ManufacturerNotFoundError(code)
        return manufacturer
