"""Car Routes — CRUD for cars and read access to manufacturers under /cars.

Invariants:
    - Routes never touch the database directly; they call CarService /
      ManufacturerService and wrap results with the assemblers
    - Request bodies are validated by Pydantic before reaching a handler
      (violations become 400 via api/error_handlers.py)
    - PUT with a body id different from the path id raises CarIdMismatchError
      before CarService.save is called
    - POST answers 201 with Location set to the new resource's self link
    - Manufacturer routes are declared before /{car_id} so they are matched first
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from vehicles_api.api.assemblers import (
    CarResourceAssembler, ManufacturerResourceAssembler,
)
from vehicles_api.api.dependencies import (
    get_car_assembler, get_car_service,
    get_manufacturer_assembler, get_manufacturer_service,
)
from vehicles_api.api.responses import UTF8JSONResponse
from vehicles_api.core.domain_types import CarId, LinkRel, ManufacturerCode
from vehicles_api.core.errors import CarIdMismatchError
from vehicles_api.core.service_protocols import CarService, ManufacturerService
from vehicles_api.models.car import Car
from vehicles_api.schemas.car import (
    CarCreate, CarUpdate, CarView, ManufacturerView,
)
from vehicles_api.schemas.resource import Resource, ResourceCollection

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/cars", tags=["cars"], default_response_class=UTF8JSONResponse,
)


def _to_entity(body: CarCreate, car_id: int | None = None) -> Car:
    """Build a transient Car from a validated request body."""
    location = body.location
    return Car(
        id=car_id,
        make=body.make,
        model=body.model,
        condition=body.condition.value,
        body=body.body,
        number_of_doors=body.number_of_doors,
        fuel_type=body.fuel_type,
        engine=body.engine,
        mileage=body.mileage,
        model_year=body.model_year,
        production_year=body.production_year,
        external_color=body.external_color,
        manufacturer_code=body.manufacturer_code,
        location_lat=location.lat if location else None,
        location_lon=location.lon if location else None,
        location_address=location.address if location else None,
        location_city=location.city if location else None,
        location_state=location.state if location else None,
        location_zip=location.zip if location else None,
    )


# ─── Manufacturers ──────────────────────────────────────────────

@router.get(
    "/manufacturers", name="list_manufacturers",
    response_model=ResourceCollection[ManufacturerView],
)
async def list_manufacturers(
    service: ManufacturerService = Depends(get_manufacturer_service),
    assembler: ManufacturerResourceAssembler = Depends(get_manufacturer_assembler),
):
    """List every manufacturer on file."""
    return assembler.to_collection(await service.list())


@router.get(
    "/manufacturers/{code}", name="get_manufacturer",
    response_model=Resource[ManufacturerView],
)
async def get_manufacturer(
    code: int,
    service: ManufacturerService = Depends(get_manufacturer_service),
    assembler: ManufacturerResourceAssembler = Depends(get_manufacturer_assembler),
):
    """Get one manufacturer by code."""
    return assembler.to_resource(
        await service.find_by_code(ManufacturerCode(code)),
    )


# ─── Cars ───────────────────────────────────────────────────────

@router.get(
    "", name="list_cars", response_model=ResourceCollection[CarView],
)
async def list_cars(
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_car_assembler),
):
    """List every car."""
    return assembler.to_collection(await service.list())


@router.get(
    "/{car_id}", name="get_car", response_model=Resource[CarView],
)
async def get_car(
    car_id: int,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_car_assembler),
):
    """Get one car by id."""
    return assembler.to_resource(await service.find_by_id(CarId(car_id)))


@router.post(
    "", name="create_car", response_model=Resource[CarView],
    status_code=status.HTTP_201_CREATED,
)
async def create_car(
    body: CarCreate,
    response: Response,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_car_assembler),
):
    """Create a car. Any id in the body is ignored."""
    car = await service.save(_to_entity(body))
    resource = assembler.to_resource(car)
    response.headers["Location"] = resource.link(LinkRel.SELF.value).href
    return resource


@router.put(
    "/{car_id}", name="update_car", response_model=Resource[CarView],
)
async def update_car(
    car_id: int,
    body: CarUpdate,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_car_assembler),
):
    """Replace a car's attributes. The body id must equal the path id."""
    if body.id != car_id:
        logger.warning(
            f"Rejected update: body id {body.id} does not match path",
            extra={"car_id": car_id},
        )
        raise CarIdMismatchError(car_id, body.id)
    car = await service.save(_to_entity(body, car_id=car_id))
    return assembler.to_resource(car)


@router.delete(
    "/{car_id}", name="delete_car", status_code=status.HTTP_200_OK,
    response_class=Response,
)
async def delete_car(
    car_id: int,
    service: CarService = Depends(get_car_service),
):
    """Remove a car."""
    await service.delete(CarId(car_id))
    return Response(status_code=status.HTTP_200_OK)
