"""Resource Assemblers — wrap ORM entities into hypermedia envelopes.

Invariants:
    - to_resource() never mutates the entity it wraps
    - Every car resource links to itself and to the car collection; a car with a
      manufacturer_code also links to that manufacturer
    - Every manufacturer resource links to itself and to the manufacturer collection
    - Links come from the route table via url_for, so they stay valid if prefixes move

Design Decisions:
    - url_for injected (usually Request.url_for) instead of the Request itself:
      assemblers stay testable without an ASGI scope
"""

from typing import Any, Callable, Iterable

from vehicles_api.core.domain_types import LinkRel
from vehicles_api.models.car import Car
from vehicles_api.models.manufacturer import Manufacturer
from vehicles_api.schemas.car import CarView, LocationView, ManufacturerView
from vehicles_api.schemas.resource import Link, Resource, ResourceCollection

UrlFor = Callable[..., Any]


def car_view(car: Car) -> CarView:
    """Project the flattened ORM row onto the nested response schema."""
    location = None
    if car.location_lat is not None and car.location_lon is not None:
        location = LocationView(
            lat=car.location_lat,
            lon=car.location_lon,
            address=car.location_address,
            city=car.location_city,
            state=car.location_state,
            zip=car.location_zip,
        )
    return CarView(
        id=car.id,
        make=car.make,
        model=car.model,
        condition=car.condition,
        body=car.body,
        number_of_doors=car.number_of_doors,
        fuel_type=car.fuel_type,
        engine=car.engine,
        mileage=car.mileage,
        model_year=car.model_year,
        production_year=car.production_year,
        external_color=car.external_color,
        manufacturer_code=car.manufacturer_code,
        location=location,
        created_at=car.created_at,
        modified_at=car.modified_at,
    )


class CarResourceAssembler:
    """Builds Resource[CarView] envelopes."""

    def __init__(self, url_for: UrlFor):
        self._url_for = url_for

    def _link(self, rel: LinkRel, route: str, **params) -> Link:
        return Link(rel=rel.value, href=str(self._url_for(route, **params)))

    def to_resource(self, car: Car) -> Resource[CarView]:
        links = [
            self._link(LinkRel.SELF, "get_car", car_id=car.id),
            self._link(LinkRel.CARS, "list_cars"),
        ]
        if car.manufacturer_code is not None:
            links.append(self._link(
                LinkRel.MANUFACTURER, "get_manufacturer",
                code=car.manufacturer_code,
            ))
        return Resource[CarView](entity=car_view(car), links=links)

    def to_collection(self, cars: Iterable[Car]) -> ResourceCollection[CarView]:
        return ResourceCollection[CarView](
            items=[self.to_resource(car) for car in cars],
            links=[self._link(LinkRel.SELF, "list_cars")],
        )


class ManufacturerResourceAssembler:
    """Builds Resource[ManufacturerView] envelopes."""

    def __init__(self, url_for: UrlFor):
        self._url_for = url_for

    def _link(self, rel: LinkRel, route: str, **params) -> Link:
        return Link(rel=rel.value, href=str(self._url_for(route, **params)))

    def to_resource(self, manufacturer: Manufacturer) -> Resource[ManufacturerView]:
        return Resource[ManufacturerView](
            entity=ManufacturerView.model_validate(manufacturer),
            links=[
                self._link(LinkRel.SELF, "get_manufacturer", code=manufacturer.code),
                self._link(LinkRel.MANUFACTURERS, "list_manufacturers"),
            ],
        )

    def to_collection(
        self, manufacturers: Iterable[Manufacturer],
    ) -> ResourceCollection[ManufacturerView]:
        return ResourceCollection[ManufacturerView](
            items=[self.to_resource(m) for m in manufacturers],
            links=[self._link(LinkRel.SELF, "list_manufacturers")],
        )
