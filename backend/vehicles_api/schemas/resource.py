"""Resource Envelopes — generic hypermedia wrappers for API responses.

Invariants:
    - Resource[T] pairs one entity with its links; it is never persisted
    - ResourceCollection[T] keeps the order of the wrapped resources
    - Link hrefs are absolute URLs built from the request
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Link(BaseModel):
    """Navigational link."""
    rel: str
    href: str


class Resource(BaseModel, Generic[T]):
    """An entity plus the links a client can follow from it."""
    entity: T
    links: list[Link] = []

    def link(self, rel: str) -> Link | None:
        """First link with the given relation, if any."""
        return next((link for link in self.links if link.rel == rel), None)


class ResourceCollection(BaseModel, Generic[T]):
    """Ordered list of resources plus links for the collection itself."""
    items: list[Resource[T]]
    links: list[Link] = []
