"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from vehicles_api.models.manufacturer import Manufacturer  # noqa: F401
from vehicles_api.models.car import Car  # noqa: F401
