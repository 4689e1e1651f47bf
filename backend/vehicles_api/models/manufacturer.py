"""Manufacturer ORM — read-only reference data seeded by the initial migration.

Invariants:
    - code is a caller-chosen integer primary key (not auto-increment)
    - name is unique
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vehicles_api.db.base import Base


class Manufacturer(Base):
    """Manufacturer entity."""
    __tablename__ = "manufacturers"

    code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
