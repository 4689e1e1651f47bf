"""Initial schema — manufacturers, cars, and the default manufacturer list.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_MANUFACTURERS = [
    {"code": 100, "name": "Audi"},
    {"code": 101, "name": "Chevrolet"},
    {"code": 102, "name": "Ford"},
    {"code": 103, "name": "BMW"},
    {"code": 104, "name": "Dodge"},
]


def upgrade() -> None:
    manufacturers = op.create_table(
        "manufacturers",
        sa.Column("code", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "cars",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("condition", sa.String(10), nullable=False, server_default="USED"),
        sa.Column("body", sa.String(50), nullable=True),
        sa.Column("number_of_doors", sa.Integer, nullable=True),
        sa.Column("fuel_type", sa.String(50), nullable=True),
        sa.Column("engine", sa.String(100), nullable=True),
        sa.Column("mileage", sa.Integer, nullable=True),
        sa.Column("model_year", sa.Integer, nullable=True),
        sa.Column("production_year", sa.Integer, nullable=True),
        sa.Column("external_color", sa.String(50), nullable=True),
        sa.Column(
            "manufacturer_code", sa.Integer,
            sa.ForeignKey("manufacturers.code"), nullable=True,
        ),
        sa.Column("location_lat", sa.Float, nullable=True),
        sa.Column("location_lon", sa.Float, nullable=True),
        sa.Column("location_address", sa.String(200), nullable=True),
        sa.Column("location_city", sa.String(100), nullable=True),
        sa.Column("location_state", sa.String(50), nullable=True),
        sa.Column("location_zip", sa.String(20), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_cars_manufacturer_code", "cars", ["manufacturer_code"])

    op.bulk_insert(manufacturers, DEFAULT_MANUFACTURERS)


def downgrade() -> None:
    op.drop_index("ix_cars_manufacturer_code", table_name="cars")
    op.drop_table("cars")
    op.drop_table("manufacturers")
