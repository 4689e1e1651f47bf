"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CarId wraps the integer primary key; ManufacturerCode wraps the manufacturer key
    - Car condition is an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CarId = NewType("CarId", int)
ManufacturerCode = NewType("ManufacturerCode", int)

# Keys are stored in 32-bit signed INTEGER columns
MIN_STORED_KEY = -(2**31)
MAX_STORED_KEY = 2**31 - 1


def is_storable_key(value: int) -> bool:
    """Whether value fits the integer key columns (cars.id, manufacturers.code)."""
    return MIN_STORED_KEY <= value <= MAX_STORED_KEY


# ─── Enums ───────────────────────────────────────────────────────

class Condition(str, Enum):
    """Whether the car is sold new or used."""
    USED = "USED"
    NEW = "NEW"


class LinkRel(str, Enum):
    """Relation names attached to resource envelopes."""
    SELF = "self"
    CARS = "cars"
    MANUFACTURER = "manufacturer"
    MANUFACTURERS = "manufacturers"
