"""Root conftest — shared test configuration and async DB + client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - seed_manufacturers inserts the same rows as the initial migration
"""

import os

# Keep tests off any real database configured in the environment
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from vehicles_api.db.base import Base  # noqa: E402
from vehicles_api.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import vehicles_api.infrastructure.database as db_module  # noqa: E402
import vehicles_api.models  # noqa: E402,F401
from vehicles_api.models.car import Car  # noqa: E402
from vehicles_api.models.manufacturer import Manufacturer  # noqa: E402
from vehicles_api.main import app  # noqa: E402

DEFAULT_MANUFACTURERS = {
    100: "Audi",
    101: "Chevrolet",
    102: "Ford",
    103: "BMW",
    104: "Dodge",
}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def default_manufacturers() -> dict[int, str]:
    """Codes and names seeded by seed_manufacturers and the initial migration."""
    return dict(DEFAULT_MANUFACTURERS)


@pytest.fixture
async def seed_manufacturers(test_db, default_manufacturers):
    manufacturers = [
        Manufacturer(code=code, name=name)
        for code, name in default_manufacturers.items()
    ]
    test_db.add_all(manufacturers)
    await test_db.commit()
    return manufacturers


@pytest.fixture
def make_car():
    """Build a transient Car with sensible defaults; override any column."""
    def _make(**overrides) -> Car:
        fields = {"make": "Toyota", "model": "Corolla", "condition": "USED"}
        fields.update(overrides)
        return Car(**fields)
    return _make


@pytest.fixture
async def seed_car(test_db, seed_manufacturers, make_car):
    car = make_car(
        make="Chevrolet", model="Impala", condition="NEW",
        body="sedan", manufacturer_code=101, model_year=2018,
        location_lat=40.73061, location_lon=-73.935242,
    )
    test_db.add(car)
    await test_db.commit()
    await test_db.refresh(car)
    return car


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
