"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.db.session import Base, create_db_engine
from backend.app.models.parcel import Parcel  # noqa: F401  (registers the table)
from backend.app.models.parcel_enums import ParcelStatus
from backend.app.repositories.memory import InMemoryParcelStore
from backend.app.repositories.parcel_store import ParcelStore
from backend.app.schemas.parcel import ParcelDTO, rfc3339_now

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_db_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test function and drop after."""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def session_factory():
    return TestingSessionLocal


@pytest.fixture
def sql_store(session_factory):
    return ParcelStore(session_factory)


@pytest.fixture(params=["sqlalchemy", "memory"])
def parcel_store(request, session_factory):
    """Every backend that implements ParcelRepository."""
    if request.param == "memory":
        return InMemoryParcelStore()
    return ParcelStore(session_factory)


@pytest.fixture
def client_id_factory():
    """Hand out client ids that never repeat within a test."""
    rng = random.Random()
    issued = set()

    def next_id():
        while True:
            client_id = rng.randint(1, 10_000_000)
            if client_id not in issued:
                issued.add(client_id)
                return client_id

    return next_id


@pytest.fixture
def make_parcel():
    """Build an unsaved registered parcel; keyword arguments override fields."""
    def factory(**overrides):
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED.value,
            "address": "test",
            "created_at": rfc3339_now(),
        }
        fields.update(overrides)
        return ParcelDTO(**fields)

    return factory


@pytest.fixture
def db_engine():
    return engine
