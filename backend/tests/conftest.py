import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from cookbook.main import create_app
from cookbook.services.cookbook import CookbookService
from cookbook.storage.catalog import InMemoryCatalogStore, SqlCatalogStore


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="store", params=["memory", "sql"])
def store_fixture(request, engine):
    if request.param == "sql":
        return SqlCatalogStore(engine)
    return InMemoryCatalogStore()


@pytest.fixture(name="memory_store")
def memory_store_fixture():
    return InMemoryCatalogStore()


@pytest.fixture(name="client")
def client_fixture():
    app = create_app(CookbookService(InMemoryCatalogStore(), detect_cycles=False))
    return TestClient(app)
