import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from userposts.main import app
from userposts.database import Base, get_db


test_database_url = "sqlite:///:memory:"

test_engine = create_engine(
    test_database_url,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


testingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = testingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(name="tables")
def tables_fixture():
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="db")
def db_fixture(tables):
    db = testingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest_asyncio.fixture(name="client")
async def client_fixture(tables):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
